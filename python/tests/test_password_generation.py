"""
Unit tests for password candidate generation.
"""

import random
from typing import Iterable, List

import pytest

from passgen.exceptions import NoCategoryEnabledError
from passgen.settings import PasswordSettings
from passgen.utils.password_generator import generate_candidate, has_identical_run


class ScriptedRandom:
    """Random stand-in that leaves order untouched and replays fixed indexes."""

    def __init__(self, indexes: Iterable[int]):
        self.indexes = iter(indexes)
        self.ranges: List[int] = []

    def shuffle(self, items):
        pass

    def randrange(self, stop):
        self.ranges.append(stop)
        return next(self.indexes)


def numeric_settings(length: int) -> PasswordSettings:
    return PasswordSettings.create(False, False, True, False, length, 10, use_default_bounds=False)


class TestGenerateCandidate:
    """Test the candidate generation algorithm."""

    def test_length(self):
        """Test that candidates always have the requested length."""
        for length in [1, 2, 3, 8, 16, 64, 256]:
            settings = PasswordSettings().with_length(length)
            assert len(generate_candidate(settings)) == length

    def test_characters_come_from_character_set(self):
        settings = PasswordSettings.create(True, False, False, True, 200, 10, use_default_bounds=False)
        candidate = generate_candidate(settings)

        assert set(candidate) <= set(settings.character_set)

    def test_no_identical_runs(self):
        """Test that no three identical characters appear in a row."""
        # A tiny alphabet makes runs likely if the constraint were missing
        settings = numeric_settings(256)
        for _ in range(20):
            assert not has_identical_run(generate_candidate(settings))

    def test_third_identical_character_is_redrawn(self):
        """Test that the same position is redrawn instead of accepting a run."""
        rng = ScriptedRandom([0, 0, 0, 0, 1])

        candidate = generate_candidate(numeric_settings(3), rng)

        assert candidate == "001"
        assert len(rng.ranges) == 5

    def test_run_at_start_is_rejected(self):
        rng = ScriptedRandom([4, 4, 4, 5])
        assert generate_candidate(numeric_settings(3), rng) == "445"

    def test_full_range_is_sampled(self):
        """Test that the last character of the shuffled set can be drawn."""
        rng = ScriptedRandom([9, 9])

        candidate = generate_candidate(numeric_settings(2), rng)

        assert candidate == "99"
        assert rng.ranges == [10, 10]

    def test_seeded_source_is_reproducible(self):
        settings = PasswordSettings()

        first = generate_candidate(settings, random.Random(1234))
        second = generate_candidate(settings, random.Random(1234))

        assert first == second

    def test_empty_character_set(self):
        settings = PasswordSettings.create(False, False, False, False, 16, 10, use_default_bounds=True)

        with pytest.raises(NoCategoryEnabledError):
            generate_candidate(settings)


class TestHasIdenticalRun:
    """Test run detection helper."""

    def test_runs(self):
        assert not has_identical_run("")
        assert not has_identical_run("aabbaa")
        assert has_identical_run("abbbc")
        assert has_identical_run("aaa")

    def test_custom_limit(self):
        assert has_identical_run("aab", limit=1)
        assert not has_identical_run("aaab", limit=3)
