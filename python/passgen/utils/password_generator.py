"""
Random password candidate generation.
"""

import logging
import random
from typing import List, Optional

from ..exceptions import NoCategoryEnabledError
from ..settings import PasswordSettings

logger = logging.getLogger(__name__)

MAXIMUM_IDENTICAL_CONSECUTIVE_CHARS = 2

# Shared source, seeded once from the OS
_system_random = random.SystemRandom()


def generate_candidate(settings: PasswordSettings,
                       rng: Optional[random.Random] = None) -> str:
    """
    Generate a random password based on the rules in settings.

    This does not check category coverage or length bounds; a candidate is
    only guaranteed to have password_length characters and no run of more
    than two identical characters.

    Args:
        settings: Password settings
        rng: Random source, defaults to a shared SystemRandom

    Returns:
        Candidate password string
    """
    rng = rng or _system_random
    character_set = settings.character_set

    if not character_set:
        raise NoCategoryEnabledError("No characters available for password generation")

    shuffled: List[str] = list(character_set)
    rng.shuffle(shuffled)

    password: List[str] = []
    rejected = 0
    while len(password) < settings.password_length:
        char = shuffled[rng.randrange(len(shuffled))]

        if (len(password) >= MAXIMUM_IDENTICAL_CONSECUTIVE_CHARS
                and password[-1] == char
                and password[-2] == char):
            # Redraw the same position
            rejected += 1
            continue

        password.append(char)

    if rejected:
        logger.debug(f"Redrew {rejected} characters to avoid identical runs")

    return "".join(password)


def has_identical_run(candidate: str,
                      limit: int = MAXIMUM_IDENTICAL_CONSECUTIVE_CHARS) -> bool:
    """
    Check whether candidate contains more than limit identical consecutive characters.

    Args:
        candidate: String to inspect
        limit: Longest allowed run

    Returns:
        True if a longer run exists
    """
    run = 0
    previous = None
    for char in candidate:
        run = run + 1 if char == previous else 1
        if run > limit:
            return True
        previous = char
    return False
