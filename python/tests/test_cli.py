"""
Tests for the passgen command line interface.
"""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from passgen.__main__ import cli
from passgen.settings import PasswordSettings
from passgen.utils.validation import is_valid_password


@pytest.fixture
def runner():
    return CliRunner()


class TestGenerateCommand:
    """Test `passgen generate`."""

    def test_generate_default(self, runner):
        result = runner.invoke(cli, ["generate"])

        assert result.exit_code == 0
        password = result.output.strip()
        assert len(password) == 16
        assert is_valid_password(PasswordSettings(), password)

    def test_generate_count(self, runner):
        result = runner.invoke(cli, ["generate", "--count", "3", "--length", "20"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 3
        assert all(len(line) == 20 for line in lines)

    def test_generate_categories(self, runner):
        result = runner.invoke(
            cli, ["generate", "--no-lowercase", "--no-uppercase", "--no-special"]
        )

        assert result.exit_code == 0
        assert result.output.strip().isdigit()

    def test_generate_invalid_length(self, runner):
        result = runner.invoke(cli, ["generate", "--length", "3"])

        assert result.exit_code == 1
        assert "between 8 and 128" in result.output

    def test_generate_unrestricted_length(self, runner):
        result = runner.invoke(cli, ["generate", "--length", "3", "--unrestricted", "--no-special",
                                     "--no-numeric"])

        assert result.exit_code == 0
        assert len(result.output.strip()) == 3

    def test_generate_exhausted(self, runner):
        result = runner.invoke(
            cli, ["generate", "--length", "1", "--unrestricted", "--max-attempts", "3"]
        )

        assert result.exit_code == 1
        assert "3 attempts" in result.output

    def test_generate_no_categories(self, runner):
        result = runner.invoke(
            cli,
            ["generate", "--no-lowercase", "--no-uppercase", "--no-numeric", "--no-special"],
        )

        assert result.exit_code == 1
        assert "At least one character type" in result.output

    @patch('pyperclip.copy')
    def test_generate_copy(self, mock_copy, runner):
        result = runner.invoke(cli, ["generate", "--copy"])

        assert result.exit_code == 0
        password = result.output.splitlines()[0]
        mock_copy.assert_called_once_with(password)

    def test_copy_with_count(self, runner):
        result = runner.invoke(cli, ["generate", "--copy", "--count", "2"])

        assert result.exit_code == 1
        assert "Cannot use --copy" in result.output


class TestCheckCommand:
    """Test `passgen check`."""

    def test_check_valid(self, runner):
        result = runner.invoke(cli, ["check", "Abcdef1!"])

        assert result.exit_code == 0
        assert "satisfies the rules" in result.output

    def test_check_missing_category(self, runner):
        result = runner.invoke(cli, ["check", "abcdefgh"])

        assert result.exit_code == 1
        assert "uppercase" in result.output

    def test_check_disabled_category(self, runner):
        result = runner.invoke(cli, ["check", "abcdefgh", "--no-uppercase", "--no-numeric",
                                     "--no-special"])

        assert result.exit_code == 0

    def test_check_too_short(self, runner):
        result = runner.invoke(cli, ["check", "aB1!"])

        assert result.exit_code == 1
        assert "at least 8" in result.output

    def test_check_warns_on_identical_run(self, runner):
        result = runner.invoke(cli, ["check", "aaaB1!xy"])

        assert result.exit_code == 0
        assert "identical characters" in result.output

    @patch("logging.basicConfig")
    def test_verbose_flag(self, mock_basic_config, runner):
        result = runner.invoke(cli, ["--verbose", "check", "Abcdef1!"])

        assert result.exit_code == 0
        mock_basic_config.assert_called_once()
