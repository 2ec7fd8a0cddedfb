"""
Password validation utilities for passgen.
"""

from typing import List

from ..settings import PasswordSettings
from .charset import Category


def length_is_valid(length: int, minimum: int, maximum: int) -> bool:
    """Check that length is within the inclusive range [minimum, maximum]."""
    return minimum <= length <= maximum


def missing_categories(settings: PasswordSettings, candidate: str) -> List[Category]:
    """
    Find the enabled categories a candidate does not contain.

    Args:
        settings: Password settings
        candidate: Password to test

    Returns:
        Enabled categories with no matching character, in canonical order
    """
    return [category for category in settings.categories if not category.matches(candidate)]


def is_valid_password(settings: PasswordSettings, candidate: str) -> bool:
    """
    Validate a candidate against the settings.

    Every enabled category must match at least one character and the
    candidate length must lie within the settings bounds. Disabled
    categories impose no requirement.

    Args:
        settings: Password settings
        candidate: Password to test

    Returns:
        True if the candidate satisfies every rule
    """
    if not isinstance(candidate, str):
        return False

    if not length_is_valid(len(candidate), settings.minimum_length, settings.maximum_length):
        return False

    return not missing_categories(settings, candidate)


def get_validation_error_message(settings: PasswordSettings, candidate: str) -> str:
    """
    Get a descriptive error message for an invalid candidate.

    Args:
        settings: Password settings
        candidate: The invalid password

    Returns:
        Error message describing why the candidate is invalid
    """
    if not isinstance(candidate, str):
        return "Password must be a string"

    if len(candidate) < settings.minimum_length:
        return f"Password must be at least {settings.minimum_length} characters long"

    if len(candidate) > settings.maximum_length:
        return f"Password cannot be longer than {settings.maximum_length} characters"

    missing = missing_categories(settings, candidate)
    if missing:
        return f"Password is missing required characters: {', '.join(c.label for c in missing)}"

    return "Password format is invalid"
