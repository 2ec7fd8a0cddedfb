"""
Password generation settings.

PasswordSettings is an immutable value: every transition returns a new
instance and the character set is always derived from the category flags.
"""

import logging
from dataclasses import dataclass, replace
from typing import Tuple

from .exceptions import InvalidSettingsError, NoCategoryEnabledError
from .utils.charset import Category, build_character_set

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD_LENGTH = 16
DEFAULT_MAXIMUM_ATTEMPTS = 10000

# Standard bounds, applied by the default and length-only constructors
DEFAULT_MINIMUM_LENGTH = 8
DEFAULT_MAXIMUM_LENGTH = 128

# Permissive bounds, applied when categories are chosen explicitly
UNRESTRICTED_MINIMUM_LENGTH = 1
UNRESTRICTED_MAXIMUM_LENGTH = 256


@dataclass(frozen=True)
class PasswordSettings:
    """Rules used to generate and validate passwords."""

    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numeric: bool = True
    include_special: bool = True
    password_length: int = DEFAULT_PASSWORD_LENGTH
    minimum_length: int = DEFAULT_MINIMUM_LENGTH
    maximum_length: int = DEFAULT_MAXIMUM_LENGTH
    maximum_attempts: int = DEFAULT_MAXIMUM_ATTEMPTS

    def __post_init__(self) -> None:
        for name in ("password_length", "minimum_length", "maximum_length", "maximum_attempts"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSettingsError(f"{name} must be an integer, got {value!r}")

        if self.maximum_attempts < 1:
            raise InvalidSettingsError("maximum_attempts must be at least 1")

        if self.minimum_length > self.maximum_length:
            raise InvalidSettingsError(
                f"minimum_length ({self.minimum_length}) cannot exceed "
                f"maximum_length ({self.maximum_length})"
            )

    @classmethod
    def create(cls,
               include_lowercase: bool,
               include_uppercase: bool,
               include_numeric: bool,
               include_special: bool,
               password_length: int,
               maximum_attempts: int,
               use_default_bounds: bool) -> "PasswordSettings":
        """
        Build settings with either the standard or the permissive length bounds.

        Args:
            include_lowercase: Require lowercase letters
            include_uppercase: Require uppercase letters
            include_numeric: Require digits
            include_special: Require special characters
            password_length: Requested password length
            maximum_attempts: Generation attempts before giving up
            use_default_bounds: Apply the standard bounds instead of the permissive ones

        Returns:
            New PasswordSettings instance
        """
        if use_default_bounds:
            minimum, maximum = DEFAULT_MINIMUM_LENGTH, DEFAULT_MAXIMUM_LENGTH
        else:
            minimum, maximum = UNRESTRICTED_MINIMUM_LENGTH, UNRESTRICTED_MAXIMUM_LENGTH

        return cls(
            include_lowercase=include_lowercase,
            include_uppercase=include_uppercase,
            include_numeric=include_numeric,
            include_special=include_special,
            password_length=password_length,
            minimum_length=minimum,
            maximum_length=maximum,
            maximum_attempts=maximum_attempts,
        )

    @property
    def categories(self) -> Tuple[Category, ...]:
        """Enabled categories in canonical order."""
        flags = {
            Category.LOWERCASE: self.include_lowercase,
            Category.UPPERCASE: self.include_uppercase,
            Category.NUMERIC: self.include_numeric,
            Category.SPECIAL: self.include_special,
        }
        return tuple(category for category in Category if flags[category])

    @property
    def character_set(self) -> str:
        """Sampling alphabet derived from the enabled categories."""
        return build_character_set(self.categories)

    def add_lowercase(self) -> "PasswordSettings":
        return replace(self, include_lowercase=True)

    def add_uppercase(self) -> "PasswordSettings":
        return replace(self, include_uppercase=True)

    def add_numeric(self) -> "PasswordSettings":
        return replace(self, include_numeric=True)

    def add_special(self) -> "PasswordSettings":
        return replace(self, include_special=True)

    def with_length(self, password_length: int) -> "PasswordSettings":
        """Return a copy requesting a different password length."""
        return replace(self, password_length=password_length)

    def length_in_bounds(self) -> bool:
        return self.minimum_length <= self.password_length <= self.maximum_length

    def require_categories(self) -> None:
        """Raise NoCategoryEnabledError if the character set would be empty."""
        if not self.categories:
            logger.debug("Rejected settings with no enabled category")
            raise NoCategoryEnabledError()

    def describe(self) -> str:
        """
        Get human-readable description of the enabled categories.

        Returns:
            Comma separated category labels, or "none"
        """
        labels = [category.label for category in self.categories]
        return ", ".join(labels) if labels else "none"
