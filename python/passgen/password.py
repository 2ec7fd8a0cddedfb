"""
Password orchestration: length check, then the generate-and-validate loop.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from .exceptions import AttemptsExhaustedError, InvalidLengthError
from .settings import (
    DEFAULT_MAXIMUM_ATTEMPTS,
    DEFAULT_PASSWORD_LENGTH,
    PasswordSettings,
)
from .utils.password_generator import generate_candidate
from .utils.validation import is_valid_password, length_is_valid

logger = logging.getLogger(__name__)


class PasswordResult:
    """Outcome of a single Password.next() call."""

    ok = False

    @property
    def message(self) -> str:
        raise NotImplementedError

    def unwrap(self) -> str:
        """Return the password, or raise the exception matching the failure."""
        raise NotImplementedError


@dataclass(frozen=True)
class Generated(PasswordResult):
    """A valid password was produced."""

    password: str
    attempts: int

    ok = True

    @property
    def message(self) -> str:
        return self.password

    def unwrap(self) -> str:
        return self.password


@dataclass(frozen=True)
class InvalidLength(PasswordResult):
    """The requested length is outside the settings bounds. Nothing was generated."""

    length: int
    minimum: int
    maximum: int

    @property
    def message(self) -> str:
        return str(self.to_exception())

    def to_exception(self) -> InvalidLengthError:
        return InvalidLengthError(self.length, self.minimum, self.maximum)

    def unwrap(self) -> str:
        raise self.to_exception()


@dataclass(frozen=True)
class AttemptsExhausted(PasswordResult):
    """Every attempt produced an invalid candidate."""

    attempts: int

    @property
    def message(self) -> str:
        return str(self.to_exception())

    def to_exception(self) -> AttemptsExhaustedError:
        return AttemptsExhaustedError(self.attempts)

    def unwrap(self) -> str:
        raise self.to_exception()


class Password:
    """
    Generates random passwords and validates that they meet the configured rules.

    The include_* and length_required methods replace the held settings with
    an updated copy and return self, so calls can be chained:

        Password().length_required(24).include_special().next()
    """

    def __init__(self,
                 settings: Optional[PasswordSettings] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            settings: Rules to apply, defaults to every category at length 16
                with the standard length bounds
            rng: Random source passed to the generator
        """
        if settings is None:
            settings = PasswordSettings.create(
                True, True, True, True,
                DEFAULT_PASSWORD_LENGTH, DEFAULT_MAXIMUM_ATTEMPTS,
                use_default_bounds=True,
            )
        self.settings = settings
        self.rng = rng

    @classmethod
    def with_length(cls, password_length: int,
                    rng: Optional[random.Random] = None) -> "Password":
        """Every category enabled, standard bounds, custom length."""
        settings = PasswordSettings.create(
            True, True, True, True,
            password_length, DEFAULT_MAXIMUM_ATTEMPTS,
            use_default_bounds=True,
        )
        return cls(settings, rng=rng)

    @classmethod
    def with_categories(cls,
                        include_lowercase: bool,
                        include_uppercase: bool,
                        include_numeric: bool,
                        include_special: bool,
                        password_length: int = DEFAULT_PASSWORD_LENGTH,
                        maximum_attempts: int = DEFAULT_MAXIMUM_ATTEMPTS,
                        rng: Optional[random.Random] = None) -> "Password":
        """Explicit categories with the permissive length bounds."""
        settings = PasswordSettings.create(
            include_lowercase, include_uppercase, include_numeric, include_special,
            password_length, maximum_attempts,
            use_default_bounds=False,
        )
        return cls(settings, rng=rng)

    def include_lowercase(self) -> "Password":
        self.settings = self.settings.add_lowercase()
        return self

    def include_uppercase(self) -> "Password":
        self.settings = self.settings.add_uppercase()
        return self

    def include_numeric(self) -> "Password":
        self.settings = self.settings.add_numeric()
        return self

    def include_special(self) -> "Password":
        self.settings = self.settings.add_special()
        return self

    def length_required(self, password_length: int) -> "Password":
        self.settings = self.settings.with_length(password_length)
        return self

    def next(self) -> PasswordResult:
        """
        Get the next random password which meets the requirements.

        Returns:
            Generated on success, InvalidLength if the requested length is
            out of bounds, AttemptsExhausted if no attempt produced a valid
            password

        Raises:
            NoCategoryEnabledError: If no character category is enabled
        """
        settings = self.settings

        if not length_is_valid(settings.password_length,
                               settings.minimum_length, settings.maximum_length):
            logger.debug(
                f"Requested length {settings.password_length} outside "
                f"[{settings.minimum_length}, {settings.maximum_length}]"
            )
            return InvalidLength(settings.password_length,
                                 settings.minimum_length, settings.maximum_length)

        settings.require_categories()

        attempts = 0
        while True:
            candidate = generate_candidate(settings, self.rng)
            attempts += 1
            valid = is_valid_password(settings, candidate)
            if valid or attempts >= settings.maximum_attempts:
                break

        if valid:
            logger.debug(f"Generated valid password after {attempts} attempt(s)")
            return Generated(candidate, attempts)

        logger.warning(f"No valid password after {attempts} attempts ({settings.describe()})")
        return AttemptsExhausted(attempts)

    def next_group(self, number_of_passwords: int) -> List[PasswordResult]:
        """
        Generate several passwords independently.

        Args:
            number_of_passwords: How many results to produce

        Returns:
            Results in call order; no uniqueness is guaranteed across the batch
        """
        if number_of_passwords < 0:
            raise ValueError("number_of_passwords cannot be negative")

        return [self.next() for _ in range(number_of_passwords)]


def generate_password(length: int = DEFAULT_PASSWORD_LENGTH,
                      use_lowercase: bool = True,
                      use_uppercase: bool = True,
                      use_numeric: bool = True,
                      use_special: bool = True,
                      maximum_attempts: int = DEFAULT_MAXIMUM_ATTEMPTS) -> str:
    """
    Convenience function to generate a password.

    Uses the standard length bounds.

    Args:
        length: Password length
        use_lowercase: Include lowercase letters
        use_uppercase: Include uppercase letters
        use_numeric: Include digits
        use_special: Include special characters
        maximum_attempts: Generation attempts before giving up

    Returns:
        Generated password string

    Raises:
        InvalidLengthError: If length is outside the standard bounds
        AttemptsExhaustedError: If no valid password was produced
        NoCategoryEnabledError: If every category is disabled
    """
    settings = PasswordSettings.create(
        use_lowercase, use_uppercase, use_numeric, use_special,
        length, maximum_attempts,
        use_default_bounds=True,
    )
    return Password(settings).next().unwrap()
