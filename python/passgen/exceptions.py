"""
Custom exceptions for passgen.
"""


class PassgenException(Exception):
    """Base exception for passgen."""

    pass


class InvalidSettingsError(PassgenException):
    """Password settings are malformed."""

    pass


class NoCategoryEnabledError(InvalidSettingsError):
    """No character category is enabled, so the character set is empty."""

    def __init__(self, message: str = "At least one character type must be enabled"):
        super().__init__(message)


class InvalidLengthError(PassgenException):
    """Requested password length is outside the allowed bounds."""

    def __init__(self, length: int, minimum: int, maximum: int):
        self.length = length
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Password length invalid. Must be between {minimum} and {maximum} characters long"
        )


class AttemptsExhaustedError(PassgenException):
    """No valid password was produced within the attempt budget."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Could not generate a valid password in {attempts} attempts")
