"""
passgen - rule-based random password generation and validation.
"""

from .exceptions import (
    AttemptsExhaustedError,
    InvalidLengthError,
    InvalidSettingsError,
    NoCategoryEnabledError,
    PassgenException,
)
from .password import (
    AttemptsExhausted,
    Generated,
    InvalidLength,
    Password,
    PasswordResult,
    generate_password,
)
from .settings import PasswordSettings
from .utils.charset import Category

__all__ = [
    'AttemptsExhausted',
    'AttemptsExhaustedError',
    'Category',
    'Generated',
    'InvalidLength',
    'InvalidLengthError',
    'InvalidSettingsError',
    'NoCategoryEnabledError',
    'PassgenException',
    'Password',
    'PasswordResult',
    'PasswordSettings',
    'generate_password',
]
