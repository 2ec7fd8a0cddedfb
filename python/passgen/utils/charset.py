"""
Character categories used to build the sampling alphabet.
"""

import re
import string
from enum import Enum
from typing import Iterable

SPECIAL_CHARACTERS = "!#$%&*@\\"


class Category(Enum):
    """A class of ASCII characters that a password may be required to contain."""

    LOWERCASE = ("lowercase", string.ascii_lowercase, r"[a-z]")
    UPPERCASE = ("uppercase", string.ascii_uppercase, r"[A-Z]")
    NUMERIC = ("numeric", string.digits, r"[0-9]")
    SPECIAL = ("special", SPECIAL_CHARACTERS, r"[!#$%&*@\\]")

    def __init__(self, label: str, characters: str, regex: str):
        self.label = label
        self.characters = characters
        self.pattern = re.compile(regex)

    def matches(self, candidate: str) -> bool:
        """Return True if at least one character of candidate belongs to this category."""
        return self.pattern.search(candidate) is not None


def build_character_set(categories: Iterable[Category]) -> str:
    """
    Concatenate the characters of the given categories.

    The result always follows the declaration order of Category, whatever
    order the categories are passed in, and each category appears once.

    Args:
        categories: Enabled categories

    Returns:
        Character set string, empty if no category is given
    """
    enabled = set(categories)
    return "".join(category.characters for category in Category if category in enabled)
