"""
Helper Functions

Contains utility functions used throughout the application.
"""

from collections import Counter


def normalize_entry(raw: str) -> str:
    """Lowercase a raw submission and strip surrounding whitespace and newlines."""
    return raw.lower().strip()


def can_spell(word: str, letters: str) -> bool:
    """
    Check whether word can be spelled from letters, each letter used at most
    as many times as it appears.
    """
    available = Counter(letters)
    for letter in word:
        if available[letter] == 0:
            return False
        available[letter] -= 1
    return True
