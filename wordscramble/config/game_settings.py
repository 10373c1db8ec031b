"""
Game Rules Module

Defines the word scramble game rules as immutable constants, plus integrity
and statistics helpers for a list of candidate root words.
"""

from typing import Dict, Final, List

MIN_WORD_LENGTH: Final[int] = 3
"""
Shortest submission accepted as a word.
Type: Final[int] - Immutable to prevent accidental modification
"""

FALLBACK_ROOT_WORD: Final[str] = "silkworm"
"""Root word used when the word list is readable but holds no candidates."""

DEFAULT_LANGUAGE: Final[str] = "en"
"""Language passed to the spell checker for dictionary lookups."""


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates a list of candidate root words.

    This function performs validation to ensure:
    1. Length validation: Every root is longer than the shortest playable word
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Args:
        words: Candidate root words as loaded by the word source

    Returns:
        bool: True if the list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) <= MIN_WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is too short to be a root word")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> Dict:
    """
    Analyzes a candidate list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of root candidates
            - avg_length: Average root length
            - letter_frequency: Distribution of letters across all roots
            - most_common_letters: Top five letters by frequency
    """
    if not words:
        return {"error": "Word list is empty"}

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_length": round(sum(len(word) for word in words) / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
