"""
Spell Checker Service

Dictionary lookups behind a small capability interface, so the game session
can use a real English dictionary in play and an in-memory word set in tests.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional, Set

from spellchecker import SpellChecker


class SpellCheckService(ABC):
    """Capability interface: report whether a word is correctly spelled."""

    @abstractmethod
    def is_valid(self, word: str, language: str) -> bool:
        """Return True if word is a correctly spelled word in language."""


class PySpellCheckService(SpellCheckService):
    """
    Spell checker backed by the pyspellchecker word frequency dictionaries.

    One SpellChecker is built per language on first use and reused after.
    """

    def __init__(self):
        self._checkers: Dict[str, SpellChecker] = {}

    def _checker(self, language: str) -> SpellChecker:
        if language not in self._checkers:
            self._checkers[language] = SpellChecker(language=language)
        return self._checkers[language]

    def is_valid(self, word: str, language: str) -> bool:
        if not word:
            return False
        return bool(self._checker(language).known([word]))


class WordListSpellCheckService(SpellCheckService):
    """Spell checker over a fixed word set; language is ignored."""

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._words: Set[str] = {w.lower() for w in (words or ())}

    def add(self, *words: str) -> None:
        self._words.update(w.lower() for w in words)

    def is_valid(self, word: str, language: str) -> bool:
        if not word:
            return False
        return word.lower() in self._words
