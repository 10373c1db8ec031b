"""
Word Source Service

Loads the bundled list of candidate root words and picks one per game.
"""

import random
from typing import List, Optional

from ..config.game_settings import FALLBACK_ROOT_WORD, get_word_statistics, validate_word_list_integrity
from ..utils.game_logger import game_logger


class ResourceError(OSError):
    """Raised when the root word list cannot be read."""


class WordSource:
    """
    Supplies root words from a newline-delimited word list file.

    The file is read once and cached. A missing or unreadable file is fatal;
    a readable file with no words falls back to FALLBACK_ROOT_WORD when
    picking.
    """

    def __init__(self, path: str, rng: Optional[random.Random] = None):
        self.path = path
        self.rng = rng or random.Random()
        self._candidates: Optional[List[str]] = None

    def load_root_candidates(self) -> List[str]:
        """
        Load candidate root words from the word list file.

        Returns:
            List[str]: Lowercase root words, blank lines dropped

        Raises:
            ResourceError: If the word list file cannot be read
        """
        if self._candidates is None:
            try:
                with open(self.path, 'r', encoding='utf-8') as f:
                    lines = f.read().splitlines()
            except OSError as e:
                raise ResourceError(f"Could not load word list: {self.path}") from e

            self._candidates = [line.strip().lower() for line in lines if line.strip()]
            self._check_candidates(self._candidates)

        return list(self._candidates)

    def pick_random_root(self, candidates: List[str]) -> str:
        """Pick a root uniformly at random, or the fallback root if there are none."""
        if not candidates:
            return FALLBACK_ROOT_WORD
        return self.rng.choice(candidates)

    def _check_candidates(self, candidates: List[str]) -> None:
        """Warn about a malformed word list; the list stays usable either way."""
        if not candidates:
            game_logger.logger.warning(f"Word list {self.path} is empty, using '{FALLBACK_ROOT_WORD}'")
            return

        try:
            validate_word_list_integrity(candidates)
        except ValueError as e:
            game_logger.logger.warning(f"Word list {self.path} failed integrity check: {e}")

        stats = get_word_statistics(candidates)
        game_logger.logger.debug(
            f"Loaded {stats['total_words']} root words from {self.path} "
            f"(average length {stats['avg_length']})"
        )
