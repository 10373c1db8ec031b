"""
Game Service

Contains the core game logic for a word scramble session.
"""

import uuid
from typing import List, Optional

from ..config import Config
from ..config.game_settings import DEFAULT_LANGUAGE, MIN_WORD_LENGTH
from ..models.game import GamePhase, Outcome, OutcomeKind, SessionState
from ..utils.decorators import logged_action
from ..utils.game_logger import game_logger
from ..utils.helpers import can_spell, normalize_entry
from .spell_checker import PySpellCheckService, SpellCheckService
from .word_source import WordSource


class GameNotStartedError(RuntimeError):
    """Raised when a word is submitted before the first game has started."""


class GameService:
    """
    Core game service managing one word scramble session.

    This class handles:
    - Root word selection for each new game
    - Submission normalization and validation, in a fixed order
    - Score and used-word bookkeeping for accepted words
    """

    def __init__(self,
                 word_source: WordSource,
                 spell_checker: SpellCheckService,
                 language: str = DEFAULT_LANGUAGE):
        self.word_source = word_source
        self.spell_checker = spell_checker
        self.language = language

        self.phase = GamePhase.IDLE
        self.game_id: Optional[str] = None
        self.root_word = ""
        self.used_words: List[str] = []
        self.score = 0
        self.words_count = 0

    @logged_action('new_game')
    def start_new_game(self) -> SessionState:
        """
        Starts a new game with a freshly picked root word.

        Returns:
            SessionState snapshot of the new game

        Raises:
            ResourceError: If the root word list cannot be read
        """
        candidates = self.word_source.load_root_candidates()

        self.root_word = self.word_source.pick_random_root(candidates)
        self.used_words = []
        self.score = 0
        self.words_count = 0
        self.game_id = str(uuid.uuid4())
        self.phase = GamePhase.PLAYING

        return self.get_game_state()

    def get_game_state(self) -> SessionState:
        """Returns a copy of the current session state."""
        return SessionState(
            game_id=self.game_id,
            phase=self.phase,
            root_word=self.root_word,
            used_words=self.used_words.copy(),
            score=self.score,
            words_count=self.words_count
        )

    @logged_action('submit_word')
    def submit_word(self, raw: str) -> Outcome:
        """
        Validates a submission and records it if accepted.

        Checks run in order and stop at the first failure; a failed
        submission leaves the session untouched.

        Args:
            raw: The word as typed by the player

        Returns:
            Outcome describing acceptance or the first failed check

        Raises:
            GameNotStartedError: If no game has been started yet
        """
        if self.phase is not GamePhase.PLAYING:
            raise GameNotStartedError("Start a new game before submitting words")

        word = normalize_entry(raw)

        if not self.is_long_enough(word):
            return Outcome(OutcomeKind.TOO_SHORT, word,
                           "Entry too short",
                           f"Entry cannot be less than {MIN_WORD_LENGTH} letters")

        if not self.is_not_root(word):
            return Outcome(OutcomeKind.IS_ROOT_WORD, word,
                           "Entry cannot be root word",
                           f"Your word cannot be the root word, {self.root_word}")

        if not self.is_unique(word):
            return Outcome(OutcomeKind.NOT_UNIQUE, word,
                           "Entry not unique",
                           "Your word is not unique")

        if not self.is_possible(word):
            return Outcome(OutcomeKind.NOT_SPELLABLE, word,
                           "Entry not possible",
                           f"Cannot spell {word} with {self.root_word}")

        if not self.is_real(word):
            return Outcome(OutcomeKind.NOT_REAL_WORD, word,
                           "Entry not real",
                           "Your word is not a real word")

        self.used_words.insert(0, word)
        self.score += len(word)
        self.words_count += 1

        return Outcome(OutcomeKind.ACCEPTED, word)

    def is_long_enough(self, word: str) -> bool:
        return len(word) >= MIN_WORD_LENGTH

    def is_not_root(self, word: str) -> bool:
        return word != self.root_word

    def is_unique(self, word: str) -> bool:
        return word not in self.used_words

    def is_possible(self, word: str) -> bool:
        """Each letter of word must be available in the root, once per occurrence."""
        return can_spell(word, self.root_word)

    def is_real(self, word: str) -> bool:
        return self.spell_checker.is_valid(word, self.language)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=Config,
                            spell_checker: Optional[SpellCheckService] = None) -> GameService:
    """Initialize the global game service instance from a config class."""
    global _game_service
    game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL)
    _game_service = GameService(
        WordSource(config_class.WORD_LIST_PATH),
        spell_checker or PySpellCheckService(),
        config_class.SPELL_CHECK_LANGUAGE
    )
    return _game_service
