"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class GamePhase(Enum):
    """Lifecycle of a game session."""
    IDLE = "IDLE"
    PLAYING = "PLAYING"


class OutcomeKind(Enum):
    """Result of a word submission, in validation order after ACCEPTED."""
    ACCEPTED = "ACCEPTED"
    TOO_SHORT = "TOO_SHORT"
    IS_ROOT_WORD = "IS_ROOT_WORD"
    NOT_UNIQUE = "NOT_UNIQUE"
    NOT_SPELLABLE = "NOT_SPELLABLE"
    NOT_REAL_WORD = "NOT_REAL_WORD"


@dataclass(frozen=True)
class Outcome:
    """A submission result with the title/message pair shown to the player."""
    kind: OutcomeKind
    word: str
    title: str = ""
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.kind is OutcomeKind.ACCEPTED

    def alert(self) -> Tuple[str, str]:
        """Return the (title, message) pair for an alert surface."""
        return self.title, self.message


@dataclass
class SessionState:
    """Read-only snapshot of a game session for rendering."""
    game_id: Optional[str]
    phase: GamePhase
    root_word: str
    used_words: List[str] = field(default_factory=list)  # most recent first
    score: int = 0
    words_count: int = 0

    @property
    def entries(self) -> List[Tuple[str, int]]:
        """Used words paired with their letter counts, for list badges."""
        return [(word, len(word)) for word in self.used_words]
