"""
Logging Decorators

Contains decorators that record player actions around game session operations.
"""

from functools import wraps

from ..models.game import Outcome, SessionState
from .game_logger import game_logger


def logged_action(action):
    """
    Decorator to log a game session operation.

    The player action is logged once the call returns, so it carries the game
    id the call left behind (a fresh one for a new game). A game event is
    logged for a started game or any returned Outcome, and an error entry if
    the call raises. Exceptions are re-raised.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(self, *args, **kwargs):
            entry = args[0] if args else next(iter(kwargs.values()), None)
            details = {'entry': entry} if entry is not None else {}

            try:
                result = f(self, *args, **kwargs)
            except Exception as e:
                game_logger.log_user_action(action, self.game_id, **details)
                game_logger.log_error(e, action, self.game_id)
                raise

            game_logger.log_user_action(action, self.game_id, **details)

            if isinstance(result, SessionState):
                game_logger.log_game_event(
                    result.game_id, 'game_started',
                    root_word=result.root_word
                )
            elif isinstance(result, Outcome):
                event = 'word_accepted' if result.accepted else 'word_rejected'
                game_logger.log_game_event(
                    self.game_id, event,
                    word=result.word,
                    outcome=result.kind.value
                )
            return result

        return decorated_function

    return decorator
