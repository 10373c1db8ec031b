"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import logged_action
from .helpers import can_spell, normalize_entry
from .game_logger import GameLogger, game_logger

__all__ = ['logged_action', 'can_spell', 'normalize_entry', 'GameLogger', 'game_logger']
