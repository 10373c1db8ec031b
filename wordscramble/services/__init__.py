"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameNotStartedError, GameService, get_game_service, initialize_game_service
from .spell_checker import PySpellCheckService, SpellCheckService, WordListSpellCheckService
from .word_source import ResourceError, WordSource

__all__ = [
    'GameService', 'GameNotStartedError', 'get_game_service', 'initialize_game_service',
    'SpellCheckService', 'PySpellCheckService', 'WordListSpellCheckService',
    'WordSource', 'ResourceError'
]
