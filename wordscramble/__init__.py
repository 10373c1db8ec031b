"""
Word Scramble Game Package

Find the shorter words hidden in a random root word. This package contains
the game session, its word source and spell checker, configuration and
logging. Rendering is left to the host application.
"""

from .config import Config


def create_game(config_class=Config, spell_checker=None):
    """
    Factory for a ready-to-play game session.

    Args:
        config_class: Configuration class to use
        spell_checker: Optional spell checker; defaults to pyspellchecker

    Returns:
        GameService with its first game already started
    """
    from .services.game_service import initialize_game_service

    game_service = initialize_game_service(config_class, spell_checker)
    game_service.start_new_game()
    return game_service
