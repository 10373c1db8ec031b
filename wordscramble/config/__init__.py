"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_LANGUAGE, FALLBACK_ROOT_WORD, MIN_WORD_LENGTH,
    get_word_statistics, validate_word_list_integrity
)

__all__ = [
    # Runtime configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MIN_WORD_LENGTH', 'FALLBACK_ROOT_WORD', 'DEFAULT_LANGUAGE',
    'validate_word_list_integrity', 'get_word_statistics'
]
