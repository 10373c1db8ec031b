"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GamePhase, Outcome, OutcomeKind, SessionState

__all__ = ['GamePhase', 'Outcome', 'OutcomeKind', 'SessionState']
