"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .input_adapter import InputAdapter, KeyResult

__all__ = [
    'GameService', 'get_game_service', 'initialize_game_service',
    'InputAdapter', 'KeyResult'
]
