"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameSession, GameState, GameStatus, LetterStatus, SubmitResult, Tile, empty_grid
from .errors import GameAlreadyOver, GuessRejected, InvalidLengthGuess

__all__ = [
    'GameSession', 'GameState', 'GameStatus', 'LetterStatus', 'SubmitResult', 'Tile', 'empty_grid',
    'GameAlreadyOver', 'GuessRejected', 'InvalidLengthGuess'
]
