"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple


class LetterStatus(Enum):
    """Outcome of comparing one guessed letter against the secret."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    EMPTY = "empty"

    @property
    def rank(self) -> int:
        """How informative the status is; higher wins on the keyboard."""
        return _RANKS[self]


_RANKS = {
    LetterStatus.CORRECT: 3,
    LetterStatus.PRESENT: 2,
    LetterStatus.ABSENT: 1,
    LetterStatus.EMPTY: 0,
}


class GameStatus(Enum):
    """Session lifecycle. WON and LOST are terminal."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Tile:
    """One cell of the guess grid."""
    letter: str = ""
    status: LetterStatus = LetterStatus.EMPTY

    def to_dict(self) -> Dict[str, str]:
        return {'letter': self.letter, 'status': self.status.value}


Row = Tuple[Tile, ...]
Grid = Tuple[Row, ...]


def empty_grid(rows: int, columns: int) -> Grid:
    """Build a grid of unrevealed tiles."""
    return tuple(tuple(Tile() for _ in range(columns)) for _ in range(rows))


@dataclass(frozen=True)
class GameSession:
    """
    Complete state of one game.

    Sessions are values: every transition in the game engine returns a new
    session and leaves the old one untouched. ``letter_status`` only holds
    letters that have been guessed at least once.
    """
    secret: str
    grid: Grid
    current_guess: str = ""
    current_row: int = 0
    game_over: bool = False
    won: bool = False
    letter_status: Mapping[str, LetterStatus] = field(default_factory=dict)

    @property
    def status(self) -> GameStatus:
        if self.won:
            return GameStatus.WON
        if self.game_over:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    @property
    def attempts(self) -> int:
        """Number of submitted rows."""
        return sum(1 for row in self.grid if row and row[0].status is not LetterStatus.EMPTY)

    @property
    def revealed_secret(self) -> Optional[str]:
        """The secret, once the game is over."""
        return self.secret if self.game_over else None


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of an accepted guess, for the caller to render."""
    tiles: Row
    game_over: bool
    won: bool
    status: GameStatus


@dataclass
class GameState:
    """Client-facing game state (the secret only appears once the game is over)."""
    game_id: str
    grid: List[List[Dict[str, str]]]
    current_guess: str
    current_row: int
    max_guesses: int
    word_length: int
    game_over: bool
    won: bool
    status: str
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over
