"""
Game Service

Keeps track of live single-player games and exposes them to the web layer.
"""

import random
import time
import uuid
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..config.game_settings import ALPHABET, ENTER_KEY, MAX_GUESSES, WORD_LENGTH, WORD_LIST
from ..models.game import GameSession, GameState
from . import game_engine
from .input_adapter import InputAdapter, KeyResult


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Secret word selection without exposing answers to clients
    - Key-by-key input and whole-word guesses
    - Removal of games nobody has touched for a while
    """

    def __init__(self,
                 word_list: Sequence[str] = WORD_LIST,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.games: Dict[str, Dict] = {}  # game_id -> {"adapter", "last_activity"}
        self.word_list = list(word_list)
        self._rng = rng
        self._clock = clock

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        session = game_engine.start_game(self.word_list, self._rng)

        self.games[game_id] = {
            "adapter": InputAdapter(session, clock=self._clock),
            "last_activity": self._clock()
        }
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        game = self.games.get(game_id)
        return game["adapter"].session if game else None

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        session = self.get_session(game_id)
        if session is None:
            return None

        return GameState(
            game_id=game_id,
            grid=[[tile.to_dict() for tile in row] for row in session.grid],
            current_guess=session.current_guess,
            current_row=session.current_row,
            max_guesses=MAX_GUESSES,
            word_length=WORD_LENGTH,
            game_over=session.game_over,
            won=session.won,
            status=session.status.value,
            letter_status={letter: status.value for letter, status in session.letter_status.items()},
            answer=session.revealed_secret
        )

    def is_shaking(self, game_id: str) -> bool:
        game = self.games.get(game_id)
        return bool(game and game["adapter"].shaking)

    def press_key(self, game_id: str, key: str) -> Optional[KeyResult]:
        """
        Feeds one key press to a game.

        Args:
            game_id: Unique game identifier
            key: Letter, ENTER or delete key

        Returns:
            KeyResult or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None

        game["last_activity"] = self._clock()
        return game["adapter"].handle_key(key)

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a whole-word guess for a specific game session.

        Args:
            game_id: Unique game identifier
            guess: The word to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        session = self.get_session(game_id)
        if session is None:
            return False, "Game not found"

        if session.game_over:
            return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        normalized_guess = guess.strip().upper()

        if len(normalized_guess) != WORD_LENGTH:
            return False, f"Guess must be exactly {WORD_LENGTH} letters"

        if not all(letter in ALPHABET for letter in normalized_guess):
            return False, "Guess must contain only Greek letters"

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Optional[KeyResult]:
        """
        Types a whole word into the current row and submits it.

        Whatever was already typed on the row is cleared first.

        Returns:
            KeyResult of the submission or None if the guess is invalid
        """
        is_valid, _ = self.is_valid_guess(game_id, guess)
        if not is_valid:
            return None

        game = self.games.get(game_id)
        if game is None:
            return None

        adapter: InputAdapter = game["adapter"]
        game["last_activity"] = self._clock()

        session = adapter.session
        while session.current_guess:
            session = game_engine.delete_letter(session)
        for letter in guess.strip().upper():
            session = game_engine.append_letter(session, letter)
        adapter.session = session

        return adapter.handle_key(ENTER_KEY)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False

    def cleanup_stale_games(self, max_idle_seconds: float) -> Dict:
        """
        Drops games with no activity for more than ``max_idle_seconds``.

        Returns:
            dict: cleaned_count and the removed game ids
        """
        now = self._clock()
        stale: List[str] = [
            game_id for game_id, game in list(self.games.items())
            if now - game["last_activity"] > max_idle_seconds
        ]
        for game_id in stale:
            self.games.pop(game_id, None)

        return {
            "cleaned_count": len(stale),
            "removed_game_ids": stale
        }


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(**kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(**kwargs)
    return _game_service
