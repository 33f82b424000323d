"""
Input Adapter

Turns raw key presses into game engine calls.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..config.game_settings import DELETE_KEY, ENTER_KEY, SHAKE_DURATION_SECONDS, WORD_LIST
from ..models.errors import GuessRejected, InvalidLengthGuess
from ..models.game import GameSession, SubmitResult
from . import game_engine

logger = logging.getLogger(__name__)

DELETE_ALIASES = frozenset({DELETE_KEY, "BACKSPACE", "DELETE"})


@dataclass(frozen=True)
class KeyResult:
    """What a single key press did."""
    action: str  # "append", "delete" or "submit"
    accepted: bool
    error: Optional[str] = None
    submit: Optional[SubmitResult] = None
    shake: bool = False  # raised by a too-short guess


class InputAdapter:
    """
    Routes key presses to the game engine for one session.

    The adapter holds no game state of its own beyond the current session.
    The shake flag is a purely visual hint raised by a too-short guess; it
    expires after SHAKE_DURATION_SECONDS and never touches the session.
    """

    def __init__(self, session: GameSession, clock: Callable[[], float] = time.monotonic):
        self.session = session
        self._clock = clock
        self._shake_until = 0.0

    @property
    def shaking(self) -> bool:
        return self._clock() < self._shake_until

    def new_game(self, word_list: Sequence[str] = WORD_LIST, rng: Optional[random.Random] = None) -> GameSession:
        """Replace the session with a brand new game."""
        self.session = game_engine.start_game(word_list, rng)
        self._shake_until = 0.0
        return self.session

    def handle_key(self, key: str) -> KeyResult:
        """
        Apply one key press.

        Args:
            key: ENTER, a delete key (⌫, BACKSPACE, DELETE) or a letter

        Returns:
            KeyResult describing the action taken
        """
        normalized = key.strip().upper() if isinstance(key, str) else ""

        if normalized == ENTER_KEY:
            return self._submit()

        if normalized in DELETE_ALIASES:
            before = self.session
            self.session = game_engine.delete_letter(before)
            return KeyResult(action="delete", accepted=self.session is not before)

        before = self.session
        self.session = game_engine.append_letter(before, normalized)
        return KeyResult(action="append", accepted=self.session is not before)

    def _submit(self) -> KeyResult:
        try:
            self.session, result = game_engine.submit_guess(self.session)
        except InvalidLengthGuess as e:
            self._shake_until = self._clock() + SHAKE_DURATION_SECONDS
            logger.debug("Rejected short guess: %s", e)
            return KeyResult(action="submit", accepted=False, error=str(e), shake=True)
        except GuessRejected as e:
            return KeyResult(action="submit", accepted=False, error=str(e))

        return KeyResult(action="submit", accepted=True, submit=result)
