"""
Game Engine

Core Wordle rules: guess evaluation and the session state machine.

Every transition is a plain function that takes a GameSession and returns a
new one, so callers decide when to re-render.
"""

import logging
import random
from dataclasses import replace
from typing import Dict, Mapping, Optional, Sequence, Tuple

from ..config.game_settings import ALPHABET, MAX_GUESSES, WORD_LENGTH, WORD_LIST
from ..models.errors import GameAlreadyOver, InvalidLengthGuess
from ..models.game import GameSession, LetterStatus, Row, SubmitResult, Tile, empty_grid

logger = logging.getLogger(__name__)


def start_game(word_list: Sequence[str] = WORD_LIST, rng: Optional[random.Random] = None) -> GameSession:
    """
    Create a fresh session with a secret drawn uniformly from ``word_list``.

    Args:
        word_list: Pool of secret words
        rng: Random source; pass a seeded ``random.Random`` for repeatable games

    Returns:
        GameSession: Empty grid, row 0, no letters guessed
    """
    secret = (rng or random).choice(list(word_list))
    logger.debug("Started game with %d candidate words", len(word_list))
    return GameSession(secret=secret, grid=empty_grid(MAX_GUESSES, WORD_LENGTH))


def append_letter(session: GameSession, letter: str) -> GameSession:
    """Add a letter to the current guess. Ignored when it cannot be added."""
    if session.game_over or len(session.current_guess) >= WORD_LENGTH or letter not in ALPHABET:
        return session
    return replace(session, current_guess=session.current_guess + letter)


def delete_letter(session: GameSession) -> GameSession:
    """Drop the last letter of the current guess, if any."""
    if session.game_over or not session.current_guess:
        return session
    return replace(session, current_guess=session.current_guess[:-1])


def evaluate_guess(guess: str, secret: str) -> Row:
    """
    Score a guess against the secret.

    Exact matches are reserved first so a repeated letter is never credited
    more times than it appears in the secret. Remaining copies are then handed
    out left to right as PRESENT.
    """
    remaining: Dict[str, int] = {}
    for letter in secret:
        remaining[letter] = remaining.get(letter, 0) + 1

    statuses = []
    for letter, target in zip(guess, secret):
        if letter == target:
            statuses.append(LetterStatus.CORRECT)
            remaining[letter] -= 1
        else:
            statuses.append(LetterStatus.ABSENT)

    for i, letter in enumerate(guess):
        if statuses[i] is LetterStatus.ABSENT and remaining.get(letter, 0) > 0:
            statuses[i] = LetterStatus.PRESENT
            remaining[letter] -= 1

    return tuple(Tile(letter, status) for letter, status in zip(guess, statuses))


def merge_letter_status(letter_status: Mapping[str, LetterStatus], tiles: Row) -> Dict[str, LetterStatus]:
    """
    Fold a row of tiles into the keyboard map.

    A letter only moves up in rank (absent < present < correct), so later
    rows never downgrade what an earlier row revealed.
    """
    merged = dict(letter_status)
    for tile in tiles:
        current = merged.get(tile.letter)
        if current is None or tile.status.rank > current.rank:
            merged[tile.letter] = tile.status
    return merged


def submit_guess(session: GameSession) -> Tuple[GameSession, SubmitResult]:
    """
    Evaluate the current guess and advance the game.

    Returns:
        Tuple of (new session, result of the submission)

    Raises:
        GameAlreadyOver: The session is already won or lost
        InvalidLengthGuess: The current guess is not WORD_LENGTH letters long
    """
    if session.game_over:
        raise GameAlreadyOver()

    guess = session.current_guess
    if len(guess) != WORD_LENGTH:
        raise InvalidLengthGuess(len(guess), WORD_LENGTH)

    tiles = evaluate_guess(guess, session.secret)
    grid = session.grid[:session.current_row] + (tiles,) + session.grid[session.current_row + 1:]
    letter_status = merge_letter_status(session.letter_status, tiles)

    if guess == session.secret:
        updated = replace(session, grid=grid, letter_status=letter_status, game_over=True, won=True)
    elif session.current_row == MAX_GUESSES - 1:
        updated = replace(session, grid=grid, letter_status=letter_status, game_over=True)
    else:
        updated = replace(
            session,
            grid=grid,
            letter_status=letter_status,
            current_row=session.current_row + 1,
            current_guess=""
        )

    logger.debug("Guess on row %d -> %s", session.current_row, updated.status.value)
    return updated, SubmitResult(tiles=tiles, game_over=updated.game_over, won=updated.won, status=updated.status)


def key_status(session: GameSession, letter: str) -> LetterStatus:
    """Best status seen for a keyboard letter, EMPTY if never guessed."""
    return session.letter_status.get(letter, LetterStatus.EMPTY)
