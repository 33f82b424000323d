"""
Game Errors

Conditions raised when a guess cannot be submitted.
"""


class GuessRejected(Exception):
    """Base class for submissions the engine refuses. State is left untouched."""


class InvalidLengthGuess(GuessRejected):
    """The current guess does not have the required number of letters."""

    def __init__(self, length: int, expected: int):
        self.length = length
        self.expected = expected
        super().__init__(f"Guess must be exactly {expected} letters (got {length})")


class GameAlreadyOver(GuessRejected):
    """The game has already been won or lost."""

    def __init__(self):
        super().__init__("Game is already over")
