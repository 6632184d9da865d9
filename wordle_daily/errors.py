"""
Game Errors

Every failure the game core reports. All of them are recoverable and carry a
short message that can be shown to the player as-is.
"""


class WordleError(Exception):
    """Base class for all game errors."""

    message = "Something went wrong"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class GuessRejected(WordleError):
    """A submitted guess was refused; the session is left unchanged."""


class InvalidLength(GuessRejected):
    message = "Guess must be exactly 5 letters"


class NotInWordBank(GuessRejected):
    message = "Word not in word list"


class DuplicateGuess(GuessRejected):
    message = "You already guessed this word"


class GameAlreadyOver(GuessRejected):
    message = "Game is already over"


class ConfigurationError(WordleError):
    """Raised for an unusable word list or invalid setup values."""

    message = "Invalid game configuration"


class PersistenceError(WordleError):
    """Raised when the statistics store cannot be read or written."""

    message = "Game statistics storage is unavailable"


class DailyAlreadyPlayed(WordleError):
    message = "Daily challenge already played today, come back tomorrow"


class GameNotStarted(WordleError):
    message = "No game in progress, start a new game first"
