"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from ..config.game_settings import WORD_LENGTH


class LetterState(Enum):
    """Letter evaluation status of one guessed letter."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class GameStatus(Enum):
    ONGOING = "ONGOING"
    WON = "WON"
    LOST = "LOST"


class GameMode(Enum):
    NORMAL = "NORMAL"
    DAILY = "DAILY"


def normalize_word(raw: str) -> str:
    """Normalize raw player input (surrounding whitespace, case) to word form."""
    return raw.strip().upper()


def is_word(candidate) -> bool:
    """True if candidate is exactly WORD_LENGTH uppercase letters."""
    return (
        isinstance(candidate, str)
        and len(candidate) == WORD_LENGTH
        and candidate.isalpha()
        and candidate.isupper()
    )


@dataclass(frozen=True)
class CharacterGuess:
    """One letter slot of a guess row; both fields are None while the slot is empty."""
    letter: Optional[str] = None
    state: Optional[LetterState] = None

    @property
    def is_empty(self) -> bool:
        return self.letter is None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "letter": self.letter,
            "state": self.state.value if self.state else None,
        }


@dataclass(frozen=True)
class GuessRow:
    """A row of WORD_LENGTH slots, either entirely blank or entirely evaluated."""
    chars: Tuple[CharacterGuess, ...]

    @classmethod
    def blank(cls) -> "GuessRow":
        return cls(tuple(CharacterGuess() for _ in range(WORD_LENGTH)))

    @classmethod
    def evaluated(cls, guess: str, states: Sequence[LetterState]) -> "GuessRow":
        if len(guess) != WORD_LENGTH or len(states) != WORD_LENGTH:
            raise ValueError(f"A guess row needs exactly {WORD_LENGTH} letters and states")
        return cls(tuple(CharacterGuess(letter, state) for letter, state in zip(guess, states)))

    @property
    def is_blank(self) -> bool:
        return all(char.is_empty for char in self.chars)

    @property
    def word(self) -> str:
        return "".join(char.letter or "" for char in self.chars)

    @property
    def states(self) -> List[Optional[LetterState]]:
        return [char.state for char in self.chars]

    @property
    def is_solved(self) -> bool:
        return not self.is_blank and all(char.state is LetterState.CORRECT for char in self.chars)

    def to_list(self) -> List[Dict[str, Optional[str]]]:
        return [char.to_dict() for char in self.chars]


@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable view of a game session returned after every mutating call.

    The answer is only filled in once the game is over.
    """
    rows: Tuple[GuessRow, ...]
    attempts: int
    max_rounds: int
    status: GameStatus
    mode: GameMode
    letter_status: Dict[str, Optional[LetterState]] = field(default_factory=dict)
    answer: Optional[str] = None
    attempt_rank: Optional[str] = None
    result_saved: bool = False

    @property
    def game_over(self) -> bool:
        return self.status is not GameStatus.ONGOING

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    @property
    def guesses(self) -> List[str]:
        return [row.word for row in self.rows if not row.is_blank]

    def to_dict(self) -> Dict:
        return {
            "rows": [row.to_list() for row in self.rows],
            "guesses": self.guesses,
            "attempts": self.attempts,
            "max_rounds": self.max_rounds,
            "status": self.status.value,
            "game_mode": self.mode.value,
            "game_over": self.game_over,
            "won": self.won,
            "letter_status": {
                letter: state.value if state else None
                for letter, state in self.letter_status.items()
            },
            "answer": self.answer,
            "attempt_rank": self.attempt_rank,
            "result_saved": self.result_saved,
        }
