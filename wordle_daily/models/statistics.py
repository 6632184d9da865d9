"""
Statistics Data Models

Contains the persisted game result record and the derived player statistics.
"""

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict

from .game import GameMode


@dataclass(frozen=True)
class GameResultRecord:
    """Outcome of one finished game, appended once to the statistics store."""
    word: str
    won: bool
    attempts: int
    mode: GameMode
    played_on: date

    def to_document(self) -> Dict[str, Any]:
        """Storage form; the date is kept as ISO text."""
        return {
            "word": self.word,
            "is_won": self.won,
            "attempts": self.attempts,
            "game_type": self.mode.value,
            "date": self.played_on.isoformat(),
        }

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "GameResultRecord":
        return cls(
            word=document["word"],
            won=bool(document["is_won"]),
            attempts=int(document["attempts"]),
            mode=GameMode(document.get("game_type", GameMode.NORMAL.value)),
            played_on=date.fromisoformat(document["date"]),
        )


@dataclass(frozen=True)
class PlayerStatistics:
    """Player statistics derived from the full result log, never stored."""
    total_wins: int = 0
    total_losses: int = 0
    win_rate: float = 0.0
    average_winning_attempts: float = 0.0
    current_streak: int = 0
    rank: str = "Newbie"
    degraded: bool = False  # True when the log could not be read

    @property
    def games_played(self) -> int:
        return self.total_wins + self.total_losses

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["games_played"] = self.games_played
        return data
