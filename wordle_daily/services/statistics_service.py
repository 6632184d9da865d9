"""
Statistics Service

Pure functions deriving player statistics from the game result log. Every
function takes the records most recent first, as the store returns them.
"""

from datetime import date
from typing import List, Sequence

from ..config.game_settings import ATTEMPT_RANKS, RANK_THRESHOLDS
from ..errors import PersistenceError
from ..models.game import GameMode
from ..models.statistics import GameResultRecord, PlayerStatistics
from ..utils.game_logger import game_logger
from .statistics_store import StatisticsStore

FAILED_RANK = "Failed"


def total_wins(records: Sequence[GameResultRecord]) -> int:
    return sum(1 for record in records if record.won)


def total_losses(records: Sequence[GameResultRecord]) -> int:
    return sum(1 for record in records if not record.won)


def win_rate(records: Sequence[GameResultRecord]) -> float:
    """Percentage of games won, 0.0 when nothing was played."""
    wins = total_wins(records)
    games = wins + total_losses(records)
    if games == 0:
        return 0.0
    return 100.0 * wins / games


def average_winning_attempts(records: Sequence[GameResultRecord]) -> float:
    """Mean attempts over won games only, 0.0 without wins."""
    attempts = [record.attempts for record in records if record.won]
    if not attempts:
        return 0.0
    return sum(attempts) / len(attempts)


def current_streak(records: Sequence[GameResultRecord]) -> int:
    """Consecutive wins counted back from the most recent game."""
    streak = 0
    for record in records:
        if not record.won:
            break
        streak += 1
    return streak


def rank_for_wins(wins: int) -> str:
    """Player rank from the highest win threshold met."""
    label = RANK_THRESHOLDS[0][1]
    for threshold, name in RANK_THRESHOLDS:
        if wins >= threshold:
            label = name
    return label


def rank(records: Sequence[GameResultRecord]) -> str:
    return rank_for_wins(total_wins(records))


def attempt_rank(attempts: int, won: bool = True) -> str:
    """Result-screen label of a single game, e.g. "Genius" for a first-try win."""
    if not won:
        return FAILED_RANK
    return ATTEMPT_RANKS.get(attempts, "Unknown")


def wins_on_date(records: Sequence[GameResultRecord], day: date) -> int:
    return sum(1 for record in records if record.won and record.played_on == day)


def daily_dates(records: Sequence[GameResultRecord]) -> List[date]:
    """Distinct dates with a daily challenge, most recent first."""
    seen = []
    for record in records:
        if record.mode is GameMode.DAILY and record.played_on not in seen:
            seen.append(record.played_on)
    return sorted(seen, reverse=True)


def compute_statistics(records: Sequence[GameResultRecord]) -> PlayerStatistics:
    return PlayerStatistics(
        total_wins=total_wins(records),
        total_losses=total_losses(records),
        win_rate=win_rate(records),
        average_winning_attempts=average_winning_attempts(records),
        current_streak=current_streak(records),
        rank=rank(records),
    )


async def load_player_statistics(store: StatisticsStore) -> PlayerStatistics:
    """
    Read the result log and compute the player's statistics.

    A store read failure does not propagate: zeroed statistics flagged as
    degraded are returned and the failure is logged as a warning.
    """
    try:
        records = await store.all_records()
    except PersistenceError as e:
        game_logger.log_degradation('load_player_statistics', e)
        return PlayerStatistics(degraded=True)

    return compute_statistics(records)
