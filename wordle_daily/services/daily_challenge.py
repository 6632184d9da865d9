"""
Daily Challenge

Maps a calendar date to the day's target word and answers whether the daily
challenge has already been played.
"""

from datetime import date
from typing import Optional

from ..models.game import GameMode
from ..models.statistics import GameResultRecord
from .statistics_store import StatisticsStore
from .word_bank import WordBank


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def date_hash(day: date) -> int:
    """
    Stable 32-bit hash of a date.

    Same packing of year, month and day as java.time.LocalDate.hashCode, so
    the word for a date never depends on the interpreter's hash seed.
    """
    year = day.year
    return _to_int32((year & 0xFFFFF800) ^ ((year << 11) + (day.month << 6) + day.day))


def word_for_date(word_bank: WordBank, day: date) -> str:
    """The daily target word; the same date always gives the same word."""
    index = date_hash(day) % len(word_bank)
    if index < 0:
        index += len(word_bank)
    return word_bank[index]


async def daily_record(store: StatisticsStore, day: date) -> Optional[GameResultRecord]:
    return await store.record_for_date(day, GameMode.DAILY)


async def already_played_today(store: StatisticsStore, day: date) -> bool:
    return await daily_record(store, day) is not None
