"""
Shared fixtures for the game tests: a small fixed word bank, in-memory
statistics stores (one of which can be told to fail) and a Flask test client.
"""

from datetime import date

import pytest

from wordle_daily import create_app
from wordle_daily.config import TestingConfig
from wordle_daily.errors import PersistenceError
from wordle_daily.models import GameMode, GameResultRecord
from wordle_daily.services import GameService, InMemoryStatisticsStore, WordBank

TODAY = date(2025, 3, 14)

TEST_WORDS = [
    "RIVER", "EERIE", "CRANE", "SLATE", "TRACE", "CRATE",
    "PLANT", "GHOST", "APPLE", "LEMON", "MOUNT", "WORLD",
]


class FlakyStatisticsStore(InMemoryStatisticsStore):
    """In-memory store whose reads and writes can be switched to fail."""

    def __init__(self, records=None):
        super().__init__(records)
        self.fail_reads = False
        self.fail_writes = False

    async def append(self, record):
        if self.fail_writes:
            raise PersistenceError("disk full")
        await super().append(record)

    async def all_records(self):
        if self.fail_reads:
            raise PersistenceError("database locked")
        return await super().all_records()

    async def record_for_date(self, day, mode):
        if self.fail_reads:
            raise PersistenceError("database locked")
        return await super().record_for_date(day, mode)


def make_record(won=True, attempts=3, mode=GameMode.NORMAL, played_on=TODAY, word="RIVER"):
    return GameResultRecord(word=word, won=won, attempts=attempts, mode=mode, played_on=played_on)


@pytest.fixture
def word_bank() -> WordBank:
    return WordBank(TEST_WORDS)


@pytest.fixture
def store() -> FlakyStatisticsStore:
    return FlakyStatisticsStore()


@pytest.fixture
def game_service(word_bank, store) -> GameService:
    return GameService(word_bank, store, clock=lambda: TODAY)


@pytest.fixture
def app(game_service):
    return create_app(TestingConfig, game_service=game_service)


@pytest.fixture
def client(app):
    return app.test_client()
