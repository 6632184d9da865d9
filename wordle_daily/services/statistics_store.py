"""
Statistics Store

Append-only log of finished games. The game core only ever appends records
and reads them back; nothing is updated or deleted.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from pymongo import DESCENDING, MongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from ..errors import ConfigurationError, PersistenceError
from ..models.game import GameMode
from ..models.statistics import GameResultRecord

logger = logging.getLogger(__name__)


def _decode(document) -> GameResultRecord:
    """Turn a stored document into a record; malformed documents are a read failure."""
    try:
        return GameResultRecord.from_document(document)
    except (KeyError, TypeError, ValueError) as e:
        logger.error("Malformed game result document: %r", document)
        raise PersistenceError(f"Malformed game result document: {e}") from e


class StatisticsStore(ABC):
    """Abstract base class for statistics store implementations."""

    @abstractmethod
    async def append(self, record: GameResultRecord) -> None:
        """Append one finished game to the log.

        Raises:
            PersistenceError: If the record could not be written
        """
        ...

    @abstractmethod
    async def all_records(self) -> List[GameResultRecord]:
        """Return every record, most recently appended first.

        Raises:
            PersistenceError: If the log could not be read
        """
        ...

    @abstractmethod
    async def record_for_date(self, day: date, mode: GameMode) -> Optional[GameResultRecord]:
        """Return the record played on day in the given mode, if any."""
        ...

    def close_connection(self):
        """Release any connection the store holds. Nothing to do by default."""
        pass


class InMemoryStatisticsStore(StatisticsStore):
    """Simple in-memory implementation, used for tests and the memory backend."""

    def __init__(self, records: Optional[List[GameResultRecord]] = None) -> None:
        # Most recent first
        self._records: List[GameResultRecord] = list(records or [])

    async def append(self, record: GameResultRecord) -> None:
        self._records.insert(0, record)

    async def all_records(self) -> List[GameResultRecord]:
        return list(self._records)

    async def record_for_date(self, day: date, mode: GameMode) -> Optional[GameResultRecord]:
        for record in self._records:
            if record.played_on == day and record.mode is mode:
                return record
        return None


class MongoStatisticsStore(StatisticsStore):
    """
    MongoDB-backed statistics store.

    Uses the blocking pymongo driver; each call is pushed to a worker thread
    so callers can await it from any event loop.
    """

    COLLECTION_NAME = "game_statistics"

    def __init__(self, mongo_uri: Optional[str] = None, db_name: str = "wordle_game",
                 collection=None):
        """
        Initialize the store with a MongoDB connection.

        Args:
            mongo_uri: MongoDB connection string
            db_name: Database holding the statistics collection
            collection: Ready-made collection, skips creating a client
        """
        self.client = None
        if collection is None:
            if not mongo_uri:
                raise ConfigurationError("MONGO_URI is required for the mongo statistics backend")
            self.client = MongoClient(mongo_uri, server_api=ServerApi('1'))
            collection = self.client[db_name][self.COLLECTION_NAME]
        self.collection = collection

        try:
            self.collection.create_index([("date", DESCENDING), ("game_type", DESCENDING)])
        except PyMongoError as e:
            raise PersistenceError(f"Could not prepare statistics collection: {e}") from e

    async def append(self, record: GameResultRecord) -> None:
        try:
            await asyncio.to_thread(self.collection.insert_one, record.to_document())
        except PyMongoError as e:
            logger.error("Failed to append game result: %s", e)
            raise PersistenceError(f"Could not save game result: {e}") from e

    async def all_records(self) -> List[GameResultRecord]:
        def _read():
            cursor = self.collection.find({}, {"_id": 0}).sort("_id", DESCENDING)
            return [_decode(doc) for doc in cursor]

        try:
            return await asyncio.to_thread(_read)
        except PyMongoError as e:
            logger.error("Failed to read game results: %s", e)
            raise PersistenceError(f"Could not read game statistics: {e}") from e

    async def record_for_date(self, day: date, mode: GameMode) -> Optional[GameResultRecord]:
        query = {"date": day.isoformat(), "game_type": mode.value}
        try:
            document = await asyncio.to_thread(self.collection.find_one, query, {"_id": 0})
        except PyMongoError as e:
            logger.error("Failed to look up %s game for %s: %s", mode.value, day, e)
            raise PersistenceError(f"Could not read game statistics: {e}") from e
        return _decode(document) if document else None

    def close_connection(self):
        """Close the MongoDB connection if this store opened it."""
        if self.client is not None:
            self.client.close()


def create_statistics_store(config) -> StatisticsStore:
    """Build the statistics store selected by config.STATS_BACKEND."""
    backend = (getattr(config, 'STATS_BACKEND', None) or 'memory').lower()

    if backend == 'memory':
        return InMemoryStatisticsStore()
    if backend == 'mongo':
        return MongoStatisticsStore(config.MONGO_URI, getattr(config, 'MONGO_DB_NAME', 'wordle_game'))

    raise ConfigurationError(f"Unknown statistics backend: {backend}")
