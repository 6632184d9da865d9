"""
Game Service

Owns the word bank, the statistics store and the player's current game
session, and starts normal or daily games on request.
"""

import threading
from datetime import date
from typing import Any, Callable, Dict, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS
from ..errors import DailyAlreadyPlayed, GameNotStarted, PersistenceError
from ..models.game import GameMode, GameSnapshot
from ..models.statistics import PlayerStatistics
from ..utils.game_logger import game_logger
from .daily_challenge import already_played_today, word_for_date
from .game_session import GameSession
from .statistics_service import daily_dates, load_player_statistics, wins_on_date
from .statistics_store import StatisticsStore
from .word_bank import WordBank


class GameService:
    """
    Single-player game service.

    Holds at most one session; starting a new game discards the previous one.
    A lock guards the synchronous session changes so a multi-threaded server
    can share one instance. Store I/O always happens outside the lock.
    """

    def __init__(self,
                 word_bank: WordBank,
                 store: StatisticsStore,
                 max_rounds: int = MAX_ROUNDS,
                 clock: Callable[[], date] = date.today):
        self.word_bank = word_bank
        self.store = store
        self.max_rounds = max_rounds
        self.clock = clock
        self.session: Optional[GameSession] = None
        self._lock = threading.Lock()

    async def new_game(self, mode: GameMode = GameMode.NORMAL) -> GameSnapshot:
        """
        Start a new game, replacing the current session.

        Args:
            mode: NORMAL picks a random word, DAILY the word of today's date

        Raises:
            DailyAlreadyPlayed: A daily game was already finished today
            PersistenceError: Today's daily record could not be checked
        """
        today = self.clock()
        if mode is GameMode.DAILY:
            if await already_played_today(self.store, today):
                raise DailyAlreadyPlayed()
            target = word_for_date(self.word_bank, today)
        else:
            target = self.word_bank.random_word()

        session = GameSession(
            target, self.word_bank, self.store,
            mode=mode, max_rounds=self.max_rounds, clock=self.clock,
        )
        with self._lock:
            self.session = session
        return session.snapshot()

    def _require_session(self) -> GameSession:
        if self.session is None:
            raise GameNotStarted()
        return self.session

    def current_state(self) -> GameSnapshot:
        with self._lock:
            return self._require_session().snapshot()

    async def submit_guess(self, guess: str) -> GameSnapshot:
        with self._lock:
            session = self._require_session()
            state = session.apply_guess(guess)

        if state.game_over:
            return await session.save_result()
        return state

    async def save_result(self) -> GameSnapshot:
        with self._lock:
            session = self._require_session()
        return await session.save_result()

    async def player_statistics(self) -> PlayerStatistics:
        return await load_player_statistics(self.store)

    async def daily_status(self) -> Tuple[date, Optional[bool]]:
        """
        Today's date and whether the daily game was played.

        The flag is None when the store could not be read.
        """
        today = self.clock()
        try:
            return today, await already_played_today(self.store, today)
        except PersistenceError as e:
            game_logger.log_degradation('daily_status', e, date=today.isoformat())
            return today, None

    async def daily_summary(self) -> Dict[str, Any]:
        """
        Today's daily challenge state and the player's daily history.

        Served with degraded=True and empty values when the store cannot be read.
        """
        today = self.clock()
        try:
            records = await self.store.all_records()
        except PersistenceError as e:
            game_logger.log_degradation('daily_summary', e, date=today.isoformat())
            return {
                'date': today.isoformat(),
                'already_played': None,
                'wins_today': 0,
                'daily_dates': [],
                'degraded': True
            }

        played = any(r.mode is GameMode.DAILY and r.played_on == today for r in records)
        return {
            'date': today.isoformat(),
            'already_played': played,
            'wins_today': wins_on_date(records, today),
            'daily_dates': [day.isoformat() for day in daily_dates(records)],
            'degraded': False
        }

    def close(self):
        """Release the statistics store connection."""
        self.store.close_connection()
