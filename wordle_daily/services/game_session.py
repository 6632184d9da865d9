"""
Game Session

State machine for one game: the target word, the evaluated guess rows and
the ONGOING -> WON / LOST transition. A finished session hands exactly one
result record to the statistics store.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH
from ..errors import (
    ConfigurationError, DuplicateGuess, GameAlreadyOver, InvalidLength, NotInWordBank,
    PersistenceError,
)
from ..models.game import GameMode, GameSnapshot, GameStatus, GuessRow, is_word, normalize_word
from ..models.statistics import GameResultRecord
from ..utils.game_logger import game_logger
from .evaluator import evaluate_guess, new_letter_status, update_letter_status
from .statistics_service import attempt_rank
from .statistics_store import StatisticsStore
from .word_bank import WordBank


class GameSession:
    """
    One game against a fixed target word.

    This class handles:
    - Guess validation (length, word list, repeats, finished game)
    - Evaluation of each accepted guess into a row
    - Win/loss determination
    - Emitting the result record once the game is over

    Guesses must be serialized externally. Overlapping save_result() calls
    append the record once.
    """

    def __init__(self,
                 target: str,
                 word_bank: WordBank,
                 store: StatisticsStore,
                 mode: GameMode = GameMode.NORMAL,
                 max_rounds: int = MAX_ROUNDS,
                 clock: Callable[[], date] = date.today):
        if max_rounds < 1:
            raise ConfigurationError("max_rounds must be at least 1")

        self.word_bank = word_bank
        self.store = store
        self.mode = mode
        self.max_rounds = max_rounds
        self._clock = clock
        self._logger = logging.getLogger(__name__)
        self.start(target)

    def start(self, target: str) -> GameSnapshot:
        """Reset to blank rows and an ongoing game against target."""
        target = normalize_word(target) if isinstance(target, str) else target
        if not is_word(target):
            raise ConfigurationError(f"Target must be a {WORD_LENGTH}-letter word")

        self._target = target
        self._rows: List[GuessRow] = []
        self._status = GameStatus.ONGOING
        self._letter_status = new_letter_status()
        self._result: Optional[GameResultRecord] = None
        self._result_saved = False
        self._saving = False

        self._logger.debug("Started %s game, target %s", self.mode.value, target)
        return self.snapshot()

    @property
    def target(self) -> str:
        return self._target

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def attempts(self) -> int:
        return len(self._rows)

    @property
    def guesses(self) -> List[str]:
        return [row.word for row in self._rows]

    @property
    def game_over(self) -> bool:
        return self._status is not GameStatus.ONGOING

    @property
    def result_record(self) -> Optional[GameResultRecord]:
        return self._result

    @property
    def result_saved(self) -> bool:
        return self._result_saved

    def validate_guess(self, raw: str) -> str:
        """
        Check a raw guess without changing the session.

        Returns:
            The normalized guess

        Raises:
            GuessRejected: One of its subclasses, naming the reason
        """
        if self.game_over:
            raise GameAlreadyOver()

        guess = normalize_word(raw) if isinstance(raw, str) else ""
        if len(guess) != WORD_LENGTH:
            raise InvalidLength()

        if not self.word_bank.contains(guess):
            raise NotInWordBank()

        if guess in self.guesses:
            raise DuplicateGuess()

        return guess

    def apply_guess(self, raw: str) -> GameSnapshot:
        """
        Validate, evaluate and record one guess without touching the store.

        When the guess ends the game the result record is prepared; call
        save_result() to append it.

        Raises:
            GuessRejected: The guess was refused and nothing changed
        """
        guess = self.validate_guess(raw)

        states = evaluate_guess(guess, self._target)
        row = GuessRow.evaluated(guess, states)
        self._rows.append(row)
        update_letter_status(self._letter_status, guess, states)

        if row.is_solved:
            self._status = GameStatus.WON
        elif self.attempts >= self.max_rounds:
            self._status = GameStatus.LOST

        self._logger.debug("Guess %d/%d evaluated, status %s",
                           self.attempts, self.max_rounds, self._status.value)

        if self.game_over:
            self._result = GameResultRecord(
                word=self._target,
                won=self._status is GameStatus.WON,
                attempts=self.attempts,
                mode=self.mode,
                played_on=self._clock(),
            )

        return self.snapshot()

    async def submit_guess(self, raw: str) -> GameSnapshot:
        """
        Validate, evaluate and record one guess.

        When the guess ends the game the result record is appended to the
        store before returning.

        Raises:
            GuessRejected: The guess was refused and nothing changed
            PersistenceError: The game ended but its result could not be saved;
                the session stays finished and save_result() retries
        """
        state = self.apply_guess(raw)
        if state.game_over:
            return await self.save_result()
        return state

    async def save_result(self) -> GameSnapshot:
        """Append the result record if the game is over and it is not stored yet."""
        if self._result is None or self._result_saved or self._saving:
            return self.snapshot()

        # Set before awaiting so a concurrent call cannot append it twice
        self._saving = True
        try:
            await self.store.append(self._result)
        except PersistenceError as e:
            game_logger.log_game_event(
                'result_save_failed', game_mode=self.mode.value, error=str(e)
            )
            raise
        finally:
            self._saving = False

        self._result_saved = True
        game_logger.log_game_event(
            'result_saved', game_mode=self.mode.value,
            won=self._result.won, attempts=self._result.attempts
        )
        return self.snapshot()

    def snapshot(self) -> GameSnapshot:
        rows = list(self._rows)
        rows.extend(GuessRow.blank() for _ in range(self.max_rounds - len(rows)))

        rank = None
        if self.game_over:
            rank = attempt_rank(self.attempts, self._status is GameStatus.WON)

        return GameSnapshot(
            rows=tuple(rows),
            attempts=self.attempts,
            max_rounds=self.max_rounds,
            status=self._status,
            mode=self.mode,
            letter_status=dict(self._letter_status),
            answer=self._target if self.game_over else None,
            attempt_rank=rank,
            result_saved=self._result_saved,
        )
