"""Tests for the daily challenge word selection."""

from datetime import date, timedelta

import pytest

from conftest import TODAY, make_record
from wordle_daily.models import GameMode
from wordle_daily.services import WordBank, already_played_today, daily_record, word_for_date
from wordle_daily.services.daily_challenge import date_hash


class TestWordForDate:
    def test_same_date_same_word(self, word_bank):
        assert word_for_date(word_bank, TODAY) == word_for_date(word_bank, TODAY)

    def test_same_date_same_word_across_instances(self, word_bank):
        rebuilt = WordBank(list(word_bank.words))
        assert word_for_date(rebuilt, TODAY) == word_for_date(word_bank, TODAY)

    def test_word_comes_from_bank(self, word_bank):
        for offset in range(60):
            assert word_for_date(word_bank, TODAY + timedelta(days=offset)) in word_bank

    def test_consecutive_days_rotate_words(self, word_bank):
        words = {word_for_date(word_bank, TODAY + timedelta(days=offset)) for offset in range(30)}
        assert len(words) > 1

    def test_date_hash_is_stable(self):
        assert date_hash(date(2024, 1, 1)) == 4145217
        assert date_hash(date(2024, 1, 2)) == 4145218

    def test_single_word_bank(self):
        assert word_for_date(WordBank(["CRANE"]), TODAY) == "CRANE"


class TestAlreadyPlayedToday:
    @pytest.mark.asyncio
    async def test_daily_record_today(self, store):
        await store.append(make_record(mode=GameMode.DAILY, won=False))
        assert await already_played_today(store, TODAY)
        assert (await daily_record(store, TODAY)).won is False

    @pytest.mark.asyncio
    async def test_normal_game_does_not_count(self, store):
        await store.append(make_record(mode=GameMode.NORMAL))
        assert not await already_played_today(store, TODAY)

    @pytest.mark.asyncio
    async def test_other_day_does_not_count(self, store):
        await store.append(make_record(mode=GameMode.DAILY, played_on=TODAY - timedelta(days=1)))
        assert not await already_played_today(store, TODAY)
        assert await daily_record(store, TODAY) is None
