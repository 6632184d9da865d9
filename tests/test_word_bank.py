"""Tests for the word bank and the word list loader."""

import json
import random

import pytest

from wordle_daily.config.game_settings import (
    get_word_statistics, load_word_list, validate_word_list_integrity,
)
from wordle_daily.errors import ConfigurationError
from wordle_daily.services import WordBank


def write_words(tmp_path, payload):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


class TestWordBank:
    def test_empty_list_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            WordBank([])

    def test_contains_is_case_normalized(self, word_bank):
        assert word_bank.contains("river")
        assert word_bank.contains(" River ")
        assert "CRANE" in word_bank
        assert not word_bank.contains("ZZZZZ")
        assert not word_bank.contains(None)

    def test_random_word_comes_from_the_list(self):
        bank = WordBank(["crane", "slate", "ghost"], rng=random.Random(7))
        picks = {bank.random_word() for _ in range(50)}
        assert picks <= {"CRANE", "SLATE", "GHOST"}
        assert len(picks) > 1

    def test_words_are_uppercased_and_immutable(self):
        bank = WordBank(["crane"])
        assert bank.words == ("CRANE",)
        assert len(bank) == 1
        assert bank[0] == "CRANE"

    def test_rejects_malformed_words(self):
        with pytest.raises(ConfigurationError):
            WordBank(["CRANES"])
        with pytest.raises(ConfigurationError):
            WordBank(["CR4NE"])

    def test_bundled_word_list_loads(self):
        bank = WordBank.from_file()
        assert len(bank) > 100
        assert bank.contains("RIVER")


class TestLoadWordList:
    def test_loads_and_uppercases(self, tmp_path):
        assert load_word_list(write_words(tmp_path, ["crane", "Slate"])) == ["CRANE", "SLATE"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_word_list(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "words.json"
        path.write_text("[not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_word_list(str(path))

    def test_not_an_array(self, tmp_path):
        with pytest.raises(ConfigurationError, match="array"):
            load_word_list(write_words(tmp_path, {"words": ["CRANE"]}))

    def test_empty_array(self, tmp_path):
        with pytest.raises(ConfigurationError, match="empty"):
            load_word_list(write_words(tmp_path, []))

    def test_duplicates(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Duplicate"):
            load_word_list(write_words(tmp_path, ["crane", "CRANE"]))


class TestWordListChecks:
    def test_integrity_requires_uppercase(self):
        with pytest.raises(ConfigurationError, match="uppercase"):
            validate_word_list_integrity(["crane"])

    def test_word_statistics(self):
        stats = get_word_statistics(["CRANE", "SLATE"])
        assert stats["total_words"] == 2
        assert stats["avg_vowel_count"] == 2.0
        assert stats["letter_frequency"]["A"] == 2

    def test_word_statistics_of_empty_list(self):
        assert "error" in get_word_statistics([])
