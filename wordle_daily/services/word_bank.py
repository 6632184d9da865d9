"""
Word Bank

The fixed list of valid words. Loaded once at startup and never modified.
"""

import random
from typing import Iterable, Optional

from ..config.game_settings import load_word_list, validate_word_list_integrity
from ..errors import ConfigurationError
from ..models.game import normalize_word


class WordBank:
    """
    Immutable set of valid five-letter words.

    Supplies uniformly random target words and the membership test used to
    validate guesses.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        normalized = [normalize_word(word) for word in words]
        if not normalized:
            raise ConfigurationError("Word list cannot be empty")
        validate_word_list_integrity(normalized)

        self._words = tuple(normalized)
        self._lookup = frozenset(self._words)
        self._rng = rng or random.Random()

    @classmethod
    def from_file(cls, path: Optional[str] = None) -> "WordBank":
        """Build a word bank from a JSON word list, the bundled one by default."""
        return cls(load_word_list(path))

    @property
    def words(self):
        return self._words

    def random_word(self) -> str:
        if not self._words:
            raise ConfigurationError("Word list cannot be empty")
        return self._rng.choice(self._words)

    def contains(self, candidate: str) -> bool:
        if not isinstance(candidate, str):
            return False
        return normalize_word(candidate) in self._lookup

    def __contains__(self, candidate) -> bool:
        return self.contains(candidate)

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]
