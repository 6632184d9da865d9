"""
Game Configuration Constants Module

This module defines the game rules and the loader for the word list.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Dict, Final, List, Optional, Tuple

from ..errors import ConfigurationError

WORD_LENGTH: Final[int] = 5
"""Number of letters in every word and every guess."""

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

RANK_THRESHOLDS: Final[Tuple[Tuple[int, str], ...]] = (
    (0, "Newbie"),
    (5, "Beginner"),
    (15, "Intermediate"),
    (30, "Advanced"),
    (50, "Expert"),
    (100, "Master"),
)
"""Player rank by total wins, ascending. The highest threshold met wins."""

ATTEMPT_RANKS: Final[Dict[int, str]] = {
    1: "Genius",
    2: "Magnificent",
    3: "Impressive",
    4: "Splendid",
    5: "Great",
    6: "Phew",
}
"""Label for a won game by the number of attempts it took."""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'wordles.json'
)


def load_word_list(json_file_path: Optional[str] = None) -> List[str]:
    """
    Load word list from a JSON file.

    Args:
        json_file_path: Path to a JSON array of words, defaults to the bundled wordles.json

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        ConfigurationError: If the file is missing, malformed, empty or contains invalid words
    """
    json_file_path = json_file_path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Word list file not found: {json_file_path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ConfigurationError("JSON file must contain an array of words")

    if not all(isinstance(word, str) for word in word_list):
        raise ConfigurationError("Word list must only contain strings")

    uppercase_words = [word.strip().upper() for word in word_list]
    validate_word_list_integrity(uppercase_words)
    return uppercase_words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ConfigurationError: If any validation check fails with detailed error message
    """
    if not words:
        raise ConfigurationError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ConfigurationError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ConfigurationError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ConfigurationError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ConfigurationError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> dict:
    """
    Analyzes a word list and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: The five most frequent letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        words = load_word_list()
        print(" Word list validation passed")

        stats = get_word_statistics(words)
        print(f" Game statistics: {stats}")
    except ConfigurationError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
