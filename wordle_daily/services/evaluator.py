"""
Guess Evaluator

Pure functions that classify each letter of a guess against the target word.
"""

import string
from typing import Dict, List, Optional, Sequence

from ..models.game import LetterState

ALPHABET = string.ascii_uppercase

# Higher wins when a letter has been seen in several states
_STATE_PRIORITY = {
    LetterState.ABSENT: 1,
    LetterState.PRESENT: 2,
    LetterState.CORRECT: 3,
}


def evaluate_guess(guess: str, target: str) -> List[LetterState]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are resolved first and consume their target letter, so a
    letter repeated in the guess is never marked CORRECT or PRESENT more
    often than it occurs in the target.

    Args:
        guess: Uppercase guess, same length as target
        target: Uppercase target word

    Returns:
        One LetterState per guess position
    """
    if len(guess) != len(target):
        raise ValueError("Guess and target must have the same length")

    result: List[Optional[LetterState]] = [None] * len(guess)
    remaining: List[Optional[str]] = list(target)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result[i] = LetterState.CORRECT
            remaining[i] = None

    # Second pass: present letters and misses among unconsumed target letters
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in remaining:
            result[i] = LetterState.PRESENT
            remaining[remaining.index(letter)] = None
        else:
            result[i] = LetterState.ABSENT

    return result  # type: ignore[return-value]


def new_letter_status() -> Dict[str, Optional[LetterState]]:
    """Keyboard status with every letter unused."""
    return {letter: None for letter in ALPHABET}


def update_letter_status(letter_status: Dict[str, Optional[LetterState]],
                         guess: str, states: Sequence[LetterState]) -> None:
    """
    Merges one evaluated guess into the keyboard status.

    A letter only ever moves up in priority: unused, ABSENT, PRESENT, CORRECT.
    """
    for letter, new_state in zip(guess, states):
        current = letter_status.get(letter)
        if current is None or _STATE_PRIORITY[new_state] > _STATE_PRIORITY[current]:
            letter_status[letter] = new_state
