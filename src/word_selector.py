"""Pick the candidate words for a new puzzle."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

from models import BankEntry

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random) -> list[T]:
    """Fisher-Yates shuffle into a new list; *items* is left untouched."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def select_candidates(
    bank: Sequence[BankEntry],
    max_words: int,
    rng: random.Random | None = None,
) -> list[BankEntry]:
    """Uniform random subset of up to *max_words* entries, longest first.

    A bank smaller than *max_words* is returned whole (shuffled, then sorted).
    """
    if rng is None:
        rng = random.Random()
    chosen = shuffle(bank, rng)[:max(max_words, 0)]
    # sorted() is stable, equal lengths keep their shuffled order
    return sorted(chosen, key=lambda e: len(e.word), reverse=True)
