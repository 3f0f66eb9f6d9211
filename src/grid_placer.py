"""Crossword word placement: centered seed word, first-fit crossings, row-major fallback."""

from __future__ import annotations

import logging
from collections import namedtuple
from typing import Iterator, Optional, Sequence

from models import BankEntry, Direction, PlacedWord

logger = logging.getLogger(__name__)

Placement = namedtuple("Placement", ["row", "col", "direction"])
WorkingGrid = list[list[Optional[str]]]


def place_words(
    candidates: Sequence[BankEntry],
    rows: int = 8,
    cols: int = 8,
) -> list[PlacedWord]:
    """Place *candidates* in order; words that fit nowhere are dropped."""
    placed, _ = place_words_on_grid(candidates, rows, cols)
    return placed


def place_words_on_grid(
    candidates: Sequence[BankEntry],
    rows: int,
    cols: int,
) -> tuple[list[PlacedWord], WorkingGrid]:
    """Like place_words, but also return the letter grid used for conflict checks."""
    working: WorkingGrid = [[None] * cols for _ in range(rows)]
    placed: list[PlacedWord] = []

    for entry in candidates:
        word = entry.word.upper()
        if not word:
            logger.debug("Skipping empty bank entry (clue %r)", entry.clue)
            continue

        if not placed:
            spot = _seed_placement(word, working, rows, cols)
        else:
            spot = _find_crossing(word, placed, working, rows, cols)
            if spot is None:
                spot = _find_free_across(word, working, rows, cols)

        if spot is None:
            logger.debug("Dropping %s: no valid position on %dx%d grid", word, rows, cols)
            continue

        _place_on_grid(word, spot.row, spot.col, spot.direction, working)
        placed.append(PlacedWord(
            id=len(placed) + 1, word=word, clue=entry.clue,
            row=spot.row, col=spot.col, direction=spot.direction,
        ))

    logger.debug("Placed %d of %d candidates", len(placed), len(candidates))
    return placed, working


# ── Placement search ─────────────────────────────────────────────────

def _seed_placement(
    word: str, working: WorkingGrid, rows: int, cols: int,
) -> Placement | None:
    """Centered ACROSS on the middle row, or None if the word is wider than the grid."""
    row = rows // 2
    col = max(0, (cols - len(word)) // 2)
    if can_place(word, row, col, Direction.ACROSS, working, rows, cols):
        return Placement(row, col, Direction.ACROSS)
    return None


def crossing_placements(
    word: str, placed: Sequence[PlacedWord],
) -> Iterator[Placement]:
    """Every placement aligning a letter of *word* with an equal letter of a placed word.

    Scan order: letter of *word*, then placed word, then letter of the placed word.
    """
    for i, ch in enumerate(word):
        for existing in placed:
            for j, other in enumerate(existing.word):
                if other != ch:
                    continue
                if existing.direction == Direction.ACROSS:
                    yield Placement(existing.row - i, existing.col + j, Direction.DOWN)
                else:
                    yield Placement(existing.row + j, existing.col - i, Direction.ACROSS)


def _find_crossing(
    word: str, placed: Sequence[PlacedWord],
    working: WorkingGrid, rows: int, cols: int,
) -> Placement | None:
    for spot in crossing_placements(word, placed):
        if can_place(word, spot.row, spot.col, spot.direction, working, rows, cols):
            return spot
    return None


def _find_free_across(
    word: str, working: WorkingGrid, rows: int, cols: int,
) -> Placement | None:
    """First row-major ACROSS position that fits, crossing or not."""
    for r in range(rows):
        for c in range(cols - len(word) + 1):
            if can_place(word, r, c, Direction.ACROSS, working, rows, cols):
                return Placement(r, c, Direction.ACROSS)
    return None


# ── Validation ────────────────────────────────────────────────────────

def can_place(
    word: str, row: int, col: int, direction: Direction,
    working: WorkingGrid, rows: int, cols: int,
) -> bool:
    """Every letter in bounds; occupied cells must already hold the same letter."""
    dr, dc = direction.step
    for i, letter in enumerate(word):
        r = row + dr * i
        c = col + dc * i
        if not (0 <= r < rows and 0 <= c < cols):
            return False
        existing = working[r][c]
        if existing is not None and existing != letter:
            return False
    return True


# ── Grid manipulation ─────────────────────────────────────────────────

def _place_on_grid(
    word: str, row: int, col: int, direction: Direction, working: WorkingGrid,
) -> None:
    dr, dc = direction.step
    for i, letter in enumerate(word):
        working[row + dr * i][col + dc * i] = letter
