"""Build the Grid model from placed words and derive the clue lists."""

from __future__ import annotations

import logging
from typing import Sequence

from models import Direction, Grid, NumberedClue, PlacedWord

logger = logging.getLogger(__name__)


def build_grid(placed: Sequence[PlacedWord], rows: int, cols: int) -> Grid:
    """Create a Grid and write letters, clue numbers and word membership.

    Clue numbers are the placement ids, not a top-left scan renumbering.
    A letter conflict between two words is logged and the first letter kept.
    """
    grid = Grid.create(rows, cols)

    for entry in sorted(placed, key=lambda p: p.id):
        for i, (r, c) in enumerate(entry.cells()):
            cell = grid.cell(r, c)
            if cell is None:
                logger.error(
                    "Word %s (id %d) leaves the %dx%d grid at (%d,%d)",
                    entry.word, entry.id, rows, cols, r, c,
                )
                break

            letter = entry.word[i]
            if i == 0 and cell.clue_number is None:
                cell.clue_number = entry.id

            if cell.solution_letter is None:
                cell.solution_letter = letter
            elif cell.solution_letter != letter:
                logger.error(
                    "Letter conflict at (%d,%d): existing '%s' vs '%s' from %s (id %d)",
                    r, c, cell.solution_letter, letter, entry.word, entry.id,
                )

            if entry.id not in cell.word_ids:
                cell.word_ids.append(entry.id)

    return grid


def build_clue_lists(
    placed: Sequence[PlacedWord],
) -> tuple[list[NumberedClue], list[NumberedClue]]:
    """Split placed words into across/down clue lists, each sorted by id."""
    across: dict[int, NumberedClue] = {}
    down: dict[int, NumberedClue] = {}

    for entry in placed:
        clue = NumberedClue(
            number=entry.id,
            clue_text=entry.clue,
            answer=entry.word,
            direction=entry.direction,
        )
        target = across if entry.direction == Direction.ACROSS else down
        target.setdefault(entry.id, clue)

    return (
        sorted(across.values(), key=lambda c: c.number),
        sorted(down.values(), key=lambda c: c.number),
    )
