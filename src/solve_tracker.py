"""Track which placed words the player has currently filled in correctly."""

from __future__ import annotations

from typing import Iterable, Sequence

from models import Grid, PlacedWord


def is_puzzle_complete(solved: Iterable[int], total_word_count: int) -> bool:
    """True when every placed word is solved. An empty puzzle is never complete."""
    return total_word_count > 0 and len(set(solved)) == total_word_count


class SolveTracker:
    """Solved-word set for one puzzle, refreshed per edited cell."""

    def __init__(self, words: Sequence[PlacedWord]):
        self._words = {w.id: w for w in words}
        self._solved: set[int] = set()

    @property
    def solved(self) -> frozenset[int]:
        return frozenset(self._solved)

    @property
    def total(self) -> int:
        return len(self._words)

    @property
    def is_complete(self) -> bool:
        return is_puzzle_complete(self._solved, self.total)

    @staticmethod
    def user_answer(grid: Grid, word: PlacedWord) -> str:
        letters = []
        for r, c in word.cells():
            cell = grid.cell(r, c)
            letters.append(cell.user_letter if cell is not None else "")
        return "".join(letters)

    @classmethod
    def is_word_correct(cls, grid: Grid, word: PlacedWord) -> bool:
        return cls.user_answer(grid, word).upper() == word.word.upper()

    def update_cell(self, grid: Grid, row: int, col: int) -> frozenset[int]:
        """Re-check only the words passing through (row, col)."""
        cell = grid.cell(row, col)
        if cell is not None:
            for word_id in cell.word_ids:
                self._check(grid, word_id)
        return self.solved

    def recompute_all(self, grid: Grid) -> frozenset[int]:
        for word_id in self._words:
            self._check(grid, word_id)
        return self.solved

    def _check(self, grid: Grid, word_id: int) -> None:
        word = self._words.get(word_id)
        if word is None:
            return
        if self.is_word_correct(grid, word):
            self._solved.add(word_id)
        else:
            self._solved.discard(word_id)
