"""Data models for the mini crossword."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class Direction(Enum):
    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> tuple[int, int]:
        """(row, col) increment when walking one letter forward."""
        return (0, 1) if self is Direction.ACROSS else (1, 0)


def normalize_word(raw: str) -> str:
    """Uppercase, strip everything except A-Z."""
    return "".join(c for c in raw.upper() if "A" <= c <= "Z")


@dataclass(frozen=True)
class BankEntry:
    """A word/clue pair from the word bank."""

    word: str  # uppercase, alpha-only
    clue: str


@dataclass(frozen=True)
class PlacedWord:
    """A bank entry that has been assigned a position on the grid."""

    id: int
    word: str
    clue: str
    row: int = 0
    col: int = 0
    direction: Direction = Direction.ACROSS

    def cells(self) -> Iterator[tuple[int, int]]:
        dr, dc = self.direction.step
        for i in range(len(self.word)):
            yield self.row + dr * i, self.col + dc * i


@dataclass
class Cell:
    """A single cell in the crossword grid."""

    solution_letter: str | None = None
    user_letter: str = ""
    clue_number: int | None = None
    word_ids: list[int] = field(default_factory=list)

    @property
    def is_blocked(self) -> bool:
        return self.solution_letter is None


@dataclass
class Grid:
    """A rows x cols crossword grid of Cell objects."""

    rows: int
    cols: int
    cells: list[list[Cell]] = field(default_factory=list)

    @classmethod
    def create(cls, rows: int, cols: int) -> Grid:
        """Create a grid of empty (blocked) cells."""
        cells = [[Cell() for _ in range(cols)] for _ in range(rows)]
        return cls(rows=rows, cols=cols, cells=cells)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell | None:
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]


@dataclass(frozen=True)
class NumberedClue:
    """A clue with its display number."""

    number: int
    clue_text: str
    answer: str
    direction: Direction


class CrosswordError(Exception):
    """Fatal error outside the generation core (bank import, CLI)."""
