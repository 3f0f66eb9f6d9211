"""Plain-text rendering of a grid and its clues for the terminal."""

from __future__ import annotations

from models import Cell, Grid, NumberedClue

BLOCK = "#"
EMPTY = "."


def cell_symbol(cell: Cell, show_answers: bool) -> str:
    if cell.is_blocked:
        return BLOCK
    if show_answers:
        return cell.solution_letter
    return cell.user_letter or EMPTY


def format_grid(grid: Grid, show_answers: bool = True) -> str:
    header = " ".join(f"{c:>2}" for c in range(grid.cols))
    lines = ["    " + header, "    " + "-" * (3 * grid.cols - 1)]
    for r, row in enumerate(grid.cells):
        rendered = " ".join(f"{cell_symbol(cell, show_answers):>2}" for cell in row)
        lines.append(f"{r:>2} | {rendered}")
    return "\n".join(lines)


def format_clues(across: list[NumberedClue], down: list[NumberedClue]) -> str:
    lines: list[str] = []
    for title, clues in (("ACROSS", across), ("DOWN", down)):
        lines.append(title)
        lines.extend(f"  {c.number}. {c.clue_text} ({len(c.answer)})" for c in clues)
    return "\n".join(lines)
