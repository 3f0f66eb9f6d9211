"""Render a crossword grid as standalone SVG."""

from __future__ import annotations

from xml.sax.saxutils import escape

from models import Grid

CELL_SIZE = 36.0
FONT = "Helvetica, Arial, sans-serif"


def render_svg(
    grid: Grid,
    output_path: str,
    show_answers: bool = False,
    show_user_letters: bool = False,
    cell_size: float = CELL_SIZE,
) -> None:
    """Write the grid to *output_path*.

    Blocked cells are black. Open cells carry their clue number and, on
    request, the solution letter or what the player has typed.
    """
    number_font = cell_size * 0.28
    letter_font = cell_size * 0.5
    width = cell_size * grid.cols
    height = cell_size * grid.rows

    parts: list[str] = [
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">\n'
    ]

    for r, row in enumerate(grid.cells):
        for c, cell in enumerate(row):
            x = c * cell_size
            y = r * cell_size

            if cell.is_blocked:
                parts.append(
                    f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                    f'height="{cell_size}" fill="black"/>\n'
                )
                continue

            parts.append(
                f'  <rect x="{x}" y="{y}" width="{cell_size}" '
                f'height="{cell_size}" fill="white" '
                f'stroke="black" stroke-width="0.5"/>\n'
            )
            if cell.clue_number is not None:
                parts.append(
                    f'  <text x="{x + 2}" y="{y + number_font + 1}" '
                    f'font-family="{FONT}" font-weight="bold" '
                    f'font-size="{number_font}" fill="black">{cell.clue_number}</text>\n'
                )

            letter = ""
            if show_answers:
                letter = cell.solution_letter or ""
            elif show_user_letters:
                letter = cell.user_letter
            if letter:
                parts.append(
                    f'  <text x="{x + cell_size * 0.5}" y="{y + cell_size * 0.6}" '
                    f'text-anchor="middle" dominant-baseline="central" '
                    f'font-family="{FONT}" font-size="{letter_font}" '
                    f'fill="black">{escape(letter)}</text>\n'
                )

    parts.append(
        f'  <rect x="0" y="0" width="{width}" height="{height}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )
    parts.append("</svg>\n")

    with open(output_path, "w", encoding="utf-8") as f:
        f.writelines(parts)


def render_puzzle_svg(grid: Grid, output_path: str) -> None:
    """Blank puzzle: numbers only."""
    render_svg(grid, output_path)


def render_answer_svg(grid: Grid, output_path: str) -> None:
    """Answer key: every solution letter filled in."""
    render_svg(grid, output_path, show_answers=True)
