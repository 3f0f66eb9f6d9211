"""Render a mini crossword to a printable PDF using ReportLab.

Page 1: title banner, grid, then the ACROSS and DOWN clues side by side.
Page 2: answer key.
"""

from __future__ import annotations

from dataclasses import dataclass
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph

from models import Grid, NumberedClue

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36
MAX_CELL = 40.0
MIN_CLUE_FONT = 7.0


@dataclass
class LayoutParams:
    """Computed page measurements."""

    rows: int = 8
    cols: int = 8
    cell_size: float = MAX_CELL
    grid_x: float = 0.0
    grid_y: float = 0.0  # top edge of the grid in page coords
    banner_h: float = 28.0
    banner_y: float = PAGE_H - MARGIN - 28.0
    clue_zone_y: float = 0.0
    clue_col_w: float = (PAGE_W - 2 * MARGIN - 18.0) / 2
    clue_gutter: float = 18.0
    clue_font_size: float = 11.0
    number_font_size: float = 9.0
    title: str = "THE DAILY PUZZLE"

    @property
    def grid_w(self) -> float:
        return self.cell_size * self.cols

    @property
    def grid_h(self) -> float:
        return self.cell_size * self.rows


def render_pdf(
    grid: Grid,
    across: list[NumberedClue],
    down: list[NumberedClue],
    title: str,
    output_path: str,
) -> None:
    """Lay out and draw the puzzle page and the answer key page."""
    from reportlab.pdfgen.canvas import Canvas

    layout = _compute_layout(grid.rows, grid.cols, title)
    layout = _fit_clues(across, down, layout)

    c = Canvas(output_path, pagesize=letter)

    _draw_title_banner(c, layout)
    _draw_grid(c, grid, layout, show_answers=False)
    _draw_clue_column(c, "ACROSS", across, MARGIN, layout)
    _draw_clue_column(c, "DOWN", down, MARGIN + layout.clue_col_w + layout.clue_gutter, layout)
    c.showPage()

    key = _compute_layout(grid.rows, grid.cols, "ANSWER KEY")
    _draw_title_banner(c, key)
    _draw_grid(c, grid, key, show_answers=True)
    c.showPage()

    c.save()


def _compute_layout(rows: int, cols: int, title: str) -> LayoutParams:
    """Grid centered under the banner, sized to at most half the usable height."""
    lp = LayoutParams(rows=rows, cols=cols, title=title)
    usable_w = PAGE_W - 2 * MARGIN
    usable_h = PAGE_H - 2 * MARGIN - lp.banner_h
    lp.cell_size = min(MAX_CELL, usable_w / max(cols, 1), usable_h * 0.5 / max(rows, 1))
    lp.number_font_size = max(5.0, lp.cell_size * 0.25)
    lp.grid_x = (PAGE_W - lp.grid_w) / 2
    lp.grid_y = lp.banner_y - 16
    lp.clue_zone_y = lp.grid_y - lp.grid_h - 24
    return lp


def _fit_clues(
    across: list[NumberedClue],
    down: list[NumberedClue],
    layout: LayoutParams,
) -> LayoutParams:
    """Shrink the clue font until the taller column fits above the bottom margin."""
    available = layout.clue_zone_y - MARGIN
    while layout.clue_font_size > MIN_CLUE_FONT:
        tallest = max(_column_height(across, layout), _column_height(down, layout))
        if tallest <= available:
            break
        layout.clue_font_size -= 0.5
    return layout


def _column_height(clues: list[NumberedClue], layout: LayoutParams) -> float:
    style = _clue_style(layout)
    height = 18.0  # section header
    for clue in clues:
        _, h = Paragraph(_clue_markup(clue), style).wrap(layout.clue_col_w, 10000)
        height += h + style.spaceAfter
    return height


def _clue_style(layout: LayoutParams) -> ParagraphStyle:
    return ParagraphStyle(
        "ClueStyle",
        fontName="Helvetica",
        fontSize=layout.clue_font_size,
        leading=layout.clue_font_size + 2,
        spaceAfter=2,
    )


def _clue_markup(clue: NumberedClue) -> str:
    """Format clue as ``<b>N.</b> text`` with XML escaping."""
    return f"<b>{clue.number}.</b> {escape(clue.clue_text)}"


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    w = PAGE_W - 2 * MARGIN
    c.setFillColorRGB(0, 0, 0)
    c.rect(MARGIN, layout.banner_y, w, layout.banner_h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    c.drawString(MARGIN + (w - text_w) / 2, layout.banner_y + 8, layout.title)


def _draw_grid(c, grid: Grid, layout: LayoutParams, show_answers: bool) -> None:
    """Blocked cells black; open cells white with clue numbers and optional letters."""
    cs = layout.cell_size

    for r, row in enumerate(grid.cells):
        for col, cell in enumerate(row):
            cx = layout.grid_x + col * cs
            cy = layout.grid_y - (r + 1) * cs

            if cell.is_blocked:
                c.setFillColorRGB(0, 0, 0)
                c.rect(cx, cy, cs, cs, fill=1, stroke=0)
                continue

            c.setFillColorRGB(1, 1, 1)
            c.setStrokeColorRGB(0, 0, 0)
            c.setLineWidth(0.5)
            c.rect(cx, cy, cs, cs, fill=1, stroke=1)

            c.setFillColorRGB(0, 0, 0)
            if cell.clue_number is not None:
                c.setFont("Helvetica-Bold", layout.number_font_size)
                c.drawString(cx + 1.5, cy + cs - layout.number_font_size - 1, str(cell.clue_number))

            if show_answers and cell.solution_letter:
                size = cs * 0.5
                c.setFont("Helvetica", size)
                lw = stringWidth(cell.solution_letter, "Helvetica", size)
                c.drawString(cx + (cs - lw) / 2, cy + cs * 0.3, cell.solution_letter)

    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(layout.grid_x, layout.grid_y - layout.grid_h, layout.grid_w, layout.grid_h,
           fill=0, stroke=1)


def _draw_clue_column(
    c, heading: str, clues: list[NumberedClue], x: float, layout: LayoutParams,
) -> None:
    """Section header followed by wrapped clue paragraphs."""
    y = layout.clue_zone_y
    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y - 14, layout.clue_col_w, 14, fill=1, stroke=0)
    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 9)
    c.drawString(x + 4, y - 10.5, heading)
    y -= 18

    style = _clue_style(layout)
    for clue in clues:
        p = Paragraph(_clue_markup(clue), style)
        _, h = p.wrap(layout.clue_col_w, 10000)
        p.drawOn(c, x, y - h)
        y -= h + style.spaceAfter
