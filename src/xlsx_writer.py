"""Write a generated puzzle's clues to an XLSX file."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Font

from models import BankEntry, NumberedClue


def write_clues_xlsx(
    across: list[NumberedClue],
    down: list[NumberedClue],
    output_path: str,
    unplaced: list[BankEntry] | None = None,
) -> None:
    """Write across and down clues to an Excel workbook.

    Sheet "Clues": a section per direction, '<number>. <clue>' in column A
    and the answer in column B. A "Not placed" sheet lists dropped candidates
    when *unplaced* is non-empty.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Clues"

    header_font = Font(bold=True, size=12)
    row = 1
    for title, clues in (("ACROSS", across), ("DOWN", down)):
        if row > 1:
            row += 1  # blank separator
        ws.cell(row=row, column=1, value=title).font = header_font
        row += 1
        for clue in clues:
            ws.cell(row=row, column=1, value=f"{clue.number}. {clue.clue_text}")
            ws.cell(row=row, column=2, value=clue.answer)
            row += 1

    ws.column_dimensions["A"].width = 60
    ws.column_dimensions["B"].width = 15

    if unplaced:
        ws2 = wb.create_sheet(title="Not placed")
        ws2.cell(row=1, column=1, value="Word").font = header_font
        ws2.cell(row=1, column=2, value="Clue").font = header_font
        for i, entry in enumerate(unplaced, start=2):
            ws2.cell(row=i, column=1, value=entry.word)
            ws2.cell(row=i, column=2, value=entry.clue)
        ws2.column_dimensions["A"].width = 15
        ws2.column_dimensions["B"].width = 60

    wb.save(output_path)
