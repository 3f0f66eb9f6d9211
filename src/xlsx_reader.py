"""Read a substitute word bank from an XLSX workbook."""

from __future__ import annotations

import logging
from pathlib import Path

import openpyxl

from models import BankEntry, CrosswordError, normalize_word

logger = logging.getLogger(__name__)


def read_bank(path: str | Path) -> list[BankEntry]:
    """Open *path* and return its (word, clue) rows as bank entries.

    Column A holds the word, column B the clue. A leading header row is
    detected and skipped.
    """
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.active
        first_row = _first_data_row(ws)
        entries: list[BankEntry] = []
        for row in ws.iter_rows(min_row=first_row, values_only=True):
            if not row or row[0] is None:
                continue
            word = normalize_word(str(row[0]))
            clue = str(row[1]).strip() if len(row) > 1 and row[1] is not None else ""
            entries.append(BankEntry(word=word, clue=clue))
    finally:
        wb.close()

    return _validate_and_filter(entries)


def _first_data_row(sheet) -> int:
    """Return 2 when row 1 is a header (word/answer, clue/hint), else 1."""
    for row in sheet.iter_rows(min_row=1, max_row=1, max_col=2, values_only=True):
        if not row:
            continue
        word = str(row[0] or "").strip().lower()
        clue = str(row[1] or "").strip().lower() if len(row) > 1 else ""
        if word in ("word", "answer") or clue in ("clue", "hint"):
            return 2
    return 1


def _validate_and_filter(entries: list[BankEntry]) -> list[BankEntry]:
    """Drop empty and duplicate words, error if none remain."""
    seen: set[str] = set()
    result: list[BankEntry] = []

    for entry in entries:
        if not entry.word:
            logger.warning("Skipping row with no letters (clue %r)", entry.clue)
            continue
        if entry.word in seen:
            logger.warning("Duplicate word '%s', skipping", entry.word)
            continue
        seen.add(entry.word)
        result.append(entry)

    if not result:
        raise CrosswordError("No valid word bank entries after filtering")

    return result
