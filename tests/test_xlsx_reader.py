"""Tests for xlsx_reader.py."""

import logging

import openpyxl
import pytest

from models import BankEntry, CrosswordError
from xlsx_reader import _validate_and_filter, read_bank


def _write_workbook(path, rows):
    wb = openpyxl.Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    wb.save(path)
    return path


class TestReadBank:
    def test_with_header(self, tmp_path):
        path = _write_workbook(tmp_path / "bank.xlsx", [
            ("Word", "Clue"),
            ("brand", "Identity of a company"),
            ("e-mail", "Newsletter channel"),
        ])
        bank = read_bank(path)
        assert bank == [
            BankEntry("BRAND", "Identity of a company"),
            BankEntry("EMAIL", "Newsletter channel"),
        ]

    def test_without_header(self, tmp_path):
        path = _write_workbook(tmp_path / "bank.xlsx", [
            ("ROI", "Return on investment"),
            ("KPI", "Indicator"),
        ])
        assert [e.word for e in read_bank(path)] == ["ROI", "KPI"]

    def test_missing_clue_is_empty(self, tmp_path):
        path = _write_workbook(tmp_path / "bank.xlsx", [("LEAD",)])
        assert read_bank(path) == [BankEntry("LEAD", "")]

    def test_duplicates_and_blanks_skipped(self, tmp_path, caplog):
        path = _write_workbook(tmp_path / "bank.xlsx", [
            ("Word", "Clue"),
            ("NICHE", "Segment"),
            ("niche", "Again"),
            ("123", "No letters"),
            (None, "No word"),
        ])
        with caplog.at_level(logging.WARNING, logger="xlsx_reader"):
            bank = read_bank(path)
        assert [e.word for e in bank] == ["NICHE"]
        assert "Duplicate word 'NICHE'" in caplog.text

    def test_file_not_found(self, tmp_path):
        with pytest.raises(CrosswordError, match="File not found"):
            read_bank(tmp_path / "nonexistent.xlsx")

    def test_empty_workbook(self, tmp_path):
        path = _write_workbook(tmp_path / "empty.xlsx", [])
        with pytest.raises(CrosswordError, match="No valid word bank entries"):
            read_bank(path)


class TestValidateAndFilter:
    def test_keeps_order(self):
        entries = [BankEntry("CTA", "a"), BankEntry("PPC", "b")]
        assert _validate_and_filter(entries) == entries

    def test_all_invalid(self):
        with pytest.raises(CrosswordError):
            _validate_and_filter([BankEntry("", "blank")])
