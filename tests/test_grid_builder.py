"""Tests for grid_builder.py."""

import logging
import random

import pytest

from models import Direction, NumberedClue, PlacedWord
from grid_builder import build_clue_lists, build_grid
from grid_placer import place_words
from word_bank import get_word_bank
from word_selector import select_candidates


def _make_placed(word, row, col, direction, word_id=1):
    return PlacedWord(
        id=word_id, word=word, clue=f"Clue for {word}",
        row=row, col=col, direction=direction,
    )


class TestBuildGrid:
    def test_basic_across(self):
        grid = build_grid([_make_placed("CAT", 0, 0, Direction.ACROSS)], 5, 5)
        assert [grid.cells[0][c].solution_letter for c in range(3)] == ["C", "A", "T"]
        assert grid.cells[0][0].word_ids == [1]

    def test_basic_down(self):
        grid = build_grid([_make_placed("DOG", 0, 0, Direction.DOWN)], 5, 5)
        assert [grid.cells[r][0].solution_letter for r in range(3)] == ["D", "O", "G"]

    def test_clue_number_is_placement_id(self):
        placed = [
            _make_placed("CAMPAIGN", 4, 0, Direction.ACROSS, 1),
            _make_placed("BRAND", 2, 1, Direction.DOWN, 2),
        ]
        grid = build_grid(placed, 8, 8)
        assert grid.cells[4][0].clue_number == 1
        assert grid.cells[2][1].clue_number == 2
        assert grid.cells[4][1].clue_number is None

    def test_clue_numbers_only_at_starts(self):
        placed = [
            _make_placed("CAMPAIGN", 4, 0, Direction.ACROSS, 1),
            _make_placed("BRAND", 2, 1, Direction.DOWN, 2),
        ]
        grid = build_grid(placed, 8, 8)
        numbered = {
            (r, c) for r in range(8) for c in range(8)
            if grid.cells[r][c].clue_number is not None
        }
        assert numbered == {(4, 0), (2, 1)}

    def test_shared_start_keeps_first_number(self):
        placed = [
            _make_placed("CAT", 0, 0, Direction.ACROSS, 1),
            _make_placed("COW", 0, 0, Direction.DOWN, 2),
        ]
        grid = build_grid(placed, 5, 5)
        assert grid.cells[0][0].clue_number == 1
        assert grid.cells[0][0].word_ids == [1, 2]

    def test_processes_in_id_order(self):
        placed = [
            _make_placed("COW", 0, 0, Direction.DOWN, 2),
            _make_placed("CAT", 0, 0, Direction.ACROSS, 1),
        ]
        grid = build_grid(placed, 5, 5)
        assert grid.cells[0][0].word_ids == [1, 2]
        assert grid.cells[0][0].clue_number == 1

    def test_letter_conflict_logged_not_raised(self, caplog):
        placed = [
            _make_placed("CAT", 0, 0, Direction.ACROSS, 1),
            _make_placed("DOG", 0, 0, Direction.DOWN, 2),  # D != C
        ]
        with caplog.at_level(logging.ERROR, logger="grid_builder"):
            grid = build_grid(placed, 5, 5)
        assert "Letter conflict at (0,0)" in caplog.text
        assert grid.cells[0][0].solution_letter == "C"
        assert grid.cells[0][0].word_ids == [1, 2]

    def test_word_off_grid_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="grid_builder"):
            grid = build_grid([_make_placed("HELLO", 0, 2, Direction.ACROSS)], 3, 3)
        assert "leaves the 3x3 grid" in caplog.text
        assert grid.cells[0][2].solution_letter == "H"

    def test_blocked_cells_remain(self):
        grid = build_grid([_make_placed("CAT", 0, 0, Direction.ACROSS)], 5, 5)
        assert grid.cells[1][0].is_blocked
        assert grid.cells[1][0].word_ids == []

    def test_empty_puzzle(self):
        grid = build_grid([], 8, 8)
        assert all(cell.is_blocked for row in grid.cells for cell in row)

    @pytest.mark.parametrize("seed", range(10))
    def test_generated_paths_match(self, seed, caplog):
        candidates = select_candidates(get_word_bank(), 8, random.Random(seed))
        placed = place_words(candidates, 8, 8)
        with caplog.at_level(logging.ERROR):
            grid = build_grid(placed, 8, 8)
        assert not caplog.records
        for word in placed:
            letters = "".join(grid.cells[r][c].solution_letter for r, c in word.cells())
            assert letters == word.word
            assert all(word.id in grid.cells[r][c].word_ids for r, c in word.cells())
        assert len({w.id for w in placed}) == len(placed)


class TestBuildClueLists:
    def test_split_and_sorted(self):
        placed = [
            _make_placed("FGH", 2, 2, Direction.ACROSS, 3),
            _make_placed("ABCDE", 0, 0, Direction.ACROSS, 1),
            _make_placed("AXY", 0, 0, Direction.DOWN, 2),
        ]
        across, down = build_clue_lists(placed)
        assert all(isinstance(c, NumberedClue) for c in across + down)
        assert [c.number for c in across] == [1, 3]
        assert [c.number for c in down] == [2]
        assert down[0].answer == "AXY"
        assert down[0].clue_text == "Clue for AXY"

    def test_duplicate_ids_collapsed(self):
        word = _make_placed("CAT", 0, 0, Direction.ACROSS, 1)
        across, down = build_clue_lists([word, word])
        assert len(across) == 1 and down == []

    def test_empty(self):
        assert build_clue_lists([]) == ([], [])
