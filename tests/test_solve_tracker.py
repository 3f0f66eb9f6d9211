"""Tests for solve_tracker.py."""

from models import Direction, PlacedWord
from grid_builder import build_grid
from solve_tracker import SolveTracker, is_puzzle_complete

CAMPAIGN = PlacedWord(1, "CAMPAIGN", "A coordinated marketing effort.", 4, 0, Direction.ACROSS)
BRAND = PlacedWord(2, "BRAND", "Identity.", 2, 1, Direction.DOWN)
SHARED = (4, 1)


def _puzzle():
    words = [CAMPAIGN, BRAND]
    return words, build_grid(words, 8, 8)


def _type(grid, word, text):
    for (r, c), ch in zip(word.cells(), text):
        grid.cells[r][c].user_letter = ch


class TestIsPuzzleComplete:
    def test_all_solved(self):
        assert is_puzzle_complete({1, 2}, 2)

    def test_partial(self):
        assert not is_puzzle_complete({1}, 2)

    def test_empty_puzzle_never_complete(self):
        assert not is_puzzle_complete(set(), 0)

    def test_duplicates_ignored(self):
        assert not is_puzzle_complete([1, 1], 2)


class TestSolveTracker:
    def test_starts_empty(self):
        words, _ = _puzzle()
        tracker = SolveTracker(words)
        assert tracker.solved == frozenset()
        assert tracker.total == 2
        assert not tracker.is_complete

    def test_user_answer_skips_blank_cells(self):
        words, grid = _puzzle()
        grid.cells[2][1].user_letter = "B"
        grid.cells[4][1].user_letter = "A"
        assert SolveTracker.user_answer(grid, BRAND) == "BA"

    def test_case_insensitive(self):
        words, grid = _puzzle()
        _type(grid, BRAND, "brand")
        assert SolveTracker.is_word_correct(grid, BRAND)

    def test_shared_cell_solves_one_word(self):
        """Finishing CAMPAIGN through the crossing leaves BRAND unsolved."""
        words, grid = _puzzle()
        tracker = SolveTracker(words)
        _type(grid, CAMPAIGN, "C-MPAIGN")
        _type(grid, BRAND, "BR-XD")
        grid.cells[4][1].user_letter = "A"

        solved = tracker.update_cell(grid, *SHARED)
        assert solved == {1}

    def test_only_words_through_cell_are_checked(self):
        words, grid = _puzzle()
        tracker = SolveTracker(words)
        _type(grid, BRAND, "BRAND")
        # (4,0) belongs to CAMPAIGN only
        assert tracker.update_cell(grid, 4, 0) == frozenset()
        assert tracker.update_cell(grid, 2, 1) == {2}

    def test_edit_can_unsolve(self):
        words, grid = _puzzle()
        tracker = SolveTracker(words)
        _type(grid, CAMPAIGN, "CAMPAIGN")
        tracker.update_cell(grid, 4, 7)
        assert tracker.solved == {1}

        grid.cells[4][7].user_letter = "X"
        assert tracker.update_cell(grid, 4, 7) == frozenset()

    def test_recompute_is_idempotent(self):
        words, grid = _puzzle()
        tracker = SolveTracker(words)
        _type(grid, BRAND, "BRAND")
        first = tracker.recompute_all(grid)
        assert tracker.recompute_all(grid) == first == {2}

    def test_full_fill_round_trip(self):
        words, grid = _puzzle()
        tracker = SolveTracker(words)
        for row in grid.cells:
            for cell in row:
                if not cell.is_blocked:
                    cell.user_letter = cell.solution_letter
        tracker.recompute_all(grid)
        assert tracker.is_complete

        grid.cells[SHARED[0]][SHARED[1]].user_letter = ""
        tracker.update_cell(grid, *SHARED)
        assert tracker.solved == frozenset()
        assert not tracker.is_complete

    def test_blocked_or_outside_cell_is_noop(self):
        words, grid = _puzzle()
        tracker = SolveTracker(words)
        assert tracker.update_cell(grid, 0, 0) == frozenset()
        assert tracker.update_cell(grid, 99, 99) == frozenset()
