"""Game session state and the controller a UI drives it through.

One controller owns one session at a time. ``start_new_game`` builds a
fresh :class:`GameSession` and drops the old one; edits update the current
session's grid in place.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Sequence

from countdown import Countdown, Scheduler
from grid_builder import build_clue_lists, build_grid
from grid_placer import place_words
from models import BankEntry, Grid, NumberedClue, PlacedWord
from solve_tracker import SolveTracker, is_puzzle_complete
from word_bank import get_word_bank
from word_selector import select_candidates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    rows: int = 8
    cols: int = 8
    max_words: int = 8
    time_limit: int = 120  # seconds


class SessionStatus(Enum):
    NOT_STARTED = "NOT_STARTED"
    NOT_READY = "NOT_READY"
    PLAYING = "PLAYING"
    SOLVED = "SOLVED"
    TIME_UP = "TIME_UP"


@dataclass
class GameSession:
    """Everything that belongs to one puzzle."""

    words: list[PlacedWord]
    grid: Grid
    across: list[NumberedClue]
    down: list[NumberedClue]
    time_left: int
    status: SessionStatus = SessionStatus.PLAYING
    solved: frozenset[int] = frozenset()
    active_cell: Optional[tuple[int, int]] = None
    active_word_id: Optional[int] = None
    tracker: SolveTracker = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.tracker = SolveTracker(self.words)

    @property
    def total_words(self) -> int:
        return len({w.id for w in self.words})

    @property
    def is_over(self) -> bool:
        return self.status in (SessionStatus.SOLVED, SessionStatus.TIME_UP)

    def word(self, word_id: int) -> Optional[PlacedWord]:
        return next((w for w in self.words if w.id == word_id), None)


def format_time(seconds: int) -> str:
    """Render a countdown value as ``m:ss``."""
    seconds = max(0, seconds)
    return f"{seconds // 60}:{seconds % 60:02d}"


def layout_puzzle(
    candidates: Sequence[BankEntry],
    config: GameConfig = GameConfig(),
) -> tuple[list[PlacedWord], Grid]:
    """Place already-selected candidates and materialize the grid."""
    placed = place_words(candidates, config.rows, config.cols)
    grid = build_grid(placed, config.rows, config.cols)
    return placed, grid


def generate_puzzle(
    bank: Sequence[BankEntry],
    config: GameConfig = GameConfig(),
    rng: random.Random | None = None,
) -> tuple[list[PlacedWord], Grid]:
    """Select, place and materialize one puzzle."""
    candidates = select_candidates(bank, config.max_words, rng)
    return layout_puzzle(candidates, config)


class GameController:
    """Owns the current session and its countdown."""

    def __init__(
        self,
        bank: Sequence[BankEntry] | None = None,
        config: GameConfig = GameConfig(),
        rng: random.Random | None = None,
        scheduler: Scheduler | None = None,
    ):
        self.bank = list(bank) if bank is not None else get_word_bank()
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.scheduler = scheduler
        self.session: Optional[GameSession] = None
        self._countdown: Optional[Countdown] = None

    @property
    def status(self) -> SessionStatus:
        if self.session is None:
            return SessionStatus.NOT_STARTED
        return self.session.status

    # ── Lifecycle ────────────────────────────────────────────────────

    def start_new_game(self) -> GameSession:
        """Replace the current session with a freshly generated puzzle."""
        self._stop_countdown()

        placed, grid = generate_puzzle(self.bank, self.config, self.rng)
        across, down = build_clue_lists(placed)
        session = GameSession(
            words=placed, grid=grid, across=across, down=down,
            time_left=self.config.time_limit,
        )
        self.session = session

        if not placed:
            session.status = SessionStatus.NOT_READY
            logger.warning("No words could be placed; puzzle is not ready")
            return session

        logger.info(
            "New %dx%d puzzle with %d words: %s",
            grid.rows, grid.cols, len(placed), ", ".join(w.word for w in placed),
        )
        self._countdown = Countdown(
            self.config.time_limit,
            on_tick=self._on_tick,
            on_expire=self._on_expire,
            scheduler=self.scheduler,
        )
        self._countdown.start()
        return session

    def end_game(self) -> None:
        """Tear down the countdown; the session stays readable."""
        self._stop_countdown()

    def tick(self) -> None:
        """One countdown step, for hosts that drive the timer themselves."""
        if self._countdown is not None:
            self._countdown.tick()

    # ── Player input ─────────────────────────────────────────────────

    def on_cell_edited(
        self, row: int, col: int, value: str,
    ) -> tuple[Optional[Grid], frozenset[int]]:
        """Apply a single-letter edit and return the grid and solved set."""
        session = self.session
        if session is None:
            return None, frozenset()
        cell = session.grid.cell(row, col)
        if cell is None or cell.is_blocked:
            return session.grid, session.solved
        if session.status not in (SessionStatus.PLAYING, SessionStatus.SOLVED):
            return session.grid, session.solved

        letter = value.upper()[-1:] if value else ""
        cell.user_letter = letter
        session.solved = session.tracker.update_cell(session.grid, row, col)

        if letter:
            self._advance(row, col)

        if session.tracker.is_complete:
            if session.status == SessionStatus.PLAYING:
                session.status = SessionStatus.SOLVED
                self._pause_countdown()
                logger.info("Puzzle solved with %s left", format_time(session.time_left))
        elif session.status == SessionStatus.SOLVED:
            # an edit broke a finished puzzle; the clock picks up where it stopped
            session.status = SessionStatus.PLAYING
            self._resume_countdown()
            logger.info("Puzzle no longer solved: %d of %d words", len(session.solved), session.total_words)

        return session.grid, session.solved

    def on_cell_selected(self, row: int, col: int) -> Optional[int]:
        """Activate a word through a cell; repeated clicks cycle crossing words."""
        session = self.session
        if session is None:
            return None
        cell = session.grid.cell(row, col)
        if cell is None or cell.is_blocked:
            return session.active_word_id

        session.active_cell = (row, col)
        ids = cell.word_ids
        if len(ids) == 1:
            session.active_word_id = ids[0]
        elif len(ids) > 1:
            current = session.active_word_id
            if current is None or current not in ids:
                session.active_word_id = ids[0]
            else:
                session.active_word_id = ids[(ids.index(current) + 1) % len(ids)]
        return session.active_word_id

    def on_clue_selected(self, word_id: int) -> Optional[int]:
        """Activate a word from the clue list and jump to its first cell."""
        session = self.session
        if session is None:
            return None
        word = session.word(word_id)
        if word is None:
            return session.active_word_id
        session.active_word_id = word.id
        session.active_cell = (word.row, word.col)
        return word.id

    def is_puzzle_complete(self, solved: Iterable[int], total: int) -> bool:
        return is_puzzle_complete(solved, total)

    # ── Internals ────────────────────────────────────────────────────

    def _advance(self, row: int, col: int) -> None:
        """Move the active cell one step along the active word, if it continues."""
        session = self.session
        if session.active_word_id is None:
            return
        word = session.word(session.active_word_id)
        if word is None:
            return
        dr, dc = word.direction.step
        nxt = session.grid.cell(row + dr, col + dc)
        if nxt is not None and word.id in nxt.word_ids:
            session.active_cell = (row + dr, col + dc)

    def _on_tick(self, remaining: int) -> None:
        if self.session is not None:
            self.session.time_left = remaining

    def _on_expire(self) -> None:
        session = self.session
        if session is not None and session.status == SessionStatus.PLAYING:
            session.status = SessionStatus.TIME_UP
            logger.info("Time's up: %d of %d words solved", len(session.solved), session.total_words)

    def _pause_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()

    def _resume_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.start()

    def _stop_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None
