#!/usr/bin/env python3
"""CLI entry point: generate a mini crossword and write its output files.

The built-in marketing word bank is used unless ``--bank`` names an XLSX
workbook (column A word, column B clue).
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from game_session import GameConfig, layout_puzzle
from grid_builder import build_clue_lists
from models import BankEntry, CrosswordError, Grid, NumberedClue
from text_renderer import format_clues, format_grid
from word_bank import get_word_bank
from word_selector import select_candidates

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure the root logger once for CLI runs."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    ))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def _build_arg_parser() -> argparse.ArgumentParser:
    defaults = GameConfig()
    p = argparse.ArgumentParser(
        description="Generate a mini crossword puzzle (PDF, SVG and XLSX)."
    )
    p.add_argument("output", nargs="?", default="crossword.pdf",
                   help="Output PDF path (default: crossword.pdf)")
    p.add_argument("--bank", default=None,
                   help="XLSX word bank (column A word, column B clue); default: built-in bank")
    p.add_argument("--rows", type=int, default=defaults.rows,
                   help=f"Grid rows (default: {defaults.rows})")
    p.add_argument("--cols", type=int, default=defaults.cols,
                   help=f"Grid columns (default: {defaults.cols})")
    p.add_argument("--max-words", type=int, default=defaults.max_words,
                   help=f"Maximum words selected from the bank (default: {defaults.max_words})")
    p.add_argument("--title", default="THE DAILY PUZZLE",
                   help='Title text (default: "THE DAILY PUZZLE")')
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")
    p.add_argument("--verbose", "-v", action="store_true",
                   help="Debug logging")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    seed = args.seed if args.seed is not None else random.randint(0, 2**31)
    t0 = time.time()

    try:
        _run(args, seed, t0)
    except CrosswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run(args, seed: int, t0: float) -> None:
    if args.rows < 1 or args.cols < 1:
        raise CrosswordError(f"Grid must be at least 1x1, got {args.rows}x{args.cols}")
    if args.max_words < 1:
        raise CrosswordError(f"--max-words must be positive, got {args.max_words}")

    if args.bank:
        from xlsx_reader import read_bank
        bank = read_bank(args.bank)
        print(f"Read {len(bank)} word bank entries", file=sys.stderr)
    else:
        bank = get_word_bank()

    config = GameConfig(rows=args.rows, cols=args.cols, max_words=args.max_words)
    print(f"Generating {config.rows}x{config.cols} crossword (seed={seed})...",
          file=sys.stderr)

    candidates = select_candidates(bank, config.max_words, random.Random(seed))
    placed, grid = layout_puzzle(candidates, config)
    if not placed:
        raise CrosswordError("No words could be placed on the grid")

    across, down = build_clue_lists(placed)
    placed_words = {p.word for p in placed}
    unplaced = [e for e in candidates if e.word not in placed_words]
    logger.debug("Not placed: %s", ", ".join(e.word for e in unplaced) or "-")

    print(format_grid(grid), file=sys.stderr)
    print(format_clues(across, down), file=sys.stderr)

    _output_all(grid, across, down, args.title, args.output, unplaced=unplaced)

    print(
        f"Placed {len(placed)} words, time {time.time() - t0:.1f}s",
        file=sys.stderr,
    )


def _output_all(
    grid: Grid,
    across: list[NumberedClue],
    down: list[NumberedClue],
    title: str,
    output_path: str,
    unplaced: list[BankEntry] | None = None,
) -> None:
    """Write PDF, clue XLSX, puzzle SVG and answer SVG into an 'output' folder."""
    from pdf_renderer import render_pdf
    from svg_renderer import render_answer_svg, render_puzzle_svg
    from xlsx_writer import write_clues_xlsx

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(parents=True, exist_ok=True)

    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}_clues.xlsx")
    puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
    answer_svg_path = str(out_dir / f"{stem}_answer.svg")

    render_pdf(grid, across, down, title, pdf_path)
    write_clues_xlsx(across, down, xlsx_path, unplaced=unplaced)
    render_puzzle_svg(grid, puzzle_svg_path)
    render_answer_svg(grid, answer_svg_path)

    for path in (pdf_path, xlsx_path, puzzle_svg_path, answer_svg_path):
        print(f"Output: {path}", file=sys.stderr)


if __name__ == "__main__":
    main()
