"""CLI entrypoint: read puzzle(s) interactively, from stdin or from files, solve, and report."""

import argparse
import csv
import curses
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

from tqdm import tqdm

from solver import solve_puzzle
from src.sudoku import terminal
from src.sudoku.board import Board
from src.sudoku.loader import load_puzzles
from src.sudoku.parser import parse_grid
from src.utils.trace import enable_tracing, get_tracer, reset_tracer

PUZZLE_SUFFIXES = [".txt", ".json", ".jsonl", ".parquet", ".csv"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Solve 9x9 Sudoku puzzles with the Z3 constraint solver")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help="Optional puzzle file or directory of puzzle files (batch mode)",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write batch results as CSV")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--stdin", action="store_true", help="Read one 9-line grid from standard input.")
    mode.add_argument("--interactive", action="store_true", help="Edit the grid in the terminal before solving.")
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not highlight solved cells with ANSI colors (also set by NO_COLOR).",
    )
    parser.add_argument(
        "--trace",
        type=Path,
        default=None,
        help="Optional path to write the step trace as CSV (one trace covering every puzzle in batch mode)",
    )
    return parser.parse_args(argv)


def use_color(args) -> bool:
    return not args.no_color and not os.environ.get("NO_COLOR")


def solve_and_print(board: Board, color: bool) -> int:
    """Print the submitted board, solve it once, print the outcome."""
    print(board.render(color=color))
    result = solve_puzzle(board)
    print(result.message(color=color))
    return 0


def run_piped(args) -> int:
    board = parse_grid(sys.stdin.read())
    return solve_and_print(board, use_color(args))


def run_interactive(args) -> int:
    edited = terminal.edit_board()
    # Whatever the user entered becomes the puzzle's clues.
    board = Board.from_grid(edited.to_grid())
    return solve_and_print(board, use_color(args))


def collect_puzzles(path: Path) -> List[Dict[str, Any]]:
    if path.is_file():
        return load_puzzles(str(path))
    if path.is_dir():
        puzzles = []
        for file_path in sorted(path.iterdir()):
            if file_path.suffix in PUZZLE_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
        return puzzles
    raise ValueError(f"Input path {path} is neither file nor directory")


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "status", "solution"])

        for r in results:
            writer.writerow([r["id"], r["status"], r["solution"]])


def run_batch(args) -> int:
    puzzles = collect_puzzles(args.input)
    results = []

    for puzzle in tqdm(puzzles, desc="Solving", unit="puzzle", disable=len(puzzles) < 2):
        puzzle_id = puzzle.get("id", "unknown")
        try:
            result = solve_puzzle(puzzle["puzzle"])
            results.append({
                "id": puzzle_id,
                "status": result.status.value,
                "solution": result.board.to_line() if result.solved else "",
            })
        except ValueError as e:
            print(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}")
            results.append({"id": puzzle_id, "status": "error", "solution": ""})

    if args.output:
        write_results_csv(results, args.output)
    else:
        for r in results:
            print(f"{r['id']},{r['status']},{r['solution']}")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    reset_tracer()
    enable_tracing(args.trace is not None)

    try:
        if args.input is not None:
            code = run_batch(args)
        elif args.stdin or (not args.interactive and not sys.stdin.isatty()):
            code = run_piped(args)
        else:
            code = run_interactive(args)
    except (ValueError, OSError, curses.error) as e:
        print(f"Error: {e}", file=sys.stderr)
        code = 1

    if args.trace:
        get_tracer().to_csv(args.trace)
    return code


if __name__ == "__main__":
    sys.exit(main())
