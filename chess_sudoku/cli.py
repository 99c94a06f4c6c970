"""Command-line interface for the solver."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from .config import SolverConfig, load_config, merge_overrides
from .core.board import format_board, is_no_solution, parse_board, pretty_board, to_string
from .core.grid import Point, index, is_on_board
from .core.rules import RuleSet, candidates
from .core.validator import find_conflicts
from .exceptions import InvalidBoardError
from .solvers import BacktrackingSolver

log = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chess-sudoku",
        description="Backtracking Sudoku solver with optional anti-king/anti-knight rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a classic puzzle
  chess-sudoku solve --puzzle "530070000600195000..."

  # Solve with the chess king and knight constraints
  chess-sudoku solve --rules extended --file puzzle.txt

  # Solve every puzzle in a file and save the results
  chess-sudoku batch --input puzzles.txt --output results.json
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log search details"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_rules(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--rules", "-r",
            choices=[r.value for r in RuleSet],
            default=None,
            help="Rule set (default: classic, or the config file's value)"
        )
        p.add_argument(
            "--config", "-c", type=str, default=None,
            help="YAML file with solver settings"
        )

    def add_puzzle(p: argparse.ArgumentParser) -> None:
        source = p.add_mutually_exclusive_group(required=True)
        source.add_argument(
            "--puzzle", "-p", type=str,
            help="Puzzle string (81 digits, 0 or . for empty cells)"
        )
        source.add_argument(
            "--file", "-f", type=str,
            help="File holding one puzzle"
        )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a puzzle")
    add_puzzle(solve_parser)
    add_rules(solve_parser)
    solve_parser.add_argument(
        "--max-steps", type=int, default=None,
        help="Abort the search after this many steps"
    )
    solve_parser.add_argument(
        "--pretty", action="store_true",
        help="Draw the board with box separators"
    )
    solve_parser.add_argument(
        "--stats", action="store_true",
        help="Show search statistics"
    )

    # Candidates command
    cand_parser = subparsers.add_parser("candidates", help="List the candidates of a cell")
    add_puzzle(cand_parser)
    add_rules(cand_parser)
    cand_parser.add_argument(
        "--cell", type=str, required=True,
        help="Cell as COLUMN,ROW (0-based)"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Report conflicting clues")
    add_puzzle(check_parser)
    add_rules(check_parser)

    # Batch command
    batch_parser = subparsers.add_parser("batch", help="Solve one puzzle per line of a file")
    batch_parser.add_argument(
        "--input", "-i", type=str, required=True,
        help="Text file, one puzzle per line"
    )
    batch_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Write results to this JSON file"
    )
    add_rules(batch_parser)
    batch_parser.add_argument(
        "--max-steps", type=int, default=None,
        help="Abort each search after this many steps"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(EXIT_FAILURE)

    try:
        config = _load_settings(args)
    except (OSError, ValueError) as e:
        print(f"Error reading config: {e}")
        sys.exit(EXIT_USAGE)

    if args.command == "solve":
        cmd_solve(args, config)
    elif args.command == "candidates":
        cmd_candidates(args, config)
    elif args.command == "check":
        cmd_check(args, config)
    elif args.command == "batch":
        cmd_batch(args, config)


def _load_settings(args) -> SolverConfig:
    config = load_config(args.config) if args.config else SolverConfig()
    return merge_overrides(
        config,
        rules=args.rules,
        max_steps=getattr(args, "max_steps", None),
    )


def _read_puzzle(args) -> List[int]:
    try:
        if args.file:
            with open(args.file, "r", encoding="utf-8") as f:
                text = f.read()
        else:
            text = args.puzzle
        return parse_board(text)
    except (OSError, InvalidBoardError) as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(EXIT_USAGE)


def cmd_solve(args, config: SolverConfig):
    """Handle the solve command."""
    board = _read_puzzle(args)
    log.info("Solving with %s rules", config.rules.value)

    solver = BacktrackingSolver(rules=config.rules, max_steps=config.max_steps)
    solution, stats = solver.solve(board)

    if args.stats:
        print(f"Time: {stats.time_seconds:.4f}s")
        print(f"Iterations: {stats.iterations:,}")
        print(f"Backtracks: {stats.backtracks:,}")
        print(f"Memory: {stats.memory_bytes / 1024:.2f} KB")

    if is_no_solution(solution):
        print("No solution")
        sys.exit(EXIT_FAILURE)

    print(pretty_board(solution) if args.pretty else format_board(solution))


def cmd_candidates(args, config: SolverConfig):
    """Handle the candidates command."""
    board = _read_puzzle(args)
    try:
        column, row = (int(part) for part in args.cell.split(","))
    except ValueError:
        print(f"Error parsing cell {args.cell!r}: expected COLUMN,ROW")
        sys.exit(EXIT_USAGE)

    point = Point(column, row)
    if not is_on_board(point):
        print(f"Cell {args.cell} is off the board")
        sys.exit(EXIT_USAGE)

    digits = sorted(candidates(board, point, config.rules))
    print(" ".join(str(d) for d in digits))


def cmd_check(args, config: SolverConfig):
    """Handle the check command."""
    board = _read_puzzle(args)
    conflicts = find_conflicts(board, config.rules)

    if not conflicts:
        print("No conflicts")
        return

    for first, second in conflicts:
        value = board[index(first.column, first.row)]
        print(f"{value} at ({first.column}, {first.row}) conflicts with ({second.column}, {second.row})")
    sys.exit(EXIT_FAILURE)


def cmd_batch(args, config: SolverConfig):
    """Handle the batch command."""
    try:
        with open(args.input, "r", encoding="utf-8") as f:
            lines = [line.strip() for line in f if line.strip() and not line.strip().startswith("#")]
    except OSError as e:
        print(f"Error reading {args.input}: {e}")
        sys.exit(EXIT_USAGE)

    solver = BacktrackingSolver(rules=config.rules, max_steps=config.max_steps)
    results = []

    for i, line in enumerate(tqdm(lines, desc="Solving", unit="puzzle"), 1):
        try:
            board = parse_board(line)
        except InvalidBoardError as e:
            log.warning("Line %d skipped: %s", i, e)
            results.append({"index": i, "puzzle": line, "error": str(e)})
            continue

        solution, stats = solver.solve(board)
        results.append({
            "index": i,
            "puzzle": to_string(board),
            "solution": to_string(solution) if solution else None,
            **stats.to_dict()
        })

    solved = sum(1 for r in results if r.get("solved"))
    print(f"Solved {solved}/{len(results)} puzzles")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"Results saved to {args.output}")


if __name__ == "__main__":
    main()
