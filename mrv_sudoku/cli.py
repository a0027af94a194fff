"""Command-line interface for the Sudoku solver."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .benchmark import Benchmark
from .core.board import SudokuBoard, InvalidGridError
from .puzzles import PUZZLES, SAMPLE_PUZZLE, get_puzzle
from .solvers import MRVSolver

log = logging.getLogger(__name__)

NO_SOLUTION_MESSAGE = "Doesn't have a solution"


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using constraint propagation and MRV backtracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve the built-in sample puzzle
  python -m mrv_sudoku.cli

  # Solve a puzzle given as 81 characters (0 or . for empty)
  python -m mrv_sudoku.cli solve --puzzle "530070000600195000..."

  # Measure the solver on every built-in puzzle
  python -m mrv_sudoku.cli benchmark --repeats 5
        """
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle", "-p", type=str, default=None,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--name", "-n", choices=sorted(PUZZLES), default=None,
        help="Name of a built-in puzzle (default: sample)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Measure the solver")
    bench_parser.add_argument(
        "--puzzles", nargs="+", choices=sorted(PUZZLES), default=None,
        help="Built-in puzzles to run (default: all)"
    )
    bench_parser.add_argument(
        "--repeats", "-r", type=int, default=1,
        help="Runs per puzzle (default: 1)"
    )
    bench_parser.add_argument(
        "--json", action="store_true",
        help="Print the summary as JSON"
    )
    bench_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    if args.command is None:
        cmd_sample()
    elif args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def print_solution(solution: Optional[SudokuBoard]) -> None:
    if solution is not None:
        print("---------------> SOLUTION <----------------")
        print()
        print(solution)
    else:
        print(NO_SOLUTION_MESSAGE)


def cmd_sample():
    """Solve and print the built-in sample puzzle."""
    board = SudokuBoard(SAMPLE_PUZZLE)
    print("---------------> ORIGINAL <----------------")
    print()
    print(board)
    print()

    solution, _ = MRVSolver().solve(board)
    print_solution(solution)


def cmd_solve(args):
    """Handle the solve command."""
    try:
        if args.puzzle is not None:
            board = SudokuBoard.from_string(args.puzzle)
        else:
            board = get_puzzle(args.name or "sample")
    except InvalidGridError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    solver = MRVSolver()
    log.info("Solving %s", board.to_string())
    solution, stats = solver.solve(board)

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
    else:
        print("✗ Failed to solve")
    if args.verbose:
        print(f"  Iterations: {stats.iterations:,}")
        print(f"  Branch points: {stats.nodes_explored:,}")
        print(f"  Backtracks: {stats.backtracks:,}")
        print(f"  Forced placements: {stats.extra.get('forced_placements', 0):,}")
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
    print()
    print_solution(solution)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    if args.repeats < 1:
        print(f"Error: --repeats must be at least 1, got {args.repeats}")
        sys.exit(1)

    benchmark = Benchmark(puzzles=args.puzzles, repeats=args.repeats)
    benchmark.run(show_progress=not args.no_progress)
    summary = benchmark.get_summary()

    if args.json:
        print(json.dumps(summary, indent=2))
        return

    print("=" * 60)
    print(f"SUDOKU SOLVER BENCHMARK ({summary['algorithm']})")
    print("=" * 60)
    for name, stats in summary["results_by_puzzle"].items():
        print(f"\n{name}:")
        print(f"  Accuracy: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Backtracks: {stats['avg_backtracks']:.1f}")
        print(f"  Avg Memory: {stats['avg_memory_mb']:.2f} MB")
    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
