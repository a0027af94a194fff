"""Benchmarking harness for the MRV solver over the built-in puzzles."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from tqdm import tqdm

from ..puzzles import PUZZLES, get_puzzle
from ..solvers import MRVSolver

log = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle: str
    run: int
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle": self.puzzle,
            "run": self.run,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


class Benchmark:
    """
    Runs the solver on named built-in puzzles and collects performance metrics.
    """

    def __init__(
        self,
        puzzles: Optional[List[str]] = None,
        repeats: int = 1,
        solver: Optional[MRVSolver] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Names of built-in puzzles to run (default: all).
            repeats: How many times each puzzle is solved.
            solver: Solver instance to use (default: a new MRVSolver).

        Raises:
            KeyError: If a puzzle name is unknown.
            ValueError: If repeats is less than 1.
        """
        if repeats < 1:
            raise ValueError(f"repeats must be at least 1, got {repeats}")

        names = list(puzzles) if puzzles is not None else list(PUZZLES)
        self.puzzles = {name: get_puzzle(name) for name in names}
        self.repeats = repeats
        self.solver = solver or MRVSolver()
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []

        total_tests = len(self.puzzles) * self.repeats
        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for name, puzzle in self.puzzles.items():
            for run in range(self.repeats):
                solution, stats = self.solver.solve(puzzle)
                self.results.append(BenchmarkResult(
                    puzzle=name,
                    run=run,
                    solved=stats.solved,
                    time_seconds=stats.time_seconds,
                    memory_bytes=stats.memory_bytes,
                    iterations=stats.iterations,
                    backtracks=stats.backtracks,
                    nodes_explored=stats.nodes_explored,
                    extra=dict(stats.extra)
                ))
                pbar.update(1)

            log.debug("Benchmarked %s x%d", name, self.repeats)

        pbar.close()
        return self.results

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "algorithm": self.solver.name,
            "repeats": self.repeats,
            "results_by_puzzle": {},
            "overall": {}
        }

        for name in self.puzzles:
            puzzle_results = [r for r in self.results if r.puzzle == name]
            if puzzle_results:
                summary["results_by_puzzle"][name] = self._aggregate(puzzle_results)

        if self.results:
            summary["overall"] = self._aggregate(self.results)

        return summary

    @staticmethod
    def _aggregate(results: List[BenchmarkResult]) -> Dict[str, Any]:
        solved = [r for r in results if r.solved]
        times = [r.time_seconds for r in results]
        memory = [r.memory_bytes for r in results]
        return {
            "accuracy": len(solved) / len(results) * 100,
            "avg_time_seconds": sum(times) / len(times),
            "max_time_seconds": max(times),
            "min_time_seconds": min(times),
            "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
            "avg_backtracks": sum(r.backtracks for r in results) / len(results),
            "total_solved": len(solved),
            "total_tested": len(results)
        }
