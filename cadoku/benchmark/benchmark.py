"""Benchmarking framework for comparing puzzle generation strategies."""

from __future__ import annotations
import json
import os
import random
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from ..core.board import Puzzle
from ..generator import Difficulty, GenerationStats, PuzzleGenerator, Strategy, TRIVIAL_MAX_HINTS
from ..generator.generator import generate_subtractive, generate_trivial
from ..solvers import PropagationSolver


@dataclass
class BenchmarkResult:
    """Results from generating a single puzzle."""
    puzzle_id: int
    difficulty: str
    strategy: str
    hints: int
    cues: int
    verified: bool
    time_seconds: float
    memory_bytes: int
    restarts: int
    reshuffles: int
    attempts: int
    constrain_calls: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "difficulty": self.difficulty,
            "strategy": self.strategy,
            "hints": self.hints,
            "cues": self.cues,
            "verified": self.verified,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "restarts": self.restarts,
            "reshuffles": self.reshuffles,
            "attempts": self.attempts,
            "constrain_calls": self.constrain_calls,
            **self.extra
        }


class GenerationBenchmark:
    """
    Benchmark framework for the puzzle generators.

    Generates puzzles for every strategy and difficulty, timing each one and
    checking that propagation reproduces the paired solution.
    """

    GENERATORS = {
        Strategy.SUBTRACTIVE: generate_subtractive,
        Strategy.TRIVIAL: generate_trivial,
    }

    def __init__(
        self,
        puzzles_per_difficulty: int = 10,
        difficulties: Optional[List[Difficulty]] = None,
        strategies: Optional[List[Strategy]] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles_per_difficulty: Number of puzzles to generate per difficulty.
            difficulties: List of difficulties to test (default: all).
            strategies: Generation strategies to test (default: subtractive).
                Difficulties above TRIVIAL_MAX_HINTS are skipped for the trivial strategy.
            seed: Random seed for reproducibility.
        """
        self.puzzles_per_difficulty = puzzles_per_difficulty
        self.difficulties = difficulties or list(Difficulty)
        self.strategies = strategies or [Strategy.SUBTRACTIVE]
        self.seed = seed
        self.rng = random.Random(seed)
        self.solver = PropagationSolver()

        self.results: List[BenchmarkResult] = []
        self.puzzles: Dict[str, List[Puzzle]] = {}

        self.pairs = [
            (strategy, difficulty)
            for strategy in self.strategies
            for difficulty in self.difficulties
            if self.is_reachable(strategy, difficulty)
        ]
        if not self.pairs:
            raise ValueError(
                "No strategy can reach the requested difficulties, the trivial "
                f"strategy places at most {TRIVIAL_MAX_HINTS} hints"
            )

    @staticmethod
    def is_reachable(strategy: Strategy, difficulty: Difficulty) -> bool:
        """False for pairs the trivial strategy would retry forever."""
        return strategy is not Strategy.TRIVIAL or difficulty.hints <= TRIVIAL_MAX_HINTS

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        self.puzzles = {}

        total = len(self.pairs) * self.puzzles_per_difficulty
        pbar = tqdm(total=total, desc="Generating", disable=not show_progress)

        for strategy, difficulty in self.pairs:
            key = f"{strategy.value}_{difficulty.value}"
            self.puzzles[key] = []
            for puzzle_id in range(self.puzzles_per_difficulty):
                result, puzzle = self._run_single(puzzle_id, difficulty, strategy)
                self.results.append(result)
                self.puzzles[key].append(puzzle)
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(self, puzzle_id: int, difficulty: Difficulty, strategy: Strategy):
        """Generate and verify a single puzzle."""
        stats = GenerationStats()
        generate = self.GENERATORS[strategy]

        tracemalloc.start()
        try:
            start_time = time.perf_counter()
            puzzle, solution = generate(difficulty.hints, self.rng, stats)
            elapsed = time.perf_counter() - start_time
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        deduced, solve_stats = self.solver.solve(puzzle)

        result = BenchmarkResult(
            puzzle_id=puzzle_id,
            difficulty=difficulty.value,
            strategy=strategy.value,
            hints=difficulty.hints,
            cues=puzzle.count_cues(),
            verified=deduced == solution,
            time_seconds=elapsed,
            memory_bytes=peak,
            restarts=stats.restarts,
            reshuffles=stats.reshuffles,
            attempts=stats.attempts,
            constrain_calls=stats.constrain_calls,
            extra={"deduce_time_seconds": solve_stats.time_seconds},
        )
        return result, puzzle

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.results),
            "strategies": [s.value for s in self.strategies],
            "difficulties": [d.value for d in self.difficulties],
            "results_by_strategy": {}
        }

        for strategy in self.strategies:
            by_difficulty = {}
            for difficulty in self.difficulties:
                group = [
                    r for r in self.results
                    if r.strategy == strategy.value and r.difficulty == difficulty.value
                ]
                if not group:
                    continue
                times = [r.time_seconds for r in group]
                by_difficulty[difficulty.value] = {
                    "hints": difficulty.hints,
                    "verified": sum(1 for r in group if r.verified),
                    "tested": len(group),
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "min_time_seconds": min(times),
                    "avg_cues": sum(r.cues for r in group) / len(group),
                    "avg_restarts": sum(r.restarts for r in group) / len(group),
                    "avg_reshuffles": sum(r.reshuffles for r in group) / len(group),
                }
            summary["results_by_strategy"][strategy.value] = by_difficulty

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and generated puzzles to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzles_dir = os.path.join(output_dir, "puzzles")
        for key, puzzles in self.puzzles.items():
            PuzzleGenerator.save_to_folder(puzzles, os.path.join(puzzles_dir, key), prefix=f"puzzle_{key}")

        print(f"Results and puzzles saved to {output_dir}")
