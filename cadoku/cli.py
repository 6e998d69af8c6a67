"""Command-line interface for the puzzle generator."""

import argparse
import json
import os
import sys

from .core.board import Puzzle
from .core.topology import CELLS
from .generator import Difficulty, PuzzleGenerator, Strategy, resolve_hints
from .generator.generator import MAX_HINTS, MIN_HINTS, TRIVIAL_DEFAULT_HINTS, TRIVIAL_MAX_HINTS
from .solvers import PropagationSolver


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku generator driven by constraint propagation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 puzzles with 30 cues each
  cadoku generate --count 5 --hints 30

  # Generate a guess-free puzzle
  cadoku generate --strategy trivial --hints 28

  # Deduce the solution of a puzzle by propagation alone
  cadoku constrain --puzzle "0030206..."

  # Time generation across difficulties
  cadoku benchmark --puzzles 10 --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate puzzles")
    hints_group = gen_parser.add_mutually_exclusive_group()
    hints_group.add_argument(
        "--hints", type=int, default=None,
        help=f"Number of cues ({MIN_HINTS}-{MAX_HINTS})"
    )
    hints_group.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Difficulty level, used when --hints is not given "
             f"(default: medium, or {TRIVIAL_DEFAULT_HINTS} hints for the trivial strategy)"
    )
    gen_parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        default="subtractive",
        help="subtractive digs holes into a solution; trivial only adds cues and "
             f"accepts at most {TRIVIAL_MAX_HINTS} hints (default: subtractive)"
    )
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles and solutions (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Constrain command
    constrain_parser = subparsers.add_parser(
        "constrain", help="Deduce a puzzle's solution by propagation alone"
    )
    constrain_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    constrain_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show timing and memory statistics"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark puzzle generation")
    bench_parser.add_argument(
        "--puzzles", "-n", type=int, default=10,
        help="Puzzles per difficulty (default: 10)"
    )
    bench_parser.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty] + ["all"],
        default="all",
        help="Difficulty to benchmark (default: all)"
    )
    bench_parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy] + ["all"],
        default="subtractive",
        help="Generation strategy to benchmark; difficulties the trivial strategy "
             "cannot reach are skipped (default: subtractive)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "generate":
        if args.hints is not None and not MIN_HINTS <= args.hints <= MAX_HINTS:
            parser.error(f"--hints must be between {MIN_HINTS} and {MAX_HINTS}")
        requested = args.hints
        if requested is None and args.difficulty is not None:
            requested = Difficulty(args.difficulty)
        try:
            args.hints = resolve_hints(requested, Strategy(args.strategy))
        except ValueError as e:
            parser.error(str(e))
        cmd_generate(args)
    elif args.command == "constrain":
        cmd_constrain(args)
    elif args.command == "benchmark":
        from .benchmark import GenerationBenchmark

        if args.difficulty == "all":
            args.difficulties = list(Difficulty)
        else:
            args.difficulties = [Difficulty(args.difficulty)]
        if args.strategy == "all":
            args.strategies = list(Strategy)
        else:
            args.strategies = [Strategy(args.strategy)]
        if not any(
            GenerationBenchmark.is_reachable(s, d)
            for s in args.strategies for d in args.difficulties
        ):
            parser.error(
                f"the trivial strategy places at most {TRIVIAL_MAX_HINTS} hints, "
                "pick a harder difficulty"
            )
        cmd_benchmark(args)


def cmd_generate(args):
    """Handle the generate command."""
    generator = PuzzleGenerator(seed=args.seed, strategy=Strategy(args.strategy))
    hints = args.hints

    print(f"Generating {args.count} {hints}-hint puzzle(s) ({args.strategy})...")

    all_puzzles = []
    for i in range(1, args.count + 1):
        puzzle, solution = generator.generate_with_solution(hints)
        all_puzzles.append({
            "index": i,
            "strategy": args.strategy,
            "clues": puzzle.count_cues(),
            "puzzle": puzzle.to_list(),
            "solution": solution.to_list(),
        })

        print(f"\n--- Puzzle {i} ({puzzle.count_cues()} clues) ---")
        print(puzzle)
        print(puzzle.to_string())

    if args.output:
        directory = os.path.dirname(args.output)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_constrain(args):
    """Handle the constrain command."""
    try:
        puzzle = Puzzle.from_string(args.puzzle)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(puzzle)
    print()

    solution, stats = PropagationSolver().solve(puzzle)

    if stats.solved:
        print(f"✓ Deduced in {stats.time_seconds:.4f}s")
        if args.verbose:
            print(f"  Cues: {stats.cues}, deduced: {stats.deduced_cells}")
            print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
        print(solution)
    else:
        print(f"✗ No unique deduction ({stats.outcome})")
        if args.verbose:
            print(f"  Cells decided: {stats.decided_cells}/{CELLS}")
            print(f"  Time: {stats.time_seconds:.4f}s")
        sys.exit(1)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    from .benchmark import GenerationBenchmark

    difficulties = args.difficulties
    strategies = args.strategies

    print("=" * 60)
    print("PUZZLE GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Puzzles per difficulty: {args.puzzles}")
    print(f"Difficulties: {[d.value for d in difficulties]}")
    print(f"Strategies: {[s.value for s in strategies]}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = GenerationBenchmark(
        puzzles_per_difficulty=args.puzzles,
        difficulties=difficulties,
        strategies=strategies,
        seed=args.seed
    )
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)

    for strategy, by_difficulty in summary["results_by_strategy"].items():
        print(f"\n{strategy}:")
        for diff, stats in by_difficulty.items():
            print(f"  {diff} ({stats['hints']} hints):")
            print(f"    Verified: {stats['verified']}/{stats['tested']}")
            print(f"    Avg Time: {stats['avg_time_seconds']:.4f}s")
            print(f"    Avg Reshuffles: {stats['avg_reshuffles']:.2f}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        from .benchmark.visualizer import Visualizer

        print("\nGenerating charts...")
        charts = Visualizer(results, args.output).generate_all()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {os.path.basename(chart)}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
