"""Unit tests for puzzle generators."""

import random

import pytest
from cadoku.core.validator import validate_solution
from cadoku.generator import (
    Difficulty,
    GenerationStats,
    PuzzleGenerator,
    Strategy,
    generate_random_solution,
    generate_subtractive,
    TRIVIAL_MAX_HINTS,
    generate_trivial,
    resolve_hints,
)
from cadoku.generator import generator as generator_module
from cadoku.generator.generator import _place_cues, check_hints, random_permutation
from cadoku.solvers import constrain


class TestRandomSolution:
    """Tests for full-solution generation."""

    def test_solution_is_solved(self):
        solution = generate_random_solution(random.Random(1))
        assert solution.is_solved()

    def test_seeded_generation_is_reproducible(self):
        a = generate_random_solution(random.Random(5))
        b = generate_random_solution(random.Random(5))
        assert a == b

    def test_default_random_source(self):
        assert generate_random_solution().is_solved()

    def test_permutation_covers_all_cells(self):
        order = random_permutation(random.Random(2))
        assert sorted(order) == list(range(81))


class TestSubtractive:
    """Tests for the hole-digging generator."""

    @pytest.mark.parametrize("hints", [45, 36])
    def test_puzzle_deduces_to_solution(self, hints):
        """Propagation on the puzzle reproduces the paired solution."""
        puzzle, solution = generate_subtractive(hints, random.Random(hints))

        assert puzzle.count_cues() == hints
        assert solution.is_solved()
        assert validate_solution(puzzle, solution)
        assert constrain(puzzle) == solution

    def test_thirty_hints(self):
        puzzle, solution = generate_subtractive(30, random.Random(30))
        assert 17 <= puzzle.count_cues() <= 30
        assert constrain(puzzle) == solution

    def test_all_hints_returns_solution(self):
        puzzle, solution = generate_subtractive(81, random.Random(0))
        assert puzzle == solution
        assert puzzle is not solution

    def test_stats_are_collected(self):
        stats = GenerationStats()
        generate_subtractive(50, random.Random(3), stats)
        assert stats.constrain_calls >= 31
        assert stats.reshuffles >= 0

    @pytest.mark.parametrize("hints", [16, 82, 0, -5])
    def test_hints_out_of_range(self, hints):
        with pytest.raises(ValueError):
            generate_subtractive(hints)

    @pytest.mark.parametrize("hints", [30.0, True, "30"])
    def test_hints_must_be_int(self, hints):
        with pytest.raises(ValueError):
            generate_subtractive(hints)

    @pytest.mark.parametrize("hints", [17, 81])
    def test_hint_bounds_accepted(self, hints):
        check_hints(hints)

    def test_seventeen_hints_accepted(self, monkeypatch):
        """Digging runs down to 17 cues when every removal keeps the deduction."""

        class _MatchesAnything:
            def __eq__(self, other):
                return True

        monkeypatch.setattr(generator_module, "constrain", lambda puzzle: _MatchesAnything())
        puzzle, solution = generate_subtractive(17, random.Random(17))

        assert puzzle.count_cues() == 17
        assert validate_solution(puzzle, solution)

    def test_stuck_pass_reshuffles(self, monkeypatch):
        """A pass where no cell can be removed resets to the solution and retries."""
        real_constrain = generator_module.constrain
        calls = {"n": 0}

        def refuse_first_pass(puzzle):
            calls["n"] += 1
            if calls["n"] <= 81:
                return None
            return real_constrain(puzzle)

        monkeypatch.setattr(generator_module, "constrain", refuse_first_pass)
        stats = GenerationStats()
        puzzle, solution = generate_subtractive(60, random.Random(6), stats)

        assert stats.reshuffles >= 1
        assert stats.constrain_calls > 81
        assert puzzle.count_cues() == 60
        assert real_constrain(puzzle) == solution


class TestTrivial:
    """Tests for the guess-free direct generator."""

    def _natural_cue_count(self, rng):
        """Cues the direct generator needs when not capped."""
        while True:
            puzzle, grid, consistent = _place_cues(81, rng)
            if consistent:
                return puzzle.count_cues()

    def test_exact_hint_count(self):
        rng = random.Random(11)
        hints = self._natural_cue_count(rng)
        assert 17 <= hints < 81

        stats = GenerationStats()
        puzzle, solution = generate_trivial(hints, rng, stats)

        assert puzzle.count_cues() == hints
        assert stats.attempts >= 1
        assert validate_solution(puzzle, solution)
        assert constrain(puzzle) == solution

    def test_uncapped_attempt_decides_grid(self):
        rng = random.Random(4)
        consistent = False
        while not consistent:
            puzzle, grid, consistent = _place_cues(81, rng)
        assert all(c.is_singleton() for c in grid)
        for cell, cue in enumerate(puzzle.to_list()):
            if cue:
                assert grid[cell].to_digit() == cue

    @pytest.mark.parametrize("hints", [16, 82])
    def test_hints_out_of_range(self, hints):
        with pytest.raises(ValueError):
            generate_trivial(hints)


class TestPuzzleGenerator:
    """Tests for the PuzzleGenerator facade."""

    def test_generate_with_difficulty(self):
        generator = PuzzleGenerator(seed=42)
        puzzle, solution = generator.generate_with_solution(Difficulty.EASY)
        assert puzzle.count_cues() == 60
        assert constrain(puzzle) == solution

    def test_generate_with_hints(self):
        puzzle = PuzzleGenerator(seed=7).generate(50)
        assert puzzle.count_cues() == 50
        assert puzzle.is_valid()

    def test_seed_reproducibility(self):
        a = PuzzleGenerator(seed=123).generate(50)
        b = PuzzleGenerator(seed=123).generate(50)
        assert a == b

    def test_generate_batch(self):
        puzzles = PuzzleGenerator(seed=1).generate_batch(3, 55)
        assert len(puzzles) == 3
        for puzzle in puzzles:
            assert puzzle.count_cues() == 55

    def test_trivial_strategy(self):
        generator = PuzzleGenerator(seed=9, strategy=Strategy.TRIVIAL)
        puzzle, solution = generator.generate_with_solution()
        assert puzzle.count_cues() == 25
        assert constrain(puzzle) == solution

    @pytest.mark.parametrize("hints", [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD, 29, 81])
    def test_trivial_strategy_rejects_unreachable_hints(self, hints):
        """Counts the direct generator cannot land on fail before generating."""
        generator = PuzzleGenerator(seed=9, strategy=Strategy.TRIVIAL)
        with pytest.raises(ValueError):
            generator.generate(hints)
        with pytest.raises(ValueError):
            generator.generate_batch(2, hints)

    def test_default_difficulty_is_medium(self):
        assert PuzzleGenerator(seed=4).generate().count_cues() == 45

    def test_strategy_from_string(self):
        assert PuzzleGenerator(strategy="trivial").strategy is Strategy.TRIVIAL

    def test_save_to_folder(self, tmp_path):
        puzzles = PuzzleGenerator(seed=2).generate_batch(2, 60)
        PuzzleGenerator.save_to_folder(puzzles, str(tmp_path), prefix="p")
        first = (tmp_path / "p_1.txt").read_text()
        assert first.startswith(puzzles[0].to_string())


class TestResolveHints:
    """Tests for turning a difficulty or count into a hint count."""

    def test_defaults(self):
        assert resolve_hints(None) == 45
        assert resolve_hints(None, Strategy.TRIVIAL) == 25
        assert resolve_hints(None, "trivial") <= TRIVIAL_MAX_HINTS

    def test_difficulty_and_int(self):
        assert resolve_hints(Difficulty.EASY) == 60
        assert resolve_hints(Difficulty.CHALLENGE, Strategy.TRIVIAL) == 22
        assert resolve_hints(TRIVIAL_MAX_HINTS, Strategy.TRIVIAL) == TRIVIAL_MAX_HINTS

    def test_trivial_cap(self):
        with pytest.raises(ValueError, match="at most"):
            resolve_hints(TRIVIAL_MAX_HINTS + 1, Strategy.TRIVIAL)
        assert resolve_hints(TRIVIAL_MAX_HINTS + 1) == TRIVIAL_MAX_HINTS + 1

    @pytest.mark.parametrize("hints", [16, 82, 2.5])
    def test_invalid_counts(self, hints):
        with pytest.raises(ValueError):
            resolve_hints(hints)


class TestDifficulty:
    """Test difficulty hint counts."""

    def test_hint_counts(self):
        assert Difficulty.EASY.hints == 60
        assert Difficulty.MEDIUM.hints == 45
        assert Difficulty.HARD.hints == 30
        assert Difficulty.CHALLENGE.hints == 22

    def test_hints_decrease_with_difficulty(self):
        counts = [d.hints for d in Difficulty]
        assert counts == sorted(counts, reverse=True)
        assert min(counts) >= 17


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
