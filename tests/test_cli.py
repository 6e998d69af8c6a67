"""Tests for the command-line interface."""

import json

import pytest
from cadoku.cli import main

EASY_PUZZLE = (
    "003020600"
    "900305001"
    "001806400"
    "008102900"
    "700000008"
    "006708200"
    "002609500"
    "800203009"
    "005010300"
)


class TestCLI:
    """Tests for the cadoku command."""

    def test_constrain(self, capsys):
        main(["constrain", "--puzzle", EASY_PUZZLE, "--verbose"])
        out = capsys.readouterr().out
        assert "Deduced" in out
        assert "| 4 8 3 | 9 2 1 | 6 5 7 |" in out

    def test_constrain_undecided(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["constrain", "--puzzle", "0" * 81])
        assert exc.value.code == 1
        assert "No unique deduction" in capsys.readouterr().out

    def test_constrain_bad_puzzle(self):
        with pytest.raises(SystemExit):
            main(["constrain", "--puzzle", "123"])

    def test_generate_to_json(self, tmp_path, capsys):
        output = tmp_path / "out" / "puzzles.json"
        main(["generate", "--hints", "50", "--count", "2", "--seed", "3", "--output", str(output)])

        data = json.loads(output.read_text())
        assert len(data) == 2
        for entry in data:
            assert entry["clues"] == 50
            assert len(entry["puzzle"]) == 81
            assert all(1 <= v <= 9 for v in entry["solution"])
        assert "Total puzzles generated: 2" in capsys.readouterr().out

    def test_generate_invalid_hints(self):
        with pytest.raises(SystemExit) as exc:
            main(["generate", "--hints", "5"])
        assert exc.value.code == 2

    def test_generate_trivial_default_hints(self, tmp_path):
        output = tmp_path / "p.json"
        main(["generate", "--strategy", "trivial", "--seed", "1", "--output", str(output)])
        data = json.loads(output.read_text())
        assert data[0]["clues"] == 25

    @pytest.mark.parametrize("extra", [
        ["--difficulty", "easy"],
        ["--difficulty", "medium"],
        ["--hints", "45"],
    ])
    def test_generate_trivial_unreachable_hints(self, extra):
        """Counts the trivial strategy cannot land on are rejected up front."""
        with pytest.raises(SystemExit) as exc:
            main(["generate", "--strategy", "trivial"] + extra)
        assert exc.value.code == 2

    def test_benchmark_all_strategies(self, tmp_path, capsys):
        main([
            "benchmark", "--strategy", "all", "--difficulty", "easy",
            "--puzzles", "1", "--no-charts", "--output", str(tmp_path),
        ])
        data = json.loads((tmp_path / "benchmark_results.json").read_text())
        assert [entry["strategy"] for entry in data] == ["subtractive"]
        assert "['subtractive', 'trivial']" in capsys.readouterr().out

    def test_benchmark_trivial_unreachable_difficulty(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main([
                "benchmark", "--strategy", "trivial", "--difficulty", "easy",
                "--no-charts", "--output", str(tmp_path),
            ])
        assert exc.value.code == 2

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
