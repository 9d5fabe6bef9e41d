"""Tests for the command line entry point."""
from __future__ import annotations

from pathlib import Path

import pytest
from maze_route.cli import EXIT_BUDGET, EXIT_MALFORMED, EXIT_UNREACHABLE, main


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "maze.txt"
    path.write_text(text)
    return path


class TestCliSuccess:
    def test_prints_both_answers(self, tmp_path, capsys, small_maze) -> None:
        code = main([str(_write(tmp_path, small_maze))])
        out = capsys.readouterr().out
        assert code == 0
        assert out.splitlines() == ["minimal cost: 7036", "optimal cells: 45"]

    def test_custom_weights(self, tmp_path, capsys) -> None:
        code = main([str(_write(tmp_path, "S..\n...\n..E")), "--move-cost", "2", "--turn-cost", "5"])
        assert code == 0
        assert "minimal cost: 13" in capsys.readouterr().out

    def test_verbose_runs(self, tmp_path, capsys, large_maze) -> None:
        code = main([str(_write(tmp_path, large_maze)), "-v"])
        assert code == 0
        assert "minimal cost: 11048" in capsys.readouterr().out


class TestCliFailures:
    def test_unreachable(self, tmp_path, capsys) -> None:
        code = main([str(_write(tmp_path, "#####\n#S#E#\n#####"))])
        assert code == EXIT_UNREACHABLE
        assert "unreachable" in capsys.readouterr().err

    def test_malformed(self, tmp_path, capsys) -> None:
        code = main([str(_write(tmp_path, "S.\n.E.\n"))])
        assert code == EXIT_MALFORMED
        assert "malformed maze" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys) -> None:
        code = main([str(tmp_path / "nope.txt")])
        assert code == EXIT_MALFORMED
        assert "cannot read" in capsys.readouterr().err

    def test_budget_exceeded(self, tmp_path, capsys, small_maze) -> None:
        code = main([str(_write(tmp_path, small_maze)), "--max-expansions", "5"])
        assert code == EXIT_BUDGET
        assert "exceeded budget of 5" in capsys.readouterr().err

    def test_invalid_weight_exits(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main([str(_write(tmp_path, "SE")), "--turn-cost", "0"])
        assert excinfo.value.code == 2

    def test_invalid_budget_exits(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main([str(_write(tmp_path, "SE")), "--max-expansions", "-1"])
        assert excinfo.value.code == 2
