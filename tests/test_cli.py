"""Tests for the keygraph command line."""
from __future__ import annotations

import pytest

from keygraph.cli import main


class TestCli:
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "bench" in capsys.readouterr().out

    def test_bench(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["bench", "--nodes", "40", "--edge-prob", "0.1", "--seed", "3"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "Nodes:             40" in out
        assert "Consistent:        yes" in out

    def test_bench_cprofile(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(["bench", "--nodes", "20", "--cprofile"])
        assert "cProfile top functions" in capsys.readouterr().out

    def test_bench_rejects_tiny_graph(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["bench", "--nodes", "1"])
        assert exc_info.value.code == 2
