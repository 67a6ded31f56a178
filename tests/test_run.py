"""Tests for the command-line entry point."""

import sys

import pytest

import run


@pytest.fixture
def ring_file(tmp_path):
    path = tmp_path / "ring.txt"
    path.write_text("A  \n * \n  B\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the CLI from reconfiguring pytest's log capture."""
    monkeypatch.setattr(run, "setup_logging", lambda *args, **kwargs: None)


def invoke(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["run.py", *argv])
    run.main()


class TestRun:
    """Tests for run.main."""

    def test_shortest_path(self, monkeypatch, capsys, ring_file):
        invoke(monkeypatch, "--maze", str(ring_file), "--algorithm", "shortest")
        out = capsys.readouterr().out
        assert "Graph: 8 nodes, 8 edges" in out
        assert "Reachable from A: 8 nodes" in out
        assert "0 -> 3 -> 5 -> 6 -> 7" in out
        assert "Path length: 4 steps" in out
        assert "··B" in out

    def test_all_algorithms(self, monkeypatch, capsys, ring_file):
        invoke(monkeypatch, "--maze", str(ring_file))
        out = capsys.readouterr().out
        for title in run.TITLES.values():
            assert f"=== {title} ===" in out
        assert "3 -> 5 -> 6 -> 1 -> 2 -> 4 -> 7 -> 0" in out

    def test_matrices(self, monkeypatch, capsys, ring_file):
        invoke(monkeypatch, "--maze", str(ring_file), "--algorithm", "bfs", "--matrices")
        out = capsys.readouterr().out
        assert "=== ADJACENCY MATRIX ===" in out
        assert "Dimension: 8x8" in out
        assert "=== INCIDENCE MATRIX ===" in out

    def test_no_path(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "blocked.txt"
        path.write_text("A*B\n", encoding="utf-8")
        invoke(monkeypatch, "--maze", str(path), "--algorithm", "shortest")
        assert "No path between A and B" in capsys.readouterr().out

    def test_missing_endpoint_exits(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("A  \n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            invoke(monkeypatch, "--maze", str(path))
        assert exc.value.code == 1
        assert "Error loading maze" in capsys.readouterr().out

    def test_missing_file_exits(self, monkeypatch, tmp_path):
        with pytest.raises(SystemExit) as exc:
            invoke(monkeypatch, "--maze", str(tmp_path / "nope.txt"))
        assert exc.value.code == 1

    def test_unknown_preset_exits(self, monkeypatch, capsys, ring_file):
        with pytest.raises(SystemExit) as exc:
            invoke(monkeypatch, "--maze", str(ring_file), "--config", "does_not_exist")
        assert exc.value.code == 1
        out = capsys.readouterr().out
        assert "Error loading config" in out
        assert "Error loading maze" not in out

    def test_malformed_preset_exits(self, monkeypatch, capsys, tmp_path, ring_file):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "broken.yaml").write_text("symbols: [wall\n")
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc:
            invoke(monkeypatch, "--maze", str(ring_file), "--config", "broken")
        assert exc.value.code == 1
        assert "Error loading config" in capsys.readouterr().out

    def test_run_algorithm_unknown(self, ring_graph):
        with pytest.raises(ValueError):
            run.run_algorithm(ring_graph, "dijkstra", 0, 7)
