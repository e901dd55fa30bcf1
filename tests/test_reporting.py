"""
Tests for console reports, DOT export and the CLI.
"""

import pytest

from collatz_graph.__main__ import main
from collatz_graph.core.graph import TrajectoryGraph
from collatz_graph.reporting import (
    print_graph_summary, print_orbit, print_series, export_dot,
)


def graph_of_six() -> TrajectoryGraph:
    graph = TrajectoryGraph()
    graph.generate_down(6)
    return graph


class TestConsoleReports:
    def test_summary(self, capsys):
        print_graph_summary(graph_of_six())
        out = capsys.readouterr().out
        assert "Variant: FULL" in out
        assert "Nodes: 9" in out
        assert "Deepest: 6 (depth 8)" in out

    def test_orbit(self, capsys):
        print_orbit(graph_of_six(), 6)
        lines = capsys.readouterr().out.splitlines()
        assert any("Orbit of 6 (FULL)" in line for line in lines)
        steps = [line for line in lines if line.strip().startswith("depth")]
        assert len(steps) == 9  # eight orbit records plus the root

    def test_series(self, capsys):
        print_series("orbit_length", [(2, 1), (3, 7)])
        out = capsys.readouterr().out
        assert "n\torbit length" in out
        assert "3\t7" in out
        assert "y in [0, 7]" in out


class TestExportDot:
    def test_writes_edges_toward_root(self, tmp_path):
        path = tmp_path / "six.dot"
        export_dot(graph_of_six(), str(path))
        text = path.read_text()
        assert text.startswith("digraph collatz {")
        assert '"6" -> "3";' in text
        assert '"2" -> "1";' in text
        assert text.count("->") == 8

    def test_reports_path(self, tmp_path, capsys):
        path = str(tmp_path / "g.dot")
        export_dot(TrajectoryGraph(), path)
        assert f"Graph exported to {path}" in capsys.readouterr().out


class TestCli:
    def test_series_output(self, capsys):
        main(["--series", "orbit_length", "--max", "6", "--quiet"])
        out = capsys.readouterr().out
        assert "3\t7" in out
        assert "6\t8" in out

    def test_orbit(self, capsys):
        main(["--orbit", "27", "--max", "2", "--quiet"])
        assert "value 9232" in capsys.readouterr().out

    def test_growth_and_summary(self, capsys):
        main(["--max", "2", "--up", "32", "--batch-size", "1000"])
        out = capsys.readouterr().out
        # 1 and 2 come from the fill, the rest of the 13 values <= 32 from growth
        assert "Added 11 nodes" in out
        assert "Nodes: 13" in out

    def test_dot(self, tmp_path, capsys):
        path = tmp_path / "cli.dot"
        main(["--variant", "odd", "--max", "15", "--dot", str(path), "--quiet"])
        assert path.exists()
        assert '"5" -> "1";' in path.read_text()

    def test_rejects_unknown_variant(self):
        with pytest.raises(SystemExit):
            main(["--variant", "sideways"])

    def test_rejects_orbit_outside_variant_domain(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--variant", "odd", "--orbit", "4", "--quiet"])
        assert exc.value.code == 2
        assert "--orbit 4 is outside the odd domain" in capsys.readouterr().err

    def test_rejects_orbit_leaving_u64(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--orbit", str(2**64 - 1), "--max", "2", "--quiet"])
        assert exc.value.code == 2
        assert "outside the FULL domain" in capsys.readouterr().err
