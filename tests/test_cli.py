"""
Tests for the command line interface.
"""

import json

import pytest

from roadgraph.cli import EXIT_INVALID_INPUT, EXIT_OK, main, parse_json_input

DOCUMENT = {
    "nodes": [
        {"id": "A", "role": "origin"},
        {"id": "B"},
        {"id": "C", "role": "destination"},
    ],
    "edges": [
        {"id": "e1", "from": "A", "to": "B", "weight": 1},
        {"id": "e2", "from": "B", "to": "C", "weight": 2},
        {"id": "e3", "from": "A", "to": "C", "weight": 5},
    ],
}


@pytest.fixture
def graph_file(tmp_path):
    """Fixture providing the document saved to disk."""
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(DOCUMENT))
    return path


def run_cli(capsys, *argv):
    status = main(list(argv))
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_route_command(capsys):
    """Test route output for an inline document."""
    status, out, _ = run_cli(capsys, "route", json.dumps(DOCUMENT))

    assert status == EXIT_OK
    result = json.loads(out)
    assert result["path"] == ["A", "B", "C"]
    assert result["total_cost"] == 3
    assert result["algorithm"] == "dijkstra"


def test_route_command_from_file(capsys, graph_file):
    """Test reading the document from an @file argument."""
    status, out, _ = run_cli(
        capsys, "route", f"@{graph_file}", "--origin", "C", "--destination", "A",
        "--algorithm", "bellman-ford",
    )

    assert status == EXIT_OK
    result = json.loads(out)
    assert result["path"] == ["C", "B", "A"]
    assert result["algorithm"] == "bellman-ford"


def test_euler_command(capsys):
    """Test Eulerian analysis output."""
    status, out, _ = run_cli(capsys, "euler", json.dumps(DOCUMENT))

    assert status == EXIT_OK
    result = json.loads(out)
    assert result["circuit_exists"] is True
    assert result["witness_path"] == ["A", "B", "C", "A"]


def test_hamilton_command(capsys):
    """Test Hamiltonian analysis output."""
    status, out, _ = run_cli(capsys, "hamilton", json.dumps(DOCUMENT))

    assert status == EXIT_OK
    assert json.loads(out)["theorem_applied"] == "Dirac's Theorem"


def test_analyze_command(capsys, graph_file):
    """Test running every analysis."""
    status, out, _ = run_cli(capsys, "-v", "analyze", f"@{graph_file}")

    assert status == EXIT_OK
    assert set(json.loads(out)) == {"route", "eulerian", "hamiltonian"}


@pytest.mark.parametrize(
    "argv",
    [
        ["route", "{not json"],
        ["route", "@does/not/exist.json"],
        ["euler", json.dumps({"nodes": []})],
        ["hamilton", json.dumps(DOCUMENT), "--search-limit", "1"],
    ],
)
def test_invalid_input_exit_status(capsys, argv):
    """Test that invalid input exits with status 2 and an error message."""
    status, out, err = run_cli(capsys, *argv)

    assert status == EXIT_INVALID_INPUT
    assert out == ""
    assert err.startswith("Error:")


def test_no_command_prints_help(capsys):
    """Test that running without a command shows usage."""
    status, out, _ = run_cli(capsys)

    assert status == EXIT_INVALID_INPUT
    assert "usage:" in out


def test_parse_json_input_inline():
    """Test inline JSON parsing."""
    assert parse_json_input('{"a": 1}') == {"a": 1}


def test_parse_json_input_missing_file():
    """Test that a missing @file raises ValueError."""
    with pytest.raises(ValueError, match="File not found"):
        parse_json_input("@missing.json")
