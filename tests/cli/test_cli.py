import json
from pathlib import Path

import pytest

from flownet import cli
from flownet.graph.io import dump_network

CLRS_YAML = """
edges:
  - {source: 0, target: 1, capacity: 16}
  - {source: 0, target: 2, capacity: 13}
  - {source: 2, target: 1, capacity: 4}
  - {source: 1, target: 3, capacity: 12}
  - {source: 2, target: 4, capacity: 14}
  - {source: 3, target: 2, capacity: 9}
  - {source: 3, target: 5, capacity: 20}
  - {source: 4, target: 5, capacity: 4}
  - {source: 4, target: 3, capacity: 7}
"""


def extract_json_from_stdout(output: str) -> str:
    """Extract the JSON object from stdout that may also carry log lines."""
    json_start = output.find("{")
    json_end = output.rfind("}")
    if json_start == -1 or json_end == -1:
        return output
    return output[json_start : json_end + 1]


@pytest.fixture
def network_file(tmp_path: Path) -> Path:
    path = tmp_path / "clrs.yaml"
    path.write_text(CLRS_YAML)
    return path


def test_maxflow_text(network_file: Path, capsys) -> None:
    cli.main(["--quiet", "maxflow", str(network_file), "-s", "0", "-t", "5"])
    out = capsys.readouterr().out
    assert "Max flow 0 -> 5: 23" in out


def test_maxflow_paths_and_cut(network_file: Path, capsys) -> None:
    cli.main(
        [
            "--quiet",
            "maxflow",
            str(network_file),
            "--source",
            "0",
            "--sink",
            "5",
            "--paths",
            "--cut",
        ]
    )
    out = capsys.readouterr().out
    assert "12: 0 -> 1 -> 3 -> 5" in out
    assert "4: 0 -> 2 -> 4 -> 5" in out
    assert "Minimum cut:" in out
    assert "(4, 3)" in out


@pytest.mark.parametrize("algorithm", ["edmonds_karp", "dinic", "push_relabel"])
def test_maxflow_json(network_file: Path, capsys, algorithm: str) -> None:
    cli.main(
        [
            "--quiet",
            "maxflow",
            str(network_file),
            "-s",
            "0",
            "-t",
            "5",
            "--algorithm",
            algorithm,
            "--paths",
            "--cut",
            "--json",
        ]
    )
    data = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    assert data["max_flow"] == 23
    assert data["algorithm"] == algorithm
    assert data["min_cut"] == [[1, 3], [4, 3], [4, 5]]
    assert sum(path[0] for path in data["paths"]) == 23


def test_mincut(network_file: Path, capsys) -> None:
    cli.main(["--quiet", "mincut", str(network_file), "-s", "0", "-t", "5"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[-4:] == ["(1, 3)", "(4, 3)", "(4, 5)", "Cut capacity: 23"]


def test_mincut_push_relabel(network_file: Path, capsys) -> None:
    cli.main(
        ["--quiet", "mincut", str(network_file), "-s", "0", "-t", "5", "-a", "push_relabel"]
    )
    assert "Cut capacity: 23" in capsys.readouterr().out


def test_inspect(tmp_path: Path, clrs_network, capsys) -> None:
    path = tmp_path / "clrs.json"
    dump_network(clrs_network, path)
    cli.main(["--quiet", "inspect", str(path)])
    out = capsys.readouterr().out
    assert "Size: 10" in out
    assert "Vertices: 6" in out
    assert "Edges: 9" in out
    assert "Capacity" in out


def test_missing_file_exits_1(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "maxflow", str(tmp_path / "none.yaml"), "-s", "0", "-t", "1"])
    assert exc_info.value.code == 1


def test_invalid_network_exits_1(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("edges:\n  - {source: 0, target: 0, capacity: 1}\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "inspect", str(path)])
    assert exc_info.value.code == 1


def test_absent_sink_exits_1(network_file: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--quiet", "maxflow", str(network_file), "-s", "0", "-t", "9"])
    assert exc_info.value.code == 1


def test_unknown_algorithm_is_usage_error(network_file: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["maxflow", str(network_file), "-s", "0", "-t", "5", "-a", "simplex"])
    assert exc_info.value.code == 2


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "maxflow" in capsys.readouterr().out
