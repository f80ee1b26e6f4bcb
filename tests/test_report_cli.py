"""Console report, exports and the command line entry point."""

from __future__ import annotations

import pandas as pd
import pytest

from avg_distance.benchmark.runner import estimate_average_distance
from avg_distance.config import SamplingConfig
from avg_distance.main import main, parse_args
from avg_distance.report import (
    format_details,
    format_report,
    pairs_frame,
    plot_distance_histogram,
    write_pairs_csv,
)
from conftest import SMALL_EDGES, scripted_randint

SMALL_FILE = "id_1,id_2\n0,1\n1,2\n0,3\n1,4\n"


@pytest.fixture
def two_pair_result():
    randint = scripted_randint([2, 4, 0, 3])
    return estimate_average_distance(SMALL_EDGES, sampling=SamplingConfig(sample_size=2), randint=randint)


def test_format_report(two_pair_result) -> None:
    lines = format_report(two_pair_result)
    assert lines[0] == "- BFS started from vertex 0 and visited 5 vertices."
    assert lines[1] == "- Computed distances for 2 pairs."
    assert lines[2] == "- Total combined distance: 5"
    assert lines[3] == "- Estimated average shortest path distance: 2.5000"
    assert "Run Completed." in lines


def test_format_details(two_pair_result) -> None:
    text = "\n".join(format_details(two_pair_result))
    assert "Unreachable pairs:  0" in text
    assert "Hop histogram:      2:1, 3:1" in text


def test_pairs_frame_and_csv(two_pair_result, tmp_path) -> None:
    df = pairs_frame(two_pair_result)
    assert list(df.columns) == ["src", "dst", "distance"]
    assert df["distance"].tolist() == [3, 2]

    out = write_pairs_csv(two_pair_result, tmp_path / "out" / "pairs.csv")
    back = pd.read_csv(out)
    assert back.to_dict("list") == {"src": [3, 0], "dst": [4, 2], "distance": [3, 2]}


def test_plot_distance_histogram(two_pair_result, tmp_path) -> None:
    png = plot_distance_histogram(two_pair_result.summary, tmp_path / "hist")
    assert png.exists()
    assert png.suffix == ".png"
    assert (tmp_path / "hist.pdf").exists()


def test_parse_args_defaults() -> None:
    cfg = parse_args([])
    assert cfg.loader.path == "fb-pages-company_edges.txt"
    assert cfg.loader.skip_header is True
    assert cfg.sampling.sample_size == 1000
    assert cfg.sampling.max_attempts == 100_000
    assert cfg.sampling.seed is None


def test_parse_args_overrides() -> None:
    cfg = parse_args(["g.txt", "--no-header", "--samples", "5", "--attempts-per-pair", "2", "--seed", "9", "--stats"])
    assert cfg.loader.path == "g.txt"
    assert cfg.loader.skip_header is False
    assert cfg.sampling.max_attempts == 10
    assert cfg.sampling.seed == 9
    assert cfg.output.show_stats is True


def test_main_success(edge_file, tmp_path, capsys) -> None:
    path = edge_file(SMALL_FILE)
    csv_path = tmp_path / "pairs.csv"
    code = main([str(path), "--seed", "4", "--stats", "--csv", str(csv_path)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Average Distance Between Two Vertices in a Graph" in out
    assert "=== GRAPH PROFILE ===" in out
    assert "Start component:    5 vertices from vertex 0 (100.00% of graph)" in out
    assert "- BFS started from vertex 0 and visited 5 vertices." in out
    assert "- Estimated average shortest path distance: 1.8000" in out
    assert csv_path.exists()


def test_main_missing_file(tmp_path, capsys) -> None:
    code = main([str(tmp_path / "missing.txt")])
    captured = capsys.readouterr()
    assert code == 1
    assert "Could not open edge list file" in captured.err
    assert "Estimated average" not in captured.out


def test_main_empty_input(edge_file, capsys) -> None:
    code = main([str(edge_file("header only\n"))])
    assert code == 1
    assert "The edge list is empty" in capsys.readouterr().err


def test_main_insufficient_reachable(edge_file, capsys) -> None:
    code = main([str(edge_file("h\n2,2\n0,1\n"))])
    out = capsys.readouterr().out
    assert code == 1
    assert "- BFS started from vertex 2 and visited 1 vertices." in out
    assert "Not enough visited vertices to form pairs (need at least 2)." in out
    assert "Estimated average" not in out


def test_main_no_pairs_formed(edge_file, monkeypatch, capsys) -> None:
    # both draws land on the same position, and the budget is a single attempt
    monkeypatch.setattr(
        "avg_distance.benchmark.runner.make_randint", lambda seed: scripted_randint([1, 1])
    )
    code = main([str(edge_file("h\n0,1\n")), "--samples", "1", "--attempts-per-pair", "1", "--seed", "0"])
    captured = capsys.readouterr()
    assert code == 1
    lines = captured.out.splitlines()
    bfs_at = lines.index("- BFS started from vertex 0 and visited 2 vertices.")
    assert lines[bfs_at + 1] == "Could not form any distinct pairs."
    assert "Estimated average" not in captured.out
    assert captured.err == ""


def test_main_unwritable_csv(edge_file, tmp_path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    code = main([str(edge_file(SMALL_FILE)), "--seed", "1", "--csv", str(blocker / "pairs.csv")])
    captured = capsys.readouterr()
    assert code == 1
    assert "- Estimated average shortest path distance: 1.8000" in captured.out
    assert captured.err.startswith("Error: Could not write output:")


def test_main_bad_sample_size(edge_file, capsys) -> None:
    code = main([str(edge_file(SMALL_FILE)), "--samples", "0"])
    assert code == 2
    assert "sample_size must be >= 1" in capsys.readouterr().err
