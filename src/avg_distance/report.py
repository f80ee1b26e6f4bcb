from __future__ import annotations
from pathlib import Path
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from .benchmark.runner import EstimateResult
from .metrics.distance_stats import DistanceSummary
from .topology.stats import GraphProfile

BANNER = "-" * 56
TITLE = "   Average Distance Between Two Vertices in a Graph"


def header_lines() -> List[str]:
    return [BANNER, TITLE, BANNER]


def bfs_line(start: int, reachable: int) -> str:
    return f"- BFS started from vertex {start} and visited {reachable} vertices."


def format_report(result: EstimateResult) -> List[str]:
    s = result.summary
    return [
        bfs_line(result.start_vertex, result.reachable_count),
        f"- Computed distances for {s.counted_pairs} pairs.",
        f"- Total combined distance: {s.total_distance}",
        f"- Estimated average shortest path distance: {s.average_distance:.4f}",
        BANNER,
        "Run Completed.",
        BANNER,
    ]


def format_details(result: EstimateResult) -> List[str]:
    s = result.summary
    hist = ", ".join(f"{d}:{c}" for d, c in s.histogram.items())
    return [
        "=== DISTANCE DETAILS ===",
        f"Sampled pairs:      {len(result.pairs)}",
        f"Unreachable pairs:  {s.unreachable_pairs}",
        f"Distance min/mean/max: {s.min_distance} / {s.average_distance:.2f} / {s.max_distance}",
        f"Distance std:       {s.std_distance:.4f}",
        f"Hop histogram:      {hist}",
    ]


def format_profile(profile: GraphProfile) -> List[str]:
    p = profile
    return [
        "=== GRAPH PROFILE ===",
        f"Vertices / edges:   {p.vertices} / {p.edges}",
        f"Self-loops:         {p.self_loops}",
        f"Isolated vertices:  {p.isolated_vertices}",
        f"Components:         {p.components} (largest {p.largest_component})",
        f"Start component:    {p.start_component} vertices from vertex {p.start_vertex} ({100.0 * p.reachable_share:.2f}% of graph)",
        f"Degree mean/max:    {p.mean_degree:.2f} / {p.max_degree}",
    ]


def print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def pairs_frame(result: EstimateResult) -> pd.DataFrame:
    df = pd.DataFrame(
        {
            "src": [p.src for p in result.pairs],
            "dst": [p.dst for p in result.pairs],
            "distance": pd.array([p.distance for p in result.pairs], dtype="Int64"),
        }
    )
    return df


def write_pairs_csv(result: EstimateResult, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pairs_frame(result).to_csv(path, index=False)
    return path


def _savefig(fig: "plt.Figure", outpath: Path) -> None:
    outpath.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(outpath.with_suffix(".png"), dpi=300)
    fig.savefig(outpath.with_suffix(".pdf"))
    plt.close(fig)


def plot_distance_histogram(summary: DistanceSummary, outpath: str | Path) -> Path:
    outpath = Path(outpath)
    hops = list(summary.histogram.keys())
    counts = list(summary.histogram.values())

    fig = plt.figure(figsize=(8, 4.5))
    ax = fig.add_subplot(111)
    ax.bar(hops, counts)
    ax.axvline(summary.average_distance, color="black", linestyle="--", linewidth=1)
    ax.set_xticks(hops)
    ax.set_xlabel("Shortest path length (hops)")
    ax.set_ylabel("Sampled pairs")
    ax.set_title(f"Sampled distances (mean = {summary.average_distance:.4f})")
    ax.grid(True, axis="y", alpha=0.3)
    _savefig(fig, outpath)
    return outpath.with_suffix(".png")
