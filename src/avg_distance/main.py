from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .benchmark.runner import estimate_on_graph
from .config import LoaderConfig, OutputConfig, RunConfig, SamplingConfig
from .errors import EmptyInput, SamplingError
from .report import (
    bfs_line,
    format_details,
    format_profile,
    format_report,
    header_lines,
    plot_distance_histogram,
    print_lines,
    write_pairs_csv,
)
from .topology.graph import build_graph
from .topology.loader import load_edges
from .topology.stats import graph_profile


def parse_args(argv: Optional[List[str]] = None) -> RunConfig:
    defaults = RunConfig()
    ap = argparse.ArgumentParser(
        prog="avg-distance",
        description="Estimate the average shortest path distance of an undirected graph by sampling vertex pairs.",
    )
    ap.add_argument("path", nargs="?", default=defaults.loader.path, help="Edge list file, one 'u,v' per line")
    ap.add_argument("--no-header", action="store_true", help="Parse the first line as data instead of skipping it")
    ap.add_argument("--samples", type=int, default=defaults.sampling.sample_size, help="Number of distinct pairs to sample")
    ap.add_argument("--attempts-per-pair", type=int, default=defaults.sampling.attempts_per_pair,
                    help="Retry budget multiplier (total attempts = this * samples)")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for reproducible sampling")
    ap.add_argument("--csv", default=None, help="Write per-pair distances to this CSV file")
    ap.add_argument("--plot", default=None, help="Write a hop histogram (png + pdf) to this path")
    ap.add_argument("--stats", action="store_true", help="Print the graph profile and distance details")
    args = ap.parse_args(argv)

    return RunConfig(
        loader=LoaderConfig(path=args.path, skip_header=not args.no_header),
        sampling=SamplingConfig(
            sample_size=args.samples,
            attempts_per_pair=args.attempts_per_pair,
            seed=args.seed,
        ),
        output=OutputConfig(csv_path=args.csv, plot_path=args.plot, show_stats=args.stats),
    )


def run(cfg: RunConfig) -> int:
    print_lines(header_lines())
    try:
        edges = load_edges(cfg.loader)
        graph = build_graph(edges)
    except EmptyInput as exc:
        print(str(exc), file=sys.stderr)
        return 1

    start = edges[0][0]
    if cfg.output.show_stats:
        print()
        print_lines(format_profile(graph_profile(graph, start)))

    print()
    try:
        result = estimate_on_graph(graph, start, sampling=cfg.sampling)
    except SamplingError as exc:
        # stdout, like the rest of the report
        print(bfs_line(exc.start, exc.reachable))
        print(str(exc))
        return 1

    print_lines(format_report(result))

    if cfg.output.show_stats:
        print()
        print_lines(format_details(result))
    try:
        if cfg.output.csv_path:
            out = write_pairs_csv(result, cfg.output.csv_path)
            print(f"Per-pair distances written to {out}")
        if cfg.output.plot_path:
            out = plot_distance_histogram(result.summary, cfg.output.plot_path)
            print(f"Distance histogram written to {out}")
    except OSError as exc:
        print(f"Error: Could not write output: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        cfg = parse_args(argv)
        cfg.sampling.validate()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return run(cfg)


if __name__ == "__main__":
    sys.exit(main())
