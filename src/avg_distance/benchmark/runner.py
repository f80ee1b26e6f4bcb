from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config import RunConfig, SamplingConfig
from ..errors import AllPairsUnreachable, InsufficientReachableVertices, NoPairsFormed
from ..metrics.distance_stats import DistanceSummary, summarize_distances
from ..routing.bfs import Distance, bfs_traverse, shortest_path
from ..sampling.pairs import RandInt, make_randint, sample_pairs
from ..topology.graph import Edge, Graph, build_graph
from ..topology.loader import load_edges


@dataclass(frozen=True)
class PairDistance:
    src: int
    dst: int
    distance: Distance


@dataclass(frozen=True)
class EstimateResult:
    graph: Graph
    start_vertex: int
    reachable: Sequence[int]
    pairs: List[PairDistance]
    summary: DistanceSummary

    @property
    def reachable_count(self) -> int:
        return len(self.reachable)


def estimate_on_graph(
    graph: Graph,
    start: int,
    sampling: SamplingConfig = SamplingConfig(),
    randint: Optional[RandInt] = None,
) -> EstimateResult:
    """
    Sampled average shortest-path distance on an already built graph.

    Steps:
      1) BFS from `start`
      2) draw distinct pairs among the reached vertices
      3) BFS distance per pair, unreachable pairs left out of the average
    """
    sampling.validate()

    reachable = bfs_traverse(graph, start)
    if len(reachable) < 2:
        raise InsufficientReachableVertices(start=start, reachable=len(reachable))

    if randint is None:
        randint = make_randint(sampling.seed)

    pairs = sample_pairs(
        reachable,
        sample_size=sampling.sample_size,
        max_attempts=sampling.max_attempts,
        randint=randint,
    )
    if not pairs:
        raise NoPairsFormed(attempts=sampling.max_attempts, start=start, reachable=len(reachable))

    rows = [PairDistance(src=a, dst=b, distance=shortest_path(graph, a, b)) for a, b in pairs]
    try:
        summary = summarize_distances([r.distance for r in rows])
    except AllPairsUnreachable as exc:
        raise AllPairsUnreachable(
            sampled_pairs=exc.sampled_pairs, start=start, reachable=len(reachable)
        ) from exc

    return EstimateResult(
        graph=graph,
        start_vertex=start,
        reachable=reachable,
        pairs=rows,
        summary=summary,
    )


def estimate_average_distance(
    edges: Sequence[Edge],
    sampling: SamplingConfig = SamplingConfig(),
    randint: Optional[RandInt] = None,
) -> EstimateResult:
    """Build the graph (EmptyInput on no edges) and estimate from the first edge's first endpoint."""
    sampling.validate()
    graph = build_graph(edges)
    return estimate_on_graph(graph, edges[0][0], sampling=sampling, randint=randint)


def run_from_file(cfg: RunConfig, randint: Optional[RandInt] = None) -> EstimateResult:
    edges = load_edges(cfg.loader)
    return estimate_average_distance(edges, sampling=cfg.sampling, randint=randint)
