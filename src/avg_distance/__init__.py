from .errors import (
    AvgDistanceError,
    InputUnavailable,
    EmptyInput,
    InsufficientReachableVertices,
    NoPairsFormed,
    AllPairsUnreachable,
)
from .topology.graph import Graph, build_graph
from .routing.bfs import UNREACHABLE, bfs_traverse, bfs_distances, shortest_path
from .sampling.pairs import sample_pairs
from .benchmark.runner import EstimateResult, estimate_average_distance, estimate_on_graph, run_from_file

__all__ = [
    "AvgDistanceError",
    "InputUnavailable",
    "EmptyInput",
    "InsufficientReachableVertices",
    "NoPairsFormed",
    "AllPairsUnreachable",
    "Graph",
    "build_graph",
    "UNREACHABLE",
    "bfs_traverse",
    "bfs_distances",
    "shortest_path",
    "sample_pairs",
    "EstimateResult",
    "estimate_average_distance",
    "estimate_on_graph",
    "run_from_file",
]
