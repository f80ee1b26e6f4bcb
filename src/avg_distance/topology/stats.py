from __future__ import annotations
from dataclasses import dataclass
from typing import List

import numpy as np

from ..routing.bfs import bfs_traverse
from .graph import Graph

# --- Graph profile for the estimate ---
# How much of the graph the sampled average actually speaks for:
# the start vertex's component versus every other component.
# Components are found with the same BFS the estimate uses.
# ------------------------------------------------------


@dataclass(frozen=True)
class GraphProfile:
    vertices: int
    edges: int
    self_loops: int
    isolated_vertices: int
    components: int
    largest_component: int
    start_vertex: int
    start_component: int
    mean_degree: float
    max_degree: int

    @property
    def reachable_share(self) -> float:
        """Fraction of all vertices the sampler can draw from."""
        return self.start_component / self.vertices if self.vertices else 0.0


def component_sizes(graph: Graph) -> List[int]:
    """Sizes of all connected components, largest first."""
    seen = [False] * graph.n
    sizes: List[int] = []
    for v in range(graph.n):
        if seen[v]:
            continue
        members = bfs_traverse(graph, v)
        for u in members:
            seen[u] = True
        sizes.append(len(members))
    return sorted(sizes, reverse=True)


def graph_profile(graph: Graph, start: int) -> GraphProfile:
    sizes = component_sizes(graph)
    degrees = np.fromiter((graph.degree(v) for v in range(graph.n)), dtype=np.int64, count=graph.n)
    loops = sum(nbrs.count(v) for v, nbrs in enumerate(graph.adjacency)) // 2

    return GraphProfile(
        vertices=graph.n,
        edges=graph.number_of_edges(),
        self_loops=loops,
        isolated_vertices=int((degrees == 0).sum()),
        components=len(sizes),
        largest_component=sizes[0] if sizes else 0,
        start_vertex=start,
        start_component=len(bfs_traverse(graph, start)),
        mean_degree=float(degrees.mean()) if graph.n else 0.0,
        max_degree=int(degrees.max()) if graph.n else 0,
    )
