from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import networkx as nx

from ..errors import EmptyInput

Edge = Tuple[int, int]


@dataclass(frozen=True)
class Graph:
    """
    Undirected, unweighted graph stored as adjacency lists.

    Vertices are the integers [0..n-1]. adjacency[v] holds the neighbors
    of v in ascending order. Parallel edges and self-loops are kept as-is,
    so a neighbor may appear more than once.
    """
    n: int
    adjacency: Tuple[Tuple[int, ...], ...]

    def neighbors(self, v: int) -> Tuple[int, ...]:
        return self.adjacency[v]

    def degree(self, v: int) -> int:
        return len(self.adjacency[v])

    def number_of_edges(self) -> int:
        # every edge is written once per endpoint, a self-loop twice into one list
        return sum(len(nbrs) for nbrs in self.adjacency) // 2

    def to_networkx(self) -> nx.MultiGraph:
        """
        Export as a NetworkX MultiGraph so parallel edges and loops survive.
        Isolated vertex ids below n are kept as nodes.
        """
        g = nx.MultiGraph()
        g.add_nodes_from(range(self.n))
        for u, nbrs in enumerate(self.adjacency):
            loops_seen = 0
            for v in nbrs:
                if v > u:
                    g.add_edge(u, v)
                elif v == u:
                    # a loop shows up twice in its own list
                    loops_seen += 1
                    if loops_seen % 2 == 0:
                        g.add_edge(u, u)
        return g


def build_graph(edges: Sequence[Edge]) -> Graph:
    """
    Build the adjacency-list graph from an edge list.

    n = 1 + largest endpoint. Each edge (u, v) inserts v into u's list and
    u into v's list; lists are then sorted for reproducible traversal order.
    """
    if not edges:
        raise EmptyInput()

    if min(min(u, v) for u, v in edges) < 0:
        raise ValueError("vertex ids must be >= 0")
    max_vertex = max(max(u, v) for u, v in edges)
    n = max_vertex + 1

    lists: List[List[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if u < n and v < n:
            lists[u].append(v)
            lists[v].append(u)

    for nbrs in lists:
        nbrs.sort()

    return Graph(n=n, adjacency=tuple(tuple(nbrs) for nbrs in lists))

