from __future__ import annotations
from collections import deque
from typing import List, Optional

from ..topology.graph import Graph

# --- Breadth-first traversal and hop distances ---
# All functions are pure: they read the immutable Graph and allocate
# their own visited/distance arrays, so concurrent calls share nothing.
# A missing path is reported as None, never as a numeric sentinel.
# ------------------------------------------------

Distance = Optional[int]
UNREACHABLE: Distance = None


def _in_range(graph: Graph, v: int) -> bool:
    return 0 <= v < graph.n


def bfs_traverse(graph: Graph, start: int) -> List[int]:
    """
    Vertices reachable from `start`, in the order BFS first discovers them
    (start first). An out-of-range start yields an empty list.
    """
    if not _in_range(graph, start):
        return []

    visited = [False] * graph.n
    queue = deque([start])
    visited[start] = True
    order: List[int] = []

    while queue:
        current = queue.popleft()
        order.append(current)
        for nbr in graph.adjacency[current]:
            if not visited[nbr]:
                visited[nbr] = True
                queue.append(nbr)

    return order


def bfs_distances(graph: Graph, start: int) -> List[Distance]:
    """
    Full single-source hop distances from `start`.
    Entry v is None when v cannot be reached.
    """
    distances: List[Distance] = [UNREACHABLE] * graph.n
    if not _in_range(graph, start):
        return distances

    distances[start] = 0
    queue = deque([start])
    while queue:
        current = queue.popleft()
        next_d = distances[current] + 1
        for nbr in graph.adjacency[current]:
            if distances[nbr] is None:
                distances[nbr] = next_d
                queue.append(nbr)

    return distances


def shortest_path(graph: Graph, start: int, end: int) -> Distance:
    """
    Number of edges on a shortest start-end path, or None if there is none.

    BFS dequeues vertices in non-decreasing distance order, so the search
    can stop as soon as `end` leaves the queue.
    """
    if not (_in_range(graph, start) and _in_range(graph, end)):
        return UNREACHABLE
    if start == end:
        return 0

    distances: List[Distance] = [UNREACHABLE] * graph.n
    distances[start] = 0
    queue = deque([start])

    while queue:
        current = queue.popleft()
        if current == end:
            return distances[end]
        next_d = distances[current] + 1
        for nbr in graph.adjacency[current]:
            if distances[nbr] is None:
                distances[nbr] = next_d
                queue.append(nbr)

    return UNREACHABLE
