from __future__ import annotations

from pathlib import Path
from typing import Iterator, List

import pytest

from avg_distance.topology.graph import Graph, build_graph

SMALL_EDGES = [(0, 1), (1, 2), (0, 3), (1, 4)]


def scripted_randint(values: List[int]):
    """randint stand-in that replays a fixed index stream."""
    it: Iterator[int] = iter(values)

    def randint(m: int) -> int:
        v = next(it)
        assert 0 <= v < m
        return v

    return randint


@pytest.fixture
def small_graph() -> Graph:
    #   0 -- 1 -- 2
    #   |    |
    #   3    4
    return build_graph(SMALL_EDGES)


@pytest.fixture
def edge_file(tmp_path: Path):
    def _write(text: str, name: str = "edges.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
