from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np

from ..errors import AllPairsUnreachable
from ..routing.bfs import Distance

# --- Distance aggregation ---
# Folds per-pair BFS distances into the numbers the report prints.
# Pairs without a path are counted separately and left out of every mean.
# ------------------------------------------------------


@dataclass(frozen=True)
class DistanceSummary:
    counted_pairs: int
    unreachable_pairs: int
    total_distance: int
    average_distance: float
    min_distance: int
    max_distance: int
    std_distance: float
    histogram: Dict[int, int]


def summarize_distances(distances: Sequence[Distance]) -> DistanceSummary:
    finite = [d for d in distances if d is not None]
    if not finite:
        raise AllPairsUnreachable(sampled_pairs=len(distances))

    arr = np.asarray(finite, dtype=np.int64)
    total = int(arr.sum())

    return DistanceSummary(
        counted_pairs=len(finite),
        unreachable_pairs=len(distances) - len(finite),
        total_distance=total,
        average_distance=total / len(finite),
        min_distance=int(arr.min()),
        max_distance=int(arr.max()),
        std_distance=float(arr.std()),
        histogram=dict(sorted(Counter(finite).items())),
    )
