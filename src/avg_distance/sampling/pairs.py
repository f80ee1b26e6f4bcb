from __future__ import annotations
from typing import Callable, List, Optional, Sequence, Set, Tuple

import numpy as np

Pair = Tuple[int, int]

# randint(m) must return an integer drawn uniformly from [0, m)
RandInt = Callable[[int], int]


def make_randint(seed: Optional[int] = None) -> RandInt:
    """Uniform index generator backed by numpy's default Generator."""
    rng = np.random.default_rng(seed)

    def randint(m: int) -> int:
        return int(rng.integers(0, m))

    return randint


def canonical_pair(a: int, b: int) -> Pair:
    return (a, b) if a < b else (b, a)


def sample_pairs(
    vertices: Sequence[int],
    sample_size: int,
    max_attempts: int,
    randint: RandInt,
) -> List[Pair]:
    """
    Draw up to `sample_size` distinct unordered vertex pairs.

    Each attempt picks two positions in `vertices` uniformly at random.
    Draws that land on the same position, or on a pair already chosen,
    still use up an attempt. Sampling stops once `sample_size` pairs are
    found or `max_attempts` attempts are spent, whichever comes first, so
    the result can be shorter than requested or empty.
    """
    if sample_size < 0:
        raise ValueError("sample_size must be >= 0")
    if max_attempts < 0:
        raise ValueError("max_attempts must be >= 0")

    m = len(vertices)
    if m < 2:
        return []

    chosen: Set[Pair] = set()
    pairs: List[Pair] = []
    attempts = 0

    while len(pairs) < sample_size and attempts < max_attempts:
        i = randint(m)
        j = randint(m)
        attempts += 1
        if i == j:
            continue
        pair = canonical_pair(vertices[i], vertices[j])
        if pair in chosen:
            continue
        chosen.add(pair)
        pairs.append(pair)

    return pairs
