from __future__ import annotations
from pathlib import Path
from typing import List, Optional

from ..config import LoaderConfig
from ..errors import EmptyInput, InputUnavailable
from .graph import Edge

# --- Edge list loader ---
# Reads "u,v" lines. The first line is treated as a header and skipped.
# Anything that is not exactly two comma-separated non-negative integers
# is dropped without complaint; only a file with no edges at all is an error.
# ------------------------------------------------------


def parse_edge_line(line: str) -> Optional[Edge]:
    parts = line.strip().split(",")
    if len(parts) != 2:
        return None
    a, b = (p.strip() for p in parts)
    if not (a.isascii() and a.isdigit() and b.isascii() and b.isdigit()):
        return None
    return int(a), int(b)


def read_edge_list(path: str | Path, skip_header: bool = True) -> List[Edge]:
    try:
        f = Path(path).open("r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputUnavailable(str(path)) from exc

    edges: List[Edge] = []
    with f:
        if skip_header:
            f.readline()
        for line in f:
            parsed = parse_edge_line(line)
            if parsed is not None:
                edges.append(parsed)

    if not edges:
        raise EmptyInput()
    return edges


def load_edges(cfg: LoaderConfig) -> List[Edge]:
    return read_edge_list(cfg.path, skip_header=cfg.skip_header)
