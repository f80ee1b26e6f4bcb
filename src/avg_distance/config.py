from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

@dataclass(frozen=True)
class LoaderConfig:
    path: str = "fb-pages-company_edges.txt" # edge list, one "u,v" per line
    skip_header: bool = True # first line is a header and is never parsed

@dataclass(frozen=True)
class SamplingConfig:
    sample_size: int = 1000 # distinct pairs wanted
    attempts_per_pair: int = 100 # retry budget = attempts_per_pair * sample_size
    seed: Optional[int] = None # None -> fresh entropy on every run

    @property
    def max_attempts(self) -> int:
        return self.attempts_per_pair * self.sample_size

    def validate(self) -> None:
        if self.sample_size < 1:
            raise ValueError("sample_size must be >= 1")
        if self.attempts_per_pair < 1:
            raise ValueError("attempts_per_pair must be >= 1")

@dataclass(frozen=True)
class OutputConfig:
    csv_path: Optional[str] = None   # per-pair distances, skipped when None
    plot_path: Optional[str] = None  # hop histogram (png + pdf), skipped when None
    show_stats: bool = False         # print topology summary before the estimate

@dataclass(frozen=True)
class RunConfig:
    loader: LoaderConfig = field(default_factory=LoaderConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
