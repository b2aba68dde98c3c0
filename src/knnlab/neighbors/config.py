"""Configuration for the k-NN engine and its interactive callers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.io import load_yaml
from .boundary import DEFAULT_GRID_SIZE
from .errors import InvalidGridSize
from .metrics import DEFAULT_P, MetricKind, check_p, parse_metric
from .types import Bounds

# interactive range for the minkowski order
MIN_P = 1.0
MAX_P = 6.0


def clamp_p(p: float, lo: float = MIN_P, hi: float = MAX_P) -> float:
    return min(max(float(p), lo), hi)


@dataclass
class KnnConfig:
    """Parameters a caller hands to nearest()/vote()/boundary()."""

    k: int = 3
    metric: Union[MetricKind, str] = MetricKind.EUCLIDEAN
    p: float = DEFAULT_P
    grid_size: int = DEFAULT_GRID_SIZE
    bounds: Bounds = field(default_factory=Bounds)
    show_boundary: bool = True
    n_jobs: int = 1

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        self.metric = parse_metric(self.metric)
        self.p = check_p(clamp_p(self.p))
        self.k = int(self.k)
        self.grid_size = int(self.grid_size)
        if self.grid_size < 1:
            raise InvalidGridSize(f"grid_size must be >= 1, got {self.grid_size}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "KnnConfig":
        b = d.get("bounds") or {}
        return cls(
            k=int(d.get("k", 3)),
            metric=d.get("metric", MetricKind.EUCLIDEAN.value),
            p=float(d.get("p", DEFAULT_P)),
            grid_size=int(d.get("grid_size", DEFAULT_GRID_SIZE)),
            bounds=Bounds(
                min_x=float(b.get("min_x", 0.0)),
                max_x=float(b.get("max_x", 100.0)),
                min_y=float(b.get("min_y", 0.0)),
                max_y=float(b.get("max_y", 100.0)),
            ),
            show_boundary=bool(d.get("show_boundary", True)),
            n_jobs=int(d.get("n_jobs", 1)),
            log_level=str(d.get("log_level", "INFO")),
            log_file=d.get("log_file"),
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["metric"] = self.metric.value
        return d


def load_config(path: Union[str, Path]) -> KnnConfig:
    return KnnConfig.from_dict(load_yaml(path))
