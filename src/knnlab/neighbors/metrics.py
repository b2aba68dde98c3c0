from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, Union

from .errors import InvalidMetric, InvalidMinkowskiP
from .types import Point


class MetricKind(str, Enum):
    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    MINKOWSKI = "minkowski"


MetricLike = Union[MetricKind, str]

METRIC_DISPLAY_NAMES: Dict[MetricKind, str] = {
    MetricKind.EUCLIDEAN: "Euclidean (L2)",
    MetricKind.MANHATTAN: "Manhattan (L1)",
    MetricKind.MINKOWSKI: "Minkowski (Lp)",
}

DEFAULT_P = 3.0


def parse_metric(metric: MetricLike) -> MetricKind:
    """
    Resolve a metric identifier. Unknown names raise InvalidMetric; there is no fallback.
    """
    if isinstance(metric, MetricKind):
        return metric
    if isinstance(metric, str):
        try:
            return MetricKind(metric.strip().lower())
        except ValueError:
            pass
    raise InvalidMetric(
        f"unknown metric {metric!r}; expected one of {[m.value for m in MetricKind]}"
    )


def check_p(p: float) -> float:
    p = float(p)
    if not math.isfinite(p) or p < 1.0:
        raise InvalidMinkowskiP(f"minkowski p must be finite and >= 1, got {p}")
    return p


def _minkowski(dx: float, dy: float, p: float) -> float:
    if p == 1.0:
        return dx + dy
    if p == 2.0:
        return math.hypot(dx, dy)
    m = max(dx, dy)
    if m == 0.0:
        return 0.0
    # scale by the larger delta so dx**p cannot overflow for large p
    return m * ((dx / m) ** p + (dy / m) ** p) ** (1.0 / p)


def _euclidean(a: Point, b: Point) -> float:
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    return math.hypot(dx, dy)


def _manhattan(a: Point, b: Point) -> float:
    return abs(a.x - b.x) + abs(a.y - b.y)


def metric_fn(metric: MetricLike, p: float = DEFAULT_P) -> Callable[[Point, Point], float]:
    """
    Resolve and validate (metric, p) once, returning a two-point distance function.
    p is only checked for minkowski.
    """
    kind = parse_metric(metric)
    if kind is MetricKind.MANHATTAN:
        return _manhattan
    if kind is MetricKind.MINKOWSKI:
        order = check_p(p)
        return lambda a, b: _minkowski(abs(a.x - b.x), abs(a.y - b.y), order)
    return _euclidean


def distance(a: Point, b: Point, metric: MetricLike = MetricKind.EUCLIDEAN, p: float = DEFAULT_P) -> float:
    """
    Distance between two 2D points.

    - euclidean: sqrt(dx^2 + dy^2)
    - manhattan: dx + dy
    - minkowski: (dx^p + dy^p)^(1/p), p >= 1; tends to max(dx, dy) as p grows
    """
    return metric_fn(metric, p)(a, b)
