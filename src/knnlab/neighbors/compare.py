from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .metrics import DEFAULT_P, MetricKind, distance
from .types import NeighborResult, Point


@dataclass(frozen=True)
class MetricComparison:
    """The same (query, neighbor) pair measured under every metric."""

    dx: float
    dy: float
    euclidean: float
    manhattan: float
    minkowski: float
    p: float

    def as_dict(self) -> dict:
        return {
            MetricKind.EUCLIDEAN.value: self.euclidean,
            MetricKind.MANHATTAN.value: self.manhattan,
            MetricKind.MINKOWSKI.value: self.minkowski,
        }


def compare_metrics(query: Point, other: Point, p: float = DEFAULT_P) -> MetricComparison:
    return MetricComparison(
        dx=abs(query.x - other.x),
        dy=abs(query.y - other.y),
        euclidean=distance(query, other, MetricKind.EUCLIDEAN),
        manhattan=distance(query, other, MetricKind.MANHATTAN),
        minkowski=distance(query, other, MetricKind.MINKOWSKI, p),
        p=float(p),
    )


def explain_closest(
    query: Point, neighbors: Sequence[NeighborResult], p: float = DEFAULT_P
) -> Optional[MetricComparison]:
    # neighbors[0] is the closest one under whatever metric produced the list
    if not neighbors:
        return None
    return compare_metrics(query, neighbors[0], p)
