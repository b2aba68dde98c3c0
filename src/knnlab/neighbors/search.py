from __future__ import annotations

from typing import List

from .metrics import DEFAULT_P, MetricKind, MetricLike, metric_fn
from .types import Dataset, NeighborResult, Point


def nearest(
    query: Point,
    dataset: Dataset,
    k: int,
    metric: MetricLike = MetricKind.EUCLIDEAN,
    p: float = DEFAULT_P,
) -> List[NeighborResult]:
    """
    The min(k, len(dataset)) entries closest to `query`, in ascending distance.

    Ties keep dataset order (sorted() is stable). k <= 0 or an empty dataset
    gives [] rather than an error. The metric is validated even then.
    """
    dist = metric_fn(metric, p)
    if k <= 0 or not dataset:
        return []

    scored = [
        NeighborResult(x=pt.x, y=pt.y, label=pt.label, distance=dist(pt, query), index=i)
        for i, pt in enumerate(dataset)
    ]
    scored.sort(key=lambda n: n.distance)
    return scored[:k]
