from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from knnlab.neighbors.boundary import DEFAULT_GRID_SIZE, boundary
from knnlab.neighbors.metrics import DEFAULT_P, MetricKind, parse_metric
from knnlab.neighbors.search import nearest
from knnlab.neighbors.types import Bounds, GridCell, LabeledPoint, NeighborResult, Point
from knnlab.neighbors.vote import vote


@dataclass
class KNNClassifier:
    k: int = 3
    metric: Union[MetricKind, str] = MetricKind.EUCLIDEAN
    p: float = DEFAULT_P

    # fit
    points_: Tuple[LabeledPoint, ...] = ()

    def __post_init__(self) -> None:
        self.metric = parse_metric(self.metric)

    def fit(self, X: np.ndarray, y: Sequence[str]):
        X = np.asarray(X, dtype=np.float64).reshape(-1, 2)
        if X.shape[0] != len(y):
            raise ValueError(f"X has {X.shape[0]} rows but y has {len(y)} labels")
        self.points_ = tuple(
            LabeledPoint(float(a), float(b), str(lab)) for (a, b), lab in zip(X, y)
        )
        return self

    def kneighbors(self, x: float, y: float) -> List[NeighborResult]:
        return nearest(Point(float(x), float(y)), self.points_, self.k, self.metric, self.p)

    def predict(self, X: np.ndarray) -> np.ndarray:
        X = np.asarray(X, dtype=np.float64).reshape(-1, 2)
        out = np.full(X.shape[0], None, dtype=object)
        for i, (a, b) in enumerate(X):
            res = vote(self.kneighbors(a, b))
            out[i] = res.label if res is not None else None
        return out

    def accuracy(self, X: np.ndarray, y: Sequence[str]) -> float:
        y = np.asarray(y, dtype=object).ravel()
        return float((self.predict(X) == y).mean())

    def decision_boundary(
        self, bounds: Optional[Bounds] = None, grid_size: int = DEFAULT_GRID_SIZE, n_jobs: int = 1
    ) -> List[GridCell]:
        return boundary(self.points_, self.k, self.metric, self.p, bounds, grid_size, n_jobs=n_jobs)
