from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from knnlab.neighbors.types import Bounds, LabeledPoint

from .points import DEFAULT_LABELS


def make_blobs_2d(
    n_per_class: int = 20,
    labels: Sequence[str] = DEFAULT_LABELS,
    spread: float = 6.0,
    bounds: Bounds = Bounds(),
    seed: int = 42,
) -> Tuple[LabeledPoint, ...]:
    """
    Gaussian clusters, one per label, with centers spaced evenly on a circle
    around the middle of `bounds`. Points are clipped into `bounds`.
    Output is grouped by label in the order given.
    """
    rng = np.random.default_rng(seed)
    cx = bounds.min_x + bounds.width / 2
    cy = bounds.min_y + bounds.height / 2
    radius = 0.3 * min(bounds.width, bounds.height)
    angles = 2 * np.pi * np.arange(len(labels)) / max(len(labels), 1)

    out = []
    for lab, a in zip(labels, angles):
        center = np.array([cx + radius * np.cos(a), cy + radius * np.sin(a)])
        X = center + spread * rng.normal(size=(n_per_class, 2))
        X[:, 0] = np.clip(X[:, 0], bounds.min_x, bounds.max_x)
        X[:, 1] = np.clip(X[:, 1], bounds.min_y, bounds.max_y)
        out.extend(LabeledPoint(float(x), float(y), str(lab)) for x, y in X)
    return tuple(out)


def to_arrays(points: Sequence[LabeledPoint]) -> Tuple[np.ndarray, np.ndarray]:
    """(n, 2) float64 coordinates and an (n,) object array of labels."""
    X = np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(-1, 2)
    y = np.array([p.label for p in points], dtype=object)
    return X, y
