from __future__ import annotations

from typing import Tuple

from knnlab.neighbors.types import Dataset, LabeledPoint

DEFAULT_LABELS: Tuple[str, ...] = ("A", "B", "C")

SEED_POINTS: Tuple[LabeledPoint, ...] = (
    LabeledPoint(20, 20, "A"),
    LabeledPoint(25, 30, "A"),
    LabeledPoint(30, 25, "A"),
    LabeledPoint(35, 20, "A"),
    LabeledPoint(40, 30, "A"),
    LabeledPoint(70, 70, "B"),
    LabeledPoint(75, 65, "B"),
    LabeledPoint(80, 75, "B"),
    LabeledPoint(65, 80, "B"),
    LabeledPoint(72, 78, "B"),
)


def add_point(dataset: Dataset, x: float, y: float, label: str) -> Tuple[LabeledPoint, ...]:
    return (*dataset, LabeledPoint(float(x), float(y), str(label)))


def delete_point(dataset: Dataset, index: int) -> Tuple[LabeledPoint, ...]:
    """
    Copy of `dataset` without entry `index`. The last remaining point is never removed.
    """
    if not 0 <= index < len(dataset):
        raise IndexError(f"point index {index} out of range for {len(dataset)} points")
    if len(dataset) <= 1:
        return tuple(dataset)
    return tuple(pt for i, pt in enumerate(dataset) if i != index)


def clamp_k(k: int, n: int) -> int:
    """Keep k inside [1, n] as the dataset grows and shrinks (1 when n == 0)."""
    if n <= 0:
        return 1
    return min(max(int(k), 1), n)
