from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from .errors import InvalidBounds


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class LabeledPoint(Point):
    label: str


@dataclass(frozen=True)
class NeighborResult(LabeledPoint):
    """A dataset entry paired with its distance to the query and its position in the dataset."""

    distance: float
    index: int


@dataclass(frozen=True)
class VoteResult:
    label: str
    counts: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Bounds:
    min_x: float = 0.0
    max_x: float = 100.0
    min_y: float = 0.0
    max_y: float = 100.0

    def __post_init__(self) -> None:
        if not (self.max_x > self.min_x and self.max_y > self.min_y):
            raise InvalidBounds(f"empty bounds: {self}")

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class GridCell:
    """
    One cell of the decision-boundary sampling.

    (x, y) is the lower-left corner; (gx, gy) the integer position in the grid.
    label=None means there was no training data to predict from.
    """

    x: float
    y: float
    width: float
    height: float
    label: Optional[str]
    gx: int
    gy: int

    @property
    def size(self) -> float:
        # side along x; equals height for square bounds
        return self.width

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)


Dataset = Sequence[LabeledPoint]
