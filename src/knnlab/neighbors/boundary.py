from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

import numpy as np
from joblib import Parallel, delayed

from ..core.timers import timed
from .errors import BoundaryCancelled, InvalidGridSize
from .metrics import DEFAULT_P, MetricKind, MetricLike, metric_fn, parse_metric
from .search import nearest
from .types import Bounds, Dataset, GridCell, Point
from .vote import vote

log = logging.getLogger("knnlab.boundary")

DEFAULT_GRID_SIZE = 30


def _column_labels(
    gx: int,
    dataset: Dataset,
    k: int,
    metric: MetricKind,
    p: float,
    bounds: Bounds,
    grid_size: int,
) -> List[Optional[str]]:
    """Predicted label for every cell of column gx, bottom (gy=0) to top."""
    cw = bounds.width / grid_size
    ch = bounds.height / grid_size
    cx = bounds.min_x + gx * cw + cw / 2
    out: List[Optional[str]] = []
    for gy in range(grid_size):
        q = Point(cx, bounds.min_y + gy * ch + ch / 2)
        res = vote(nearest(q, dataset, k, metric, p))
        out.append(res.label if res is not None else None)
    return out


def boundary(
    dataset: Dataset,
    k: int,
    metric: MetricLike = MetricKind.EUCLIDEAN,
    p: float = DEFAULT_P,
    bounds: Optional[Bounds] = None,
    grid_size: int = DEFAULT_GRID_SIZE,
    *,
    enabled: bool = True,
    n_jobs: int = 1,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> List[GridCell]:
    """
    Sample the decision regions on a grid_size x grid_size grid over `bounds`.

    Each cell is classified by running nearest() + vote() at its center with
    k = min(k, len(dataset)). Cells are returned column by column (gx outer,
    gy inner); callers should index them by (gx, gy), not by list position.

    Returns [] when `enabled` is false or the dataset is empty. With k <= 0 every
    cell carries label=None. n_jobs != 1 spreads columns over joblib workers and
    yields the same cells as the sequential path. `should_cancel` is polled between
    columns (before dispatch and after gather when parallel); BoundaryCancelled is
    raised once it returns True.
    """
    if grid_size < 1:
        raise InvalidGridSize(f"grid_size must be >= 1, got {grid_size}")
    kind = parse_metric(metric)
    metric_fn(kind, p)  # fail fast on a bad p before touching the grid
    bounds = bounds or Bounds()

    if not enabled or not dataset:
        return []

    k = min(k, len(dataset))
    cancelled = should_cancel or (lambda: False)
    args = (dataset, k, kind, p, bounds, grid_size)

    with timed(f"boundary {grid_size}x{grid_size} n={len(dataset)} k={k} {kind.value}", log):
        if n_jobs == 1:
            columns: List[List[Optional[str]]] = []
            for gx in range(grid_size):
                if cancelled():
                    raise BoundaryCancelled(f"cancelled at column {gx}/{grid_size}")
                columns.append(_column_labels(gx, *args))
        else:
            if cancelled():
                raise BoundaryCancelled("cancelled before dispatch")
            columns = Parallel(n_jobs=n_jobs)(
                delayed(_column_labels)(gx, *args) for gx in range(grid_size)
            )
            if cancelled():
                raise BoundaryCancelled("cancelled after gather")

    cw = bounds.width / grid_size
    ch = bounds.height / grid_size
    # fixed-size arena indexed gx * grid_size + gy
    cells: List[Optional[GridCell]] = [None] * (grid_size * grid_size)
    for gx, labels in enumerate(columns):
        for gy, label in enumerate(labels):
            cells[gx * grid_size + gy] = GridCell(
                x=bounds.min_x + gx * cw,
                y=bounds.min_y + gy * ch,
                width=cw,
                height=ch,
                label=label,
                gx=gx,
                gy=gy,
            )
    return cells  # type: ignore[return-value]


def cells_to_array(cells: Sequence[GridCell], grid_size: int) -> np.ndarray:
    """
    Reshape boundary cells into a (grid_size, grid_size) object array indexed [gy, gx].
    Positions without a cell hold None.
    """
    grid = np.full((grid_size, grid_size), None, dtype=object)
    for c in cells:
        grid[c.gy, c.gx] = c.label
    return grid
