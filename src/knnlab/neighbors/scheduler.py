from __future__ import annotations

import logging
import threading
from typing import List, Optional

from .boundary import DEFAULT_GRID_SIZE, boundary
from .errors import BoundaryCancelled
from .metrics import DEFAULT_P, MetricKind, MetricLike
from .types import Bounds, Dataset, GridCell

log = logging.getLogger("knnlab.scheduler")


class BoundaryScheduler:
    """
    Generation counter for interactive boundary recomputation.

    Every parameter change calls begin() and gets a ticket; starting a new
    ticket (or calling cancel()) supersedes the previous one, whose run()
    stops at the next column and returns None instead of stale cells.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._generation = 0

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def begin(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def cancel(self) -> None:
        with self._lock:
            self._generation += 1

    def is_current(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._generation

    def run(
        self,
        ticket: int,
        dataset: Dataset,
        k: int,
        metric: MetricLike = MetricKind.EUCLIDEAN,
        p: float = DEFAULT_P,
        bounds: Optional[Bounds] = None,
        grid_size: int = DEFAULT_GRID_SIZE,
        *,
        enabled: bool = True,
        n_jobs: int = 1,
    ) -> Optional[List[GridCell]]:
        try:
            cells = boundary(
                dataset,
                k,
                metric,
                p,
                bounds,
                grid_size,
                enabled=enabled,
                n_jobs=n_jobs,
                should_cancel=lambda: not self.is_current(ticket),
            )
        except BoundaryCancelled as e:
            log.info("boundary ticket %d superseded (%s)", ticket, e)
            return None
        # an empty result never polls should_cancel
        if not self.is_current(ticket):
            log.info("boundary ticket %d superseded after completion", ticket)
            return None
        return cells
