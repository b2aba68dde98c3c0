# k-NN engine: metrics, neighbor search, voting and decision-boundary sampling.

from .boundary import (
    DEFAULT_GRID_SIZE as DEFAULT_GRID_SIZE,
    boundary as boundary,
    cells_to_array as cells_to_array,
)
from .compare import (
    MetricComparison as MetricComparison,
    compare_metrics as compare_metrics,
    explain_closest as explain_closest,
)
from .config import KnnConfig as KnnConfig, clamp_p as clamp_p, load_config as load_config
from .errors import (
    BoundaryCancelled as BoundaryCancelled,
    InvalidBounds as InvalidBounds,
    InvalidGridSize as InvalidGridSize,
    InvalidMetric as InvalidMetric,
    InvalidMinkowskiP as InvalidMinkowskiP,
    KnnError as KnnError,
)
from .metrics import (
    DEFAULT_P as DEFAULT_P,
    METRIC_DISPLAY_NAMES as METRIC_DISPLAY_NAMES,
    MetricKind as MetricKind,
    distance as distance,
    parse_metric as parse_metric,
)
from .scheduler import BoundaryScheduler as BoundaryScheduler
from .search import nearest as nearest
from .types import (
    Bounds as Bounds,
    GridCell as GridCell,
    LabeledPoint as LabeledPoint,
    NeighborResult as NeighborResult,
    Point as Point,
    VoteResult as VoteResult,
)
from .vote import tally as tally, vote as vote

__all__ = [
    "DEFAULT_GRID_SIZE",
    "boundary",
    "cells_to_array",
    "MetricComparison",
    "compare_metrics",
    "explain_closest",
    "KnnConfig",
    "clamp_p",
    "load_config",
    "BoundaryCancelled",
    "InvalidBounds",
    "InvalidGridSize",
    "InvalidMetric",
    "InvalidMinkowskiP",
    "KnnError",
    "DEFAULT_P",
    "METRIC_DISPLAY_NAMES",
    "MetricKind",
    "distance",
    "parse_metric",
    "BoundaryScheduler",
    "nearest",
    "Bounds",
    "GridCell",
    "LabeledPoint",
    "NeighborResult",
    "Point",
    "VoteResult",
    "tally",
    "vote",
]
