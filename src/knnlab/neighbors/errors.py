from __future__ import annotations


class KnnError(Exception):
    """Base class for every error raised by the k-NN engine."""


class InvalidMetric(KnnError, ValueError):
    """Unrecognized metric identifier."""


class InvalidMinkowskiP(InvalidMetric):
    """Minkowski order that is not finite or is below 1."""


class InvalidGridSize(KnnError, ValueError):
    """Decision-boundary grid with fewer than one cell per axis."""


class BoundaryCancelled(KnnError):
    """A boundary computation was superseded before it finished."""


class InvalidBounds(KnnError, ValueError):
    """Feature-space bounds with no extent on some axis."""
