from __future__ import annotations

from typing import Dict, Optional, Sequence

from .types import LabeledPoint, VoteResult


def tally(neighbors: Sequence[LabeledPoint]) -> Dict[str, int]:
    # keys appear in the order labels are first met in `neighbors`
    counts: Dict[str, int] = {}
    for nb in neighbors:
        counts[nb.label] = counts.get(nb.label, 0) + 1
    return counts


def vote(neighbors: Sequence[LabeledPoint]) -> Optional[VoteResult]:
    """
    Majority label among `neighbors`, or None when there are none.

    `neighbors` is expected in ascending distance order (as returned by nearest()).
    On a tie for the top count the label of the closest tied neighbor wins.
    """
    if not neighbors:
        return None
    counts = tally(neighbors)
    best = max(counts.values())
    winner = next(nb.label for nb in neighbors if counts[nb.label] == best)
    return VoteResult(label=winner, counts=counts)
