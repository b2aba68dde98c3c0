import math

import pytest

from knnlab.neighbors.errors import InvalidMetric, InvalidMinkowskiP
from knnlab.neighbors.metrics import MetricKind, distance, metric_fn, parse_metric
from knnlab.neighbors.types import Point

PAIRS = [
    (Point(0, 0), Point(3, 4)),
    (Point(12.5, 80.25), Point(-3.0, 7.75)),
    (Point(50, 50), Point(50, 10)),
    (Point(1e-3, 2e-3), Point(99.999, 0.5)),
]
METRICS = ["euclidean", "manhattan", "minkowski"]


def test_known_values():
    a, b = Point(0, 0), Point(3, 4)
    assert distance(a, b, "euclidean") == 5.0
    assert distance(a, b, "manhattan") == 7.0
    assert distance(a, b, "minkowski", 3) == pytest.approx(91 ** (1 / 3))


@pytest.mark.parametrize("metric", METRICS)
@pytest.mark.parametrize("p", [1.0, 1.5, 2.0, 3.0, 6.0])
def test_symmetric_and_zero_on_self(metric, p):
    for a, b in PAIRS:
        assert distance(a, b, metric, p) == distance(b, a, metric, p)
        assert distance(a, a, metric, p) == 0.0
        assert distance(a, b, metric, p) > 0.0


def test_minkowski_p1_p2_match_l1_l2_exactly():
    for a, b in PAIRS:
        assert distance(a, b, "minkowski", 1) == distance(a, b, "manhattan")
        assert distance(a, b, "minkowski", 2) == distance(a, b, "euclidean")


def test_minkowski_tends_to_chebyshev():
    a, b = Point(0, 0), Point(3, 4)
    prev = distance(a, b, "minkowski", 1)
    for p in (1.5, 2, 3, 6, 20, 60):
        d = distance(a, b, "minkowski", p)
        assert d <= prev + 1e-12, "Lp distance should not grow with p"
        prev = d
    assert distance(a, b, "minkowski", 60) == pytest.approx(4.0, abs=1e-6)


def test_minkowski_large_p_stays_finite():
    d = distance(Point(0, 0), Point(90, 80), "minkowski", 500)
    assert math.isfinite(d)
    assert d == pytest.approx(90.0, rel=1e-3)


def test_l2_stays_finite_for_huge_coordinates():
    a, b = Point(0, 0), Point(1e200, 1e200)
    for d in (distance(a, b, "euclidean"), distance(a, b, "minkowski", 2)):
        assert math.isfinite(d)
        assert d == pytest.approx(math.sqrt(2) * 1e200)
    assert distance(a, b, "minkowski", 2) == distance(a, b, "euclidean")


def test_parse_metric_accepts_enum_and_loose_strings():
    assert parse_metric(MetricKind.MINKOWSKI) is MetricKind.MINKOWSKI
    assert parse_metric(" Manhattan ") is MetricKind.MANHATTAN
    assert parse_metric("EUCLIDEAN") is MetricKind.EUCLIDEAN


@pytest.mark.parametrize("bad", ["cosine", "", "l2", None, 3])
def test_unknown_metric_raises(bad):
    with pytest.raises(InvalidMetric):
        distance(Point(0, 0), Point(1, 1), bad)


@pytest.mark.parametrize("p", [0.5, 0.0, -2.0, float("nan"), float("inf")])
def test_degenerate_p_raises(p):
    with pytest.raises(InvalidMinkowskiP):
        distance(Point(0, 0), Point(1, 1), "minkowski", p)
    # InvalidMinkowskiP is an InvalidMetric and a ValueError
    with pytest.raises(ValueError):
        metric_fn("minkowski", p)


def test_p_ignored_for_other_metrics():
    assert distance(Point(0, 0), Point(3, 4), "euclidean", 0.1) == 5.0
    assert distance(Point(0, 0), Point(3, 4), "manhattan", float("nan")) == 7.0
