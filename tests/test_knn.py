import numpy as np
import pytest

from knnlab.datasets.points import SEED_POINTS
from knnlab.datasets.toy import make_blobs_2d, to_arrays
from knnlab.models.knn import KNNClassifier
from knnlab.neighbors.search import nearest
from knnlab.neighbors.types import Point
from knnlab.neighbors.vote import vote


def test_seed_query_near_a_cluster():
    nbrs = nearest(Point(30, 25), SEED_POINTS, 3, "euclidean")
    assert [n.label for n in nbrs] == ["A", "A", "A"]
    assert [n.index for n in nbrs] == [2, 1, 3]  # 1 and 3 tie at sqrt(50)
    assert vote(nbrs).label == "A"


def test_seed_query_near_b_cluster_manhattan():
    nbrs = nearest(Point(72, 74), SEED_POINTS, 5, "manhattan")
    res = vote(nbrs)
    assert res.label == "B"
    assert res.counts == {"B": 5}
    assert [n.distance for n in nbrs] == [4, 6, 9, 12, 13]


def test_knn_classifier_acc():
    X, y = to_arrays(make_blobs_2d(n_per_class=60, seed=0))
    knn = KNNClassifier(k=5).fit(X, y)
    assert knn.accuracy(X, y) >= 0.9


def test_knn_classifier_metrics_agree_on_seed():
    X, y = to_arrays(SEED_POINTS)
    for metric in ("euclidean", "manhattan", "minkowski"):
        knn = KNNClassifier(k=3, metric=metric, p=4).fit(X, y)
        assert list(knn.predict([[30, 25], [72, 74]])) == ["A", "B"]


def test_unfitted_predicts_nothing():
    knn = KNNClassifier()
    assert knn.predict(np.array([[1.0, 2.0]])).tolist() == [None]
    assert knn.decision_boundary(grid_size=4) == []


def test_fit_length_mismatch():
    with pytest.raises(ValueError):
        KNNClassifier().fit(np.zeros((3, 2)), ["A", "B"])


def test_decision_boundary_single_class():
    X = np.array([[10.0, 10.0], [20.0, 30.0]])
    cells = KNNClassifier(k=2).fit(X, ["A", "A"]).decision_boundary(grid_size=5)
    assert len(cells) == 25
    assert all(c.label == "A" for c in cells)
