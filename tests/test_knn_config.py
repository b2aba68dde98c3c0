from pathlib import Path

import pytest

from knnlab.core.io import save_yaml
from knnlab.neighbors.config import MAX_P, MIN_P, KnnConfig, clamp_p, load_config
from knnlab.neighbors.errors import InvalidBounds, InvalidGridSize, InvalidMetric, KnnError
from knnlab.neighbors.metrics import MetricKind
from knnlab.neighbors.types import Bounds

REPO = Path(__file__).resolve().parents[1]


def test_defaults():
    cfg = KnnConfig()
    assert cfg.k == 3
    assert cfg.metric is MetricKind.EUCLIDEAN
    assert cfg.p == 3.0
    assert cfg.grid_size == 30
    assert cfg.bounds == Bounds(0, 100, 0, 100)
    assert cfg.show_boundary and cfg.n_jobs == 1


def test_shipped_yaml_matches_defaults():
    assert load_config(REPO / "configs" / "knn_default.yaml") == KnnConfig()


def test_yaml_roundtrip(tmp_path: Path):
    p = tmp_path / "cfg" / "knn.yaml"
    save_yaml(p, {"k": 7, "metric": "Minkowski", "p": 2.5, "grid_size": 12,
                  "bounds": {"min_x": -1, "max_x": 1, "min_y": -2, "max_y": 2}})
    cfg = load_config(p)
    assert (cfg.k, cfg.metric, cfg.p, cfg.grid_size) == (7, MetricKind.MINKOWSKI, 2.5, 12)
    assert cfg.bounds == Bounds(-1.0, 1.0, -2.0, 2.0)

    save_yaml(p, cfg.to_dict())
    assert load_config(p) == cfg


def test_empty_yaml_gives_defaults(tmp_path: Path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(p) == KnnConfig()


def test_p_is_clamped():
    assert clamp_p(0.2) == MIN_P
    assert clamp_p(10) == MAX_P
    assert clamp_p(2.5) == 2.5
    assert KnnConfig(metric="minkowski", p=0.5).p == 1.0
    assert KnnConfig(metric="minkowski", p=9).p == 6.0


def test_invalid_values():
    with pytest.raises(InvalidMetric):
        KnnConfig(metric="cosine")
    with pytest.raises(InvalidGridSize):
        KnnConfig.from_dict({"grid_size": 0})
    with pytest.raises(InvalidBounds):
        KnnConfig.from_dict({"bounds": {"min_x": 5, "max_x": 5}})
    with pytest.raises(KnnError):
        Bounds(min_x=0, max_x=10, min_y=3, max_y=-3)
