#!/usr/bin/env python
from __future__ import annotations

from dataclasses import asdict
from typing import Optional

import typer

from knnlab.core.io import save_json
from knnlab.core.logs import get_logger
from knnlab.datasets.points import SEED_POINTS, clamp_k
from knnlab.neighbors.boundary import boundary, cells_to_array
from knnlab.neighbors.compare import compare_metrics, explain_closest
from knnlab.neighbors.config import KnnConfig, load_config
from knnlab.neighbors.errors import KnnError
from knnlab.neighbors.metrics import METRIC_DISPLAY_NAMES, MetricKind
from knnlab.neighbors.search import nearest
from knnlab.neighbors.types import Point
from knnlab.neighbors.vote import vote

app = typer.Typer(add_completion=False)


def _cfg(config: Optional[str], **overrides) -> KnnConfig:
    try:
        cfg = load_config(config) if config else KnnConfig()
        return KnnConfig.from_dict(
            {**cfg.to_dict(), **{key: v for key, v in overrides.items() if v is not None}}
        )
    except KnnError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2)


@app.command()
def predict(
    x: float,
    y: float,
    k: Optional[int] = typer.Option(None, help="number of neighbors"),
    metric: Optional[str] = typer.Option(None, help="euclidean | manhattan | minkowski"),
    p: Optional[float] = typer.Option(None, help="minkowski order"),
    config: Optional[str] = typer.Option(None, help="YAML config"),
):
    cfg = _cfg(config, k=k, metric=metric, p=p)
    log = get_logger("knnlab", cfg.log_level, cfg.log_file)
    data = SEED_POINTS
    kk = clamp_k(cfg.k, len(data))
    q = Point(x, y)

    nbrs = nearest(q, data, kk, cfg.metric, cfg.p)
    res = vote(nbrs)
    log.debug("query=(%.2f, %.2f) k=%d metric=%s", x, y, kk, cfg.metric.value)

    name = METRIC_DISPLAY_NAMES[cfg.metric]
    if cfg.metric is MetricKind.MINKOWSKI:
        name += f" p={cfg.p:g}"
    typer.echo(f"query ({x:.2f}, {y:.2f})  k={kk}  metric={name}")
    for rank, n in enumerate(nbrs, 1):
        typer.echo(f" {rank:>2}. #{n.index:<3} {n.label}  ({n.x:.2f}, {n.y:.2f})  d={n.distance:.3f}")
    if res is None:
        typer.echo("no prediction")
        return
    votes = ", ".join(f"{lab}: {c}" for lab, c in res.counts.items())
    typer.echo(f"votes: {votes}")
    typer.echo(f"predicted: {res.label}")

    cmp = explain_closest(q, nbrs, cfg.p)
    if cmp is not None:
        typer.echo(
            f"closest pair dx={cmp.dx:.3f} dy={cmp.dy:.3f} -> "
            f"L2={cmp.euclidean:.3f} L1={cmp.manhattan:.3f} Lp={cmp.minkowski:.3f}"
        )


@app.command("boundary")
def boundary_cmd(
    k: Optional[int] = typer.Option(None),
    metric: Optional[str] = typer.Option(None),
    p: Optional[float] = typer.Option(None),
    grid_size: Optional[int] = typer.Option(None, help="cells per axis"),
    out: Optional[str] = typer.Option(None, help="write cells as JSON"),
    config: Optional[str] = typer.Option(None),
):
    cfg = _cfg(config, k=k, metric=metric, p=p, grid_size=grid_size)
    log = get_logger("knnlab", cfg.log_level, cfg.log_file)
    data = SEED_POINTS
    try:
        cells = boundary(
            data,
            clamp_k(cfg.k, len(data)),
            cfg.metric,
            cfg.p,
            cfg.bounds,
            cfg.grid_size,
            enabled=cfg.show_boundary,
            n_jobs=cfg.n_jobs,
        )
    except KnnError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2)
    log.info("boundary: %d cells", len(cells))
    if not cells:
        typer.echo("decision boundary disabled or no training data")
        return

    grid = cells_to_array(cells, cfg.grid_size)
    # top row first so the map reads like the plot
    for row in grid[::-1]:
        typer.echo(" ".join(lab[0] if lab else "." for lab in row))

    if out:
        save_json(out, {"config": cfg.to_dict(), "cells": [asdict(c) for c in cells]})
        typer.echo(f"wrote {out}")


@app.command()
def compare(x1: float, y1: float, x2: float, y2: float, p: float = 3.0):
    try:
        cmp = compare_metrics(Point(x1, y1), Point(x2, y2), p)
    except KnnError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=2)
    typer.echo(f"dx={cmp.dx:.3f} dy={cmp.dy:.3f}")
    for kind in MetricKind:
        typer.echo(f"{METRIC_DISPLAY_NAMES[kind]:<16} {cmp.as_dict()[kind.value]:.3f}")


if __name__ == "__main__":
    app()
