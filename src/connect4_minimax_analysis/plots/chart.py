from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Optional[Path]:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_metric_vs_depth(
    df: pd.DataFrame, outdir: Path, metric: str, *, log_y: bool = True, show: bool
) -> Optional[Path]:
    """One line per benchmark position; log scale suits the 7^depth growth."""
    if not {"position", "depth", metric}.issubset(df.columns):
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    fig = plt.figure()
    for name, g in df.sort_values("depth").groupby("position"):
        plt.plot(g["depth"], g[metric].clip(lower=1) if log_y else g[metric], marker="o", label=str(name))

    if log_y:
        plt.yscale("log")
    plt.title(f"{metric} vs search depth")
    plt.xlabel("depth (plies)")
    plt.ylabel(metric)
    plt.legend()

    return _finish(fig, outdir, f"{metric}_vs_depth.png", show=show)


def plot_branching(table: pd.DataFrame, outdir: Path, *, show: bool) -> Optional[Path]:
    if "branching" not in table.columns or "depth" not in table.columns:
        return None

    data = table.dropna(subset=["branching"])
    if data.empty:
        return None

    fig = plt.figure()
    plt.bar(data["depth"].astype(str), data["branching"].astype(float))
    plt.axhline(7, linestyle="--", color="gray")
    plt.title("Effective branching factor")
    plt.xlabel("depth (plies)")
    plt.ylabel("mean nodes(d) / mean nodes(d-1)")

    return _finish(fig, outdir, "branching_factor.png", show=show)


def plot_histogram(df: pd.DataFrame, outdir: Path, col: str, *, show: bool) -> Optional[Path]:
    if col not in df.columns or not pd.api.types.is_numeric_dtype(df[col]):
        return None

    fig = plt.figure()
    plt.hist(df[col].dropna(), bins=30)
    plt.title(f"Histogram: {col}")
    plt.xlabel(col)
    plt.ylabel("count")

    return _finish(fig, outdir, f"hist_{col}.png", show=show)
