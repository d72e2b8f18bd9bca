from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "nodes",
    "time_ms",
    "value",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "nodes"
    max_depth: int | None = None
    # Restrict to a subset of named positions (None keeps all)
    positions: tuple[str, ...] | None = None


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()

    if cfg.max_depth is not None:
        _require_cols(out, ["depth"])
        out = out[out["depth"] <= cfg.max_depth].copy()

    if cfg.positions:
        _require_cols(out, ["position"])
        out = out[out["position"].isin(cfg.positions)].copy()

    return out


def depth_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """
    One row per search depth: mean/max of the metric over all positions,
    plus the effective branching factor (mean nodes at d over mean nodes
    at d-1).
    """
    _require_cols(df, ["depth", "nodes", cfg.metric])

    out = filter_rows(df, cfg)
    if out.empty:
        return pd.DataFrame(columns=["depth", "positions", "mean", "max", "mean_nodes", "branching"])

    grouped = out.groupby("depth")
    table = pd.DataFrame({
        "positions": grouped["position"].nunique() if "position" in out.columns else grouped.size(),
        "mean": grouped[cfg.metric].mean(),
        "max": grouped[cfg.metric].max(),
        "mean_nodes": grouped["nodes"].mean(),
    }).sort_index()

    table["branching"] = table["mean_nodes"] / table["mean_nodes"].shift(1)
    return table.reset_index()


def position_table(df: pd.DataFrame) -> pd.DataFrame:
    """Chosen column per position (rows) and depth (columns)."""
    _require_cols(df, ["position", "depth", "move"])
    return df.pivot_table(index="position", columns="depth", values="move", aggfunc="first")


def move_stability(df: pd.DataFrame) -> pd.DataFrame:
    """
    For each position: how many distinct columns the search picked across
    depths, and the deepest depth's choice.
    """
    _require_cols(df, ["position", "depth", "move"])

    rows = []
    for name, g in df.sort_values("depth").groupby("position"):
        moves = g["move"].dropna()
        rows.append({
            "position": name,
            "distinct_moves": int(moves.nunique()),
            "deepest_move": (moves.iloc[-1] if not moves.empty else None),
            "deepest_value": g["value"].iloc[-1] if "value" in g.columns else None,
        })
    return pd.DataFrame(rows, columns=["position", "distinct_moves", "deepest_move", "deepest_value"])


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    desc = num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
    return desc
