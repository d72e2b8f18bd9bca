# src/connect4_minimax_analysis/cli/make_figures.py
from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import SummaryConfig, depth_table, filter_rows
from ..plots.chart import plot_branching, plot_histogram, plot_metric_vs_depth


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="connect4_minimax_analysis figures",
        description="Generate search-cost figures from bench_results_*.csv",
    )

    # Input selection
    ap.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Path to a specific results CSV. If omitted, uses latest CSV in --results-dir matching --pattern.",
    )
    ap.add_argument(
        "--results-dir",
        type=str,
        default="data/results",
        help="Directory to search for latest results CSV when --csv is not provided.",
    )
    ap.add_argument(
        "--pattern",
        type=str,
        default="bench_results_*.csv",
        help="Glob pattern to find results CSVs in --results-dir.",
    )

    # Output location
    ap.add_argument(
        "--figures-dir",
        type=str,
        default="data/figures",
        help="Output directory for PNG files.",
    )
    ap.add_argument(
        "--show",
        action="store_true",
        help="Show plots instead of saving",
    )

    # Filtering
    ap.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Ignore rows deeper than this.",
    )

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    # Resolve CSV path
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    cfg = SummaryConfig(max_depth=args.max_depth)
    df = filter_rows(df, cfg)

    figures_dir = Path(args.figures_dir)
    created = {
        "nodes_vs_depth": plot_metric_vs_depth(df, figures_dir, "nodes", show=args.show),
        "time_vs_depth": plot_metric_vs_depth(df, figures_dir, "time_ms", show=args.show),
        "branching": plot_branching(depth_table(df, cfg), figures_dir, show=args.show),
        "value_hist": plot_histogram(df, figures_dir, "value", show=args.show),
    }
    created = {k: p for k, p in created.items() if p is not None}

    print(f"Loaded: {csv_path}")
    if not args.show:
        print(f"Wrote {len(created)} outputs under: {figures_dir.resolve()}")
        for k, p in created.items():
            print(f"- {k}: {p}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
