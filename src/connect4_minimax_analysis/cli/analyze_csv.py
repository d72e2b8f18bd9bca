from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import SummaryConfig, depth_table, move_stability, numeric_summary, position_table


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze minimax benchmark CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing bench_results_*.csv")
    ap.add_argument("--pattern", type=str, default="bench_results_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--metric", type=str, default="nodes", choices=["nodes", "time_ms", "value"], help="Metric for the per-depth table")
    ap.add_argument("--max-depth", type=int, default=None, help="Ignore rows deeper than this")
    ap.add_argument("--position", action="append", default=None, help="Only include this position (repeatable)")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    # Choose CSV
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Cols: {len(df.columns)}")

    cfg = SummaryConfig(
        metric=args.metric,
        max_depth=args.max_depth,
        positions=tuple(args.position) if args.position else None,
    )

    print("\n=== Per-depth summary ===")
    print(depth_table(df, cfg).to_string(index=False))

    print("\n=== Chosen column by depth ===")
    print(position_table(df).to_string())

    print("\n=== Move stability ===")
    print(move_stability(df).to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
