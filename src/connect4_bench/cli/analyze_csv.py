from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import branching_factor, decision_agreement, depth_table, numeric_summary, pruning_ratio
from ..plots.chart import plot_histograms, plot_nodes_vs_depth, plot_pruning_ratio


DEFAULT_NUMERIC_PLOTS = ["nodes", "time_ms", "depth_reached"]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze Connect-4 search benchmark CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing search_bench_*.csv")
    ap.add_argument("--pattern", type=str, default="search_bench_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    ap.add_argument("--no-hists", action="store_true", help="Disable histogram generation")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    outdir = Path(args.outdir)

    # Choose CSV
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Cols: {len(df.columns)}")

    print("\n=== Nodes per depth ===")
    print(depth_table(df).to_string(index=False))

    ebf = branching_factor(df)
    if not ebf.empty:
        print("\n=== Effective branching factor (alpha-beta) ===")
        print(ebf.to_string(index=False))

    ratios = None
    if "pruned" in df.columns and "position" in df.columns:
        ratios = pruning_ratio(df)
        if not ratios.empty:
            print("\n=== Pruning ratio (alpha-beta / minimax nodes) ===")
            print(ratios.to_string(index=False))

        agree = decision_agreement(df)
        if not agree.empty:
            same = int((agree["same_column"] & agree["same_score"]).sum())
            print(f"\nPruned vs full decisions identical: {same}/{len(agree)}")

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    plot_nodes_vs_depth(df, outdir, show=args.show)
    if ratios is not None:
        plot_pruning_ratio(ratios, outdir, show=args.show)
    if not args.no_hists:
        plot_histograms(df, outdir, DEFAULT_NUMERIC_PLOTS, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
