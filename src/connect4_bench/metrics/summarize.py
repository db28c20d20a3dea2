from __future__ import annotations

import pandas as pd


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def depth_table(df: pd.DataFrame) -> pd.DataFrame:
    """
    Node counts and timings per (depth, pruned).
    """
    _require_cols(df, ["depth", "nodes"])

    keys = ["depth", "pruned"] if "pruned" in df.columns else ["depth"]
    agg = {"nodes": ["count", "mean", "median", "max"]}
    if "time_ms" in df.columns:
        agg["time_ms"] = ["mean", "max"]

    out = df.groupby(keys).agg(agg)
    out.columns = ["_".join(c) for c in out.columns]
    out = out.rename(columns={"nodes_count": "runs"})
    return out.reset_index()


def paired_runs(df: pd.DataFrame) -> pd.DataFrame:
    """
    Join each pruned run with the unpruned run of the same position and
    depth. Overlapping columns get _pruned / _full suffixes.
    """
    _require_cols(df, ["position", "depth", "pruned", "nodes"])

    keys = ["position", "depth"]
    pruned = df[df["pruned"] == 1].drop(columns=["pruned"]).set_index(keys)
    full = df[df["pruned"] == 0].drop(columns=["pruned"]).set_index(keys)
    joined = pruned.join(full, lsuffix="_pruned", rsuffix="_full", how="inner")
    return joined.reset_index()


def pruning_ratio(df: pd.DataFrame) -> pd.DataFrame:
    """
    Fraction of the full minimax tree that alpha-beta visited, per depth
    (1.0 = no savings).
    """
    pairs = paired_runs(df)
    if pairs.empty:
        return pd.DataFrame(columns=["depth", "ratio_mean", "ratio_min", "ratio_max"])

    pairs["ratio"] = pairs["nodes_pruned"] / pairs["nodes_full"]
    out = pairs.groupby("depth")["ratio"].agg(["mean", "min", "max"])
    out.columns = ["ratio_mean", "ratio_min", "ratio_max"]
    return out.reset_index()


def decision_agreement(df: pd.DataFrame) -> pd.DataFrame:
    """
    Per paired run: did pruning keep the same column and score?
    """
    pairs = paired_runs(df)
    if pairs.empty:
        return pd.DataFrame(columns=["position", "depth", "same_column", "same_score"])

    def _same(a: pd.Series, b: pd.Series) -> pd.Series:
        return (a == b) | (a.isna() & b.isna())

    pairs["same_column"] = _same(pairs["column_pruned"], pairs["column_full"])
    pairs["same_score"] = _same(pairs["score_pruned"], pairs["score_full"])
    return pairs[["position", "depth", "same_column", "same_score"]]


def branching_factor(df: pd.DataFrame, pruned: bool = True) -> pd.DataFrame:
    """
    Mean nodes per depth and the growth from one depth to the next
    (effective branching factor).
    """
    _require_cols(df, ["depth", "nodes"])

    sub = df
    if "pruned" in df.columns:
        sub = df[df["pruned"] == int(pruned)]

    mean_nodes = sub.groupby("depth")["nodes"].mean().sort_index()
    out = mean_nodes.to_frame("mean_nodes")
    out["ebf"] = mean_nodes / mean_nodes.shift(1)
    return out.reset_index()


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    desc = num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
    return desc
