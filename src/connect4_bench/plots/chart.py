from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> list[Path]:
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]
    saved: list[Path] = []

    for c in num_cols:
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=30)
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("count")

        path = _finish(fig, outdir, f"hist_{c}.png", show=show)
        if path is not None:
            saved.append(path)

    return saved


def plot_nodes_vs_depth(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """
    Mean nodes visited per depth, one line per search mode, log scale.
    """
    if "depth" not in df.columns or "nodes" not in df.columns:
        return None

    fig = plt.figure()
    if "pruned" in df.columns:
        for flag, label in ((1, "alpha-beta"), (0, "minimax")):
            sub = df[df["pruned"] == flag]
            if sub.empty:
                continue
            means = sub.groupby("depth")["nodes"].mean().sort_index()
            plt.plot(means.index, means.values, marker="o", label=label)
        plt.legend()
    else:
        means = df.groupby("depth")["nodes"].mean().sort_index()
        plt.plot(means.index, means.values, marker="o")

    plt.yscale("log")
    plt.title("Nodes visited vs depth")
    plt.xlabel("depth")
    plt.ylabel("mean nodes (log)")

    return _finish(fig, outdir, "nodes_vs_depth.png", show=show)


def plot_pruning_ratio(ratios: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if ratios.empty or "ratio_mean" not in ratios.columns:
        return None

    fig = plt.figure()
    plt.bar(ratios["depth"].astype(str), ratios["ratio_mean"].astype(float))
    plt.title("Alpha-beta nodes / minimax nodes")
    plt.xlabel("depth")
    plt.ylabel("ratio")
    plt.ylim(0, 1.05)

    return _finish(fig, outdir, "pruning_ratio.png", show=show)
