from .chart import (
    plot_histograms,
    plot_nodes_vs_depth,
    plot_pruning_ratio,
)

__all__ = [
    "plot_histograms",
    "plot_nodes_vs_depth",
    "plot_pruning_ratio",
]
