from .chart import (
    plot_branching,
    plot_histogram,
    plot_metric_vs_depth,
)

__all__ = [
    "plot_branching",
    "plot_histogram",
    "plot_metric_vs_depth",
]
