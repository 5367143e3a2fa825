"""
Visualization utilities.

- Layout drawings (edges as lines, nodes as circles sized by mass)
- Convergence plots (largest displacement per tick)
"""

from forcelayout.viz.layout import (
    plot_layout,
    plot_convergence,
    save_figure,
)

__all__ = [
    "plot_layout",
    "plot_convergence",
    "save_figure",
]
