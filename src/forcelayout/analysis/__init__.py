"""
Analysis layer: measurements for display and for checking convergence.

IMPORTANT: This is NOT seen by the simulation. One-way observation only.

- bounding_box / fit_scale: camera transform that fits the layout on screen
- edge_lengths / pairwise_distances: spacing of the layout
- neighbor_angles: how evenly edges are spread around a node
- layout_summary: all of the above in one record
"""

from forcelayout.analysis.layout import (
    LayoutSummary,
    bounding_box,
    fit_scale,
    edge_lengths,
    pairwise_distances,
    neighbor_angles,
    layout_summary,
)

__all__ = [
    "LayoutSummary",
    "bounding_box",
    "fit_scale",
    "edge_lengths",
    "pairwise_distances",
    "neighbor_angles",
    "layout_summary",
]
