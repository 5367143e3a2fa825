"""
Draw a layout with matplotlib.

Nodes are circles whose diameter equals their mass, edges are straight
lines between endpoints. Given a canvas size, the drawing is shrunk about
the canvas center so the whole layout fits (see analysis.fit_scale).
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from forcelayout.analysis.layout import fit_scale
from forcelayout.core.config import ForceConstants

if TYPE_CHECKING:
    from forcelayout.core.graph import Graph


def plot_layout(
    graph: "Graph",
    constants: ForceConstants | None = None,
    width: float | None = None,
    height: float | None = None,
    title: str = "Graph Layout",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 6),
    node_color: str = "black",
    edge_color: str = "black",
    edge_width: float = 0.8,
) -> tuple[Figure, Axes]:
    """
    Plot nodes and edges of a graph.

    Args:
        graph: Graph to draw
        constants: Mass coefficients for node sizes (defaults if None)
        width, height: Canvas size. When both are given the view is fixed
                       to the canvas and the layout is scaled to fit.
        title: Plot title
        ax: Existing axes (creates new if None)
        node_color: Fill color of node circles
        edge_color: Edge line color
        edge_width: Edge line width

    Returns:
        (fig, ax) tuple
    """
    if constants is None:
        constants = ForceConstants()

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    pos = graph.positions()
    scale = 1.0
    canvas = width is not None and height is not None
    if canvas:
        scale = fit_scale(graph, width, height)
        mid = np.array([width / 2, height / 2])
        pos = mid + (pos - mid) * scale

    # Edges
    if graph.edge_count:
        segments = [(pos[a], pos[b]) for a, b in graph.edge_pairs()]
        ax.add_collection(
            LineCollection(segments, colors=edge_color, linewidths=edge_width, zorder=1)
        )

    # Nodes, drawn over edges
    if graph.node_count:
        circles = [
            Circle(p, radius=constants.mass(d) * scale / 2)
            for p, d in zip(pos, graph.degrees())
        ]
        ax.add_collection(
            PatchCollection(circles, facecolor=node_color, edgecolor="none", zorder=2)
        )

    if canvas:
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)  # Screen coordinates: y grows downward
    else:
        ax.autoscale_view()

    ax.set_aspect("equal")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    return fig, ax


def plot_convergence(
    displacements: Sequence[float],
    title: str = "Layout Convergence",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 4),
) -> tuple[Figure, Axes]:
    """Plot the largest node displacement per tick on a log scale."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    values = np.asarray(displacements, dtype=np.float64)
    ax.plot(np.arange(1, len(values) + 1), values, color="tab:blue", linewidth=1.5)
    if len(values) and np.all(values > 0):
        ax.set_yscale("log")

    ax.set_title(title)
    ax.set_xlabel("Tick")
    ax.set_ylabel("Max displacement")
    ax.grid(True, alpha=0.3)

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
