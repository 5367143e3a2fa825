"""
Force models: each one reads node positions and adds into node.force.

Five independent contributors:
- apply_gravity: pull toward a center point
- apply_charge_repulsion: every pair repels, stronger when closer
- apply_degree_repulsion: high-degree pairs repel more (spreads out hubs)
- apply_spring_forces: edges pulled/pushed toward an optimal length
- apply_edge_angle_repulsion: edges around a node spread to even angles

All models are ADDITIVE. None of them resets an accumulator and none of
them moves a node; the integrator does that after every model has run.

Degenerate geometry never raises:
- Pairwise distances are clamped to ForceConstants.min_distance
- Exactly coincident nodes are pushed apart along the x axis
- Zero-length edges (self-loops) produce no spring force
- Nodes with fewer than two distinct neighbors get no angle correction
"""

from __future__ import annotations
from typing import Protocol, TYPE_CHECKING
import math

import numpy as np

from forcelayout.core.config import ForceConstants

if TYPE_CHECKING:
    from forcelayout.core.graph import Graph


class OptimalLength(Protocol):
    """Policy giving the target edge length for a graph of n nodes."""

    def __call__(self, node_count: int) -> float:
        ...


def log_optimal_length(node_count: int) -> float:
    """
    Default policy: L = log(n²).

    Grows slowly with graph size. Graphs with 0 or 1 node get 0.
    """
    if node_count <= 1:
        return 0.0
    return math.log(node_count * node_count)


def area_optimal_length(width: float, height: float, scale: float = 1.0) -> OptimalLength:
    """
    Policy factory: L = scale * sqrt(width * height / n).

    Each node gets an equal share of the canvas area, so larger graphs get
    proportionally shorter edges.

    Args:
        width, height: Canvas size, must be positive
        scale: Multiplier on the per-node length

    Returns:
        An OptimalLength callable
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")

    area = float(width) * float(height)

    def policy(node_count: int) -> float:
        if node_count <= 0:
            return 0.0
        return scale * math.sqrt(area / node_count)

    return policy


def _rotate(vec: np.ndarray, angle: float) -> np.ndarray:
    """Rotate a 2-vector counter-clockwise by angle (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([vec[0] * c - vec[1] * s, vec[0] * s + vec[1] * c])


def pairwise_directions(
    positions: np.ndarray, min_distance: float
) -> tuple[np.ndarray, np.ndarray]:
    """
    Unit directions and clamped distances between every pair of nodes.

    Args:
        positions: Node positions, shape [N, 2]
        min_distance: Lower bound applied to distances

    Returns:
        (unit, dist) where unit[i, j] points from node j to node i (shape
        [N, N, 2]) and dist[i, j] = max(|p_i - p_j|, min_distance). The
        diagonal of unit is zero. unit[i, j] == -unit[j, i] exactly.
    """
    diff = positions[:, np.newaxis, :] - positions[np.newaxis, :, :]  # (n, n, 2)
    dist = np.sqrt(np.sum(diff ** 2, axis=2))  # (n, n)

    unit = np.zeros_like(diff)
    apart = dist > 0
    unit[apart] = diff[apart] / dist[apart][:, np.newaxis]

    # Coincident pairs: lower id pushed toward +x, higher id toward -x
    coincident = ~apart
    unit[np.triu(coincident, k=1)] = (1.0, 0.0)
    unit[np.tril(coincident, k=-1)] = (-1.0, 0.0)

    return unit, np.maximum(dist, min_distance)


# ═══════════════════════════════════════════════════════════════
# FORCE MODELS
# ═══════════════════════════════════════════════════════════════


def apply_gravity(graph: "Graph", center, constants: ForceConstants) -> None:
    """
    Pull every node toward center.

    F(n) += -gravity_constant * (pos(n) - center)
    """
    center = np.asarray(center, dtype=np.float64)
    k = constants.gravity_constant
    for node in graph.nodes:
        node.force -= k * (node.pos - center)


def apply_charge_repulsion(graph: "Graph", constants: ForceConstants) -> None:
    """
    Repel every unordered pair of distinct nodes.

    For d = pos(i) - pos(j): F = repulsion_constant * d / |d|², added to i and
    subtracted from j. Distances are clamped to min_distance.
    """
    if graph.node_count < 2:
        return

    unit, dist = pairwise_directions(graph.positions(), constants.min_distance)
    magnitude = constants.repulsion_constant / dist
    totals = np.sum(unit * magnitude[:, :, np.newaxis], axis=1)

    for node, total in zip(graph.nodes, totals):
        node.force += total


def apply_degree_repulsion(graph: "Graph", constants: ForceConstants) -> None:
    """
    Repel pairs in proportion to the product of their degrees.

    k = degree_force_constant * (deg(i)+1) * (deg(j)+1) / |d|, applied along d.
    The magnitude therefore does not depend on distance, only on degree.
    """
    if graph.node_count < 2:
        return

    unit, _ = pairwise_directions(graph.positions(), constants.min_distance)
    weight = graph.degrees().astype(np.float64) + 1.0
    magnitude = constants.degree_force_constant * np.outer(weight, weight)
    totals = np.sum(unit * magnitude[:, :, np.newaxis], axis=1)

    for node, total in zip(graph.nodes, totals):
        node.force += total


def apply_spring_forces(
    graph: "Graph",
    constants: ForceConstants,
    optimal_length: OptimalLength = log_optimal_length,
) -> None:
    """
    Push or pull each edge's endpoints toward the optimal edge length.

    correction = (dist - L) / max(|L|, dist), which stays in [-1, 1):
    a positive correction (edge too long) pulls the endpoints together, a
    negative one pushes them apart.
    """
    target = float(optimal_length(graph.node_count))
    nodes = graph.nodes

    for edge in graph.edges:
        node_a = nodes[edge.a]
        node_b = nodes[edge.b]
        d = node_a.pos - node_b.pos
        dist = float(np.hypot(d[0], d[1]))

        scale = max(abs(target), dist)
        if scale == 0.0:
            continue

        correction = (dist - target) / scale
        node_a.force -= correction * d
        node_b.force += correction * d


def apply_edge_angle_repulsion(graph: "Graph", constants: ForceConstants) -> None:
    """
    Spread the edges around each node toward even angular spacing.

    For a node c with k >= 2 distinct neighbors the target angle is 2π/k.
    For each pair (a, b) of its neighbors, with angle θ between c→a and c→b:

        correction = edge_angle_constant * (2π/k - θ)

    c→a is rotated by correction away from b, and c→b away from a. Each
    neighbor receives the displacement from its position to its rotated
    position. Both ends of a pair are corrected, so the update is symmetric.
    """
    k = constants.edge_angle_constant
    nodes = graph.nodes

    for central in nodes:
        adjacent = graph.distinct_neighbors(central.id)
        if len(adjacent) < 2:
            continue

        optimal_angle = 2 * math.pi / len(adjacent)

        for i, a in enumerate(adjacent):
            node_a = nodes[a]
            to_a = node_a.pos - central.pos
            if not np.any(to_a):
                continue

            for b in adjacent[i + 1:]:
                node_b = nodes[b]
                to_b = node_b.pos - central.pos
                if not np.any(to_b):
                    continue

                cross = to_a[0] * to_b[1] - to_a[1] * to_b[0]
                dot = to_a[0] * to_b[0] + to_a[1] * to_b[1]
                angle = math.atan2(abs(cross), dot)  # [0, π]

                correction = k * (optimal_angle - angle)
                # b counter-clockwise of a (or collinear): a turns clockwise
                side = 1.0 if cross >= 0 else -1.0

                node_a.force += _rotate(to_a, -side * correction) - to_a
                node_b.force += _rotate(to_b, side * correction) - to_b
