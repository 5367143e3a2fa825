"""
Graph: the nodes, edges and adjacency index that the forces act on.

The graph stores ONLY layout primitives:
- Node position (2-vector, moved by the integrator every tick)
- Node force accumulator (2-vector, rebuilt by the force models every tick)
- Edges as unordered id pairs, plus the adjacency index derived from them

Mass is NOT stored. It is a pure function of degree (see core.config.mass).

Self-loops and parallel edges are kept as given. A self-loop (a, a) appends
a to its own neighbor list twice, so it counts 2 toward degree.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence
import logging
import numbers

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 800.0
DEFAULT_HEIGHT = 600.0


def as_point(value, name: str) -> np.ndarray:
    """Convert value to a finite float64 2-vector or raise ValueError."""
    vec = np.asarray(value, dtype=np.float64)
    if vec.shape != (2,):
        raise ValueError(f"{name} must be a 2D point, got shape {vec.shape}")
    if not np.all(np.isfinite(vec)):
        raise ValueError(f"{name} must be finite, got {vec.tolist()}")
    return vec.copy()


def check_count(value, name: str) -> int:
    """Validate a non-negative integer count."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return int(value)


@dataclass
class Node:
    """A point in the layout with a position and a force accumulator."""

    id: int
    pos: np.ndarray
    force: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64))

    @property
    def x(self) -> float:
        return float(self.pos[0])

    @property
    def y(self) -> float:
        return float(self.pos[1])


@dataclass(frozen=True)
class Edge:
    """Unordered pair of node ids. Immutable once created."""

    a: int
    b: int

    @property
    def is_self_loop(self) -> bool:
        return self.a == self.b

    def as_tuple(self) -> tuple[int, int]:
        return self.a, self.b


class Graph:
    """
    Nodes, edges and the adjacency index.

    Nodes and edges are only ever added. Node ids are assigned in creation
    order (0, 1, 2, ...) and double as indices into ``nodes``.
    """

    def __init__(self):
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        # node id -> neighbor ids, one entry per edge endpoint
        self._adjacency: dict[int, list[int]] = {}

    # ═══════════════════════════════════════════════════════════════
    # CONSTRUCTION
    # ═══════════════════════════════════════════════════════════════

    def add_node(self, position) -> int:
        """
        Add a node at the given position.

        Args:
            position: (x, y) pair, must be finite

        Returns:
            The new node's id
        """
        node_id = len(self._nodes)
        self._nodes.append(Node(id=node_id, pos=as_point(position, "position")))
        return node_id

    def add_edge(self, id_a: int, id_b: int) -> Edge:
        """
        Add an edge between two existing nodes.

        Both endpoints get each other appended to their neighbor lists, even
        when id_a == id_b.
        """
        id_a = self._check_id(id_a)
        id_b = self._check_id(id_b)

        edge = Edge(id_a, id_b)
        self._edges.append(edge)
        self._adjacency.setdefault(id_a, []).append(id_b)
        self._adjacency.setdefault(id_b, []).append(id_a)
        return edge

    def _check_id(self, node_id) -> int:
        if isinstance(node_id, bool) or not isinstance(node_id, numbers.Integral):
            raise TypeError(f"Node id must be an integer, got {type(node_id).__name__}")
        if not 0 <= node_id < len(self._nodes):
            raise ValueError(f"Unknown node id: {node_id}")
        return int(node_id)

    # ═══════════════════════════════════════════════════════════════
    # ADJACENCY
    # ═══════════════════════════════════════════════════════════════

    def degree(self, node_id: int) -> int:
        """Number of adjacency entries for node_id (0 if it has no edges)."""
        return len(self._adjacency.get(node_id, ()))

    def neighbors(self, node_id: int) -> tuple[int, ...]:
        """Neighbor ids in insertion order, duplicates included."""
        return tuple(self._adjacency.get(node_id, ()))

    def distinct_neighbors(self, node_id: int) -> tuple[int, ...]:
        """
        Neighbor ids de-duplicated in first-seen order.

        The node itself is left out: a self-loop has no direction, so it
        takes no part in angular spacing.
        """
        seen = dict.fromkeys(self._adjacency.get(node_id, ()))
        seen.pop(node_id, None)
        return tuple(seen)

    def degrees(self) -> np.ndarray:
        """Degree of every node, indexed by id."""
        return np.array([self.degree(n.id) for n in self._nodes], dtype=np.int64)

    # ═══════════════════════════════════════════════════════════════
    # STATE ACCESS
    # ═══════════════════════════════════════════════════════════════

    @property
    def nodes(self) -> Sequence[Node]:
        return self._nodes

    @property
    def edges(self) -> Sequence[Edge]:
        return self._edges

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def node(self, node_id: int) -> Node:
        return self._nodes[self._check_id(node_id)]

    def positions(self) -> np.ndarray:
        """Copy of all positions, shape [N, 2]."""
        if not self._nodes:
            return np.zeros((0, 2), dtype=np.float64)
        return np.stack([n.pos for n in self._nodes])

    def forces(self) -> np.ndarray:
        """Copy of all force accumulators, shape [N, 2]."""
        if not self._nodes:
            return np.zeros((0, 2), dtype=np.float64)
        return np.stack([n.force for n in self._nodes])

    def set_positions(self, positions) -> None:
        """Overwrite all positions from an [N, 2] array."""
        positions = np.asarray(positions, dtype=np.float64)
        if positions.shape != (len(self._nodes), 2):
            raise ValueError(
                f"positions must have shape ({len(self._nodes)}, 2), got {positions.shape}"
            )
        if not np.all(np.isfinite(positions)):
            raise ValueError("positions must be finite")
        for node, pos in zip(self._nodes, positions):
            node.pos[:] = pos

    def edge_pairs(self) -> list[tuple[int, int]]:
        """Edge endpoints as (a, b) id tuples."""
        return [e.as_tuple() for e in self._edges]

    def clear_forces(self) -> None:
        """Reset every force accumulator to zero."""
        for node in self._nodes:
            node.force.fill(0.0)


def build_graph(
    node_count: int,
    edge_spec: Iterable[tuple[int, int]] = (),
    positions=None,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    rng: np.random.Generator | None = None,
) -> Graph:
    """
    Build a graph with ids 0..node_count-1 and the given edges.

    Args:
        node_count: Number of nodes
        edge_spec: Iterable of (id_a, id_b) endpoint pairs, added in order
        positions: Optional [node_count, 2] initial positions
        width, height: Area for random placement when positions is None
        rng: Generator for random placement (a fresh one if None)

    Returns:
        The constructed Graph
    """
    node_count = check_count(node_count, "node_count")

    if positions is None:
        if rng is None:
            rng = np.random.default_rng()
        positions = np.column_stack([
            rng.uniform(0.0, width, size=node_count),
            rng.uniform(0.0, height, size=node_count),
        ])
    else:
        positions = np.asarray(positions, dtype=np.float64)
        if positions.shape != (node_count, 2):
            raise ValueError(
                f"positions must have shape ({node_count}, 2), got {positions.shape}"
            )

    graph = Graph()
    for pos in positions:
        graph.add_node(pos)

    for pair in edge_spec:
        try:
            id_a, id_b = pair
        except (TypeError, ValueError):
            raise ValueError(f"Edges must be (id_a, id_b) pairs, got {pair!r}") from None
        graph.add_edge(id_a, id_b)

    logger.debug(f"Built graph with {graph.node_count} nodes and {graph.edge_count} edges")
    return graph
