"""
Integrator: turns each node's accumulated force into motion.

First-order Euler step with unit timestep:
    velocity = force / mass(degree)
    pos += velocity

No velocity is carried between ticks, so there is no momentum. Mass is
recomputed from the current degree on every call.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from forcelayout.core.config import ForceConstants

if TYPE_CHECKING:
    from forcelayout.core.graph import Graph


def integrate(graph: "Graph", constants: ForceConstants) -> float:
    """
    Move every node by force / mass.

    Args:
        graph: Graph whose force accumulators are filled for this tick
        constants: Supplies the mass coefficients

    Returns:
        Largest displacement of any node this step (0.0 for an empty graph)
    """
    max_step = 0.0
    for node in graph.nodes:
        velocity = node.force / constants.mass(graph.degree(node.id))
        node.pos += velocity
        max_step = max(max_step, float(np.hypot(velocity[0], velocity[1])))
    return max_step
