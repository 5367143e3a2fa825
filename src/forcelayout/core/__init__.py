"""
Core layout primitives.

This layer knows NOTHING about canvases, rendering or random graphs.
It only knows:
- Nodes with a position and a force accumulator
- Edges and the adjacency index derived from them
- Mass as a function of degree
- The five force models
- The Euler integrator
- The tick that strings them together
"""

from forcelayout.core.graph import Graph, Node, Edge, build_graph
from forcelayout.core.config import (
    FORCE_ORDER,
    ForceConstants,
    SimulationConfig,
    configure,
    mass,
)
from forcelayout.core.forces import (
    OptimalLength,
    apply_gravity,
    apply_charge_repulsion,
    apply_degree_repulsion,
    apply_spring_forces,
    apply_edge_angle_repulsion,
    area_optimal_length,
    log_optimal_length,
)
from forcelayout.core.integrator import integrate
from forcelayout.core.simulation import Simulation, tick

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "build_graph",
    "FORCE_ORDER",
    "ForceConstants",
    "SimulationConfig",
    "configure",
    "mass",
    "OptimalLength",
    "apply_gravity",
    "apply_charge_repulsion",
    "apply_degree_repulsion",
    "apply_spring_forces",
    "apply_edge_angle_repulsion",
    "area_optimal_length",
    "log_optimal_length",
    "integrate",
    "Simulation",
    "tick",
]
