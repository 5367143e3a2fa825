"""
Simulation driver: one tick = clear forces, apply enabled forces, integrate.

Forces are applied in a fixed order:
    gravity → charge repulsion → degree repulsion → spring → edge angle

Every force model reads the positions as they were at the start of the
tick; positions only change in the final integration pass.

Two entry points:
- tick(): stateless single step, for callers that own their own loop
- Simulation: explicit context object holding graph, config and policy,
  with a tick counter and a run() loop that can stop on convergence
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
import logging

import numpy as np

from forcelayout.core.config import ForceConstants, SimulationConfig
from forcelayout.core.forces import (
    OptimalLength,
    apply_charge_repulsion,
    apply_degree_repulsion,
    apply_edge_angle_repulsion,
    apply_gravity,
    apply_spring_forces,
    log_optimal_length,
)
from forcelayout.core.graph import as_point
from forcelayout.core.integrator import integrate

if TYPE_CHECKING:
    from forcelayout.core.graph import Graph

logger = logging.getLogger(__name__)


def _apply_forces(
    graph: "Graph",
    config: SimulationConfig,
    center: np.ndarray,
    constants: ForceConstants,
    optimal_length: OptimalLength,
) -> None:
    graph.clear_forces()

    if config.gravity:
        apply_gravity(graph, center, constants)
    if config.charge_repulsion:
        apply_charge_repulsion(graph, constants)
    if config.degree_repulsion:
        apply_degree_repulsion(graph, constants)
    if config.spring_forces:
        apply_spring_forces(graph, constants, optimal_length)
    if config.edge_angle_repulsion:
        apply_edge_angle_repulsion(graph, constants)


def tick(
    graph: "Graph",
    config: SimulationConfig,
    center,
    constants: ForceConstants | None = None,
    optimal_length: OptimalLength | None = None,
) -> None:
    """
    Advance the layout by one step, moving nodes in place.

    Args:
        graph: The graph to lay out
        config: Which forces are enabled
        center: (x, y) point gravity pulls toward
        constants: Force strengths (defaults if None)
        optimal_length: Edge length policy (log(n²) if None)
    """
    center = as_point(center, "center")
    if constants is None:
        constants = ForceConstants()
    if optimal_length is None:
        optimal_length = log_optimal_length

    _apply_forces(graph, config, center, constants, optimal_length)
    integrate(graph, constants)


@dataclass
class Simulation:
    """
    A layout run: the graph plus everything needed to tick it.

    The caller owns the instance and drives it, one step() per frame or
    many at once with run().
    """

    graph: "Graph"
    config: SimulationConfig = field(default_factory=SimulationConfig)
    center: np.ndarray = field(default_factory=lambda: np.zeros(2))
    constants: ForceConstants = field(default_factory=ForceConstants)
    optimal_length: OptimalLength = log_optimal_length

    # Simulation state
    current_tick: int = field(default=0, init=False)
    last_displacement: float = field(default=0.0, init=False)

    def __post_init__(self):
        self.center = as_point(self.center, "center")

    def step(self) -> float:
        """
        Execute one tick.

        Returns:
            Largest node displacement of the tick
        """
        _apply_forces(
            self.graph, self.config, self.center, self.constants, self.optimal_length
        )
        self.last_displacement = integrate(self.graph, self.constants)
        self.current_tick += 1
        return self.last_displacement

    def run(self, n_ticks: int, tolerance: float | None = None) -> dict:
        """
        Run up to n_ticks ticks.

        Args:
            n_ticks: Maximum number of ticks to run
            tolerance: Stop early once the largest displacement in a tick
                       drops below this value (never stops early if None)

        Returns:
            Statistics dictionary
        """
        if n_ticks < 0:
            raise ValueError(f"n_ticks must be non-negative, got {n_ticks}")

        converged = False
        ran = 0
        for _ in range(n_ticks):
            displacement = self.step()
            ran += 1
            if tolerance is not None and displacement < tolerance:
                converged = True
                logger.info(f"Layout converged after {self.current_tick} ticks")
                break

        logger.debug(
            f"Ran {ran} ticks, max displacement {self.last_displacement:.4g}"
        )
        return {
            "n_ticks": ran,
            "current_tick": self.current_tick,
            "max_displacement": self.last_displacement,
            "converged": converged,
        }

    def positions(self) -> np.ndarray:
        """Current node positions, shape [N, 2]."""
        return self.graph.positions()
