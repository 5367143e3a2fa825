"""
Simulation configuration: which forces run, and how strong they are.

Two frozen dataclasses, both validated once at construction:
- SimulationConfig: one boolean toggle per force model
- ForceConstants: tunable strengths and the mass coefficients

Mass is a pure function of degree: mass = mass_per_degree * degree + base_mass.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
import math


# Tick order. Every enabled force is applied in this sequence.
FORCE_ORDER = (
    "gravity",
    "charge_repulsion",
    "degree_repulsion",
    "spring_forces",
    "edge_angle_repulsion",
)


@dataclass(frozen=True)
class SimulationConfig:
    """Force toggles for a run. Each one is honored as given."""

    gravity: bool = True
    charge_repulsion: bool = True
    degree_repulsion: bool = True
    spring_forces: bool = True
    edge_angle_repulsion: bool = True

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise TypeError(
                    f"{f.name} must be a bool, got {type(value).__name__}"
                )

    def enabled_forces(self) -> list[str]:
        """Names of the enabled forces, in tick order."""
        return [name for name in FORCE_ORDER if getattr(self, name)]


def configure(**toggles: bool) -> SimulationConfig:
    """
    Factory for a SimulationConfig.

    Unspecified toggles default to enabled. Unknown names raise TypeError.
    """
    return SimulationConfig(**toggles)


@dataclass(frozen=True)
class ForceConstants:
    """Strengths of the force models and the mass coefficients."""

    gravity_constant: float = 0.9  # Pull toward the center per unit distance
    repulsion_constant: float = 1100.0  # Charge repulsion numerator
    degree_force_constant: float = 0.25  # Hub-to-hub repulsion scale
    edge_angle_constant: float = 0.1  # Fraction of angular error corrected per tick

    # mass = mass_per_degree * degree + base_mass
    mass_per_degree: float = 4.0
    base_mass: float = 4.0

    # Pairwise distances are clamped to at least this value
    min_distance: float = 1.0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{f.name} must be a number, got {type(value).__name__}")
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value}")
            if value < 0:
                raise ValueError(f"{f.name} must be non-negative, got {value}")

        if self.base_mass <= 0:
            raise ValueError(f"base_mass must be positive, got {self.base_mass}")
        if self.min_distance <= 0:
            raise ValueError(f"min_distance must be positive, got {self.min_distance}")

    def mass(self, degree: int) -> float:
        """Mass of a node with the given degree."""
        return mass(degree, self.mass_per_degree, self.base_mass)


def mass(degree: int, mass_per_degree: float = 4.0, base_mass: float = 4.0) -> float:
    """
    Mass of a node from its degree.

    Args:
        degree: Adjacency entry count, must be >= 0
        mass_per_degree: Mass added per edge endpoint
        base_mass: Mass of an isolated node, must be > 0

    Returns:
        mass_per_degree * degree + base_mass (always > 0)
    """
    if degree < 0:
        raise ValueError(f"degree must be non-negative, got {degree}")
    if base_mass <= 0 or mass_per_degree < 0:
        raise ValueError(
            f"mass coefficients must satisfy base_mass > 0 and mass_per_degree >= 0, "
            f"got base_mass={base_mass}, mass_per_degree={mass_per_degree}"
        )
    return mass_per_degree * degree + base_mass
