# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force model: attraction, apply_force, apply_gravity_pairwise.
    - Integrator: semi-implicit Euler.
    - Invariants: momentum, energy and centre of mass diagnostics.

Typical usage:
    from gravity_sim.core import apply_gravity_pairwise

    apply_gravity_pairwise(entities)
    for e in entities:
        e.update(dt)
"""
from .forces import attraction, apply_force, apply_gravity_pairwise
from .integrators import semi_implicit_euler_step
from .invariants import (
    total_mass,
    linear_momentum,
    center_of_mass,
    kinetic_energy,
    potential_energy,
    total_energy,
)

__all__ = [
    # Forces
    "attraction",
    "apply_force",
    "apply_gravity_pairwise",
    # Integrators
    "semi_implicit_euler_step",
    # Invariants
    "total_mass",
    "linear_momentum",
    "center_of_mass",
    "kinetic_energy",
    "potential_energy",
    "total_energy",
]
