# MIT License (see LICENSE)
"""
gravity_sim - A 2D Newtonian N-body gravity simulator.

Point masses attract each other pairwise under Newton's law of universal
gravitation and are advanced with fixed-step semi-implicit Euler. All
arithmetic runs at 50 significant decimal digits (mpmath), so long runs keep
rounding error far below the reported digits.

Main entry points:
    - Simulation: The driver owning the entities and the run loop.
    - SimulationConfig: Immutable run parameters.
    - Entity: A point mass with position, velocity and acceleration.
    - reference_entities: The fixed three-body initial configuration.

Submodules:
    - core: Force model, integrator and conserved-quantity diagnostics.
    - report: Report formatting and output adapters.
    - cli: Command-line entry point (also `python -m gravity_sim`).

Example:
    from gravity_sim import Simulation, SimulationConfig, reference_entities

    sim = Simulation(SimulationConfig(total_steps=1000), reference_entities())
    sim.run()
"""
from .types import Entity
from .config import SimulationConfig
from .simulation import Simulation, reference_entities

__all__ = [
    # Simulation
    "Simulation",
    "SimulationConfig",
    "reference_entities",
    # Bodies
    "Entity",
]
