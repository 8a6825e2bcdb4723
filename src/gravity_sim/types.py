# MIT License (see LICENSE)
"""
Core type definitions for the gravity simulation.

Defines Entity, a point mass in the plane. The equations of motion follow
standard Newtonian mechanics:
  - dx/dt = v
  - dv/dt = a,  a = Σ F/m accumulated from every other entity

All scalar state lives at working precision (see util.py).
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .core.integrators import semi_implicit_euler_step
from .util import mp, real, vec, zeros


@dataclass(eq=False)
class Entity:
    """
    A point mass with kinematic state and an acceleration accumulator.

    Attributes:
        mass: Mass in kg. Must be finite and > 0; immutable once constructed.
        position: Position [x, y] in meters.
        velocity: Velocity [vx, vy] in m/s.
        acceleration: Accumulated acceleration [ax, ay] in m/s² (cleared
                      after every update).

    Note:
        Vectors are converted to working-precision numpy arrays on init.
        During a step the force model adds into acceleration; update() then
        integrates and clears it, so acceleration is zero whenever a new
        accumulation phase begins.

    Raises:
        ValueError: If mass is not a finite positive number.
    """
    mass: object
    position: np.ndarray | tuple = (0, 0)
    velocity: np.ndarray | tuple = (0, 0)
    acceleration: np.ndarray = field(default_factory=zeros)

    def __post_init__(self) -> None:
        """Validate mass and convert vectors to working precision."""
        mass = real(self.mass)
        if not mp.isfinite(mass) or mass <= 0:
            raise ValueError(f"Entity mass must be finite and positive, got {self.mass!r}")
        object.__setattr__(self, "mass", mass)
        self.position = vec(self.position)
        self.velocity = vec(self.velocity)
        self.acceleration = vec(self.acceleration)

    def __setattr__(self, name: str, value) -> None:
        if name == "mass" and "mass" in self.__dict__:
            raise AttributeError("Entity mass is immutable")
        super().__setattr__(name, value)

    @property
    def x(self):
        return self.position[0]

    @property
    def y(self):
        return self.position[1]

    @property
    def v_x(self):
        return self.velocity[0]

    @property
    def v_y(self):
        return self.velocity[1]

    @property
    def a_x(self):
        return self.acceleration[0]

    @property
    def a_y(self):
        return self.acceleration[1]

    def clear_acceleration(self) -> None:
        """Reset accumulated acceleration to zero for the next step."""
        self.acceleration[:] = mp.zero

    def update(self, dt) -> None:
        """
        Advance this entity by one time step and clear its accumulator.

        Velocity is advanced first and position uses the new velocity
        (semi-implicit Euler). Swapping the two updates would turn this into
        explicit Euler, which drifts in energy.

        Args:
            dt: Time step in seconds (> 0).
        """
        semi_implicit_euler_step(self, dt)
        self.clear_acceleration()
