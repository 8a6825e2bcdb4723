# MIT License (see LICENSE)
"""
Numerical integrator for point-mass dynamics.

Solves the equations of motion
    dx/dt = v,         dv/dt = a
with a fixed step using semi-implicit (symplectic) Euler:
    v(t+dt) = v(t) + a(t)*dt
    x(t+dt) = x(t) + v(t+dt)*dt

Being symplectic, the scheme keeps energy error bounded over long runs
instead of letting it grow secularly as explicit Euler does.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
from typing import TYPE_CHECKING

from ..util import real

if TYPE_CHECKING:
    from ..types import Entity


def semi_implicit_euler_step(entity: Entity, dt) -> None:
    """
    Advance entity state by dt using semi-implicit Euler.

    The accumulated acceleration is held constant over the step. This does
    not clear the accumulator; Entity.update() does that afterwards.

    Args:
        entity: Entity to integrate (modified in-place).
        dt: Timestep in seconds.
    """
    dt = real(dt)
    entity.velocity += entity.acceleration * dt
    entity.position += entity.velocity * dt
