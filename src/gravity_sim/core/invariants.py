# MIT License (see LICENSE)
"""
Conserved quantities of a gravitating system.

Used for verifying simulation correctness. With only internal gravitational
forces, total linear momentum is conserved exactly by the force model (up to
rounding) and total energy is conserved up to the bounded oscillation of the
symplectic integrator.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import numpy as np

from ..constants import G as G_DEFAULT
from ..util import mp, real, norm, norm2, zeros

if TYPE_CHECKING:
    from ..types import Entity

_G = real(G_DEFAULT)


def total_mass(entities: Sequence[Entity]):
    """Sum of all entity masses."""
    return mp.fsum(e.mass for e in entities)


def linear_momentum(entities: Sequence[Entity]) -> np.ndarray:
    """
    Calculate the total linear momentum of a system.

    P = Σ (m * v)

    Returns:
        Total momentum vector [Px, Py] in kg·m/s.
    """
    p = zeros()
    for e in entities:
        p += e.velocity * e.mass
    return p


def center_of_mass(entities: Sequence[Entity]) -> np.ndarray:
    """Mass-weighted mean position [x, y]."""
    r = zeros()
    for e in entities:
        r += e.position * e.mass
    return r / total_mass(entities)


def kinetic_energy(entities: Sequence[Entity]):
    """
    Calculate the total kinetic energy.

    T = Σ 0.5 * m * v²
    """
    return mp.fsum(e.mass * norm2(e.velocity) / 2 for e in entities)


def potential_energy(entities: Sequence[Entity], G=_G):
    """
    Calculate the total gravitational potential energy.

    U = -Σ_{i<j} G * m_i * m_j / |r_i - r_j|

    Raises:
        ValueError: If two entities occupy the same position.
    """
    terms = []
    for i in range(len(entities)):
        for j in range(i):
            a, b = entities[i], entities[j]
            d = norm(a.position - b.position)
            if d == 0:
                raise ValueError(
                    f"Entities coincide at ({a.x}, {a.y}); gravitational potential is singular"
                )
            terms.append(-G * (a.mass * b.mass) / d)
    return mp.fsum(terms)


def total_energy(entities: Sequence[Entity], G=_G):
    """Kinetic plus potential energy (E = T + U)."""
    return kinetic_energy(entities) + potential_energy(entities, G)
