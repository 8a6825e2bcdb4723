# MIT License (see LICENSE)
"""
Gravitational force model.

Newton's law of universal gravitation between point masses, split into the
scalar magnitude (attraction) and its resolution into equal and opposite
acceleration contributions (apply_force). apply_gravity_pairwise drives both
over every unordered pair of a collection.

All functions are called during the accumulation phase of a step, before any
entity is integrated. Only apply_force and apply_gravity_pairwise modify state,
and only entity.acceleration.

Key concepts:
- Forces are accumulated as accelerations (a = F/m) on each entity.
- The all-pairs sweep is O(N²); entity counts here are tiny and a fixed
  iteration order keeps runs bit-reproducible.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

from ..constants import G as G_DEFAULT
from ..util import mp, real

if TYPE_CHECKING:
    from ..types import Entity

_G = real(G_DEFAULT)


def attraction(a: Entity, b: Entity, G=_G):
    """
    Magnitude of the gravitational force between two entities.

    Implements F = G * m_a * m_b / d², where d² is the squared distance
    between the two positions. The result is symmetric in a and b and always
    attractive.

    Args:
        a: First entity.
        b: Second entity.
        G: Gravitational constant (m³·kg⁻¹·s⁻²).

    Returns:
        Force magnitude in Newtons.

    Raises:
        ValueError: If the entities occupy the same position (d² = 0).
    """
    dx = b.x - a.x
    dy = b.y - a.y
    d_squared = dx * dx + dy * dy
    if d_squared == 0:
        raise ValueError(
            f"Entities coincide at ({a.x}, {a.y}); gravitational force is singular"
        )
    return G * (a.mass * b.mass) / d_squared


def apply_force(entity_1: Entity, entity_2: Entity, force) -> None:
    """
    Resolve a scalar attraction into accelerations on both entities.

    The direction is theta = atan2(dy, dx) with (dx, dy) = p1 - p2, i.e.
    pointing from entity_2 to entity_1. Then f = F(cos θ, sin θ) and
        a1 -= f / m1     (entity_1 pulled toward entity_2)
        a2 += f / m2     (entity_2 pulled toward entity_1)
    so m1·Δa1 + m2·Δa2 = 0 (Newton's third law).

    Args:
        entity_1: First entity (modified in-place).
        entity_2: Second entity (modified in-place).
        force: Force magnitude from attraction().
    """
    dx = entity_1.x - entity_2.x
    dy = entity_1.y - entity_2.y

    theta = mp.atan2(dy, dx)
    f_x = force * mp.cos(theta)
    f_y = force * mp.sin(theta)

    entity_1.acceleration[0] -= f_x / entity_1.mass
    entity_1.acceleration[1] -= f_y / entity_1.mass
    entity_2.acceleration[0] += f_x / entity_2.mass
    entity_2.acceleration[1] += f_y / entity_2.mass


def apply_gravity_pairwise(entities: Sequence[Entity], G=_G) -> None:
    """
    Accumulate mutual gravitational accelerations over all entity pairs.

    Each unordered pair (i, j), j < i, is visited exactly once in a fixed
    order, so repeated runs sum contributions identically.

    Complexity: O(N²) in the number of entities.

    Args:
        entities: Ordered entity collection (accelerations modified in-place).
        G: Gravitational constant.
    """
    for i in range(len(entities)):
        outer = entities[i]
        for j in range(i):
            inner = entities[j]
            force = attraction(outer, inner, G)
            apply_force(inner, outer, force)
