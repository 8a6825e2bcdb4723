# MIT License (see LICENSE)
"""
Text serialization of simulation snapshots.

Each entity is rendered as

    p<x>,<y>, v<speed>∠<angle>

where speed = |v| and angle = atan2(vy, vx) in degrees counter-clockwise
from +x. A report line joins all entities with two spaces, in collection
order.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

from ..constants import DEFAULT_REPORT_DIGITS
from ..util import mp, norm, heading_deg

if TYPE_CHECKING:
    from ..types import Entity

ENTITY_SEPARATOR = "  "


def format_real(x, digits: int = DEFAULT_REPORT_DIGITS) -> str:
    """
    Render a scalar with `digits` significant digits in general notation.

    Fixed notation is used for decimal exponents in [-4, digits), scientific
    otherwise. Trailing zeros are dropped, so whole numbers print without a
    decimal point (2 -> "2", 0 -> "0").
    """
    s = mp.nstr(x, digits, min_fixed=-5, max_fixed=digits)
    mantissa, sep, exponent = s.partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    return mantissa + sep + exponent


def format_entity(entity: Entity, digits: int = DEFAULT_REPORT_DIGITS) -> str:
    """Render one entity as p<x>,<y>, v<speed>∠<angle>."""
    speed = norm(entity.velocity)
    angle = heading_deg(entity.velocity)
    return (
        f"p{format_real(entity.x, digits)},{format_real(entity.y, digits)}"
        f", v{format_real(speed, digits)}∠{format_real(angle, digits)}"
    )


def format_report(entities: Sequence[Entity], digits: int = DEFAULT_REPORT_DIGITS) -> str:
    """Render a whole collection as one report line (no trailing newline)."""
    return ENTITY_SEPARATOR.join(format_entity(e, digits) for e in entities)
