# MIT License (see LICENSE)
import pytest
from gravity_sim.types import Entity
from gravity_sim.util import real


def test_update_order_semi_implicit():
    """
    One semi-implicit Euler step from rest with a = (2, 0), dt = 1:
      v' = v + a dt     = (2, 0)
      x' = x + v' dt    = (2, 0)   (explicit Euler would give x' = 0)
      a' = 0
    """
    e = Entity(mass=1, position=(0, 0), velocity=(0, 0), acceleration=(2, 0))
    e.update(1)

    assert (e.v_x, e.v_y) == (2, 0)
    assert (e.x, e.y) == (2, 0), "Position must use the updated velocity"
    assert (e.a_x, e.a_y) == (0, 0), "Acceleration must be cleared after update"


def test_update_fractional_dt():
    """x' = x + (v + a dt) dt with dt = 0.01 in exact decimal."""
    e = Entity(mass=3, position=(1, -1), velocity=(0.5, 0), acceleration=(0, 10))
    e.update("0.01")

    assert e.v_x == real("0.5")
    assert abs(e.v_y - real("0.1")) < real("1e-48")
    assert abs(e.x - real("1.005")) < real("1e-48")
    assert abs(e.y - real("-0.999")) < real("1e-48")


def test_new_entity_at_rest():
    e = Entity(mass=2, position=(1, 1))
    assert (e.v_x, e.v_y) == (0, 0)
    assert (e.a_x, e.a_y) == (0, 0)
    assert e.mass == 2


@pytest.mark.parametrize("mass", [0, -1, "-0.5", "inf", "nan"])
def test_invalid_mass_rejected(mass):
    with pytest.raises(ValueError, match="mass"):
        Entity(mass=mass, position=(0, 0))


def test_mass_is_immutable():
    e = Entity(mass=1, position=(0, 0))
    with pytest.raises(AttributeError):
        e.mass = 5
    assert e.mass == 1


def test_vector_must_be_2d():
    with pytest.raises(ValueError):
        Entity(mass=1, position=(0, 0, 0))


def test_decimal_strings_keep_precision():
    """Decimal strings are parsed at full precision, not through a float."""
    e = Entity(mass="0.1", position=("0.1", 0))
    assert e.mass == real("0.1")
    assert e.mass != real(0.1)
