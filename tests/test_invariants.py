# MIT License (see LICENSE)
import pytest
from gravity_sim.core.invariants import (
    center_of_mass,
    kinetic_energy,
    linear_momentum,
    potential_energy,
    total_energy,
    total_mass,
)
from gravity_sim.simulation import reference_entities
from gravity_sim.types import Entity
from gravity_sim.util import mp, real

TOL = real("1e-45")


def test_momentum_and_kinetic_energy():
    """
    P = Σ m v = 1·(3, 0) + 2·(-1, 2) = (1, 4)
    T = Σ ½ m v² = ½·1·9 + ½·2·5 = 9.5
    """
    bodies = [
        Entity(mass=1, position=(0, 0), velocity=(3, 0)),
        Entity(mass=2, position=(1, 0), velocity=(-1, 2)),
    ]
    p = linear_momentum(bodies)
    assert (p[0], p[1]) == (1, 4)
    assert kinetic_energy(bodies) == real("9.5")


def test_reference_system_quantities():
    """
    Reference bodies A(1; -1,0), B(1; 1,0), C(2; 1,1):
      M = 4, r_cm = (1/4)(-1 + 1 + 2, 0 + 0 + 2) = (0.5, 0.5)
      U = -G (1·1/2 + 1·2/√5 + 1·2/1)
    """
    bodies = reference_entities()
    assert total_mass(bodies) == 4

    r = center_of_mass(bodies)
    assert (r[0], r[1]) == (real("0.5"), real("0.5"))

    u = potential_energy(bodies, G=1)
    expected = -(real("0.5") + 2 / mp.sqrt(5) + 2)
    assert abs(u - expected) < TOL
    assert kinetic_energy(bodies) == 0
    assert total_energy(bodies, G=1) == u


def test_potential_energy_coincident_raises():
    bodies = [
        Entity(mass=1, position=(2, 3)),
        Entity(mass=4, position=(2, 3)),
    ]
    with pytest.raises(ValueError, match="coincide"):
        potential_energy(bodies)
