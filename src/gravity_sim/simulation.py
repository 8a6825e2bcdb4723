# MIT License (see LICENSE)
"""
The simulation driver.

The Simulation class owns the entity collection and the run loop:
    1. Force accumulation over all entity pairs.
    2. Semi-implicit Euler integration of every entity (which also clears
       its acceleration).
    3. Periodic reports through a Reporter.

Structure:
    - Build a Simulation from a SimulationConfig and entities
      (reference_entities() gives the standard three-body setup).
    - Call run(reporter) for a whole run, or step() for single steps.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .config import SimulationConfig
from .core.forces import apply_gravity_pairwise
from .core.invariants import linear_momentum, total_energy
from .report.adapter import Reporter, StreamReporter
from .report.format import format_report
from .types import Entity
from .util import norm, real

logger = logging.getLogger(__name__)


def reference_entities() -> list[Entity]:
    """
    The fixed initial configuration: three bodies at rest.

        mass 1 at (-1, 0), mass 1 at (1, 0), mass 2 at (1, 1)
    """
    return [
        Entity(mass=1, position=(-1, 0)),
        Entity(mass=1, position=(1, 0)),
        Entity(mass=2, position=(1, 1)),
    ]


@dataclass
class Simulation:
    """
    Fixed-step N-body gravity simulation.

    Attributes:
        config: Immutable run parameters (G, dt, run length, report cadence).
        entities: Ordered entity collection. Order fixes pair iteration and
                  report order; it is frozen once stepping starts.
        step_count: Number of steps completed.
        time: Simulated time elapsed in seconds.
    """
    config: SimulationConfig = field(default_factory=SimulationConfig)
    entities: list[Entity] = field(default_factory=list)
    step_count: int = 0
    time: object = 0

    def __post_init__(self) -> None:
        self.entities = list(self.entities)
        self.time = real(self.time)

    def add_entity(self, entity: Entity) -> int:
        """
        Append an entity to the collection.

        Returns:
            The entity's index in the collection.

        Raises:
            RuntimeError: If the simulation has already been stepped.
        """
        if self.step_count > 0:
            raise RuntimeError("Cannot add entities after the simulation has started")
        self.entities.append(entity)
        return len(self.entities) - 1

    def _apply_forces(self) -> None:
        """Accumulate pairwise gravitational accelerations."""
        apply_gravity_pairwise(self.entities, self.config.G)

    def _integrate(self) -> None:
        """Advance every entity by dt and clear its accumulator."""
        dt = self.config.dt
        for e in self.entities:
            e.update(dt)

    def step(self) -> None:
        """Advance the simulation by one step of width config.dt."""
        self._apply_forces()
        self._integrate()
        self.step_count += 1
        self.time += self.config.dt

    def report(self) -> str:
        """Current snapshot as a report line."""
        return format_report(self.entities, self.config.report_digits)

    def _emit(self, reporter: Reporter) -> None:
        line = self.report()
        logger.debug("report at step %d: %s", self.step_count, line)
        reporter.emit(self.step_count, line)

    def run(self, reporter: Reporter | None = None) -> int:
        """
        Execute config.total_steps steps, reporting along the way.

        A report is emitted before the first step, after every step whose
        zero-based index is a multiple of config.steps_per_report, and after
        the final step.

        Args:
            reporter: Destination of report lines (default: stdout).

        Returns:
            Number of report lines emitted.
        """
        reporter = reporter if reporter is not None else StreamReporter()
        cfg = self.config
        logger.info(
            "running %d entities for %d steps (dt=%s, report every %d steps)",
            len(self.entities), cfg.total_steps, cfg.dt, cfg.steps_per_report,
        )
        track_energy = logger.isEnabledFor(logging.DEBUG)
        energy_0 = total_energy(self.entities, cfg.G) if track_energy else None

        self._emit(reporter)
        emitted = 1
        for i in range(cfg.total_steps):
            self.step()
            if cfg.is_report_step(i):
                self._emit(reporter)
                emitted += 1

        self._emit(reporter)
        emitted += 1
        reporter.flush()

        logger.info("finished after %d steps, t=%s s", self.step_count, self.time)
        if track_energy:
            logger.debug("total momentum |P| = %s", norm(linear_momentum(self.entities)))
            logger.debug("energy drift dE = %s", total_energy(self.entities, cfg.G) - energy_0)
        return emitted
