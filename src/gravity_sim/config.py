# MIT License (see LICENSE)
"""
Immutable run configuration.

SimulationConfig gathers everything that was process-wide in a plain script
(gravitational constant, step width, run length and report cadence) into one
frozen value handed to the Simulation at construction.
"""
from __future__ import annotations
from dataclasses import dataclass

from .constants import (
    G,
    DEFAULT_DT,
    DEFAULT_TOTAL_STEPS,
    REPORT_DIVISIONS,
    DEFAULT_REPORT_DIGITS,
)
from .util import mp, real


@dataclass(frozen=True)
class SimulationConfig:
    """
    Parameters of a fixed-step simulation run.

    Attributes:
        G: Gravitational constant in m³·kg⁻¹·s⁻². Strings are parsed at
           working precision.
        dt: Step width in seconds.
        total_steps: Number of integration steps in a run.
        report_divisions: A report is emitted every
                          total_steps // report_divisions steps.
        report_digits: Significant digits per number in a report line.

    Raises:
        ValueError: If any parameter is not strictly positive.
    """
    G: object = G
    dt: object = DEFAULT_DT
    total_steps: int = DEFAULT_TOTAL_STEPS
    report_divisions: int = REPORT_DIVISIONS
    report_digits: int = DEFAULT_REPORT_DIGITS

    def __post_init__(self) -> None:
        """Convert scalars to working precision and validate."""
        object.__setattr__(self, "G", real(self.G))
        object.__setattr__(self, "dt", real(self.dt))

        for name in ("G", "dt"):
            value = getattr(self, name)
            if not mp.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be finite and positive, got {value}")
        for name in ("total_steps", "report_divisions", "report_digits"):
            value = getattr(self, name)
            if int(value) != value or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @property
    def steps_per_report(self) -> int:
        """Report interval k. Runs shorter than report_divisions report every step."""
        return max(1, self.total_steps // self.report_divisions)

    def is_report_step(self, index: int) -> bool:
        """Whether a report follows the step with this zero-based index."""
        return index % self.steps_per_report == 0

    def report_count(self) -> int:
        """
        Number of report lines a full run emits.

        One before the first step, one after every step index that is a
        multiple of k, and one after the final step.
        """
        k = self.steps_per_report
        return 2 + (self.total_steps + k - 1) // k
