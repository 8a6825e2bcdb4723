# MIT License (see LICENSE)
"""
Physical and run constants used throughout the simulation.

Scalar constants are kept as decimal strings and parsed into the working
precision context by util.real(), so no value ever passes through a binary
float on its way in.
"""
from __future__ import annotations

# Working precision in significant decimal digits.
PRECISION_DIGITS: int = 50

# Newtonian gravitational constant, G = 6.67430 × 10⁻¹¹ m³·kg⁻¹·s⁻²
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?bg
G: str = "6.67430e-11"

# Integration step width in seconds.
DEFAULT_DT: str = "0.01"

# Length of the reference run.
DEFAULT_TOTAL_STEPS: int = 1_000_000

# A report is emitted every total_steps / REPORT_DIVISIONS steps.
REPORT_DIVISIONS: int = 100

# Significant digits per reported number (C++ ostream default precision).
DEFAULT_REPORT_DIGITS: int = 6
