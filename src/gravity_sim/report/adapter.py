# MIT License (see LICENSE)
"""
Reporter adapters for simulation output.

The driver produces report lines; a Reporter decides where they go. The core
engine never writes to a stream directly.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TextIO
import sys


class Reporter(ABC):
    """
    Abstract base class for report sinks.

    Usage:
        reporter = StreamReporter(sys.stdout)
        simulation.run(reporter)
    """

    @abstractmethod
    def emit(self, step: int, line: str) -> None:
        """
        Receive one report line.

        Args:
            step: Number of integration steps completed when the snapshot
                  was taken (0 for the initial report).
            line: Formatted report line without trailing newline.
        """
        ...

    def flush(self) -> None:
        """Flush buffered output, if any. Called once at the end of a run."""


class StreamReporter(Reporter):
    """
    Writes each report line to a text stream.

    Args:
        output: Output stream (default: sys.stdout).
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output if output is not None else sys.stdout

    def emit(self, step: int, line: str) -> None:
        self.output.write(line + "\n")

    def flush(self) -> None:
        self.output.flush()


class NullReporter(Reporter):
    """
    No-op reporter.

    Useful for benchmarking the integration loop without formatting costs
    reaching any output.
    """

    def emit(self, step: int, line: str) -> None:
        pass


class BufferedReporter(Reporter):
    """
    Reporter that keeps every report in memory.

    Example:
        reporter = BufferedReporter()
        simulation.run(reporter)
        for step, line in zip(reporter.steps, reporter.lines):
            print(step, line)
    """

    def __init__(self):
        self.steps: list[int] = []
        self.lines: list[str] = []

    def emit(self, step: int, line: str) -> None:
        self.steps.append(step)
        self.lines.append(line)

    def __len__(self) -> int:
        return len(self.lines)
