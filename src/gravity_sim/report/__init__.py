# MIT License (see LICENSE)
"""
Report formatting and output adapters.

The format functions turn entities into text; the adapters route finished
lines to a stream, a buffer, or nowhere.
"""
from .format import ENTITY_SEPARATOR, format_real, format_entity, format_report
from .adapter import Reporter, StreamReporter, NullReporter, BufferedReporter

__all__ = [
    "ENTITY_SEPARATOR",
    "format_real",
    "format_entity",
    "format_report",
    "Reporter",
    "StreamReporter",
    "NullReporter",
    "BufferedReporter",
]
