"""lines core business logic.

This module contains the selection engine separated from CLI presentation:
- errors: Exception hierarchy
- lookback: Fixed-capacity lookback buffer
- streaming: Line selection strategies (range, head, tail, skip_bounds)
- select: Dispatch from a window specification to its strategy
"""

from .errors import (
    EmptyRequest,
    InvalidCapacity,
    LinesError,
    NegativeCount,
    StreamReadError,
    StreamWriteError,
)
from .lookback import LookbackBuffer
from .select import select_lines
from .streaming import copy_range, head, iter_lines, skip_bounds, tail, write_line

__all__ = [
    "EmptyRequest",
    "InvalidCapacity",
    "LinesError",
    "LookbackBuffer",
    "NegativeCount",
    "StreamReadError",
    "StreamWriteError",
    "copy_range",
    "head",
    "iter_lines",
    "select_lines",
    "skip_bounds",
    "tail",
    "write_line",
]
