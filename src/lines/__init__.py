"""lines: print a range of lines from standard input or files."""

from .core import LookbackBuffer, select_lines
from .models import HeadWindow, RangeWindow, SkipWindow, TailWindow

__all__ = [
    "__version__",
    "HeadWindow",
    "LookbackBuffer",
    "RangeWindow",
    "SkipWindow",
    "TailWindow",
    "select_lines",
]

__version__ = "0.5.2"
