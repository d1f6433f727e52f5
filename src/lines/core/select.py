"""Run the strategy matching a window specification."""

import logging
from typing import Iterable, TextIO

from ..models.window import HeadWindow, RangeWindow, SkipWindow, TailWindow, Window
from .streaming import copy_range, head, skip_bounds, tail

logger = logging.getLogger(__name__)


def select_lines(window: Window, input_stream: Iterable[str], output_stream: TextIO) -> None:
    """Write the lines of input_stream selected by window to output_stream."""
    logger.debug("selecting %s", window)

    if isinstance(window, RangeWindow):
        copy_range(input_stream, window.start, window.end, output_stream)
    elif isinstance(window, HeadWindow):
        head(input_stream, window.count, output_stream)
    elif isinstance(window, TailWindow):
        tail(input_stream, window.count, output_stream)
    elif isinstance(window, SkipWindow):
        skip_bounds(input_stream, window.skip_top, window.skip_bottom, output_stream)
    else:
        raise TypeError(f"unknown window: {window!r}")
