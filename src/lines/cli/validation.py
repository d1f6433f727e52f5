"""Input validation helpers for the CLI."""

import re
from typing import Optional, Tuple

from ..core.errors import ConflictingOptions, InvertedRange, MalformedRange
from ..models.window import HeadWindow, RangeWindow, SkipWindow, TailWindow, Window

_NUMBER = re.compile(r"[0-9]+")


def _parse_bound(text: str, which: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise MalformedRange(f"cannot parse {which} value from range: {text!r}.")
    return int(text)


def parse_range(text: str) -> Tuple[int, int]:
    """Parse a range option into (start, end).

    Accepted forms, where 0 means that side is open:
        "N"          -> (N, N)   only line N
        "START-END"  -> (START, END)
        "START-"     -> (START, 0)
        "-END"       -> (0, END)

    Args:
        text: Range string from the command line

    Returns:
        Tuple of (start, end)

    Raises:
        MalformedRange: If the string is not one of the forms above
        InvertedRange: If START is greater than END
    """
    parts = text.split("-")

    if len(parts) == 1:
        if not parts[0]:
            return 0, 0
        line = _parse_bound(parts[0], "initial")
        return line, line

    if len(parts) != 2:
        raise MalformedRange(f"cannot print invalid range of lines: {text!r}.")

    start = _parse_bound(parts[0], "initial") if parts[0] else 0
    end = _parse_bound(parts[1], "final") if parts[1] else 0

    if end > 0 and start > end:
        raise InvertedRange(start, end)

    return start, end


def build_window(
    top: Optional[int] = None,
    bottom: Optional[int] = None,
    line_range: Optional[str] = None,
    skip_top: int = 0,
    skip_bottom: int = 0,
) -> Window:
    """Choose the single window requested by the selection options.

    --top, --bottom and --range exclude each other and both skip options;
    --skip-top and --skip-bottom may be combined. Without any option the
    whole input is selected.

    Raises:
        ConflictingOptions: If mutually exclusive options were combined
        MalformedRange: If --range cannot be parsed
        InvertedRange: If --range is out of order
    """
    if top is not None:
        if bottom is not None:
            raise ConflictingOptions("cannot print only the top, and only the bottom.")
        if line_range is not None:
            raise ConflictingOptions("cannot print only the top, and only a range.")
        if skip_bottom:
            raise ConflictingOptions("cannot print only the top, and skip the bottom.")
        if skip_top:
            raise ConflictingOptions("cannot print only the top, and skip the top.")
        return HeadWindow(count=top)

    if bottom is not None:
        if line_range is not None:
            raise ConflictingOptions("cannot print only the bottom, and only a range.")
        if skip_bottom:
            raise ConflictingOptions("cannot print only the bottom, and skip the bottom.")
        if skip_top:
            raise ConflictingOptions("cannot print only the bottom, and skip the top.")
        return TailWindow(count=bottom)

    if line_range is not None:
        if skip_bottom:
            raise ConflictingOptions("cannot print only a range, and skip the bottom.")
        if skip_top:
            raise ConflictingOptions("cannot print only a range, and skip the top.")
        start, end = parse_range(line_range)
        return RangeWindow(start=start, end=end)

    return SkipWindow(skip_top=skip_top, skip_bottom=skip_bottom)


def check_verbosity(quiet: bool, verbose: bool, force: bool) -> None:
    """Reject --quiet combined with --verbose or --force."""
    if quiet:
        if force:
            raise ConflictingOptions("cannot use both --quiet and --force")
        if verbose:
            raise ConflictingOptions("cannot use both --quiet and --verbose")
