"""Error types raised by the line selection engine and its CLI."""


class LinesError(Exception):
    """Base class for every error raised by lines."""

    pass


class InvalidCapacity(LinesError, ValueError):
    """Lookback buffer requested with a negative capacity."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(
            f"cannot create buffer with negative item count: {capacity}"
        )


class EmptyRequest(LinesError, ValueError):
    """Head or tail asked for zero lines."""

    pass


class NegativeCount(LinesError, ValueError):
    """Head or tail asked for a negative number of lines."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"cannot print a negative number of lines: {count}")


class UsageError(LinesError):
    """Invalid combination or format of command line arguments."""

    pass


class MalformedRange(UsageError):
    """Range string could not be parsed."""

    pass


class InvertedRange(UsageError):
    """Range whose start comes after its end."""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(
            f"cannot print lines {start} thru {end} because they are out of order."
        )


class ConflictingOptions(UsageError):
    """Two mutually exclusive selection options were given together."""

    pass


class StreamReadError(LinesError):
    """Reading from the input stream failed."""

    pass


class StreamWriteError(LinesError):
    """Writing to the output stream failed."""

    pass


__all__ = [
    "ConflictingOptions",
    "EmptyRequest",
    "InvalidCapacity",
    "InvertedRange",
    "LinesError",
    "MalformedRange",
    "NegativeCount",
    "StreamReadError",
    "StreamWriteError",
    "UsageError",
]
