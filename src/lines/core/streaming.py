"""Line stream utilities.

Strategies for selecting lines from a text stream in a single forward pass:
- copy_range: Lines START through END
- head: First N lines
- tail: Last N lines
- skip_bounds: Everything except the first N and last M lines
"""

from typing import Iterable, Iterator, TextIO

from .errors import EmptyRequest, NegativeCount, StreamReadError, StreamWriteError
from .lookback import LookbackBuffer


def iter_lines(input_stream: Iterable[str]) -> Iterator[str]:
    """Yield lines from input stream without their trailing newline.

    A "\\r\\n" terminator is removed as a whole. Read and decode failures are
    raised as StreamReadError. Lines are pulled lazily, so a caller that stops
    iterating leaves the rest of the stream unread.
    """
    lines = iter(input_stream)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise StreamReadError(str(e)) from e
        if line.endswith("\n"):
            line = line[:-2] if line.endswith("\r\n") else line[:-1]
        yield line


def write_line(output_stream: TextIO, line: str) -> None:
    """Write line followed by exactly one newline."""
    try:
        output_stream.write(line + "\n")
    except OSError as e:
        raise StreamWriteError(str(e)) from e


def copy_range(
    input_stream: Iterable[str], start: int, end: int, output_stream: TextIO
) -> None:
    """Output lines START through END (inclusive, 1-based).

    Args:
        input_stream: Input stream to read from
        start: First line to output, 0 for the beginning of input
        end: Last line to output, 0 for the end of input
        output_stream: Output stream to write to

    Reading stops as soon as line END has been written. The caller is
    responsible for rejecting ``start > end > 0``.
    """
    for line_number, line in enumerate(iter_lines(input_stream), start=1):
        if start > 0 and line_number < start:
            continue

        write_line(output_stream, line)

        if end > 0 and line_number == end:
            break


def head(input_stream: Iterable[str], n: int, output_stream: TextIO) -> None:
    """Output first N lines from input stream to output stream.

    Args:
        input_stream: Input stream to read from
        n: Number of lines to output, must be positive
        output_stream: Output stream to write to

    Raises:
        NegativeCount: If n is negative
        EmptyRequest: If n is 0
    """
    if n < 0:
        raise NegativeCount(n)
    if n == 0:
        raise EmptyRequest("cannot print the initial 0 lines.")

    remaining = n
    for line in iter_lines(input_stream):
        write_line(output_stream, line)
        remaining -= 1
        if remaining == 0:
            break


def tail(input_stream: Iterable[str], n: int, output_stream: TextIO) -> None:
    """Output last N lines from input stream to output stream.

    Uses a lookback buffer to maintain constant memory regardless of input size.

    Args:
        input_stream: Input stream to read from
        n: Number of lines to output, must be positive
        output_stream: Output stream to write to

    Raises:
        NegativeCount: If n is negative
        EmptyRequest: If n is 0
    """
    if n < 0:
        raise NegativeCount(n)
    if n == 0:
        raise EmptyRequest("cannot print the final 0 lines.")

    buffer: LookbackBuffer[str] = LookbackBuffer(n)

    # Only the final contents matter, evictions are dropped
    for line in iter_lines(input_stream):
        buffer.insert_and_evict(line)

    for line in buffer.drain():
        write_line(output_stream, line)


def skip_bounds(
    input_stream: Iterable[str],
    skip_top: int,
    skip_bottom: int,
    output_stream: TextIO,
) -> None:
    """Output every line except the first SKIP_TOP and the last SKIP_BOTTOM.

    Each line is held back until SKIP_BOTTOM newer lines have been read, so the
    trailing lines are never written.
    """
    buffer: LookbackBuffer[str] = LookbackBuffer(skip_bottom)

    line_number = 0
    for line in iter_lines(input_stream):
        if skip_top > 0:
            # Only count lines while skipping the top
            line_number += 1
            if line_number <= skip_top:
                continue
            skip_top = 0

        held, ok = buffer.insert_and_evict(line)
        if not ok:
            continue

        write_line(output_stream, held)
