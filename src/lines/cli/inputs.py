"""Per-input orchestration: open each file, run the selection, report errors."""

import logging
from typing import Callable, Sequence, TextIO

import click

from ..context import Settings
from ..core.errors import LinesError, StreamWriteError

logger = logging.getLogger(__name__)

Selector = Callable[[TextIO, TextIO], None]


def with_open_file(path: str, callback: Callable[[TextIO], None]) -> None:
    """Open path as UTF-8 text, hand it to callback, close it afterwards.

    Only "\\n" ends a line; "\\r\\n" is handled by the line reader.
    """
    with open(path, encoding="utf-8", newline="\n") as fh:
        callback(fh)


def filter_inputs(
    paths: Sequence[str],
    selector: Selector,
    settings: Settings,
    stdin: TextIO,
    stdout: TextIO,
) -> None:
    """Run selector once per input, each with its own state.

    With no paths, reads stdin. "-" also names stdin.

    A failing input stops the run unless settings.force is set, in which case
    a warning is printed and the next input is processed. Write failures
    always stop the run.

    Raises:
        LinesError: For the first failing input when not forced
        StreamWriteError: When the output can no longer be written
    """
    if not paths:
        logger.debug("reading standard input")
        selector(stdin, stdout)
        return

    for path in paths:
        logger.debug("reading %s", path)
        try:
            if path == "-":
                selector(stdin, stdout)
            else:
                with_open_file(path, lambda fh: selector(fh, stdout))
        except StreamWriteError:
            raise
        except (OSError, LinesError) as e:
            err = LinesError(f"cannot read {path!r}: {e}")
            if not settings.force:
                raise err from e
            click.echo(f"Warning: {err}", err=True)
            logger.debug("skipping %s after error", path, exc_info=True)
