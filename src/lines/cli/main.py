"""lines CLI entry point."""

import os
import sys
from functools import partial

import click

from .. import __version__
from ..context import resolve_settings
from ..core.errors import LinesError, StreamWriteError, UsageError
from ..core.select import select_lines
from ..utils.logger import setup_logging
from .inputs import filter_inputs
from .validation import build_window, check_verbosity


def _silence_stdout() -> None:
    # Point stdout at devnull so the interpreter's final flush cannot fail again
    try:
        stdout_fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, stdout_fd)
    os.close(devnull)


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("files", nargs=-1)
@click.option(
    "-r",
    "--range",
    "line_range",
    metavar="START-END",
    help="Only print lines START-END (also N, START-, -END).",
)
@click.option(
    "-t",
    "--top",
    "--head",
    "top",
    type=click.IntRange(min=1),
    help="Only print the top N lines.",
)
@click.option(
    "-b",
    "--bottom",
    "--tail",
    "bottom",
    type=click.IntRange(min=1),
    help="Only print the bottom N lines.",
)
@click.option(
    "--skip-top",
    "--header",
    "skip_top",
    type=click.IntRange(min=0),
    default=0,
    help="Skip printing the top N header lines.",
)
@click.option(
    "--skip-bottom",
    "--footer",
    "skip_bottom",
    type=click.IntRange(min=0),
    default=0,
    help="Skip printing the bottom N footer lines.",
)
@click.option("-q", "--quiet", is_flag=True, help="Only report fatal errors.")
@click.option("-v", "--verbose", is_flag=True, help="Print verbose output to stderr.")
@click.option("--force", is_flag=True, help="Print error messages but continue processing.")
@click.version_option(__version__, prog_name="lines")
def cli(files, line_range, top, bottom, skip_top, skip_bottom, quiet, verbose, force):
    """Print a range of lines from standard input or files.

    Without FILES, reads from standard input and writes to standard output.
    With FILES, reads each file in sequence and applies the selection
    independently to each one.

    Not all options may be used together: --top, --bottom and --range each
    exclude every other selection option, while --skip-top and --skip-bottom
    may be combined.

    Examples:
        lines sample.txt --range 4-7      # Lines 4 thru 7
        lines sample.txt --range=-3       # Lines 1 thru 3
        lines sample.txt --range 7-       # Line 7 to the end
        lines sample.txt --range 3        # Only line 3
        lines sample.txt --skip-top 3 --skip-bottom 2
        lines sample.txt --top 3          # Like head -n 3
        lines sample.txt --bottom 3       # Like tail -n 3
        cat sample.txt | lines --skip-top 1
    """
    settings = resolve_settings(quiet=quiet, verbose=verbose, force=force)
    try:
        check_verbosity(settings.quiet, settings.verbose, settings.force)
        window = build_window(
            top=top,
            bottom=bottom,
            line_range=line_range,
            skip_top=skip_top,
            skip_bottom=skip_bottom,
        )
    except UsageError as e:
        raise click.UsageError(str(e))

    logger = setup_logging(settings.log_level)
    logger.debug("window: %s, inputs: %s", window, list(files) or ["<stdin>"])

    try:
        filter_inputs(
            files,
            partial(select_lines, window),
            settings,
            sys.stdin,
            sys.stdout,
        )
    except StreamWriteError as e:
        if isinstance(e.__cause__, BrokenPipeError):
            # Downstream reader went away, e.g. `lines big.txt | head -1`
            _silence_stdout()
            sys.exit(0)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except LinesError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
