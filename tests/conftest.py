"""Pytest configuration and shared fixtures."""

import logging

import pytest
from click.testing import CliRunner

from lines.cli import cli


@pytest.fixture(autouse=True)
def clear_lines_env(monkeypatch):
    """Keep LINES_* variables from the developer's shell out of tests."""
    for name in ("LINES_QUIET", "LINES_VERBOSE", "LINES_FORCE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_lines_logger():
    """Drop handlers bound to a previous CliRunner's streams."""
    yield
    logger = logging.getLogger("lines")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["--top", "3"], input_data="a\\nb\\n")
        result = invoke([str(path), "--range", "2-4"])
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def sample_text():
    """Five short lines."""
    return "a\nb\nc\nd\ne\n"


@pytest.fixture
def sample_file(tmp_path, sample_text):
    """Provide path to a file holding sample_text."""
    path = tmp_path / "sample.txt"
    path.write_text(sample_text)
    return path


@pytest.fixture
def numbered_file(tmp_path):
    """Provide path to a file with lines "line 1" thru "line 20"."""
    path = tmp_path / "numbered.txt"
    path.write_text("".join(f"line {n}\n" for n in range(1, 21)))
    return path
