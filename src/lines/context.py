"""Run-wide settings resolved from CLI flags and the environment."""

import os
from dataclasses import dataclass

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Resolved run-wide behaviour flags."""

    quiet: bool = False
    verbose: bool = False
    force: bool = False

    @property
    def log_level(self) -> str:
        if self.quiet:
            return "ERROR"
        if self.verbose:
            return "DEBUG"
        return "WARNING"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in TRUTHY


def resolve_settings(
    quiet: bool = False, verbose: bool = False, force: bool = False
) -> Settings:
    """Resolve behaviour flags.

    A flag is on when given on the command line, or when its environment
    variable ($LINES_QUIET, $LINES_VERBOSE, $LINES_FORCE) holds 1, true, yes
    or on. Reads fresh from environment each time.

    Args:
        quiet: --quiet was given
        verbose: --verbose was given
        force: --force was given

    Returns:
        Settings with every flag resolved
    """
    return Settings(
        quiet=quiet or _env_flag("LINES_QUIET"),
        verbose=verbose or _env_flag("LINES_VERBOSE"),
        force=force or _env_flag("LINES_FORCE"),
    )
