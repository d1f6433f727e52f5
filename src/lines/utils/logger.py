from __future__ import annotations

import logging
import sys


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    logger = logging.getLogger("lines")
    logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    # sys.stderr may have been swapped since the last call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(fmt)
    logger.addHandler(stderr_handler)

    return logger
