"""Pydantic models for line selection."""

from .window import (
    HeadWindow,
    RangeWindow,
    SkipWindow,
    TailWindow,
    Window,
)

__all__ = [
    "HeadWindow",
    "RangeWindow",
    "SkipWindow",
    "TailWindow",
    "Window",
]
