"""Window specifications: which lines of an input to select."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RangeWindow(BaseModel):
    """Lines START through END, inclusive. 0 leaves that side open."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["range"] = "range"
    start: int = Field(default=0, ge=0)
    end: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "RangeWindow":
        if self.start and self.end and self.start > self.end:
            raise ValueError(
                f"cannot print lines {self.start} thru {self.end} "
                "because they are out of order."
            )
        return self

    def __str__(self) -> str:
        start = str(self.start) if self.start else ""
        end = str(self.end) if self.end else ""
        return f"range {start}-{end}"


class HeadWindow(BaseModel):
    """Only the first COUNT lines."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["head"] = "head"
    count: int = Field(gt=0)

    def __str__(self) -> str:
        return f"head {self.count}"


class TailWindow(BaseModel):
    """Only the last COUNT lines."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["tail"] = "tail"
    count: int = Field(gt=0)

    def __str__(self) -> str:
        return f"tail {self.count}"


class SkipWindow(BaseModel):
    """Everything except the first SKIP_TOP and last SKIP_BOTTOM lines.

    The all-zero window copies the input unchanged and is the default when no
    selection is requested.
    """

    model_config = ConfigDict(frozen=True)

    mode: Literal["skip"] = "skip"
    skip_top: int = Field(default=0, ge=0)
    skip_bottom: int = Field(default=0, ge=0)

    def __str__(self) -> str:
        return f"skip top {self.skip_top}, bottom {self.skip_bottom}"


Window = Union[RangeWindow, HeadWindow, TailWindow, SkipWindow]


__all__ = [
    "HeadWindow",
    "RangeWindow",
    "SkipWindow",
    "TailWindow",
    "Window",
]
