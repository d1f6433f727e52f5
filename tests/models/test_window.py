"""Tests for window specification models."""

import pytest
from pydantic import ValidationError

from lines.models import (
    HeadWindow,
    RangeWindow,
    SkipWindow,
    TailWindow,
)


class TestRangeWindow:
    def test_defaults_select_everything(self):
        window = RangeWindow()
        assert (window.start, window.end) == (0, 0)
        assert str(window) == "range -"

    def test_bounds(self):
        window = RangeWindow(start=2, end=4)
        assert str(window) == "range 2-4"

    def test_open_sides(self):
        assert str(RangeWindow(start=7)) == "range 7-"
        assert str(RangeWindow(end=3)) == "range -3"

    def test_inverted_rejected(self):
        with pytest.raises(ValidationError, match="out of order"):
            RangeWindow(start=5, end=2)

    def test_open_end_allows_any_start(self):
        assert RangeWindow(start=5, end=0).start == 5

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            RangeWindow(start=-1)

    def test_frozen(self):
        window = RangeWindow(start=1, end=2)
        with pytest.raises(ValidationError):
            window.start = 3


@pytest.mark.parametrize("model", [HeadWindow, TailWindow])
def test_count_must_be_positive(model):
    with pytest.raises(ValidationError):
        model(count=0)
    assert model(count=3).count == 3


def test_skip_window_defaults():
    window = SkipWindow()
    assert (window.skip_top, window.skip_bottom) == (0, 0)
    assert str(window) == "skip top 0, bottom 0"


def test_skip_window_negative_rejected():
    with pytest.raises(ValidationError):
        SkipWindow(skip_bottom=-2)
