"""Tests for the fixed-capacity lookback buffer."""

import pytest

from lines.core.errors import InvalidCapacity, LinesError
from lines.core.lookback import LookbackBuffer


def test_negative_capacity_rejected():
    with pytest.raises(InvalidCapacity) as exc_info:
        LookbackBuffer(-1)
    assert exc_info.value.capacity == -1
    assert "negative item count: -1" in str(exc_info.value)
    assert isinstance(exc_info.value, LinesError)
    assert isinstance(exc_info.value, ValueError)


def test_zero_capacity_passes_items_through():
    """Capacity 0 returns every item immediately as valid."""
    buffer = LookbackBuffer(0)
    assert buffer.insert_and_evict("a") == ("a", True)
    assert buffer.insert_and_evict("") == ("", True)
    assert buffer.drain() == []
    assert len(buffer) == 0


def test_invalid_until_capacity_inserted():
    buffer = LookbackBuffer(3)
    for item in ("a", "b", "c"):
        _, valid = buffer.insert_and_evict(item)
        assert valid is False


def test_evicts_item_from_capacity_insertions_ago():
    buffer = LookbackBuffer(3)
    for item in ("a", "b", "c"):
        buffer.insert_and_evict(item)

    assert buffer.insert_and_evict("d") == ("a", True)
    assert buffer.insert_and_evict("e") == ("b", True)
    assert buffer.insert_and_evict("f") == ("c", True)
    assert buffer.insert_and_evict("g") == ("d", True)


def test_capacity_one():
    buffer = LookbackBuffer(1)
    assert buffer.insert_and_evict("a")[1] is False
    assert buffer.insert_and_evict("b") == ("a", True)
    assert buffer.insert_and_evict("c") == ("b", True)
    assert buffer.drain() == ["c"]


def test_empty_strings_are_real_items():
    """No sentinel: an evicted empty string is still valid."""
    buffer = LookbackBuffer(2)
    buffer.insert_and_evict("")
    buffer.insert_and_evict("x")
    assert buffer.insert_and_evict("y") == ("", True)


def test_drain_before_wrap():
    buffer = LookbackBuffer(5)
    for item in ("a", "b", "c"):
        buffer.insert_and_evict(item)
    assert buffer.drain() == ["a", "b", "c"]
    assert len(buffer) == 3


def test_drain_after_wrap_is_oldest_first():
    buffer = LookbackBuffer(3)
    for item in ("a", "b", "c", "d", "e", "f", "g"):
        buffer.insert_and_evict(item)
    assert buffer.drain() == ["e", "f", "g"]
    assert len(buffer) == 3


def test_drain_exactly_full():
    buffer = LookbackBuffer(2)
    buffer.insert_and_evict("a")
    buffer.insert_and_evict("b")
    assert buffer.drain() == ["a", "b"]


def test_drain_empty():
    assert LookbackBuffer(4).drain() == []


def test_capacity_and_repr():
    buffer = LookbackBuffer(4)
    buffer.insert_and_evict("a")
    assert buffer.capacity == 4
    assert repr(buffer) == "LookbackBuffer(capacity=4, held=1)"
