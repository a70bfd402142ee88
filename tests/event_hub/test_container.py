"""Tests for the shared default bus."""

from unittest.mock import Mock

from event_hub import EventBus, ListLogger, get_default_bus, reset_default_bus, set_default_bus


def test_default_bus_is_shared() -> None:
    assert get_default_bus() is get_default_bus()


def test_default_bus_keeps_listeners_across_accesses() -> None:
    callback = Mock()
    get_default_bus().on("app.ready", callback)
    get_default_bus().emit("app.ready")
    callback.assert_called_once_with()


def test_clear_empties_the_default_bus() -> None:
    bus = get_default_bus()
    bus.on("app.ready", Mock())
    bus.clear()
    assert get_default_bus() is bus
    assert len(bus) == 0


def test_set_default_bus() -> None:
    custom = EventBus(trace_logger=ListLogger())
    set_default_bus(custom)
    assert get_default_bus() is custom


def test_reset_creates_a_fresh_bus() -> None:
    first = get_default_bus()
    reset_default_bus()
    assert get_default_bus() is not first
