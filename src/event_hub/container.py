"""Shared default bus.

Most applications want a single bus per process. The default bus is
created lazily on first access and lives until the process ends; clear it
with its own ``clear()``.

Usage:
    from event_hub import get_default_bus

    get_default_bus().on("app.ready", start)

    # Tests
    set_default_bus(EventBus(trace_logger=ListLogger()))
    reset_default_bus()
"""

from event_hub.bus import EventBus

_default_bus: EventBus | None = None


def get_default_bus() -> EventBus:
    """Get the process-wide bus, creating it if necessary."""
    global _default_bus
    if _default_bus is None:
        _default_bus = EventBus()
    return _default_bus


def set_default_bus(bus: EventBus | None) -> None:
    """Override the process-wide bus, or None to reset to default."""
    global _default_bus
    _default_bus = bus


def reset_default_bus() -> None:
    """Drop the process-wide bus so the next access creates a fresh one.

    Call this in test teardown to ensure clean state.
    """
    set_default_bus(None)
