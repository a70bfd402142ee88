"""event-hub protocols - interface definitions.

Protocols:
- EventBus: publish/subscribe surface shared by EventBus and NullEventBus
- TraceLogger: human-readable trace output

Import protocols directly from their modules to avoid circular imports:
    from event_hub.protocols.logger import TraceLogger
"""

__all__ = [
    "EventBus",
    "TraceLogger",
    "RichConsoleLogger",
    "NullLogger",
    "ListLogger",
]


def __getattr__(name: str) -> type:
    """Lazy imports to avoid circular dependencies."""
    if name == "EventBus":
        from event_hub.protocols.bus import EventBus

        return EventBus
    if name in ("TraceLogger", "RichConsoleLogger", "NullLogger", "ListLogger"):
        from event_hub.protocols import logger

        return getattr(logger, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
