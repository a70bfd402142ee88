"""event-hub exception hierarchy.

All errors raised by the bus itself inherit from EventHubError, so callers
can catch every bus error with a single except clause. Each class also
inherits the built-in exception that best describes it (ValueError or
TypeError), so generic handlers keep working.

Exceptions raised by listener callbacks are never wrapped; they propagate
out of ``emit`` unchanged.

Usage:
    from event_hub import EventBus
    from event_hub.exceptions import EventHubError, InvalidIdentifierError

    bus = EventBus()
    try:
        bus.on("user*", handler)
    except InvalidIdentifierError as e:
        print(f"Bad identifier {e.identifier!r}: {e.reason}")
    except EventHubError as e:
        print(f"event-hub error: {e}")
"""

from typing import Any


class EventHubError(Exception):
    """Base exception for all event-hub errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidIdentifierError(EventHubError, ValueError):
    """Identifier violates the wildcard syntax rules.

    Raised at registration when a pattern is malformed, and at emission
    when the identifier contains a wildcard or starts/ends with '.'.
    """

    def __init__(self, identifier: Any, reason: str) -> None:
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid identifier {identifier!r}: {reason}")


class InvalidCallbackError(EventHubError, TypeError):
    """Listener is not callable."""

    def __init__(self, callback: Any) -> None:
        self.callback = callback
        super().__init__(f"Listener must be callable, got {type(callback).__name__}")


class InvalidCapacityError(EventHubError, ValueError):
    """Capacity is not a positive integer.

    Covers zero, negative numbers, floats, bools and any other type.
    """

    def __init__(self, capacity: Any) -> None:
        self.capacity = capacity
        super().__init__(f"Capacity must be a positive integer or omitted, got {capacity!r}")
