"""EventBus protocol definition."""

from collections.abc import Callable
from typing import Any, Protocol

from event_hub.models import EmitResult

Listener = Callable[..., Any]


class EventBus(Protocol):
    """Protocol for event bus implementations."""

    def on(self, identifier: Any, callback: Listener, capacity: int | None = None) -> int:
        """Register a listener and return its id."""
        ...

    def once(self, identifier: Any, callback: Listener) -> int:
        """Register a listener that fires at most once."""
        ...

    def off(self, identifier: Any, callback: Listener | None = None) -> bool:
        """Remove listeners registered under exactly ``identifier``."""
        ...

    def remove_listener(self, listener_id: int) -> bool:
        """Remove a listener by id."""
        ...

    def emit(self, identifier: Any, *args: Any) -> EmitResult | None:
        """Call every listener reached by ``identifier``."""
        ...

    def clear(self) -> None:
        """Remove all listeners."""
        ...
