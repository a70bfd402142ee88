"""EventBus facade and implementations.

The EventBus is an in-process publish/subscribe primitive. Listeners are
registered under identifiers, which may be wildcard patterns:

    bus = EventBus()
    bus.on("user.*", audit)              # every user.<something>
    bus.on("user.**", metrics)           # user and everything below it
    bus.once("user.login", greet)        # fires a single time
    bus.on(SHUTDOWN, flush, capacity=3)  # any value works as an identifier

    outcome = bus.emit("user.login", user)
    if outcome is None:
        ...  # nobody was listening

Two implementations:
- EventBus: the real bus
- NullEventBus: accepts registrations and discards everything

Listeners run synchronously on the emitting thread. Values returned by a
listener (including coroutines) are reported in the EmitResult but never
awaited.
"""

import itertools
import logging
import threading
from contextlib import AbstractContextManager, nullcontext
from typing import Any

from event_hub.config import EventHubSettings, get_settings
from event_hub.dispatcher import Dispatcher
from event_hub.exceptions import InvalidCallbackError, InvalidCapacityError
from event_hub.models import EmitResult, ListenerInfo
from event_hub.patterns import validate_for_registration
from event_hub.protocols.logger import RichConsoleLogger, TraceLogger
from event_hub.registry import UNBOUNDED, Listener, ListenerRegistry

logger = logging.getLogger(__name__)


def _normalize_capacity(capacity: int | None) -> int | float:
    if capacity is None:
        return UNBOUNDED
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise InvalidCapacityError(capacity)
    return capacity


def _describe(callback: Listener) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


class EventBus:
    """In-process event bus with wildcard identifiers and capacities.

    Registering the same callback twice under the same exact identifier
    does not create a second listener: the existing listener keeps its id
    and takes the new capacity.

    ``off`` and ``remove_listener`` never expand wildcards. A listener
    registered under ``"evt.*"`` can only be removed with ``"evt.*"`` (or
    its id), never with ``"evt.a"``.
    """

    def __init__(
        self,
        settings: EventHubSettings | None = None,
        trace_logger: TraceLogger | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._registry = ListenerRegistry()
        self._dispatcher = Dispatcher(self._registry)
        self._trace_logger = trace_logger
        self._log_enabled = self._settings.log_enabled
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if self._settings.thread_safe else nullcontext()
        )

    def __len__(self) -> int:
        return len(self._registry)

    # Registration

    def on(self, identifier: Any, callback: Listener, capacity: int | None = None) -> int:
        """Register a listener.

        Args:
            identifier: Event identifier; strings may be wildcard patterns
            callback: Called with the positional arguments given to ``emit``
            capacity: Maximum number of calls, unbounded when omitted

        Returns:
            The listener id

        Raises:
            InvalidIdentifierError: If a string identifier is not a valid pattern
            InvalidCallbackError: If callback is not callable
            InvalidCapacityError: If capacity is not a positive integer
        """
        key = validate_for_registration(identifier)
        if not callable(callback):
            raise InvalidCallbackError(callback)
        limit = _normalize_capacity(capacity)

        with self._lock:
            existing = self._registry.find_entry(key, callback)
            if existing is not None:
                logger.warning(
                    "Listener %s is already registered under %r, updating its capacity to %s",
                    _describe(callback),
                    key.raw,
                    limit,
                )
                existing.capacity = limit
                self._trace(f"update #{existing.id} on {key.raw!r} (capacity={limit})")
                return existing.id
            listener_id = self._registry.insert(key, callback, limit)

        self._trace(f"on {key.raw!r} -> #{listener_id} {_describe(callback)} (capacity={limit})")
        return listener_id

    def once(self, identifier: Any, callback: Listener) -> int:
        """Register a listener that is removed after its first call."""
        return self.on(identifier, callback, 1)

    # Removal

    def off(self, identifier: Any, callback: Listener | None = None) -> bool:
        """Remove listeners registered under exactly ``identifier``.

        With ``callback``, only that callback's listener is removed.

        Returns:
            False if nothing was removed
        """
        with self._lock:
            if callback is None:
                removed = self._registry.remove_by_identifier(identifier)
            else:
                removed = self._registry.remove_callback(identifier, callback)
        if removed:
            self._trace(f"off {identifier!r}")
        return removed

    def remove_listener(self, listener_id: int) -> bool:
        """Remove one listener by id. Returns False for unknown ids."""
        with self._lock:
            removed = self._registry.remove_by_id(listener_id)
        if removed:
            self._trace(f"removed #{listener_id}")
        return removed

    def clear(self) -> None:
        """Remove every listener. Ids are not reused afterwards."""
        with self._lock:
            self._registry.clear()
        self._trace("cleared")

    # Emission

    def emit(self, identifier: Any, *args: Any) -> EmitResult | None:
        """Call every listener reached by ``identifier``.

        Listeners under the exact identifier run first, then listeners of
        matching wildcard patterns. A listener exception propagates and
        stops the remaining calls.

        Returns:
            EmitResult, or None if no listener was reached

        Raises:
            InvalidIdentifierError: If a string identifier contains '*' or
                starts/ends with '.'
        """
        with self._lock:
            outcome = self._dispatcher.emit(identifier, args)
        self._trace_emission(identifier, outcome)
        return outcome

    def emit_with_receiver(self, identifier: Any, receiver: Any, *args: Any) -> EmitResult | None:
        """Like ``emit``, with plain-function listeners bound to ``receiver``.

        A plain function is called as ``callback(receiver, *args)``. Bound
        methods and other callables keep their own receiver.
        """
        with self._lock:
            outcome = self._dispatcher.emit(identifier, args, receiver=receiver)
        self._trace_emission(identifier, outcome)
        return outcome

    # Introspection

    def listeners(self, identifier: Any) -> list[ListenerInfo]:
        """Listeners registered under exactly ``identifier``."""
        with self._lock:
            entries = self._registry.exact_lookup(identifier)
        return [
            ListenerInfo(
                id=entry.id,
                identifier=entry.identifier.raw,
                capacity=entry.capacity,
                callback_name=_describe(entry.callback),
            )
            for entry in entries
        ]

    # Trace output

    @property
    def log_enabled(self) -> bool:
        return self._log_enabled

    def turn_on_log(self) -> None:
        self._log_enabled = True

    def turn_off_log(self) -> None:
        self._log_enabled = False

    def log_event_map(self, forced: bool = False) -> None:
        """Print every identifier and its listeners to the trace logger.

        Args:
            forced: Print even when trace output is turned off
        """
        if not (self._log_enabled or forced):
            return
        with self._lock:
            snapshot = self._registry.snapshot()
        sink = self._sink()
        sink.print(f"{len(snapshot)} identifier(s), {len(self)} listener(s)")
        for identifier, entries in snapshot:
            listeners = ", ".join(
                f"#{entry.id} {_describe(entry.callback)} x{entry.capacity}" for entry in entries
            )
            sink.print(f"  {identifier!r}: {listeners}")

    def _sink(self) -> TraceLogger:
        if self._trace_logger is None:
            self._trace_logger = RichConsoleLogger(self._settings.log_prefix)
        return self._trace_logger

    def _trace(self, message: str) -> None:
        if self._log_enabled:
            self._sink().print(message)

    def _trace_emission(self, identifier: Any, outcome: EmitResult | None) -> None:
        if outcome is None:
            self._trace(f"emit {identifier!r}: no listeners")
        else:
            self._trace(f"emit {identifier!r} -> {', '.join(f'#{i}' for i in outcome.ids)}")


class NullEventBus:
    """No-op event bus for testing or when events are disabled.

    Registrations are accepted (and get unique ids) but nothing is stored
    and emissions never reach a listener.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)

    def on(self, identifier: Any, callback: Listener, capacity: int | None = None) -> int:
        """Discard the registration."""
        return next(self._ids)

    def once(self, identifier: Any, callback: Listener) -> int:
        """Discard the registration."""
        return next(self._ids)

    def off(self, identifier: Any, callback: Listener | None = None) -> bool:
        return False

    def remove_listener(self, listener_id: int) -> bool:
        return False

    def emit(self, identifier: Any, *args: Any) -> EmitResult | None:
        """Discard the emission."""
        return None

    def clear(self) -> None:
        pass
