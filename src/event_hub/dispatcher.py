"""Emission protocol.

Resolves the buckets an identifier reaches, calls every live listener in
order, spends capacity and prunes expired entries.

Listener exceptions are not caught: they abort the emission and reach
the caller of ``emit``. The failing listener keeps its capacity; capacity
spent by listeners that completed before it stays spent, and expired
entries are still pruned.

A listener is reserved while it runs, so a nested emission cannot use a
trigger the running call is about to spend.
"""

import inspect
import logging
import types
from collections import Counter
from typing import Any

from event_hub.models import EmitResult, InvocationRecord
from event_hub.patterns import validate_for_emission
from event_hub.registry import Listener, ListenerEntry, ListenerRegistry

logger = logging.getLogger(__name__)

NO_RECEIVER = object()


def bind_receiver(callback: Listener, receiver: Any) -> Listener:
    """Bind a plain function to ``receiver`` as if it were a method.

    Bound methods, builtins and other callables already carry their own
    receiver and are returned unchanged.
    """
    if inspect.isfunction(callback):
        return types.MethodType(callback, receiver)
    return callback


class Dispatcher:
    """Runs emissions against a listener registry."""

    def __init__(self, registry: ListenerRegistry) -> None:
        self._registry = registry
        self._in_flight: Counter[int] = Counter()

    def emit(
        self,
        identifier: Any,
        args: tuple[Any, ...] = (),
        receiver: Any = NO_RECEIVER,
    ) -> EmitResult | None:
        """Emit ``identifier`` with positional ``args``.

        Returns None when no listener was reached.

        Raises:
            InvalidIdentifierError: If the identifier is not concrete
        """
        key = validate_for_emission(identifier)
        buckets = self._registry.pattern_scan(key)
        if not buckets:
            logger.debug("No listeners for %r", key.raw)
            return None

        ids: list[int] = []
        records: dict[int, InvocationRecord] = {}
        expired: list[ListenerEntry] = []
        try:
            for bucket in buckets:
                # Entries added while this bucket runs wait for the next emission.
                for entry in list(bucket.entries):
                    if not self._available(entry):
                        continue
                    callback = entry.callback
                    if receiver is not NO_RECEIVER:
                        callback = bind_receiver(callback, receiver)
                    self._in_flight[entry.id] += 1
                    try:
                        result = callback(*args)
                    finally:
                        self._release(entry.id)
                    rest = entry.consume()
                    if entry.expired:
                        expired.append(entry)
                    ids.append(entry.id)
                    records[entry.id] = InvocationRecord(
                        result=result,
                        identifier=bucket.identifier.raw,
                        rest=rest,
                    )
        finally:
            for entry in expired:
                # A listener may have been re-armed by a later call in this emission.
                if entry.expired:
                    self._registry.remove_by_id(entry.id)

        if not ids:
            return None
        logger.debug("Emitted %r to %d listener(s), %d expired", key.raw, len(ids), len(expired))
        return EmitResult(ids=ids, records=records)

    def _available(self, entry: ListenerEntry) -> bool:
        """Live and with capacity not already reserved by running calls."""
        if not self._registry.is_live(entry.id):
            return False
        return entry.capacity - self._in_flight[entry.id] > 0

    def _release(self, listener_id: int) -> None:
        self._in_flight[listener_id] -= 1
        if self._in_flight[listener_id] <= 0:
            del self._in_flight[listener_id]
