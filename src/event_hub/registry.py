"""Listener registry.

Owns every listener entry of a bus. Entries live in *buckets* keyed by
the exact identifier they were registered under (a concrete name, a
wildcard pattern or an opaque value). A reverse index maps listener ids
back to their bucket so removal by id never scans.

The registry performs no validation; the bus validates before calling in.
"""

import itertools
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NamedTuple

from event_hub.identifiers import Identifier, TextualIdentifier, parse_identifier
from event_hub.patterns import matches

logger = logging.getLogger(__name__)

UNBOUNDED = math.inf

Listener = Callable[..., Any]


@dataclass
class ListenerEntry:
    """A registered callback and its remaining trigger capacity."""

    id: int
    callback: Listener
    capacity: int | float
    identifier: Identifier

    @property
    def expired(self) -> bool:
        return self.capacity <= 0

    def consume(self) -> int | float:
        """Use up one trigger. Unbounded entries never change."""
        if self.capacity != UNBOUNDED:
            self.capacity -= 1
        return self.capacity


class Bucket(NamedTuple):
    identifier: Identifier
    entries: list[ListenerEntry]


class ListenerRegistry:
    """Identifier-keyed buckets of listener entries plus an id index."""

    def __init__(self) -> None:
        self._buckets: dict[Identifier, list[ListenerEntry]] = {}
        self._owners: dict[int, Identifier] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._owners)

    def insert(self, identifier: Any, callback: Listener, capacity: int | float = UNBOUNDED) -> int:
        """File a new entry under the identifier and return its id."""
        key = parse_identifier(identifier)
        entry = ListenerEntry(
            id=next(self._ids),
            callback=callback,
            capacity=capacity,
            identifier=key,
        )
        self._buckets.setdefault(key, []).append(entry)
        self._owners[entry.id] = key
        logger.debug("Registered listener #%d under %r (capacity=%s)", entry.id, key.raw, capacity)
        return entry.id

    def find_entry(self, identifier: Any, callback: Listener) -> ListenerEntry | None:
        """Find the entry of a callback under the exact identifier."""
        for entry in self._buckets.get(parse_identifier(identifier), []):
            if entry.callback == callback:
                return entry
        return None

    def exact_lookup(self, identifier: Any) -> list[ListenerEntry]:
        """Entries registered under exactly this identifier."""
        return list(self._buckets.get(parse_identifier(identifier), []))

    def pattern_scan(self, identifier: Any) -> list[Bucket]:
        """Resolve the buckets an emission of ``identifier`` reaches.

        The exact bucket comes first, followed by every wildcard bucket
        whose pattern matches, in the order the buckets were created.
        Opaque identifiers only ever reach their exact bucket.
        """
        key = parse_identifier(identifier)
        resolved: list[Bucket] = []
        exact = self._buckets.get(key)
        if exact:
            resolved.append(Bucket(key, exact))
        if not isinstance(key, TextualIdentifier):
            return resolved

        for registered, entries in self._buckets.items():
            if registered == key or not registered.is_pattern:
                continue
            if matches(registered.raw, key.name):
                resolved.append(Bucket(registered, entries))
        return resolved

    def is_live(self, listener_id: int) -> bool:
        return listener_id in self._owners

    def remove_by_id(self, listener_id: int) -> bool:
        """Remove a single entry. Returns False if the id is unknown."""
        key = self._owners.pop(listener_id, None)
        if key is None:
            return False
        entries = self._buckets[key]
        entries[:] = [entry for entry in entries if entry.id != listener_id]
        if not entries:
            del self._buckets[key]
        logger.debug("Removed listener #%d from %r", listener_id, key.raw)
        return True

    def remove_by_identifier(self, identifier: Any) -> bool:
        """Drop the whole bucket of an exact identifier (no pattern expansion)."""
        key = parse_identifier(identifier)
        entries = self._buckets.pop(key, None)
        if entries is None:
            return False
        for entry in entries:
            self._owners.pop(entry.id, None)
        logger.debug("Removed %d listener(s) under %r", len(entries), key.raw)
        return True

    def remove_callback(self, identifier: Any, callback: Listener) -> bool:
        """Remove the entries of one callback under an exact identifier."""
        doomed = [entry.id for entry in self.exact_lookup(identifier) if entry.callback == callback]
        for listener_id in doomed:
            self.remove_by_id(listener_id)
        return bool(doomed)

    def clear(self) -> None:
        self._buckets.clear()
        self._owners.clear()

    def snapshot(self) -> list[tuple[Any, list[ListenerEntry]]]:
        """Copy of the registry as (raw identifier, entries) pairs."""
        return [(key.raw, list(entries)) for key, entries in self._buckets.items()]
