"""Result models returned by the event bus.

Frozen because they describe what already happened during an emission.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class InvocationRecord(BaseModel):
    """Outcome of one listener call within an emission.

    Attributes:
        result: Whatever the callback returned (coroutines are not awaited)
        identifier: The identifier the listener was *registered* under,
            which may be a wildcard pattern
        rest: Capacity left after this call, ``math.inf`` if unbounded
    """

    model_config = ConfigDict(frozen=True)

    result: Any = None
    identifier: Any
    rest: int | float


class EmitResult(BaseModel):
    """Aggregate of every listener call made by one ``emit``.

    Usage:
        outcome = bus.emit("user.login", user)
        for listener_id in outcome.ids:
            print(outcome[listener_id].result)
    """

    model_config = ConfigDict(frozen=True)

    ids: list[int]
    records: dict[int, InvocationRecord]

    def __getitem__(self, listener_id: int) -> InvocationRecord:
        return self.records[listener_id]

    def __contains__(self, listener_id: object) -> bool:
        return listener_id in self.records

    def __len__(self) -> int:
        return len(self.ids)

    @property
    def results(self) -> list[Any]:
        """Callback return values in invocation order."""
        return [self.records[listener_id].result for listener_id in self.ids]


class ListenerInfo(BaseModel):
    """Read-only view of a registered listener."""

    model_config = ConfigDict(frozen=True)

    id: int
    identifier: Any
    capacity: int | float
    callback_name: str
