"""Identifier model for the event bus.

Any value can be used as an event identifier. Strings are *textual* and
take part in wildcard matching; every other value is *opaque* and only
ever matches itself.

    parse_identifier("user.*")   -> TextualIdentifier(name="user.*")
    parse_identifier(42)         -> OpaqueIdentifier(value=42)
"""

import math
from dataclasses import dataclass
from typing import Any

SEPARATOR = "."
WILDCARD = "*"


@dataclass(frozen=True)
class TextualIdentifier:
    """A string identifier, possibly a wildcard pattern."""

    name: str

    @property
    def is_pattern(self) -> bool:
        return WILDCARD in self.name

    @property
    def raw(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class OpaqueIdentifier:
    """A non-string identifier.

    Hashable values compare by equality, everything else by identity so
    that lists, dicts and other unhashable objects can still be used as
    keys. A value always matches itself, and float NaNs match each other.
    """

    value: Any

    @property
    def is_pattern(self) -> bool:
        return False

    @property
    def raw(self) -> Any:
        return self.value

    def _by_value(self) -> bool:
        try:
            hash(self.value)
        except TypeError:
            return False
        return True

    def _is_nan(self) -> bool:
        return isinstance(self.value, float) and math.isnan(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OpaqueIdentifier):
            return NotImplemented
        if self.value is other.value:
            return True
        if self._by_value() and other._by_value():
            if type(self.value) is not type(other.value):
                # Keep True and 1 apart.
                return False
            if self._is_nan() and other._is_nan():
                return True
            return self.value == other.value
        return False

    def __hash__(self) -> int:
        if self._is_nan():
            return hash((float, "nan"))
        if self._by_value():
            return hash((type(self.value), self.value))
        return hash(id(self.value))


Identifier = TextualIdentifier | OpaqueIdentifier


def parse_identifier(identifier: Any) -> Identifier:
    """Classify a raw identifier value.

    ``str`` subclasses (e.g. ``str``-valued enums) are normalised to their
    plain string value.
    """
    if isinstance(identifier, (TextualIdentifier, OpaqueIdentifier)):
        return identifier
    if isinstance(identifier, str):
        return TextualIdentifier(str.__str__(identifier))
    return OpaqueIdentifier(identifier)
