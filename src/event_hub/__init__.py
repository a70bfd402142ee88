"""event-hub - in-process publish/subscribe with wildcard identifiers.

Usage:
    from event_hub import EventBus

    bus = EventBus()
    bus.on("order.*", lambda order: print("order event", order))
    bus.once("order.paid", send_receipt)

    outcome = bus.emit("order.paid", order)
    # outcome.ids -> [2, 1]; outcome[1].identifier -> "order.*"
"""

from event_hub.bus import EventBus, NullEventBus
from event_hub.config import EventHubSettings, clear_settings_cache, get_settings
from event_hub.container import get_default_bus, reset_default_bus, set_default_bus
from event_hub.exceptions import (
    EventHubError,
    InvalidCallbackError,
    InvalidCapacityError,
    InvalidIdentifierError,
)
from event_hub.identifiers import OpaqueIdentifier, TextualIdentifier, parse_identifier
from event_hub.models import EmitResult, InvocationRecord, ListenerInfo
from event_hub.patterns import matches, validate_for_emission, validate_for_registration
from event_hub.protocols.logger import ListLogger, NullLogger, RichConsoleLogger, TraceLogger
from event_hub.registry import UNBOUNDED

__version__ = "0.1.0"

__all__ = [
    # Bus
    "EventBus",
    "NullEventBus",
    "get_default_bus",
    "set_default_bus",
    "reset_default_bus",
    # Results
    "EmitResult",
    "InvocationRecord",
    "ListenerInfo",
    "UNBOUNDED",
    # Identifiers and patterns
    "TextualIdentifier",
    "OpaqueIdentifier",
    "parse_identifier",
    "matches",
    "validate_for_registration",
    "validate_for_emission",
    # Errors
    "EventHubError",
    "InvalidIdentifierError",
    "InvalidCallbackError",
    "InvalidCapacityError",
    # Settings and trace output
    "EventHubSettings",
    "get_settings",
    "clear_settings_cache",
    "TraceLogger",
    "RichConsoleLogger",
    "NullLogger",
    "ListLogger",
]
