"""Trace logger protocol for human-readable bus output.

The bus can narrate what it does (registrations, emissions, removals)
to a trace logger. Output is purely informational and never changes
dispatch results.
"""

from typing import Protocol, runtime_checkable

from event_hub.config import DEFAULT_LOG_PREFIX


@runtime_checkable
class TraceLogger(Protocol):
    """Protocol for bus trace output.

    Allows swapping the Rich console for non-interactive contexts.
    """

    def print(self, message: str) -> None:
        """Print one trace line.

        Args:
            message: Plain text, not interpreted as Rich markup
        """
        ...


class RichConsoleLogger:
    """Default trace logger writing to a Rich console."""

    def __init__(self, prefix: str = DEFAULT_LOG_PREFIX) -> None:
        from rich.console import Console

        self._console = Console(stderr=True)
        self._prefix = prefix

    def print(self, message: str) -> None:
        from rich.text import Text

        self._console.print(Text.assemble((self._prefix, "bold cyan"), " ", message))


class NullLogger:
    """Silent trace logger."""

    def print(self, message: str) -> None:
        pass


class ListLogger:
    """Trace logger that captures messages to a list for testing."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def print(self, message: str) -> None:
        self.messages.append(message)
