"""Shared pytest fixtures for event-hub tests."""

from collections.abc import Iterator

import pytest

from event_hub import EventBus, EventHubSettings, ListLogger, clear_settings_cache, reset_default_bus


@pytest.fixture
def trace() -> ListLogger:
    """Trace logger capturing bus output."""
    return ListLogger()


@pytest.fixture
def bus(trace: ListLogger) -> EventBus:
    """Fresh bus with trace output off and no lock."""
    settings = EventHubSettings(log_enabled=False, thread_safe=False)
    return EventBus(settings=settings, trace_logger=trace)


@pytest.fixture(autouse=True)
def _clean_globals() -> Iterator[None]:
    """Reset the default bus and settings cache around every test."""
    reset_default_bus()
    clear_settings_cache()
    yield
    reset_default_bus()
    clear_settings_cache()
