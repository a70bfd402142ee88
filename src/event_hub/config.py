"""Settings for event-hub.

Uses pydantic-settings so defaults can be changed through environment
variables (prefixed ``EVENT_HUB_``) or a .env file found by searching up
the directory tree from the current directory.

    EVENT_HUB_LOG_ENABLED=true      # start buses with trace output on
    EVENT_HUB_LOG_PREFIX="[bus]"    # header of every trace line
    EVENT_HUB_THREAD_SAFE=true      # guard buses with a re-entrant lock
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_PREFIX = "[event-hub]"


class EventHubSettings(BaseSettings):
    """Defaults applied to every new EventBus."""

    model_config = SettingsConfigDict(
        env_prefix="EVENT_HUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_enabled: bool = False
    log_prefix: str = DEFAULT_LOG_PREFIX
    thread_safe: bool = False


def find_dotenv(start_path: Path | None = None) -> Path | None:
    """Find a .env file by searching up the directory tree.

    Stops at the home directory. A start path outside the home directory
    is searched on its own.
    """
    current = (start_path or Path.cwd()).resolve()
    home = Path.home().resolve()

    while True:
        candidate = current / ".env"
        if candidate.exists():
            return candidate
        if current == home or home not in current.parents:
            return None
        current = current.parent


@lru_cache(maxsize=1)
def get_settings() -> EventHubSettings:
    """Get the cached settings instance."""
    env_file = find_dotenv()
    if env_file:
        return EventHubSettings(_env_file=env_file)
    return EventHubSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache. Useful for testing."""
    get_settings.cache_clear()
