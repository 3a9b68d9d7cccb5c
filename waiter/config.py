"""
waiter/config.py
----------------
Process-wide defaults for waits and for the smoke-check browser.

- `WaiterConfig`: default timeout and poll interval used when a wait call
  does not pass its own.
- `BrowserConfig`: Chrome settings for the `waiter open` command.
- Values are read from environment variables (.env) with sensible defaults.

Use: `default_config()` / `browser_config()` for freshly read settings.
"""
from dataclasses import dataclass
import os

from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load .env file if it exists
load_dotenv()

DEFAULT_TIMEOUT_SEC = 30
DEFAULT_POLL_INTERVAL_SEC = 0.5


@dataclass(frozen=True)
class WaiterConfig:
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    poll_interval_sec: float = DEFAULT_POLL_INTERVAL_SEC


@dataclass(frozen=True)
class BrowserConfig:
    headless: bool = True
    window_width: int = 1400
    window_height: int = 900
    page_load_timeout_sec: int = 60
    implicit_wait_sec: int = 0


def _env(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name}={raw!r} is not a valid {cast.__name__}") from e


def default_config() -> WaiterConfig:
    """
    Read the wait defaults from the current environment.

    Parsing happens here rather than at import time, so a malformed
    WAITER_TIMEOUT surfaces as ConfigurationError from the wait call.
    """
    return WaiterConfig(
        timeout_sec=_env("WAITER_TIMEOUT", DEFAULT_TIMEOUT_SEC, float),
        poll_interval_sec=_env("WAITER_POLL_INTERVAL", DEFAULT_POLL_INTERVAL_SEC, float),
    )


def browser_config() -> BrowserConfig:
    return BrowserConfig(
        headless=os.getenv("WAITER_HEADLESS", "1") == "1",
        window_width=_env("WAITER_WIN_W", 1400, int),
        window_height=_env("WAITER_WIN_H", 900, int),
        page_load_timeout_sec=_env("WAITER_PAGELOAD_TIMEOUT", 60, int),
        implicit_wait_sec=_env("WAITER_IMPLICIT_WAIT", 0, int),
    )
