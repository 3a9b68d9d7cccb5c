"""
waiter/
-------
Selenium wait helpers built on one polling primitive.

- `wait_until` / `ConditionPoller`: poll a condition at a fixed interval
  until it holds or the timeout passes.
- `waiter.conditions`: composable text checks and condition factories.
- `waiter.actions`: named helpers (get, click, wait_for_url, ...).

Usage:
    from waiter import actions
    actions.get(driver, "https://example.com")
    actions.click_and_wait_for_url(driver, (By.ID, "next"), "/done", relation="contains")
"""

from .config import BrowserConfig, WaiterConfig, browser_config, default_config
from .exceptions import (
    ConfigurationError,
    PredicateError,
    WaitCancelledError,
    WaiterError,
    WaitTimeoutError,
)
from .waits import ConditionPoller, PollOutcome, PollRequest, until, wait_until

__version__ = "0.1.0"

__all__ = [
    "BrowserConfig",
    "browser_config",
    "WaiterConfig",
    "default_config",
    "ConfigurationError",
    "PredicateError",
    "WaitCancelledError",
    "WaiterError",
    "WaitTimeoutError",
    "ConditionPoller",
    "PollOutcome",
    "PollRequest",
    "until",
    "wait_until",
]
