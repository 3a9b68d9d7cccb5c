"""
waiter/waits.py
---------------
The polling primitive every wait helper is built on.

- `PollRequest`: what to evaluate, for how long, and which errors mean
  "not yet".
- `ConditionPoller`: runs the request through Selenium's `WebDriverWait`,
  counting attempts and sorting condition errors into ignorable and fatal.
- `until`: one-call shortcut used by the helpers in `waiter.actions`.

The condition is always evaluated at least once before the deadline is
checked, so a condition that already holds succeeds even with a tiny timeout.
"""
from __future__ import annotations

import logging
import math
import numbers
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.support.ui import WebDriverWait

from .config import WaiterConfig, default_config
from .exceptions import (
    ConfigurationError,
    PredicateError,
    WaitCancelledError,
    WaitTimeoutError,
)

logger = logging.getLogger(__name__)

Condition = Callable[[Any], Any]


def _check_positive(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"{name} must be a number of seconds, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive finite number, got {value!r}")


def _is_exception_class(value) -> bool:
    return isinstance(value, type) and issubclass(value, BaseException)


@dataclass(frozen=True)
class PollRequest:
    """
    One wait call.

    Args:
        condition: Callable taking the subject; a truthy return ends the wait
        timeout: Seconds to wait, or None for the configured default
        poll_interval: Seconds between evaluations, or None for the default
        ignored_exceptions: Exception types treated as "not yet true"
        message: Prefix for error messages and log lines
    """
    condition: Condition
    timeout: Optional[float] = None
    poll_interval: Optional[float] = None
    ignored_exceptions: tuple[type[BaseException], ...] = ()
    message: str = ""

    def __post_init__(self):
        if not callable(self.condition):
            raise ConfigurationError(f"condition must be callable, got {self.condition!r}")
        if self.timeout is not None:
            _check_positive("timeout", self.timeout)
        if self.poll_interval is not None:
            _check_positive("poll_interval", self.poll_interval)
        # Accept a single class or any iterable of classes.
        ignored = self.ignored_exceptions
        if isinstance(ignored, type):
            ignored = (ignored,)
        try:
            ignored = tuple(ignored)
        except TypeError as e:
            raise ConfigurationError(f"ignored_exceptions must be exception classes, got {ignored!r}") from e
        for entry in ignored:
            if not _is_exception_class(entry):
                raise ConfigurationError(f"ignored_exceptions entries must be exception classes, got {entry!r}")
        object.__setattr__(self, "ignored_exceptions", ignored)


@dataclass(frozen=True)
class PollOutcome:
    value: Any
    attempts: int
    elapsed: float


class _Attempts:
    """
    Condition wrapper handed to WebDriverWait.

    Ignorable errors become a falsy result and non-ignorable ones become
    PredicateError, so WebDriverWait only ever sees values or our own errors.
    Cancellation is checked after a falsy result and before each retry.
    """

    def __init__(self, request: PollRequest, start: float, cancel_event: threading.Event | None):
        self.request = request
        self.start = start
        self.cancel_event = cancel_event
        self.count = 0
        self.last_exception: BaseException | None = None

    @property
    def label(self) -> str:
        return self.request.message or "wait"

    def _check_cancelled(self) -> None:
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise WaitCancelledError(self.request.message, time.monotonic() - self.start, self.count)

    def __call__(self, subject):
        if self.count:
            self._check_cancelled()
        self.count += 1
        try:
            value = self.request.condition(subject)
        except self.request.ignored_exceptions as e:
            self.last_exception = e
            logger.debug(f"{self.label}: attempt {self.count} ignored {type(e).__name__}: {e}")
            value = None
        except Exception as e:
            logger.debug(f"{self.label}: attempt {self.count} raised {type(e).__name__}")
            raise PredicateError(self.request.message, e, self.count) from e
        if not value:
            self._check_cancelled()
        return value


class ConditionPoller:
    """
    Sequential fixed-interval poller on top of `WebDriverWait`.

    `config` supplies the timeout and interval when a request leaves them
    unset; without one, defaults are read from the environment on each call.
    """

    def __init__(self, config: WaiterConfig | None = None):
        self.config = config

    def _resolve(self, request: PollRequest) -> tuple[float, float]:
        config = self.config or default_config()
        timeout = request.timeout if request.timeout is not None else config.timeout_sec
        interval = request.poll_interval if request.poll_interval is not None else config.poll_interval_sec
        _check_positive("timeout", timeout)
        _check_positive("poll_interval", interval)
        return timeout, interval

    def wait_until(
        self,
        subject,
        request: PollRequest,
        cancel_event: threading.Event | None = None,
    ) -> PollOutcome:
        """
        Block until `request.condition(subject)` is truthy.

        Returns:
            PollOutcome with the condition's value, attempt count and elapsed seconds

        Raises:
            ConfigurationError: timeout or poll interval is not a positive finite number
            PredicateError: condition raised an error not in ignored_exceptions
            WaitTimeoutError: deadline reached without the condition holding
            WaitCancelledError: cancel_event was set between polls
        """
        timeout, interval = self._resolve(request)
        start = time.monotonic()
        attempts = _Attempts(request, start, cancel_event)
        wait = WebDriverWait(subject, timeout, poll_frequency=interval)

        try:
            value = wait.until(attempts, request.message)
        except TimeoutException as e:
            elapsed = time.monotonic() - start
            logger.warning(f"{attempts.label}: timed out after {elapsed:.2f}s ({attempts.count} attempts)")
            raise WaitTimeoutError(
                request.message, timeout, elapsed, attempts.count, attempts.last_exception
            ) from e

        elapsed = time.monotonic() - start
        logger.info(f"{attempts.label}: satisfied after {attempts.count} attempt(s), {elapsed:.2f}s")
        return PollOutcome(value=value, attempts=attempts.count, elapsed=elapsed)


def wait_until(
    subject,
    condition: Condition,
    timeout: float | None = None,
    *,
    poll_interval: float | None = None,
    ignored_exceptions=(),
    message: str = "",
    cancel_event: threading.Event | None = None,
) -> PollOutcome:
    """Build a PollRequest and run it with a default ConditionPoller."""
    request = PollRequest(
        condition=condition,
        timeout=timeout,
        poll_interval=poll_interval,
        ignored_exceptions=ignored_exceptions,
        message=message,
    )
    return ConditionPoller().wait_until(subject, request, cancel_event=cancel_event)


def until(driver, condition: Condition, timeout: float | None = None, **kwargs):
    """Wait for `condition(driver)` and return its truthy value."""
    return wait_until(driver, condition, timeout, **kwargs).value
