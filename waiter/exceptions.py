"""
waiter/exceptions.py
--------------------
Error taxonomy for wait helpers.

- `ConfigurationError`: invalid timeout or poll interval, raised before polling.
- `WaitTimeoutError`: deadline reached without the condition being observed.
- `PredicateError`: the condition raised an error that is not ignorable.
- `WaitCancelledError`: the caller's cancellation event was set between polls.

All derive from `WaiterError` so callers can catch the whole family.
"""
from __future__ import annotations


class WaiterError(RuntimeError):
    ...


class ConfigurationError(WaiterError, ValueError):
    ...


class WaitTimeoutError(WaiterError):
    """Condition never held within the timeout."""

    def __init__(
        self,
        message: str,
        timeout: float,
        elapsed: float,
        attempts: int,
        last_exception: BaseException | None = None,
    ):
        text = f"Timed out after {elapsed:.2f}s (timeout={timeout}s, attempts={attempts})"
        if message:
            text = f"{message}: {text}"
        if last_exception is not None:
            text += f"; last ignored error: {type(last_exception).__name__}: {last_exception}"
        super().__init__(text)
        self.message = message
        self.timeout = timeout
        self.elapsed = elapsed
        self.attempts = attempts
        self.last_exception = last_exception


class PredicateError(WaiterError):
    """Condition raised a non-ignorable error; polling stopped."""

    def __init__(self, message: str, cause: BaseException, attempts: int):
        text = f"Condition raised {type(cause).__name__} on attempt {attempts}: {cause}"
        if message:
            text = f"{message}: {text}"
        super().__init__(text)
        self.message = message
        self.cause = cause
        self.attempts = attempts


class WaitCancelledError(WaiterError):
    def __init__(self, message: str, elapsed: float, attempts: int):
        text = f"Wait cancelled after {elapsed:.2f}s ({attempts} attempts)"
        if message:
            text = f"{message}: {text}"
        super().__init__(text)
        self.message = message
        self.elapsed = elapsed
        self.attempts = attempts
