"""
tests/conftest.py
-----------------
Fake clock, driver and element used across the test suite.

No real browser is started: the fakes expose the same attributes the wait
helpers use (current_url, execute_script, get, find_element, is_displayed,
text, get_attribute, click). The `clock` fixture stands in for the `time`
module inside Selenium's WebDriverWait, so polling takes no real time.
"""

import pytest
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.support import wait as selenium_wait

from waiter import waits
from waiter.config import WaiterConfig
from waiter.waits import ConditionPoller


class FakeClock:
    """Replacement `time` module whose clock only moves when sleep() is called."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def monotonic(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


def _step(values):
    """Return the next value, repeating the last one once exhausted."""
    if len(values) > 1:
        return values.pop(0)
    return values[0]


class FakeElement:
    def __init__(self, text="", attributes=None, displayed=True, click_errors=()):
        self._texts = text if isinstance(text, list) else [text]
        self._displayed = displayed if isinstance(displayed, list) else [displayed]
        self.attributes = attributes or {}
        self.click_errors = list(click_errors)
        self.click_attempts = 0
        self.clicks = 0

    @property
    def text(self):
        return _step(self._texts)

    def is_displayed(self):
        value = _step(self._displayed)
        if isinstance(value, BaseException):
            raise value
        return value

    def get_attribute(self, name):
        value = self.attributes.get(name)
        if isinstance(value, list):
            return _step(value)
        return value

    def click(self):
        self.click_attempts += 1
        if self.click_errors:
            raise self.click_errors.pop(0)
        self.clicks += 1


class FakeDriver:
    def __init__(self, url="about:blank", ready_states=("complete",), clock=None):
        self._url = url
        self.ready_states = list(ready_states)
        self.clock = clock
        self.url_changes = []
        self.elements = {}
        self.missing_lookups = {}
        self.visited = []
        self.scripts = []
        self.url_reads = 0

    @property
    def current_url(self):
        self.url_reads += 1
        if self.clock is not None:
            for at, url in self.url_changes:
                if self.clock.now >= at:
                    self._url = url
        return self._url

    def get(self, url):
        self.visited.append(url)
        self._url = url

    def execute_script(self, script):
        self.scripts.append(script)
        return _step(self.ready_states)

    def find_element(self, by, value):
        key = (by, value)
        if self.missing_lookups.get(key, 0) > 0:
            self.missing_lookups[key] -= 1
            raise NoSuchElementException(f"no element {by}={value}")
        if key not in self.elements:
            raise NoSuchElementException(f"no element {by}={value}")
        return self.elements[key]


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(selenium_wait, "time", fake)
    monkeypatch.setattr(waits, "time", fake)
    return fake


@pytest.fixture
def poller(clock):
    """ConditionPoller with a 10s / 0.5s default, driven by the fake clock."""
    return ConditionPoller(config=WaiterConfig(timeout_sec=10, poll_interval_sec=0.5))


@pytest.fixture
def fast_waits(monkeypatch):
    """Short real-time defaults for tests going through waiter.actions."""
    monkeypatch.setenv("WAITER_TIMEOUT", "1")
    monkeypatch.setenv("WAITER_POLL_INTERVAL", "0.01")
