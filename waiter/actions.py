"""
waiter/actions.py
-----------------
Named wait helpers to reduce boilerplate.

- Navigate and wait for the page to finish loading with `get`.
- Wait for elements to become visible or for their text/attributes to match.
- Wait for the browser URL to match, then for the new page to load.
- Click elements, retrying while they are not yet interactable.

Every helper takes the driver first and an optional timeout in seconds;
`None` means the configured default (see `waiter.config`).
"""
from __future__ import annotations

import logging

from . import conditions
from .conditions import CLICK_IGNORED_EXCEPTIONS, Target, ignored_for
from .waits import until

logger = logging.getLogger(__name__)


# --- Page load ---

def wait_for_page_load(driver, timeout: float | None = None) -> None:
    """Wait until document.readyState is 'complete'."""
    until(driver, conditions.page_ready(), timeout, message="page load")


def get(driver, url: str, timeout: float | None = None) -> None:
    """Open `url` and wait for the page to load completely."""
    logger.info(f"Navigating to {url}")
    driver.get(url)
    wait_for_page_load(driver, timeout)


def get_and_wait_for_element_visible(driver, url: str, target: Target, timeout: float | None = None) -> None:
    get(driver, url, timeout)
    wait_for_element_visible(driver, target, timeout)


def get_url_and_wait_for_url(
    driver,
    url_to_get: str,
    url_to_wait_for: str,
    timeout: float | None = None,
    *,
    relation: str = "equals",
    ignore_case: bool = False,
) -> None:
    """
    Open a URL that is expected to redirect, then wait for the redirect target.

    Args:
        driver: WebDriver instance
        url_to_get: URL to open
        url_to_wait_for: URL (or fragment of it, see relation) to wait for
        timeout: Seconds for each wait step
        relation: "equals", "contains" or "starts_with"
        ignore_case: Compare case-insensitively
    """
    logger.info(f"Navigating to {url_to_get}")
    driver.get(url_to_get)
    wait_for_url(driver, url_to_wait_for, timeout, relation=relation, ignore_case=ignore_case)


# --- Elements ---

def wait_for_element_visible(driver, target: Target, timeout: float | None = None, *, ignored_exceptions=()) -> None:
    until(
        driver,
        conditions.element_visible(target),
        timeout,
        ignored_exceptions=ignored_for(target, ignored_exceptions),
        message=f"element {_describe(target)} visible",
    )


def click(driver, target: Target, timeout: float | None = None) -> None:
    """Try to click `target` until a click goes through or the timeout passes."""
    until(
        driver,
        conditions.click_succeeds(target),
        timeout,
        ignored_exceptions=ignored_for(target, CLICK_IGNORED_EXCEPTIONS),
        message=f"click {_describe(target)}",
    )


def wait_for_element_text(
    driver,
    target: Target,
    expected: str,
    timeout: float | None = None,
    *,
    relation: str = "equals",
    ignore_case: bool = False,
    ignore_whitespace: bool = False,
    ignored_exceptions=(),
) -> None:
    """
    Wait for the element's text to match `expected`.

    With ignore_whitespace, all whitespace is removed from both sides before
    comparing, so 'this      string  here' equals 'this string here'.
    """
    until(
        driver,
        conditions.element_text_matches(
            target, expected, relation, ignore_case=ignore_case, ignore_whitespace=ignore_whitespace
        ),
        timeout,
        ignored_exceptions=ignored_for(target, ignored_exceptions),
        message=f"text of {_describe(target)} {relation} {expected!r}",
    )


def wait_for_element_attribute(
    driver,
    target: Target,
    attribute: str,
    expected: str,
    timeout: float | None = None,
    *,
    relation: str = "equals",
    ignore_case: bool = False,
    ignore_whitespace: bool = False,
    ignored_exceptions=(),
) -> None:
    until(
        driver,
        conditions.element_attribute_matches(
            target, attribute, expected, relation, ignore_case=ignore_case, ignore_whitespace=ignore_whitespace
        ),
        timeout,
        ignored_exceptions=ignored_for(target, ignored_exceptions),
        message=f"attribute {attribute!r} of {_describe(target)} {relation} {expected!r}",
    )


# --- URL ---

def wait_for_url(
    driver,
    expected: str,
    timeout: float | None = None,
    *,
    relation: str = "equals",
    ignore_case: bool = False,
) -> None:
    """Wait for the current URL to match, then for that page to finish loading."""
    until(
        driver,
        conditions.url_matches(expected, relation, ignore_case=ignore_case),
        timeout,
        message=f"url {relation} {expected!r}",
    )
    wait_for_page_load(driver, timeout)


# --- Click then wait ---

def click_and_wait_for_url(
    driver,
    target: Target,
    expected: str,
    timeout: float | None = None,
    *,
    relation: str = "equals",
    ignore_case: bool = False,
) -> None:
    click(driver, target, timeout)
    wait_for_url(driver, expected, timeout, relation=relation, ignore_case=ignore_case)


def click_and_wait_for_page_load(driver, target: Target, timeout: float | None = None) -> None:
    """Click and wait for the same page to reload; use wait_for_url for redirects."""
    click(driver, target, timeout)
    wait_for_page_load(driver, timeout)


def _describe(target: Target) -> str:
    if conditions.is_locator(target):
        by, value = target
        return f"{by}={value!r}"
    return "<element>"
