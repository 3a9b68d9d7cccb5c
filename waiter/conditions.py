"""
waiter/conditions.py
--------------------
Conditions to hand to the poller, built from small composable pieces.

- Text transforms (`fold_case`, `remove_whitespace`) and relations
  (`equals`, `contains`, `starts_with`) combine into `text_matcher`.
- Condition factories (`page_ready`, `element_visible`, `url_matches`, ...)
  return `(driver) -> bool` callables.
- Element targets may be a WebElement or a `(By, value)` locator; locators
  are looked up again on every evaluation.

Use these with `waiter.waits.until` or through the helpers in `waiter.actions`.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Union

from selenium.common.exceptions import (
    ElementNotInteractableException,
    ElementNotSelectableException,
    ElementNotVisibleException,
    NoSuchElementException,
)
from selenium.webdriver.remote.webelement import WebElement

from .exceptions import ConfigurationError

Target = Union[WebElement, tuple]
Transform = Callable[[str], str]

# Raised by click() while the element is still covered, hidden or disabled.
CLICK_IGNORED_EXCEPTIONS = (
    ElementNotInteractableException,
    ElementNotSelectableException,
    ElementNotVisibleException,
)

# Element not in the DOM yet; only meaningful when the target is a locator.
LOCATOR_IGNORED_EXCEPTIONS = (NoSuchElementException,)

PAGE_READY_SCRIPT = "return document.readyState"

_WHITESPACE = re.compile(r"\s", re.ASCII)


# --- Text transforms ---

def fold_case(value: str) -> str:
    return value.casefold()


def remove_whitespace(value: str) -> str:
    """Remove ASCII whitespace (space, tab, newline, CR, FF, VT); NBSP is kept."""
    return _WHITESPACE.sub("", value)


def normalizer(*transforms: Transform) -> Transform:
    """Chain transforms left to right; no transforms means identity."""
    def apply(value: str) -> str:
        for transform in transforms:
            value = transform(value)
        return value
    return apply


# --- Relations ---

def equals(actual: str, expected: str) -> bool:
    return actual == expected


def contains(actual: str, expected: str) -> bool:
    return expected in actual


def starts_with(actual: str, expected: str) -> bool:
    return actual.startswith(expected)


RELATIONS: dict[str, Callable[[str, str], bool]] = {
    "equals": equals,
    "contains": contains,
    "starts_with": starts_with,
}


def get_relation(name: str) -> Callable[[str, str], bool]:
    try:
        return RELATIONS[name.replace("-", "_")]
    except KeyError:
        raise ConfigurationError(
            f"Unknown relation {name!r}; expected one of {', '.join(sorted(RELATIONS))}"
        ) from None


def text_matcher(
    expected: str,
    relation: str = "equals",
    *,
    ignore_case: bool = False,
    ignore_whitespace: bool = False,
) -> Callable[[str | None], bool]:
    """
    Build a check comparing an actual string against `expected`.

    The same transforms are applied to both sides, so
    `text_matcher("this string here", ignore_whitespace=True)` accepts
    "this      string  here". A None actual value never matches.
    """
    transforms = []
    if ignore_case:
        transforms.append(fold_case)
    if ignore_whitespace:
        transforms.append(remove_whitespace)
    normalize = normalizer(*transforms)
    compare = get_relation(relation)
    target = normalize(expected)

    def matches(actual: str | None) -> bool:
        if actual is None:
            return False
        return compare(normalize(str(actual)), target)

    return matches


# --- Element targets ---

def is_locator(target: Any) -> bool:
    return isinstance(target, tuple) and len(target) == 2


def resolve(driver, target: Target):
    """Return the element for `target`, finding it first if it is a locator."""
    if is_locator(target):
        return driver.find_element(*target)
    return target


def ignored_for(target: Target, extra=()) -> tuple[type[BaseException], ...]:
    """Ignorable errors for a wait on `target`, plus any caller-supplied ones."""
    ignored = tuple(extra)
    if is_locator(target):
        ignored += LOCATOR_IGNORED_EXCEPTIONS
    return ignored


# --- Condition factories ---

def page_ready() -> Callable[[Any], bool]:
    def condition(driver) -> bool:
        return str(driver.execute_script(PAGE_READY_SCRIPT)) == "complete"
    return condition


def element_visible(target: Target) -> Callable[[Any], bool]:
    def condition(driver) -> bool:
        return bool(resolve(driver, target).is_displayed())
    return condition


def element_text_matches(
    target: Target,
    expected: str,
    relation: str = "equals",
    *,
    ignore_case: bool = False,
    ignore_whitespace: bool = False,
) -> Callable[[Any], bool]:
    matches = text_matcher(expected, relation, ignore_case=ignore_case, ignore_whitespace=ignore_whitespace)

    def condition(driver) -> bool:
        return matches(resolve(driver, target).text)
    return condition


def element_attribute_matches(
    target: Target,
    attribute: str,
    expected: str,
    relation: str = "equals",
    *,
    ignore_case: bool = False,
    ignore_whitespace: bool = False,
) -> Callable[[Any], bool]:
    matches = text_matcher(expected, relation, ignore_case=ignore_case, ignore_whitespace=ignore_whitespace)

    def condition(driver) -> bool:
        return matches(resolve(driver, target).get_attribute(attribute))
    return condition


def url_matches(
    expected: str,
    relation: str = "equals",
    *,
    ignore_case: bool = False,
) -> Callable[[Any], bool]:
    matches = text_matcher(expected, relation, ignore_case=ignore_case)

    def condition(driver) -> bool:
        return matches(driver.current_url)
    return condition


def click_succeeds(target: Target) -> Callable[[Any], bool]:
    """Click on every evaluation; holds once a click goes through."""
    def condition(driver) -> bool:
        resolve(driver, target).click()
        return True
    return condition
