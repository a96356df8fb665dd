from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Protocol, Sequence

from appium.webdriver.common.appiumby import AppiumBy
from playwright.sync_api import Error as PlaywrightError

from .errors import PlatformMismatchError
from .models import (
    ByAccessibilityId,
    ByClassChain,
    ByClassName,
    ById,
    ByPredicateString,
    ByXPath,
    Strategy,
)

if TYPE_CHECKING:
    from playwright.sync_api import Page

_CSS_SAFE_IDENT_PATTERN = re.compile(r"^-?[A-Za-z_][A-Za-z0-9_-]*$")


class ScriptingDriver(Protocol):
    def execute_script(self, script: str, *args: Any) -> Any: ...

    def find_elements(self, by: str, value: str) -> Sequence[Any]: ...


class PickerElement(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def size(self) -> Mapping[str, Any]: ...

    def get_attribute(self, name: str) -> str | None: ...

    def send_keys(self, *value: str) -> None: ...


def to_appium_by(strategy: Strategy) -> tuple[str, str]:
    if isinstance(strategy, ById):
        return AppiumBy.ID, strategy.value
    if isinstance(strategy, ByAccessibilityId):
        return AppiumBy.ACCESSIBILITY_ID, strategy.value
    if isinstance(strategy, ByClassName):
        return AppiumBy.CLASS_NAME, strategy.value
    if isinstance(strategy, ByXPath):
        return AppiumBy.XPATH, strategy.value
    if isinstance(strategy, ByPredicateString):
        return AppiumBy.IOS_PREDICATE, strategy.value
    if isinstance(strategy, ByClassChain):
        return AppiumBy.IOS_CLASS_CHAIN, strategy.value
    raise TypeError(f"Unsupported strategy: {strategy!r}")


def escape_css_attribute_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def to_playwright_selector(strategy: Strategy) -> str:
    if isinstance(strategy, ById):
        return f'[id="{escape_css_attribute_value(strategy.value)}"]'
    if isinstance(strategy, ByAccessibilityId):
        return f'[aria-label="{escape_css_attribute_value(strategy.value)}"]'
    if isinstance(strategy, ByClassName):
        if _CSS_SAFE_IDENT_PATTERN.fullmatch(strategy.value):
            return f".{strategy.value}"
        return f'[class~="{escape_css_attribute_value(strategy.value)}"]'
    if isinstance(strategy, ByXPath):
        return f"xpath={strategy.value}"
    if isinstance(strategy, (ByPredicateString, ByClassChain)):
        raise PlatformMismatchError(
            f"{strategy.kind} locators only apply to iOS devices: {strategy.value}",
            locator=strategy.value,
        )
    raise TypeError(f"Unsupported strategy: {strategy!r}")


def count_strategy_matches(page: Page, strategy: Strategy) -> int:
    selector = to_playwright_selector(strategy)
    try:
        return page.locator(selector).count()
    except PlaywrightError:
        return 0


def find_first_present(driver: ScriptingDriver, strategies: Iterable[Strategy]) -> tuple[Strategy, Any] | None:
    """Return the first alternative that matches at least one element, with that element."""
    for strategy in strategies:
        by, value = to_appium_by(strategy)
        elements = driver.find_elements(by, value)
        if elements:
            return strategy, elements[0]
    return None
