from typing import Any

import pytest
from appium.webdriver.common.appiumby import AppiumBy
from playwright.sync_api import Error as PlaywrightError

from uilocator.drivers import count_strategy_matches, find_first_present, to_appium_by, to_playwright_selector
from uilocator.errors import PlatformMismatchError
from uilocator.models import (
    ByAccessibilityId,
    ByClassChain,
    ByClassName,
    ById,
    ByPredicateString,
    ByXPath,
)


class FakeLocator:
    def __init__(self, count: int | Exception) -> None:
        self._count = count

    def count(self) -> int:
        if isinstance(self._count, Exception):
            raise self._count
        return self._count


class FakePage:
    def __init__(self, counts: dict[str, int | Exception]) -> None:
        self.counts = counts
        self.selectors: list[str] = []

    def locator(self, selector: str) -> FakeLocator:
        self.selectors.append(selector)
        return FakeLocator(self.counts.get(selector, 0))


class FakeDriver:
    def __init__(self, present: dict[tuple[str, str], list[Any]]) -> None:
        self.present = present
        self.lookups: list[tuple[str, str]] = []

    def execute_script(self, script: str, *args: Any) -> Any:
        return None

    def find_elements(self, by: str, value: str) -> list[Any]:
        self.lookups.append((by, value))
        return self.present.get((by, value), [])


def test_to_appium_by_maps_every_strategy() -> None:
    assert to_appium_by(ById("a")) == (AppiumBy.ID, "a")
    assert to_appium_by(ByAccessibilityId("a")) == (AppiumBy.ACCESSIBILITY_ID, "a")
    assert to_appium_by(ByClassName("a")) == (AppiumBy.CLASS_NAME, "a")
    assert to_appium_by(ByXPath("//a")) == (AppiumBy.XPATH, "//a")
    assert to_appium_by(ByPredicateString("label == 'a'")) == (AppiumBy.IOS_PREDICATE, "label == 'a'")
    assert to_appium_by(ByClassChain("**/Cell")) == (AppiumBy.IOS_CLASS_CHAIN, "**/Cell")


def test_to_playwright_selector() -> None:
    assert to_playwright_selector(ById('a"b')) == '[id="a\\"b"]'
    assert to_playwright_selector(ByAccessibilityId("Close")) == '[aria-label="Close"]'
    assert to_playwright_selector(ByClassName("primary-btn")) == ".primary-btn"
    assert to_playwright_selector(ByClassName("1col")) == '[class~="1col"]'
    assert to_playwright_selector(ByXPath("//a")) == "xpath=//a"
    with pytest.raises(PlatformMismatchError):
        to_playwright_selector(ByPredicateString("label == 'a'"))


def test_count_strategy_matches_uses_page_locator() -> None:
    page = FakePage({"xpath=//button": 3, '[id="broken"]': PlaywrightError("detached")})
    assert count_strategy_matches(page, ByXPath("//button")) == 3
    assert count_strategy_matches(page, ById("broken")) == 0
    assert page.selectors == ["xpath=//button", '[id="broken"]']


def test_find_first_present_returns_first_match() -> None:
    element = object()
    driver = FakeDriver({(AppiumBy.ID, "dismiss"): [element]})
    found = find_first_present(driver, [ByXPath("//*[@text='Clear all']"), ById("dismiss"), ById("later")])
    assert found == (ById("dismiss"), element)
    assert driver.lookups == [(AppiumBy.XPATH, "//*[@text='Clear all']"), (AppiumBy.ID, "dismiss")]
    assert find_first_present(driver, [ById("missing")]) is None
