from __future__ import annotations

import re

from .models import MatchMode

PREFIX_ID = "id"
PREFIX_NAME = "name"
PREFIX_RESOURCE_ID = "res"
PREFIX_ACCESSIBILITY = "a11y"
PREFIX_CLASS = "class"
PREFIX_XPATH = "xpath"
PREFIX_TEXT = "text"
PREFIX_NEARBY = "nearby"
PREFIX_ONE_OF = "one-of"
PREFIX_PREDICATE = "predicate"
PREFIX_CLASS_CHAIN = "cc"
PREFIX_DESCRIPTION = "desc"

PREFIX_INDEX = "index:"

XPATH_LEADING_TOKENS = ("/", "./", "(/", "( /", "(./", "( ./")

# (token, mode) pairs; the resolver re-sorts them longest-first.
MATCH_TOKENS: tuple[tuple[str, MatchMode], ...] = (
    ("REGEX:", MatchMode.REGEX),
    ("NUMERIC:", MatchMode.NUMERIC),
    ("CONTAINS_ANY_CASE:", MatchMode.CONTAINS_ANY_CASE),
    ("CONTAIN_ANY_CASE:", MatchMode.CONTAINS_ANY_CASE),
    ("CONTAINS:", MatchMode.CONTAINS),
    ("CONTAIN:", MatchMode.CONTAINS),
    ("STARTS_WITH_ANY_CASE:", MatchMode.STARTS_WITH_ANY_CASE),
    ("START_ANY_CASE:", MatchMode.STARTS_WITH_ANY_CASE),
    ("STARTS_WITH:", MatchMode.STARTS_WITH),
    ("START:", MatchMode.STARTS_WITH),
    ("ENDS_WITH_ANY_CASE:", MatchMode.ENDS_WITH_ANY_CASE),
    ("END_ANY_CASE:", MatchMode.ENDS_WITH_ANY_CASE),
    ("ENDS_WITH:", MatchMode.ENDS_WITH),
    ("END:", MatchMode.ENDS_WITH),
    ("LENGTH:", MatchMode.LENGTH),
    ("EXACT:", MatchMode.EXACT),
)

ONE_OF_PATTERN = re.compile(r"one-of\s*=(\s*\{.+\}\s*)+", re.IGNORECASE)
PLATFORM_TAG_PATTERN = re.compile(r"^(android|ios)\s*;\s*(.+)$", re.IGNORECASE | re.DOTALL)
NEARBY_PAIR_PATTERN = re.compile(r"\s*.+\s*[=:]\s*.+\s*")
NEARBY_RELATION_PATTERN = re.compile(
    r"^\s*(left-of|right-of|above|below|container|scroll-container|item)\s*:\s*.+$",
    re.IGNORECASE,
)

ATTRIBUTE_NAME_PATTERN = re.compile(r"^[A-Za-z_][\w.-]*$")

IMPLIED_ENABLED = "@enabled='true'"
IMPLIED_ANDROID_VISIBLE = "@displayed='true'"
IMPLIED_IOS_VISIBLE = "@visible='true'"

CONTAINER_CLASS_HINT = "group"
SCROLL_CONTAINER_CLASS_HINT = "scroll"

SCRIPT_SWIPE = "mobile: swipe"
SCRIPT_SELECT_PICKER_VALUE = "mobile: selectPickerWheelValue"

PICKER_STEP_DISTANCE = 25.0
PICKER_RESET_VELOCITY = 250

SCROLLABLE_LOCATOR = "//*[@scrollable='true' and @displayed='true' and @enabled='true']"
ANDROID_SCROLL_VIEW_LOCATOR = "//android.widget.ScrollView[@displayed='true' and @enabled='true']"
IOS_ALERT_LOCATOR = "//*[@type='XCUIElementTypeAlert' and @visible='true']"
PICKER_WHEEL_LOCATOR = "//XCUIElementTypePickerWheel"
IOS_KEYBOARD_DONE_LOCATOR = "//XCUIElementTypeKeyboard//XCUIElementTypeButton[@name='Done']"
DONE_LOCATOR = "name=Done"
CLEAR_ALL_NOTIFICATIONS_LOCATOR = (
    "one-of="
    "{text=Clear all}"
    "{android;id=com.android.systemui:id/dismiss_text}"
    "{android;id=com.android.systemui:id/clear_all_button}"
)


def starts_with_xpath(locator: str, tokens: tuple[str, ...] = XPATH_LEADING_TOKENS) -> bool:
    text = locator.lstrip()
    return any(text.startswith(token) for token in tokens)


def is_index_request(value: str) -> bool:
    return value.startswith(PREFIX_INDEX)
