from __future__ import annotations

from dataclasses import dataclass
import logging

from . import locator_rules as rules
from .compound import is_compound_locator, resolve_one_of
from .config import DEFAULT_CONFIG, LocatorConfig
from .errors import EmptyLocatorError, MalformedCompoundError, PlatformMismatchError
from .models import (
    ByAccessibilityId,
    ByClassChain,
    ByClassName,
    ById,
    ByPredicateString,
    ByXPath,
    LocatorSpec,
    Platform,
    Strategy,
)
from .nearby import resolve_nearby
from .text_filter import resolve_text_filter
from .xpath_text import xpath_literal

logger = logging.getLogger("uilocator.resolve")


def fix_relative_xpath(locator: str) -> str:
    """Drop the leading ``.`` of ``.//x`` style paths so they search from the document root."""
    text = locator.strip()
    if not text:
        return locator
    if text.startswith(".//"):
        return text[1:]
    if text.startswith("(.//"):
        return "(" + text[2:]
    if text.startswith("( .//"):
        return "(" + text[3:]
    return text


@dataclass(frozen=True, slots=True)
class LocatorParser:
    platform: Platform = Platform.GENERIC
    config: LocatorConfig = DEFAULT_CONFIG

    def resolve(self, locator: str, allow_relative: bool = False) -> Strategy:
        if not locator or not locator.strip():
            raise EmptyLocatorError(f"Invalid locator: {locator!r}", locator=locator)

        if rules.starts_with_xpath(locator, self.config.xpath_leading_tokens):
            return ByXPath(self._xpath(locator, allow_relative))
        if "=" not in locator:
            return ById(locator.strip())

        head, _, value = locator.partition("=")
        prefix = head.strip().lower()
        trimmed = value.strip()

        if prefix in (rules.PREFIX_ID, rules.PREFIX_NAME):
            return ById(trimmed)
        if prefix == rules.PREFIX_RESOURCE_ID:
            return ByXPath(f"//*[@resource-id={xpath_literal(trimmed)}]")
        if prefix == rules.PREFIX_ACCESSIBILITY:
            return ByAccessibilityId(trimmed)
        if prefix == rules.PREFIX_CLASS:
            return ByClassName(trimmed)
        if prefix == rules.PREFIX_XPATH:
            return ByXPath(self._xpath(trimmed, allow_relative))
        if prefix == rules.PREFIX_TEXT:
            return ByXPath(f"//*[{resolve_text_filter(self.platform, value, self.config)}]")
        if prefix == rules.PREFIX_NEARBY:
            return resolve_nearby(self.platform, trimmed, self.config)
        if prefix == rules.PREFIX_ONE_OF:
            raise MalformedCompoundError(
                f"one-of locator resolves to several alternatives, use resolve_compound(): {locator}",
                locator=locator,
            )

        if prefix == rules.PREFIX_PREDICATE:
            self._require_ios(locator)
            return ByPredicateString(value)
        if prefix == rules.PREFIX_CLASS_CHAIN:
            self._require_ios(locator)
            return ByClassChain(value)
        if prefix == rules.PREFIX_DESCRIPTION:
            if not self.platform.is_android:
                raise PlatformMismatchError(f"Locator only supported on Android: {locator}", locator=locator)
            return ByXPath(f"//*[@content-desc={xpath_literal(trimmed)}]")

        # unknown prefixes are kept as plain ids; some ids contain "="
        logger.debug("unrecognized locator prefix %r, falling back to id lookup", prefix)
        return ById(trimmed)

    def resolve_spec(self, spec: LocatorSpec) -> Strategy:
        return self.resolve(spec.locator, spec.allow_relative)

    def resolve_compound(self, compound_locator: str) -> list[Strategy]:
        return resolve_one_of(self.platform, compound_locator, self.resolve)

    def resolve_all(self, locator: str, allow_relative: bool = False) -> list[Strategy]:
        if locator and is_compound_locator(locator):
            return self.resolve_compound(locator)
        return [self.resolve(locator, allow_relative)]

    def _xpath(self, locator: str, allow_relative: bool) -> str:
        return locator.strip() if allow_relative else fix_relative_xpath(locator)

    def _require_ios(self, locator: str) -> None:
        if not self.platform.is_ios:
            raise PlatformMismatchError(f"Locator only supported on iOS: {locator}", locator=locator)


def resolve(
    locator: str,
    allow_relative: bool = False,
    platform: Platform = Platform.GENERIC,
    config: LocatorConfig = DEFAULT_CONFIG,
) -> Strategy:
    return LocatorParser(platform, config).resolve(locator, allow_relative)


def resolve_compound(
    platform: Platform,
    compound_locator: str,
    config: LocatorConfig = DEFAULT_CONFIG,
) -> list[Strategy]:
    return LocatorParser(platform, config).resolve_compound(compound_locator)
