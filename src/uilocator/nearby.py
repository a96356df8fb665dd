from __future__ import annotations

from dataclasses import dataclass, field
import logging

from .config import DEFAULT_CONFIG, LocatorConfig
from .errors import InvalidIndexError, InvalidSpecError, LocatorError
from .locator_rules import (
    ATTRIBUTE_NAME_PATTERN,
    CONTAINER_CLASS_HINT,
    IMPLIED_ANDROID_VISIBLE,
    IMPLIED_ENABLED,
    IMPLIED_IOS_VISIBLE,
    NEARBY_PAIR_PATTERN,
    NEARBY_RELATION_PATTERN,
    SCROLL_CONTAINER_CLASS_HINT,
)
from .models import LAST, ByXPath, IndexSpec, Last, Ordinal, Platform, SpatialRelation
from .syntax import brace_groups, is_enclosed
from .text_filter import resolve_filter, resolve_link_text_filter
from .xpath_text import lower_attribute

logger = logging.getLogger("uilocator.resolve")


@dataclass(slots=True)
class _NearbyQuery:
    predicates: list[str]
    ancestors: list[str] = field(default_factory=list)
    index: IndexSpec | None = None

    def to_xpath(self) -> str:
        xpath = "//*[" + " and ".join(self.predicates) + "]"
        if self.ancestors:
            offset = f"-{self.index.position}" if isinstance(self.index, Ordinal) else ""
            return f"({xpath}{''.join(self.ancestors)})[last(){offset}]"
        if isinstance(self.index, Last):
            return f"({xpath})[last()]"
        if isinstance(self.index, Ordinal):
            return f"({xpath})[{self.index.position}]"
        return xpath


def implied_predicates(platform: Platform) -> list[str]:
    predicates = [IMPLIED_ENABLED]
    if platform.is_android:
        predicates.append(IMPLIED_ANDROID_VISIBLE)
    elif platform.is_ios:
        predicates.append(IMPLIED_IOS_VISIBLE)
    return predicates


def resolve_nearby(platform: Platform, spec: str, config: LocatorConfig = DEFAULT_CONFIG) -> ByXPath:
    """Translate ``{relation:text}{attr,attr=value,...}`` into an XPath.

    Only visible and enabled elements qualify, so every query starts with
    ``@enabled='true'`` plus ``@displayed='true'`` (Android) or
    ``@visible='true'`` (iOS).

    ``{left-of=None of these}{clickable,enabled}`` selects the last clickable
    element whose following sibling carries the text "None of these".
    """
    if not spec or not spec.strip():
        raise InvalidSpecError("nearby locator requires at least one {...} group", locator=spec)
    if not is_enclosed(spec):
        raise InvalidSpecError(f"nearby locator must be enclosed in braces: {spec}", locator=spec)

    try:
        groups = brace_groups(spec.strip())
    except ValueError as exc:
        raise InvalidSpecError(f"Invalid nearby locator {spec}: {exc}", locator=spec) from exc

    query = _NearbyQuery(predicates=implied_predicates(platform))
    for group in groups:
        for part in group.split(","):
            if not part.strip():
                continue
            _apply_part(query, platform, part, config)

    xpath = query.to_xpath()
    logger.debug("resolved %s to %s", spec, xpath)
    return ByXPath(xpath)


def _split_pair(part: str) -> tuple[str, str]:
    if NEARBY_RELATION_PATTERN.match(part) or "=" not in part:
        name, _, value = part.partition(":")
    else:
        name, _, value = part.partition("=")
    return name.strip().lower(), value.strip()


def _apply_part(query: _NearbyQuery, platform: Platform, part: str, config: LocatorConfig) -> None:
    if not NEARBY_PAIR_PATTERN.fullmatch(part):
        query.predicates.append(f"@{_attribute_name(part.strip(), part)}='true'")
        return

    name, value = _split_pair(part)
    relation = SpatialRelation.lookup(name)
    if relation is None:
        query.predicates.append(resolve_filter(_attribute_name(name, part), value, config))
        return

    if relation is SpatialRelation.ITEM:
        query.index = parse_item_index(value, part)
        return

    text_filter = resolve_link_text_filter(platform, value, config)
    sibling_filter = f"[{text_filter} or .//*[{text_filter}]]"

    if relation in (SpatialRelation.LEFT_OF, SpatialRelation.ABOVE):
        query.predicates.append(f"following-sibling::*[1]{sibling_filter}")
        query.index = LAST
    elif relation in (SpatialRelation.RIGHT_OF, SpatialRelation.BELOW):
        query.predicates.append(f"preceding-sibling::*[1]{sibling_filter}")
        query.index = Ordinal(1)
    elif relation is SpatialRelation.CONTAINER:
        query.predicates.append(text_filter)
        query.ancestors.append(_ancestor_step(CONTAINER_CLASS_HINT))
    elif relation is SpatialRelation.SCROLL_CONTAINER:
        query.predicates.append(text_filter)
        query.ancestors.append(_ancestor_step(SCROLL_CONTAINER_CLASS_HINT))
    else:
        raise LocatorError(f"Unhandled nearby relation {relation.value}", locator=part)


def _attribute_name(name: str, part: str) -> str:
    if not ATTRIBUTE_NAME_PATTERN.fullmatch(name):
        raise InvalidSpecError(f"Invalid attribute name {name!r} in nearby locator: {part}", locator=part)
    return name


def _ancestor_step(class_hint: str) -> str:
    return f"/ancestor::*[contains({lower_attribute('class', class_hint)},'{class_hint}')]"


def parse_item_index(value: str, part: str | None = None) -> IndexSpec:
    text = value.strip().lower()
    if text == "last":
        return LAST
    if not (text.isascii() and text.isdigit()):
        raise InvalidIndexError(f"item value must be a number or 'last', got {value!r}", locator=part or value)
    position = int(text)
    if position < 1:
        raise InvalidIndexError(f"item value must be greater than 0, got {value!r}", locator=part or value)
    return Ordinal(position)
