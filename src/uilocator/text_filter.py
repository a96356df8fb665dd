from __future__ import annotations

from .config import DEFAULT_CONFIG, LocatorConfig
from .errors import InvalidLengthError, UnsupportedMatchModeError
from .models import MatchMode, Platform
from .xpath_text import ends_with, fold_case, lower_attribute, xpath_literal


def split_match_mode(value: str, config: LocatorConfig = DEFAULT_CONFIG) -> tuple[MatchMode, str]:
    """Return the match mode named by the leading token of ``value`` and the remaining text."""
    upper = value.upper()
    for token, mode in config.match_tokens:
        if upper.startswith(token):
            return mode, value[len(token):]
    return MatchMode.DEFAULT, value


def resolve_filter(attribute: str, value: str, config: LocatorConfig = DEFAULT_CONFIG) -> str:
    mode, text = split_match_mode(value, config)
    attr = f"@{attribute}"

    if not mode.supported:
        raise UnsupportedMatchModeError(
            f"{mode.name} matching is not supported for locators: {attribute}={value}",
            locator=f"{attribute}={value}",
        )

    if mode is MatchMode.CONTAINS:
        return f"contains({attr},{xpath_literal(text)})"
    if mode is MatchMode.STARTS_WITH:
        return f"starts-with({attr},{xpath_literal(text)})"
    if mode is MatchMode.ENDS_WITH:
        return ends_with(attr, xpath_literal(text), native=config.native_ends_with)

    if mode.ignores_case:
        subject = lower_attribute(attribute, text)
        literal = xpath_literal(fold_case(text))
        if mode is MatchMode.CONTAINS_ANY_CASE:
            return f"contains({subject},{literal})"
        if mode is MatchMode.STARTS_WITH_ANY_CASE:
            return f"starts-with({subject},{literal})"
        return ends_with(subject, literal, native=config.native_ends_with)

    if mode is MatchMode.LENGTH:
        length = text.strip()
        if not (length.isascii() and length.isdigit()):
            raise InvalidLengthError(
                f"LENGTH match requires a non-negative integer, got {length!r}",
                locator=f"{attribute}={value}",
            )
        return f"string-length({attr})={int(length)}"

    if mode in (MatchMode.EXACT, MatchMode.DEFAULT):
        return f"{attr}={xpath_literal(text)}"

    raise UnsupportedMatchModeError(f"Unhandled match mode {mode.name}", locator=f"{attribute}={value}")


def resolve_text_filter(platform: Platform, text: str, config: LocatorConfig = DEFAULT_CONFIG) -> str:
    if platform.is_ios:
        return (
            f"{resolve_filter('label', text, config)} or "
            f"(contains({lower_attribute('type', 'text')},'text') and {resolve_filter('value', text, config)})"
        )
    return resolve_filter("text", text, config)


def resolve_link_text_filter(platform: Platform, text: str, config: LocatorConfig = DEFAULT_CONFIG) -> str:
    if platform.is_ios:
        return resolve_filter("label", text, config)
    return resolve_filter("text", text, config)
