from __future__ import annotations

import logging
from typing import Callable

from .errors import MalformedCompoundError, NoEligibleAlternativeError
from .locator_rules import ONE_OF_PATTERN, PLATFORM_TAG_PATTERN, PREFIX_ONE_OF
from .models import Platform, Strategy
from .syntax import brace_groups

logger = logging.getLogger("uilocator.resolve")


def is_compound_locator(locator: str) -> bool:
    head, sep, _ = locator.strip().partition("=")
    return bool(sep) and head.strip().lower() == PREFIX_ONE_OF


def eligible_alternatives(platform: Platform, spec: str) -> list[str]:
    """Return the alternatives of a ``one-of=`` locator usable on ``platform``, platform tags removed."""
    text = spec.strip()
    if not ONE_OF_PATTERN.fullmatch(text):
        raise MalformedCompoundError(f"Invalid one-of locator: {spec}", locator=spec)

    try:
        groups = brace_groups(text.partition("=")[2])
    except ValueError as exc:
        raise MalformedCompoundError(f"Invalid one-of locator {spec}: {exc}", locator=spec) from exc

    alternatives: list[str] = []
    for group in groups:
        candidate = group.strip()
        if not candidate:
            continue
        tagged = PLATFORM_TAG_PATTERN.match(candidate)
        if not tagged:
            alternatives.append(candidate)
            continue
        if tagged.group(1).lower() == platform.value:
            alternatives.append(tagged.group(2).strip())

    if not alternatives:
        raise NoEligibleAlternativeError(
            f"None of the one-of alternatives apply to {platform.value}: {spec}",
            locator=spec,
        )
    return alternatives


def resolve_one_of(platform: Platform, spec: str, resolve: Callable[[str], Strategy]) -> list[Strategy]:
    alternatives = eligible_alternatives(platform, spec)
    strategies = [resolve(alternative) for alternative in alternatives]
    logger.debug("resolved %s to %d alternative(s) for %s", spec, len(strategies), platform.value)
    return strategies
