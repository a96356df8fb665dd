from __future__ import annotations

from dataclasses import dataclass, field, replace

from .locator_rules import (
    MATCH_TOKENS,
    PICKER_RESET_VELOCITY,
    PICKER_STEP_DISTANCE,
    XPATH_LEADING_TOKENS,
)
from .models import MatchMode


def _ordered_tokens(tokens: tuple[tuple[str, MatchMode], ...]) -> tuple[tuple[str, MatchMode], ...]:
    # longer tokens first so that no token is shadowed by one of its prefixes
    normalized = [(token.upper(), mode) for token, mode in tokens]
    return tuple(sorted(normalized, key=lambda item: len(item[0]), reverse=True))


@dataclass(frozen=True, slots=True)
class LocatorConfig:
    xpath_leading_tokens: tuple[str, ...] = XPATH_LEADING_TOKENS
    match_tokens: tuple[tuple[str, MatchMode], ...] = field(default_factory=lambda: _ordered_tokens(MATCH_TOKENS))
    native_ends_with: bool = False
    picker_step_distance: float = PICKER_STEP_DISTANCE
    picker_reset_velocity: int = PICKER_RESET_VELOCITY

    def with_match_tokens(self, extra: dict[str, MatchMode]) -> LocatorConfig:
        merged = dict(self.match_tokens)
        for token, mode in extra.items():
            merged[token.upper()] = mode
        return replace(self, match_tokens=_ordered_tokens(tuple(merged.items())))


DEFAULT_CONFIG = LocatorConfig()
