from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

StrategyKind = Literal["id", "accessibility_id", "class_name", "xpath", "predicate", "class_chain"]


@dataclass(frozen=True, slots=True)
class ById:
    value: str
    kind: StrategyKind = "id"


@dataclass(frozen=True, slots=True)
class ByAccessibilityId:
    value: str
    kind: StrategyKind = "accessibility_id"


@dataclass(frozen=True, slots=True)
class ByClassName:
    value: str
    kind: StrategyKind = "class_name"


@dataclass(frozen=True, slots=True)
class ByXPath:
    value: str
    kind: StrategyKind = "xpath"


@dataclass(frozen=True, slots=True)
class ByPredicateString:
    value: str
    kind: StrategyKind = "predicate"


@dataclass(frozen=True, slots=True)
class ByClassChain:
    value: str
    kind: StrategyKind = "class_chain"


Strategy = Union[ById, ByAccessibilityId, ByClassName, ByXPath, ByPredicateString, ByClassChain]


class Platform(str, Enum):
    ANDROID = "android"
    IOS = "ios"
    GENERIC = "generic"

    @property
    def is_android(self) -> bool:
        return self is Platform.ANDROID

    @property
    def is_ios(self) -> bool:
        return self is Platform.IOS

    @classmethod
    def from_name(cls, name: str | None) -> "Platform":
        key = (name or "").strip().lower()
        if key.startswith("android"):
            return cls.ANDROID
        if key.startswith("ios"):
            return cls.IOS
        if key in {"", "generic", "web", "browser"}:
            return cls.GENERIC
        raise ValueError(f"Unknown platform: {name!r}")


class MatchMode(Enum):
    REGEX = "regex"
    NUMERIC = "numeric"
    CONTAINS = "contains"
    CONTAINS_ANY_CASE = "contains_any_case"
    STARTS_WITH = "starts_with"
    STARTS_WITH_ANY_CASE = "starts_with_any_case"
    ENDS_WITH = "ends_with"
    ENDS_WITH_ANY_CASE = "ends_with_any_case"
    LENGTH = "length"
    EXACT = "exact"
    DEFAULT = "default"

    @property
    def supported(self) -> bool:
        return self not in {MatchMode.REGEX, MatchMode.NUMERIC}

    @property
    def ignores_case(self) -> bool:
        return self.value.endswith("_any_case")


class SpatialRelation(Enum):
    LEFT_OF = "left-of"
    RIGHT_OF = "right-of"
    ABOVE = "above"
    BELOW = "below"
    CONTAINER = "container"
    SCROLL_CONTAINER = "scroll-container"
    ITEM = "item"

    @classmethod
    def lookup(cls, name: str) -> "SpatialRelation | None":
        key = name.strip().lower()
        for relation in cls:
            if relation.value == key:
                return relation
        return None


@dataclass(frozen=True, slots=True)
class Ordinal:
    position: int

    def __post_init__(self) -> None:
        if self.position < 1:
            raise ValueError(f"Ordinal position must be >= 1, got {self.position}")


@dataclass(frozen=True, slots=True)
class Last:
    pass


LAST = Last()

IndexSpec = Union[Ordinal, Last]


@dataclass(frozen=True, slots=True)
class LocatorSpec:
    locator: str
    allow_relative: bool = False


@dataclass(frozen=True, slots=True)
class PickerSelection:
    target: str
    steps: int
    reset: bool
    offset: float | None = None
