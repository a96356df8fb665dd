from __future__ import annotations


class LocatorError(ValueError):
    """Base class for locator resolution failures.

    ``locator`` keeps the offending input so callers can report it verbatim.
    """

    def __init__(self, message: str, locator: str | None = None) -> None:
        super().__init__(message)
        self.locator = locator


class EmptyLocatorError(LocatorError):
    pass


class MalformedCompoundError(LocatorError):
    pass


class NoEligibleAlternativeError(LocatorError):
    pass


class PlatformMismatchError(LocatorError):
    pass


class UnsupportedMatchModeError(LocatorError):
    pass


class InvalidLengthError(LocatorError):
    pass


class InvalidIndexError(LocatorError):
    pass


class InvalidSpecError(LocatorError):
    pass


class DeviceInteractionError(RuntimeError):
    """A driver command failed while a picker selection was in progress."""

    def __init__(self, message: str, command: str | None = None) -> None:
        super().__init__(message)
        self.command = command
