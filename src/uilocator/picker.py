from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, TypeVar

from selenium.common.exceptions import WebDriverException

from .config import DEFAULT_CONFIG, LocatorConfig
from .drivers import PickerElement, ScriptingDriver
from .errors import DeviceInteractionError, InvalidIndexError
from .locator_rules import PREFIX_INDEX, SCRIPT_SELECT_PICKER_VALUE, SCRIPT_SWIPE, is_index_request
from .models import PickerSelection, Platform
from .text_filter import resolve_text_filter

T = TypeVar("T")


def to_index_value(item: str) -> int:
    """Convert ``index:<n>`` (0-based) into a 1-based position."""
    raw = item[len(PREFIX_INDEX):] if is_index_request(item) else item
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        raise InvalidIndexError(f"Invalid index {text!r}: expected a non-negative integer", locator=item)
    return int(text) + 1


def android_dropdown_item_locator(item: str, config: LocatorConfig = DEFAULT_CONFIG) -> str:
    if is_index_request(item):
        return f"(.//*[@text != ''])[{to_index_value(item)}]"
    return f".//*[{resolve_text_filter(Platform.ANDROID, item, config)}]"


class PickerScrollController:
    def __init__(self, driver: ScriptingDriver, config: LocatorConfig | None = None) -> None:
        self.driver = driver
        self.config = config or DEFAULT_CONFIG
        self.logger = logging.getLogger("uilocator.picker")

    def select_value(self, picker: PickerElement, target: str) -> PickerSelection:
        # validate before touching the device
        index = to_index_value(target) if is_index_request(target) else None

        current = self._read_value(picker)
        if current == target:
            self.logger.info("Picker already shows %r, nothing to select.", target)
            return PickerSelection(target=target, steps=0, reset=False)

        if index is None:
            self._run("send_keys", lambda: picker.send_keys(target))
            self.logger.info("Typed %r into picker.", target)
            return PickerSelection(target=target, steps=0, reset=False)

        reset = bool(current and current.strip())
        if reset:
            self._execute(
                SCRIPT_SWIPE,
                {"element": picker.id, "direction": "down", "velocity": self.config.picker_reset_velocity},
            )

        offset = self._step_offset(picker)
        steps = 0
        while steps < index:
            self._execute(SCRIPT_SELECT_PICKER_VALUE, {"element": picker.id, "order": "next", "offset": offset})
            steps += 1

        self.logger.info("Scrolled picker %s step(s) to reach %s.", steps, target)
        return PickerSelection(target=target, steps=steps, reset=reset, offset=offset)

    def _read_value(self, picker: PickerElement) -> str | None:
        value = self._run("get_attribute", lambda: picker.get_attribute("value"))
        return None if value is None else str(value)

    def _step_offset(self, picker: PickerElement) -> float:
        size = self._run("size", lambda: picker.size)
        height = float(size.get("height") or 0) if isinstance(size, Mapping) else 0.0
        if height <= 0:
            raise DeviceInteractionError(f"Picker reports unusable height: {size!r}", command="size")
        return self.config.picker_step_distance / height

    def _execute(self, script: str, args: dict[str, Any]) -> None:
        self._run(script, lambda: self.driver.execute_script(script, args))

    def _run(self, command: str, callback: Callable[[], T]) -> T:
        try:
            return callback()
        except WebDriverException as exc:
            self.logger.error("Picker command %s failed: %s", command, exc)
            raise DeviceInteractionError(f"Picker command {command} failed: {exc}", command=command) from exc
