from typing import Any

import pytest
from selenium.common.exceptions import WebDriverException

from uilocator.config import LocatorConfig
from uilocator.errors import DeviceInteractionError, InvalidIndexError
from uilocator.picker import PickerScrollController, android_dropdown_item_locator, to_index_value


class FakePicker:
    def __init__(self, value: str | None, height: int = 100) -> None:
        self.id = "picker-1"
        self.size = {"height": height, "width": 300}
        self.value = value
        self.typed: list[str] = []

    def get_attribute(self, name: str) -> str | None:
        assert name == "value"
        return self.value

    def send_keys(self, *value: str) -> None:
        self.typed.extend(value)


class RecordingDriver:
    def __init__(self, fail_on: int | None = None) -> None:
        self.commands: list[tuple[str, dict[str, Any]]] = []
        self.fail_on = fail_on

    def execute_script(self, script: str, *args: Any) -> Any:
        if self.fail_on is not None and len(self.commands) == self.fail_on:
            raise WebDriverException("device went away")
        self.commands.append((script, args[0]))
        return None

    def find_elements(self, by: str, value: str) -> list[Any]:
        return []


def test_index_values_are_converted_to_one_based() -> None:
    for n in (0, 1, 7, 42):
        assert to_index_value(f"index:{n}") == n + 1
    assert to_index_value("index: 3 ") == 4
    for bad in ("index:-1", "index:abc", "index:", "index:1.0"):
        with pytest.raises(InvalidIndexError):
            to_index_value(bad)


def test_matching_value_is_a_no_op() -> None:
    driver = RecordingDriver()
    picker = FakePicker("March")
    selection = PickerScrollController(driver).select_value(picker, "March")
    assert selection.steps == 0
    assert driver.commands == []
    assert picker.typed == []


def test_plain_value_is_typed() -> None:
    driver = RecordingDriver()
    picker = FakePicker("March")
    PickerScrollController(driver).select_value(picker, "April")
    assert picker.typed == ["April"]
    assert driver.commands == []


def test_index_from_blank_picker_steps_without_reset() -> None:
    driver = RecordingDriver()
    selection = PickerScrollController(driver).select_value(FakePicker(""), "index:2")
    assert selection.reset is False
    assert selection.steps == 3
    assert selection.offset == pytest.approx(0.25)
    assert [script for script, _ in driver.commands] == ["mobile: selectPickerWheelValue"] * 3
    assert driver.commands[0][1] == {"element": "picker-1", "order": "next", "offset": pytest.approx(0.25)}


def test_index_with_current_value_resets_to_top_first() -> None:
    driver = RecordingDriver()
    config = LocatorConfig(picker_step_distance=50.0, picker_reset_velocity=400)
    selection = PickerScrollController(driver, config).select_value(FakePicker("May", height=200), "index:0")
    assert selection.reset is True
    assert selection.steps == 1
    assert driver.commands[0] == (
        "mobile: swipe",
        {"element": "picker-1", "direction": "down", "velocity": 400},
    )
    assert driver.commands[1][1]["offset"] == pytest.approx(0.25)
    assert len(driver.commands) == 2


def test_invalid_index_fails_before_any_device_call() -> None:
    driver = RecordingDriver()
    picker = FakePicker("May")
    with pytest.raises(InvalidIndexError):
        PickerScrollController(driver).select_value(picker, "index:-1")
    assert driver.commands == []


def test_driver_failure_is_fatal() -> None:
    driver = RecordingDriver(fail_on=2)
    with pytest.raises(DeviceInteractionError) as error:
        PickerScrollController(driver).select_value(FakePicker(None), "index:5")
    assert error.value.command == "mobile: selectPickerWheelValue"
    assert len(driver.commands) == 2


def test_zero_height_picker_is_rejected() -> None:
    with pytest.raises(DeviceInteractionError):
        PickerScrollController(RecordingDriver()).select_value(FakePicker(None, height=0), "index:1")


def test_android_dropdown_item_locator() -> None:
    assert android_dropdown_item_locator("index:0") == "(.//*[@text != ''])[1]"
    assert android_dropdown_item_locator("contains:Jan") == ".//*[contains(@text,'Jan')]"
