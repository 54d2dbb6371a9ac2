"""アクセシビリティ系バリデータのユニットテスト。"""

from rubric.models.element import DocumentSnapshot, ElementSnapshot
from rubric.validators.accessibility import (
    check_contrast,
    check_focus_visible,
    check_keyboard,
    check_motion,
    check_screen_reader,
    check_touch_target,
)


class TestContrast:
    def test_passes_with_opaque_colors(self, button: ElementSnapshot) -> None:
        outcome = check_contrast(button, {"ratio": 4.5})
        assert outcome.passed is True
        assert outcome.message == "Color contrast ratio should be at least 4.5:1"
        assert outcome.details is not None
        assert outcome.details["background"] == "rgb(0, 102, 204)"

    def test_fails_with_transparent_background(self) -> None:
        element = ElementSnapshot(tag="span", style={"color": "rgb(0, 0, 0)"})
        outcome = check_contrast(element, 7)
        assert outcome.passed is False
        assert outcome.details is not None
        assert outcome.details["required"] == 7

    def test_boolean_parameter_uses_default_ratio(self, button: ElementSnapshot) -> None:
        outcome = check_contrast(button, True)
        assert outcome.details is not None
        assert outcome.details["required"] == 4.5


class TestKeyboard:
    def test_native_button_passes(self, button: ElementSnapshot) -> None:
        assert check_keyboard(button, True).passed is True

    def test_disabled_button_fails(self) -> None:
        element = ElementSnapshot(tag="button", attributes={"disabled": ""})
        outcome = check_keyboard(element, True)
        assert outcome.passed is False
        assert outcome.details is not None
        assert outcome.details["isDisabled"] is True

    def test_aria_disabled_fails(self) -> None:
        element = ElementSnapshot(tag="a", attributes={"aria-disabled": "true"})
        assert check_keyboard(element, True).passed is False

    def test_div_with_tabindex_passes(self) -> None:
        element = ElementSnapshot(tag="div", attributes={"tabindex": "0"})
        assert check_keyboard(element, True).passed is True

    def test_div_with_negative_tabindex_fails(self) -> None:
        element = ElementSnapshot(tag="div", attributes={"tabindex": "-1"})
        outcome = check_keyboard(element, True)
        assert outcome.passed is False
        assert outcome.message == "Element must be keyboard accessible (native element or tabindex >= 0)"

    def test_plain_div_fails(self) -> None:
        assert check_keyboard(ElementSnapshot(tag="div"), True).passed is False


class TestFocusVisible:
    def test_focus_selector_in_stylesheet_passes(self, button: ElementSnapshot) -> None:
        outcome = check_focus_visible(button, True)
        assert outcome.passed is True
        assert outcome.details is not None
        assert outcome.details["hasFocusStylesheet"] is True

    def test_own_outline_passes(self) -> None:
        element = ElementSnapshot(tag="button", style={"outline": "3px solid blue"})
        assert check_focus_visible(element, True).passed is True

    def test_own_box_shadow_passes(self) -> None:
        element = ElementSnapshot(tag="button", style={"box-shadow": "0 0 0 3px blue"})
        assert check_focus_visible(element, True).passed is True

    def test_no_focus_indication_fails(self) -> None:
        element = ElementSnapshot(tag="button", context=DocumentSnapshot(selectors=[".btn:hover"]))
        assert check_focus_visible(element, True).passed is False


class TestTouchTarget:
    def test_small_target_fails(self) -> None:
        element = ElementSnapshot(tag="button", width=32, height=32)
        outcome = check_touch_target(element, {"min": 44})
        assert outcome.passed is False
        assert outcome.message == "Touch target must be at least 44px (currently 32px)"
        assert outcome.details == {"required": 44, "actual": {"width": 32, "height": 32}, "smallest": 32}

    def test_large_target_passes(self, button: ElementSnapshot) -> None:
        outcome = check_touch_target(button, 44)
        assert outcome.passed is True
        assert outcome.message == "Touch target meets minimum size (44px)"

    def test_one_short_side_fails(self) -> None:
        element = ElementSnapshot(tag="button", width=100, height=40)
        assert check_touch_target(element, {"min": 44}).passed is False

    def test_string_minimum(self) -> None:
        element = ElementSnapshot(tag="button", width=46, height=46)
        assert check_touch_target(element, {"min": "48px"}).passed is False

    def test_boolean_parameter_uses_default(self) -> None:
        element = ElementSnapshot(tag="button", width=44, height=44)
        outcome = check_touch_target(element, True)
        assert outcome.passed is True
        assert outcome.details is not None
        assert outcome.details["required"] == 44


class TestMotion:
    def test_not_required(self, button: ElementSnapshot) -> None:
        outcome = check_motion(button, {"respectsPreference": False})
        assert outcome.passed is True
        assert outcome.message == "Motion preference respect not required"

    def test_no_motion(self, button: ElementSnapshot) -> None:
        outcome = check_motion(button, True)
        assert outcome.passed is True
        assert outcome.message == "Element has no motion"

    def test_motion_reports_metadata_and_passes(self) -> None:
        element = ElementSnapshot(
            tag="div",
            style={"transition": "opacity 0.3s ease"},
            context=DocumentSnapshot(reduced_motion=True),
        )
        outcome = check_motion(element, {"respectsPreference": True})
        assert outcome.passed is True
        assert outcome.details == {
            "hasMotion": True,
            "transition": "opacity 0.3s ease",
            "animation": "none",
            "prefersReducedMotion": True,
        }


class TestScreenReader:
    def test_text_content_passes(self, button: ElementSnapshot) -> None:
        assert check_screen_reader(button, True).passed is True

    def test_aria_label_passes(self) -> None:
        element = ElementSnapshot(tag="button", attributes={"aria-label": "Close"})
        assert check_screen_reader(element, True).passed is True

    def test_nested_text_passes(self) -> None:
        element = ElementSnapshot(tag="a", children=[ElementSnapshot(tag="span", text="Docs")])
        assert check_screen_reader(element, True).passed is True

    def test_whitespace_only_fails(self) -> None:
        element = ElementSnapshot(tag="button", text="   ")
        outcome = check_screen_reader(element, True)
        assert outcome.passed is False
        assert outcome.details is not None
        assert outcome.details["hasTextContent"] is False
