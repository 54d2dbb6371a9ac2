"""アクセシビリティ系バリデータ。"""

from typing import Any

from rubric.models.element import InspectableElement
from rubric.models.report import CheckOutcome
from rubric.validators.common import format_number, is_number, leading_int

_TRANSPARENT = "rgba(0, 0, 0, 0)"
_NATIVELY_FOCUSABLE: set[str] = {"BUTTON", "A", "INPUT", "SELECT", "TEXTAREA"}

# WCAG AA の通常テキスト基準
DEFAULT_CONTRAST_RATIO = 4.5
DEFAULT_TOUCH_TARGET = 44


def check_contrast(element: InspectableElement, rule: Any) -> CheckOutcome:
    """前景色・背景色がともに透明でないことを確認する。

    実際のコントラスト比は計算しない。
    """
    if is_number(rule):
        ratio = rule
    elif isinstance(rule, dict) and is_number(rule.get("ratio")):
        ratio = rule["ratio"]
    else:
        ratio = DEFAULT_CONTRAST_RATIO

    background = element.computed_style("background-color")
    foreground = element.computed_style("color")
    has_colors = background != _TRANSPARENT and foreground != _TRANSPARENT

    return CheckOutcome(
        passed=has_colors,
        message=f"Color contrast ratio should be at least {format_number(ratio)}:1",
        details={"required": ratio, "background": background, "foreground": foreground},
    )


def check_keyboard(element: InspectableElement, rule: Any) -> CheckOutcome:
    tag_name = element.tag_name.upper()
    natively_focusable = tag_name in _NATIVELY_FOCUSABLE
    tabindex = element.get_attribute("tabindex")
    disabled = element.has_attribute("disabled") or element.get_attribute("aria-disabled") == "true"

    tab_order = leading_int(tabindex) if tabindex is not None else None
    passed = not disabled and (natively_focusable or (tab_order is not None and tab_order >= 0))

    return CheckOutcome(
        passed=passed,
        message=(
            "Element is keyboard accessible"
            if passed
            else "Element must be keyboard accessible (native element or tabindex >= 0)"
        ),
        details={
            "tagName": tag_name,
            "tabindex": tabindex,
            "isDisabled": disabled,
            "isNativelyFocusable": natively_focusable,
        },
    )


def check_focus_visible(element: InspectableElement, rule: Any) -> CheckOutcome:
    outline = element.computed_style("outline")
    box_shadow = element.computed_style("box-shadow")
    # `:focus` は `:focus-visible` も含む
    has_focus_stylesheet = element.document.has_selector_containing(":focus")

    passed = has_focus_stylesheet or outline != "none" or box_shadow not in ("none", "")

    return CheckOutcome(
        passed=passed,
        message=(
            "Element has focus indication"
            if passed
            else "Element must have visible focus indication (:focus-visible styles)"
        ),
        details={"outline": outline, "boxShadow": box_shadow, "hasFocusStylesheet": has_focus_stylesheet},
    )


def _min_touch_size(rule: Any) -> float:
    if is_number(rule):
        return rule
    if isinstance(rule, dict):
        minimum = rule.get("min")
        if is_number(minimum):
            return minimum
        if isinstance(minimum, str) and (parsed := leading_int(minimum)) is not None:
            return parsed
    return DEFAULT_TOUCH_TARGET


def check_touch_target(element: InspectableElement, rule: Any) -> CheckOutcome:
    min_size = _min_touch_size(rule)
    width, height = element.bounding_size()
    smallest = min(width, height)
    passed = width >= min_size and height >= min_size

    return CheckOutcome(
        passed=passed,
        message=(
            f"Touch target meets minimum size ({format_number(min_size)}px)"
            if passed
            else f"Touch target must be at least {format_number(min_size)}px (currently {format_number(smallest)}px)"
        ),
        details={"required": min_size, "actual": {"width": width, "height": height}, "smallest": smallest},
    )


def check_motion(element: InspectableElement, rule: Any) -> CheckOutcome:
    """アニメーションが prefers-reduced-motion を尊重するかの確認。

    アニメーションの実際の抑止状況は検査できないため、動きの情報を
    収集したうえで常に合格とする。
    """
    if isinstance(rule, dict):
        respects_preference = bool(rule.get("respectsPreference"))
    else:
        respects_preference = bool(rule)
    if not respects_preference:
        return CheckOutcome(passed=True, message="Motion preference respect not required")

    transition = element.computed_style("transition")
    animation = element.computed_style("animation")
    has_motion = transition not in ("none", "") or animation not in ("none", "")
    if not has_motion:
        return CheckOutcome(passed=True, message="Element has no motion")

    return CheckOutcome(
        passed=True,
        message="Animations should respect prefers-reduced-motion",
        details={
            "hasMotion": has_motion,
            "transition": transition,
            "animation": animation,
            "prefersReducedMotion": element.document.prefers_reduced_motion(),
        },
    )


def check_screen_reader(element: InspectableElement, rule: Any) -> CheckOutcome:
    aria_label = element.get_attribute("aria-label")
    aria_labelledby = element.get_attribute("aria-labelledby")
    has_text_content = bool(element.text_content.strip())
    passed = bool(aria_label or aria_labelledby or has_text_content)

    return CheckOutcome(
        passed=passed,
        message=(
            "Element has accessible name"
            if passed
            else "Element must have accessible name (aria-label, aria-labelledby, or text content)"
        ),
        details={
            "role": element.get_attribute("role"),
            "ariaLabel": aria_label,
            "ariaLabelledBy": aria_labelledby,
            "ariaDescribedBy": element.get_attribute("aria-describedby"),
            "hasTextContent": has_text_content,
        },
    )
