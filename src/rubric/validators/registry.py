"""名前付きバリデータのカタログ。"""

from collections.abc import Callable
from typing import Any

from rubric.models.element import InspectableElement
from rubric.models.report import CheckOutcome
from rubric.validators.accessibility import (
    check_contrast,
    check_focus_visible,
    check_keyboard,
    check_motion,
    check_screen_reader,
    check_touch_target,
)
from rubric.validators.common import ValidatorFunction, format_number
from rubric.validators.performance import check_bundle_size, check_image_optimization, check_render_time
from rubric.validators.security import check_clickjacking, check_external_links, check_xss

VALIDATORS: dict[str, ValidatorFunction] = {
    # アクセシビリティ
    "contrast": check_contrast,
    "keyboard": check_keyboard,
    "focusVisible": check_focus_visible,
    "touchTarget": check_touch_target,
    "motion": check_motion,
    "screenReader": check_screen_reader,
    # セキュリティ
    "xss": check_xss,
    "clickjacking": check_clickjacking,
    "externalLinks": check_external_links,
    # パフォーマンス
    "bundleSize": check_bundle_size,
    "renderTime": check_render_time,
    "imageOptimization": check_image_optimization,
}

# レポート表示用のグループ分け。要件カテゴリの自動分類とは別物。
RULE_GROUPS: dict[str, set[str]] = {
    "accessibility": {"contrast", "keyboard", "focusVisible", "touchTarget", "motion", "screenReader"},
    "performance": {"bundleSize", "renderTime", "imageOptimization"},
    "security": {"xss", "clickjacking", "externalLinks"},
}


def min_size(size: float) -> ValidatorFunction:
    """要素の短辺が size 以上であることを確認するバリデータを生成する。"""

    def check_min_size(element: InspectableElement, rule: Any) -> CheckOutcome:
        width, height = element.bounding_size()
        smallest = min(width, height)
        return CheckOutcome(
            passed=smallest >= size,
            message=f"Element must be at least {format_number(size)}px (currently {format_number(smallest)}px)",
            details={"required": size, "actual": smallest},
        )

    return check_min_size


# `name(arg)` 形式の要件ヒントから参照される
VALIDATOR_FACTORIES: dict[str, Callable[[float], ValidatorFunction]] = {
    "minSize": min_size,
}


def rule_group(rule_name: str) -> str | None:
    """ルール名の表示グループを返す。未分類ならNone。"""
    for group, members in RULE_GROUPS.items():
        if rule_name in members:
            return group
    return None
