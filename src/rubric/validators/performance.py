"""パフォーマンス系バリデータ。"""

import math
import re
import time
from typing import Any

from rubric.models.element import InspectableElement
from rubric.models.report import CheckOutcome
from rubric.validators.common import format_number, is_number

_NODE_WEIGHT_BYTES = 50
_NON_NUMERIC = re.compile(r"[^\d.]")
_MODERN_FORMATS = ("webp", "avif")


def _max_bundle_size(rule: Any) -> float:
    """バンドルサイズ上限（バイト）。`"2kb"` のような文字列はKB単位として扱う。

    要件ヒントから渡される `True` は上限1バイトとして比較する。
    """
    if is_number(rule):
        return rule
    if isinstance(rule, bool):
        return int(rule)
    if isinstance(rule, dict):
        maximum = rule.get("max")
        if isinstance(maximum, str):
            digits = _NON_NUMERIC.sub("", maximum)
            try:
                return float(digits) * 1024
            except ValueError:
                return math.inf
        if is_number(maximum) and maximum:
            return maximum
    return math.inf


def check_bundle_size(element: InspectableElement, rule: Any) -> CheckOutcome:
    """DOMの複雑さからバンドルへの影響を概算する。"""
    max_size = _max_bundle_size(rule)

    node_count = len(element.descendants())
    inline_styles = len(element.get_attribute("style") or "")
    class_names = len(element.class_name or "")
    estimated_size = node_count * _NODE_WEIGHT_BYTES + inline_styles + class_names

    passed = estimated_size <= max_size

    return CheckOutcome(
        passed=passed,
        message=(
            f"Estimated bundle impact: {estimated_size / 1024:.1f}kb"
            if passed
            else f"Bundle impact too large: {estimated_size / 1024:.1f}kb (max: {max_size / 1024:.1f}kb)"
        ),
        details={
            "estimatedSize": estimated_size,
            "maxSize": max_size,
            "nodeCount": node_count,
            "inlineStyles": inline_styles,
            "classNames": class_names,
        },
    )


def check_render_time(element: InspectableElement, rule: Any) -> CheckOutcome:
    """要素と全子孫のレイアウトを強制した際の所要時間を計測する。"""
    if is_number(rule):
        max_ms = rule
    elif isinstance(rule, dict) and is_number(rule.get("maxMs")):
        max_ms = rule["maxMs"]
    else:
        # 上限が数値で指定されていなければ計測結果に関わらず不合格
        max_ms = math.nan

    descendants = element.descendants()
    start = time.perf_counter()
    element.force_layout()
    for descendant in descendants:
        descendant.force_layout()
    render_time = (time.perf_counter() - start) * 1000

    passed = render_time <= max_ms

    return CheckOutcome(
        passed=passed,
        message=(
            f"Render time: {render_time:.2f}ms"
            if passed
            else f"Render time too slow: {render_time:.2f}ms (max: {format_number(max_ms)}ms)"
        ),
        details={"renderTime": render_time, "maxMs": max_ms, "nodeCount": len(descendants)},
    )


def check_image_optimization(element: InspectableElement, rule: Any) -> CheckOutcome:
    images = [d for d in element.descendants() if d.tag_name.upper() == "IMG"]
    if not images:
        return CheckOutcome(passed=True, message="No images found")

    issues: list[str] = []
    for index, img in enumerate(images):
        src = img.get_attribute("src")
        if img.get_attribute("alt") is None:
            issues.append(f"Image {index}: Missing alt attribute")
        if not img.get_attribute("loading"):
            issues.append(f'Image {index}: Missing loading="lazy"')
        if not img.get_attribute("width") or not img.get_attribute("height"):
            issues.append(f"Image {index}: Missing width/height attributes")
        if src and not any(fmt in src for fmt in _MODERN_FORMATS):
            issues.append(f"Image {index}: Consider modern formats (WebP/AVIF)")

    passed = not issues

    return CheckOutcome(
        passed=passed,
        message=f"All {len(images)} images optimized" if passed else f"{len(issues)} image optimization issues",
        details={"issues": issues, "imageCount": len(images)},
    )
