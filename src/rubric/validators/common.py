"""バリデータ間で共有する型とヘルパー。"""

import re
from collections.abc import Callable
from typing import Any

from rubric.models.element import InspectableElement
from rubric.models.report import CheckOutcome

ValidatorFunction = Callable[[InspectableElement, Any], CheckOutcome]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def leading_int(text: str) -> int | None:
    """文字列先頭の整数部分を読む（`"48px"` → 48）。読めなければNone。"""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def leading_float(text: str) -> float | None:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else None


def format_number(value: float) -> str:
    """メッセージ用の数値表記。整数値は小数点なしで出す。"""
    return f"{value:g}"
