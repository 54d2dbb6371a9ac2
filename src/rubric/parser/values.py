"""値リテラルのパース。"""

import re

from rubric.models.spec import Comparison, Value

_NUMBER_PATTERN = re.compile(r"^\d+(\.\d+)?$")
_COMPARISON_PATTERN = re.compile(r"^(>=|<=|>|<)\s*(.+)$")


def parse_value(value: str) -> Value:
    """値トークンを型付きの値に変換する。

    判定は先勝ちで、クォート文字列・真偽値・数値・配列・オブジェクト・
    比較演算子の順に試し、どれにも当てはまらなければ文字列のまま返す。
    配列とオブジェクトはカンマで単純分割するため、入れ子には対応しない。

    Args:
        value: トリム済みの値トークン。

    Returns:
        str | bool | float | list | dict | Comparison のいずれか。
    """
    for quote in ('"', "'"):
        if value.startswith(quote) and value.endswith(quote):
            return value[1:-1]

    if value == "true":
        return True
    if value == "false":
        return False

    if _NUMBER_PATTERN.match(value):
        return float(value)

    if value.startswith("[") and value.endswith("]"):
        return [parse_value(item.strip()) for item in value[1:-1].split(",")]

    if value.startswith("{") and value.endswith("}"):
        obj: dict[str, Value] = {}
        for pair in value[1:-1].split(","):
            key, sep, raw = pair.partition(":")
            if sep:
                obj[key.strip()] = parse_value(raw.strip())
        return obj

    match = _COMPARISON_PATTERN.match(value)
    if match:
        return Comparison(operator=match.group(1), value=parse_value(match.group(2)))

    return value
