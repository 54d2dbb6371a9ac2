"""ブロック本文のキー・バリュー解析。"""

from rubric.models.spec import Value
from rubric.parser.values import parse_value


def parse_key_value_pairs(content: str) -> dict[str, Value]:
    """ブロック本文を `key: value` のマッピングに変換する。

    値が空または `{` の行はキーを保留し、それより深くインデントされた
    後続行を1階層の入れ子オブジェクトとしてそのキーに束ねる。
    2階層目以降のインデントも同じ入れ子オブジェクトに入る。

    Args:
        content: `@Block { ... }` の波括弧内の本文。

    Returns:
        トップレベルキーから値へのマッピング。
    """
    result: dict[str, Value] = {}
    current_key: str | None = None
    current_object: dict[str, Value] | None = None
    indent = 0

    for line in content.strip().split("\n"):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        leading = len(line) - len(line.lstrip())

        if leading > indent and current_key:
            if current_object is None:
                current_object = {}
                result[current_key] = current_object
            key, sep, raw = trimmed.partition(":")
            if sep:
                current_object[key.strip()] = parse_value(raw.strip())
            continue

        current_object = None
        key, sep, raw = trimmed.partition(":")
        if not sep:
            continue

        current_key = key.strip()
        raw = raw.strip()
        if not raw or raw == "{":
            # 入れ子オブジェクトの開始
            indent = leading
        else:
            result[current_key] = parse_value(raw)
            current_key = None

    return result
