""".rux 仕様テキストのパースロジック。"""

import re
from typing import Any

from rubric.models.spec import (
    PropDefinition,
    Requirement,
    RequirementCategory,
    RubricSpec,
    Severity,
    SpecMetadata,
    StyleGuidelines,
    Value,
)
from rubric.parser.blocks import parse_key_value_pairs
from rubric.parser.values import parse_value

_COMPONENT_PATTERN = re.compile(r"Component:\s*(\w+)")
_DESCRIPTION_PATTERN = re.compile(r'Description:\s*"([^"]+)"')
_CATEGORY_PATTERN = re.compile(r'Category:\s*"([^"]+)"')

# 最初の `}` でブロックが終わる（波括弧の対応は取らない）
_BLOCK_PATTERN = re.compile(r"@(\w+)\s*\{([^}]+)\}")

_REQUIREMENTS_HEADER = re.compile(r"^!Requirements:", re.IGNORECASE)
_RECOMMENDATIONS_HEADER = re.compile(r"^\?Recommendations:", re.IGNORECASE)

_PROP_PATTERN = re.compile(r"^(\w+)(\?)?\s*:\s*([^=]+?)(?:\s*=\s*(.+))?$")

_VALIDATE_HINT = re.compile(r"@validate:\s*([^\]]+)\]")
_VALIDATE_HINT_REMOVAL = re.compile(r"\[?@validate:[^\]]+\]")
_SEVERITY_HINT = re.compile(r"@severity:\s*(error|warning|info)\]")
_SEVERITY_HINT_REMOVAL = re.compile(r"\[?@severity:[^\]]+\]")

# 要件カテゴリの自動分類キーワード（上から順に判定）
_CATEGORY_KEYWORDS: list[tuple[RequirementCategory, re.Pattern[str]]] = [
    ("accessibility", re.compile(r"contrast|keyboard|focus|aria|screen reader|accessible")),
    ("performance", re.compile(r"performance|render|bundle|load|optimize")),
    ("compatibility", re.compile(r"browser|compatibility|support|fallback")),
]

_SIZE_RULES = {"touchTarget", "bundleSize"}


def parse_rubric(content: str) -> RubricSpec:
    """.rux テキストを構造化された仕様に変換する。

    パースは寛容で、解釈できない部分は無視されるか汎用ブロックとして
    保持される。例外は送出しない。

    Args:
        content: .rux 文書のテキスト。

    Returns:
        パース結果の仕様。
    """
    fields: dict[str, Any] = {}
    blocks: dict[str, dict[str, Value]] = {}

    for match in _BLOCK_PATTERN.finditer(content):
        block_name, block_content = match.group(1), match.group(2)
        name = block_name.lower()
        if name == "structure":
            fields["structure"] = parse_key_value_pairs(block_content)
        elif name == "validation":
            fields["validation"] = _parse_validation_block(block_content)
        elif name == "props":
            fields["props"] = _parse_props_block(block_content)
        elif name == "style":
            fields["style"] = _parse_style_block(block_content)
        else:
            blocks[name] = parse_key_value_pairs(block_content)

    requirements: list[Requirement] = []
    recommendations: list[str] = []
    section: str | None = None
    for line in content.split("\n"):
        trimmed = line.strip()

        if _REQUIREMENTS_HEADER.match(trimmed):
            section = "requirements"
            continue
        if _RECOMMENDATIONS_HEADER.match(trimmed):
            section = "recommendations"
            continue

        if trimmed.startswith("!") and section == "requirements":
            requirements.append(parse_requirement(trimmed))
        elif trimmed.startswith("?") and section == "recommendations":
            recommendations.append(trimmed[1:].strip())

    return RubricSpec(
        metadata=_parse_metadata(content),
        requirements=requirements,
        recommendations=recommendations,
        blocks=blocks,
        **fields,
    )


def _parse_metadata(content: str) -> SpecMetadata:
    metadata: dict[str, str] = {}
    if match := _COMPONENT_PATTERN.search(content):
        metadata["name"] = match.group(1)
    if match := _DESCRIPTION_PATTERN.search(content):
        metadata["description"] = match.group(1)
    if match := _CATEGORY_PATTERN.search(content):
        metadata["category"] = match.group(1)
    return SpecMetadata(**metadata)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_validation_block(content: str) -> dict[str, Value]:
    """@Validation ブロックをパースし、既知ルールのパラメータ形を正規化する。

    contrast は `{ratio}`、touchTarget/bundleSize は `{min}`、
    motion は `{respectsPreference}` の形に揃える。どの形にも当てはまらない
    既知ルールの値は捨てる。
    """
    rules: dict[str, Value] = {}

    for line in content.strip().split("\n"):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        key, sep, raw = trimmed.partition(":")
        if not sep:
            continue
        key = key.strip()
        parsed = parse_value(raw.strip())

        if key == "contrast":
            if isinstance(parsed, dict) and "ratio" in parsed:
                rules[key] = parsed
            elif _is_number(parsed):
                rules[key] = {"ratio": parsed}
        elif key in _SIZE_RULES:
            if isinstance(parsed, dict) and ("min" in parsed or "max" in parsed):
                rules[key] = parsed
            elif _is_number(parsed) or isinstance(parsed, str):
                rules[key] = {"min": parsed}
        elif key == "motion":
            if isinstance(parsed, dict) and "respectsPreference" in parsed:
                rules[key] = parsed
            elif parsed is True or parsed == "required":
                rules[key] = {"respectsPreference": True}
        else:
            rules[key] = parsed

    return rules


def _parse_props_block(content: str) -> dict[str, PropDefinition]:
    """@Props ブロックを `name?: type = default` 形式でパースする。"""
    props: dict[str, PropDefinition] = {}

    for line in content.strip().split("\n"):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        match = _PROP_PATTERN.match(trimmed)
        if not match:
            continue

        name, optional, type_text, default = match.groups()
        prop: dict[str, Any] = {"type": type_text.strip(), "required": not optional}

        # `"a" | "b"` 形式のユニオンは列挙型として扱う
        if "|" in type_text:
            prop["enum"] = [v.strip() for v in type_text.split("|")]
            prop["type"] = "enum"

        if default:
            prop["default"] = parse_value(default.strip())

        props[name] = PropDefinition(**prop)

    return props


def _parse_style_block(content: str) -> StyleGuidelines:
    parsed = parse_key_value_pairs(content)
    style: dict[str, Value] = {}

    guidelines = parsed.get("guidelines")
    if guidelines not in (None, "", False):
        style["guidelines"] = guidelines if isinstance(guidelines, list) else [guidelines]

    if parsed.get("tokens") not in (None, "", False):
        style["tokens"] = parsed["tokens"]

    if parsed.get("naming") not in (None, "", False):
        style["naming"] = parsed["naming"]

    return StyleGuidelines(**style)


def parse_requirement(line: str) -> Requirement:
    """要件行（`! text [@validate: rule] [@severity: warning]`）をパースする。"""
    text = line[1:].strip()
    validation: str | None = None
    severity: Severity = "error"

    if match := _VALIDATE_HINT.search(text):
        validation = match.group(1).strip()
        text = _VALIDATE_HINT_REMOVAL.sub("", text, count=1).strip()

    if match := _SEVERITY_HINT.search(text):
        severity = match.group(1)  # type: ignore[assignment]
        text = _SEVERITY_HINT_REMOVAL.sub("", text, count=1).strip()

    return Requirement(
        text=text,
        validation=validation,
        category=categorize_requirement(text),
        severity=severity,
    )


def categorize_requirement(text: str) -> RequirementCategory:
    """要件テキストのキーワードからカテゴリを判定する。"""
    lower = text.lower()
    for category, pattern in _CATEGORY_KEYWORDS:
        if pattern.search(lower):
            return category
    return "quality"
