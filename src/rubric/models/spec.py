"""仕様（.rux）関連のデータモデル。

パース結果は不変として扱うため、モデルはすべて frozen にしている。
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeAliasType

RequirementCategory = Literal["accessibility", "performance", "compatibility", "quality"]
Severity = Literal["error", "warning", "info"]
ComparisonOperator = Literal[">=", "<=", ">", "<"]


class Comparison(BaseModel):
    """比較演算子付きの値リテラル（例: `>= 4.5`）。"""

    model_config = ConfigDict(frozen=True)

    operator: ComparisonOperator
    value: "Value"


# 値リテラルの型（再帰的なタグ付きユニオン）
Value = TypeAliasType("Value", "str | bool | float | list[Value] | dict[str, Value] | Comparison")

Comparison.model_rebuild()


class SpecMetadata(BaseModel):
    """コンポーネントのメタデータ。"""

    model_config = ConfigDict(frozen=True)

    name: str = "Component"
    description: str | None = None
    category: str | None = None


class PropDefinition(BaseModel):
    """@Props ブロックのプロパティ定義。"""

    model_config = ConfigDict(frozen=True)

    type: str
    required: bool = True
    default: Value | None = None
    enum: list[str] | None = None


class StyleGuidelines(BaseModel):
    """@Style ブロックのスタイルガイドライン。"""

    model_config = ConfigDict(frozen=True)

    guidelines: list[Value] | None = None
    tokens: Value | None = None
    naming: Value | None = None


class Requirement(BaseModel):
    """自然言語の要件。検証ヒントを持つ場合は自動検証される。"""

    model_config = ConfigDict(frozen=True)

    text: str
    validation: str | None = None
    category: RequirementCategory = "quality"
    severity: Severity = "error"


class RubricSpec(BaseModel):
    """1つの.rux文書をパースした結果。"""

    model_config = ConfigDict(frozen=True)

    metadata: SpecMetadata = Field(default_factory=SpecMetadata)
    structure: dict[str, Value] | None = None
    validation: dict[str, Value] | None = None
    props: dict[str, PropDefinition] | None = None
    style: StyleGuidelines | None = None
    requirements: list[Requirement] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    # 未知のブロックは小文字化したブロック名で保持する
    blocks: dict[str, dict[str, Value]] = Field(default_factory=dict)
