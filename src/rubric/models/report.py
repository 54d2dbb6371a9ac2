"""検証レポート関連のデータモデル。"""

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from rubric.models.spec import Severity

SuggestionType = Literal["tokens", "naming", "pattern"]


class CheckOutcome(BaseModel):
    """個々のバリデータ関数の判定結果。"""

    passed: bool
    message: str
    details: dict[str, Any] | None = None


class ValidationResult(BaseModel):
    """レポートに記録される個別検証結果。"""

    rule: str
    passed: bool
    message: str
    severity: Severity
    details: dict[str, Any] | None = None


class Coverage(BaseModel):
    """要件の自動化カバレッジ。"""

    total: int = 0
    automated: int = 0
    percentage: int = 0


class StyleSuggestion(BaseModel):
    """@Style ブロックから生成されるスタイル提案。"""

    type: SuggestionType
    message: str
    example: str | None = None


class ValidationReport(BaseModel):
    """1回のvalidate()呼び出しで生成される検証レポート。"""

    component: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    passed: list[ValidationResult] = Field(default_factory=list)
    failed: list[ValidationResult] = Field(default_factory=list)
    warnings: list[ValidationResult] = Field(default_factory=list)
    manual: list[str] = Field(default_factory=list)
    coverage: Coverage = Field(default_factory=Coverage)
    suggestions: list[StyleSuggestion] | None = None

    @property
    def has_issues(self) -> bool:
        """失敗または警告が1件以上あるか。"""
        return bool(self.failed or self.warnings)
