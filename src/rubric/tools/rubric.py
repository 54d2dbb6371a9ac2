"""仕様パース・検証のMCPツール定義。"""

from typing import Any

from fastmcp import FastMCP

from rubric.models.element import ElementSnapshot
from rubric.models.errors import RubricError
from rubric.parser.spec import parse_rubric
from rubric.services.presets import PresetService
from rubric.validators.engine import RubricValidator


def register_rubric_tools(mcp: FastMCP, preset_service: PresetService, validator: RubricValidator) -> None:
    """Rubric関連のMCPツールを登録する。"""

    @mcp.tool()
    async def parse_spec(content: str) -> dict[str, Any]:
        """.rux形式の仕様テキストをパースする。

        メタデータ、@Validation等のブロック、要件と推奨事項を構造化して返します。

        Args:
            content: .rux 文書のテキスト。
        """
        return parse_rubric(content).model_dump(mode="json", exclude_none=True)

    @mcp.tool()
    async def validate_element(content: str, element: dict[str, Any]) -> dict[str, Any]:
        """仕様テキストに照らして要素スナップショットを検証する。

        Args:
            content: .rux 文書のテキスト。
            element: 要素スナップショット（tag, attributes, style, width, height,
                text, children, props, context）。
        """
        snapshot = ElementSnapshot.model_validate(element)
        report = validator.validate(snapshot, parse_rubric(content))
        return report.model_dump(mode="json")

    @mcp.tool()
    async def validate_with_preset(preset: str, element: dict[str, Any]) -> dict[str, Any]:
        """組み込みプリセットで要素スナップショットを検証する。

        Args:
            preset: プリセット名（list_presetsで取得）。
            element: 要素スナップショット。
        """
        try:
            snapshot = ElementSnapshot.model_validate(element)
            report = validator.validate(snapshot, preset_service.get_spec(preset))
            return report.model_dump(mode="json")
        except RubricError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def list_presets() -> dict[str, Any]:
        """利用可能な組み込みプリセットの一覧を取得する。"""
        try:
            return {"presets": preset_service.list_presets()}
        except RubricError as e:
            return {"error": type(e).__name__, "message": str(e)}
