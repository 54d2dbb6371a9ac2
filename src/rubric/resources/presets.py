"""プリセット関連のMCPリソース定義。"""

import yaml
from fastmcp import FastMCP

from rubric.services.presets import PresetService


def register_preset_resources(mcp: FastMCP, preset_service: PresetService) -> None:
    """プリセット関連のMCPリソースを登録する。"""

    @mcp.resource("rubric://presets")
    async def preset_catalog() -> str:
        """組み込みプリセットのカタログを取得する。"""
        data = {"presets": preset_service.list_presets()}
        return yaml.dump(data, allow_unicode=True, default_flow_style=False)

    @mcp.resource("rubric://presets/{name}")
    async def preset_source(name: str) -> str:
        """プリセットの.ruxテキストを取得する。"""
        return preset_service.load_preset_text(name)
