"""FastMCPベースのMCPサーバーエントリポイント。"""

import logging

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from rubric.config import RubricConfig
from rubric.resources.presets import register_preset_resources
from rubric.services.diagnostics import DiagnosticsSink
from rubric.services.presets import PresetService
from rubric.tools.rubric import register_rubric_tools
from rubric.validators.engine import RubricValidator

logger = logging.getLogger(__name__)


def create_server(config: RubricConfig | None = None) -> FastMCP:
    """Rubric MCPサーバーを作成し、ツール・リソースを登録する。

    Args:
        config: 設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = RubricConfig()

    mcp = FastMCP("rubric")

    # 検証エンジン
    diagnostics = DiagnosticsSink(verbose=config.verbose)
    validator = RubricValidator(diagnostics=diagnostics)

    # サービス層
    preset_service = PresetService(config_dir=config.config_dir, validator=validator)

    # MCPインターフェース登録
    register_rubric_tools(mcp, preset_service, validator)
    register_preset_resources(mcp, preset_service)

    # ヘルスチェックエンドポイント
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    logger.info("Rubric MCP server created (config_dir=%s)", config.config_dir)
    return mcp
