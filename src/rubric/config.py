"""Rubricの設定管理。"""

from pathlib import Path

from pydantic_settings import BaseSettings

_PACKAGE_ROOT = Path(__file__).parent
_REPO_ROOT = _PACKAGE_ROOT.parent.parent


class RubricConfig(BaseSettings):
    """Rubric設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "RUBRIC_"}

    config_dir: Path = _REPO_ROOT / "config"
    verbose: bool = False

    # MCPサーバー (streamable-http)
    host: str = "0.0.0.0"
    port: int = 8000
