"""テスト共通フィクスチャ。"""

from pathlib import Path

import pytest

from rubric.config import RubricConfig
from rubric.models.element import DocumentSnapshot, ElementSnapshot
from rubric.services.diagnostics import DiagnosticsSink
from rubric.services.presets import PresetService
from rubric.validators.engine import RubricValidator


@pytest.fixture
def config_dir() -> Path:
    """設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def diagnostics() -> DiagnosticsSink:
    """テスト用DiagnosticsSink。"""
    return DiagnosticsSink()


@pytest.fixture
def validator(diagnostics: DiagnosticsSink) -> RubricValidator:
    """テスト用RubricValidator。"""
    return RubricValidator(diagnostics=diagnostics)


@pytest.fixture
def preset_service(config_dir: Path, validator: RubricValidator) -> PresetService:
    """テスト用PresetService。"""
    return PresetService(config_dir=config_dir, validator=validator)


@pytest.fixture
def rubric_config(config_dir: Path) -> RubricConfig:
    """テスト用RubricConfig。"""
    return RubricConfig(config_dir=config_dir)


@pytest.fixture
def button() -> ElementSnapshot:
    """アクセシブルなボタン要素のスナップショット。"""
    return ElementSnapshot(
        tag="button",
        attributes={"type": "button", "class": "btn btn-primary"},
        style={"color": "rgb(255, 255, 255)", "background-color": "rgb(0, 102, 204)"},
        width=120,
        height=48,
        text="Save",
        context=DocumentSnapshot(selectors=[".btn:focus-visible"]),
    )
