"""組み込みプリセットの読み込みとプリセットによる検証を行うサービス。"""

from pathlib import Path
from typing import Any

import yaml

from rubric.models.element import InspectableElement
from rubric.models.errors import PresetCatalogError, PresetNotFoundError
from rubric.models.report import ValidationReport
from rubric.models.spec import RubricSpec
from rubric.parser.spec import parse_rubric
from rubric.validators.engine import RubricValidator


class PresetService:
    """プリセット（.rux）の解決・パース・キャッシュを行う。

    プリセットはカタログ（presets/catalog.yaml）に登録された名前、
    または .rux ファイルへのパスで指定する。仕様は不変なので、
    同じプリセットは一度だけパースしてキャッシュする。
    """

    def __init__(self, config_dir: Path, validator: RubricValidator | None = None) -> None:
        self._config_dir = config_dir
        self._presets_dir = config_dir / "presets"
        self._validator = validator or RubricValidator()
        self._catalog: dict[str, dict[str, Any]] | None = None
        self._specs: dict[str, RubricSpec] = {}

    def _load_catalog(self) -> dict[str, dict[str, Any]]:
        """プリセットカタログをYAMLファイルから読み込む。"""
        if self._catalog is not None:
            return self._catalog

        catalog_file = self._presets_dir / "catalog.yaml"
        if not catalog_file.exists():
            self._catalog = {}
            return self._catalog

        with open(catalog_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data and (not isinstance(data, dict) or not isinstance(data.get("presets"), list)):
            raise PresetCatalogError(f"Invalid preset catalog: {catalog_file}")

        self._catalog = {entry["name"]: entry for entry in (data or {}).get("presets", [])}
        return self._catalog

    def list_presets(self) -> list[dict[str, Any]]:
        """カタログに登録されたプリセットの一覧を返す。"""
        return [
            {
                "name": name,
                "component": entry.get("component", ""),
                "category": entry.get("category", ""),
                "description": entry.get("description", ""),
            }
            for name, entry in self._load_catalog().items()
        ]

    def preset_names(self) -> list[str]:
        return list(self._load_catalog().keys())

    def load_preset_text(self, name: str) -> str:
        """プリセットの.ruxテキストを取得する。

        Raises:
            PresetNotFoundError: カタログにもファイルパスとしても存在しない場合。
        """
        entry = self._load_catalog().get(name)
        if entry is not None:
            preset_file = self._presets_dir / entry["file"]
        else:
            preset_file = Path(name)

        if preset_file.suffix != ".rux" or not preset_file.is_file():
            raise PresetNotFoundError(name, self.preset_names())
        return preset_file.read_text(encoding="utf-8")

    def get_spec(self, name: str) -> RubricSpec:
        """プリセットのパース済み仕様を取得する（キャッシュ付き）。"""
        spec = self._specs.get(name)
        if spec is None:
            spec = parse_rubric(self.load_preset_text(name))
            self._specs[name] = spec
        return spec

    def validate_component(self, element: InspectableElement, name: str) -> ValidationReport:
        """プリセットの仕様で要素を検証する。

        Raises:
            PresetNotFoundError: プリセットが解決できない場合。
        """
        return self._validator.validate(element, self.get_spec(name))
