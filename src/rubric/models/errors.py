"""Rubricのカスタム例外クラス。"""


class RubricError(Exception):
    """Rubricの基底例外クラス。"""


class PresetNotFoundError(RubricError):
    """指定されたプリセットが見つからない場合の例外。"""

    def __init__(self, preset_name: str, available: list[str]) -> None:
        super().__init__(f'Preset "{preset_name}" not found. Available presets: {", ".join(available)}')
        self.preset_name = preset_name
        self.available = available


class PresetCatalogError(RubricError):
    """プリセットカタログの読み込みエラー。"""
