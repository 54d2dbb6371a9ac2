"""検証対象要素の検査インターフェースと、そのスナップショット実装。

バリデータは InspectableElement プロトコル越しにのみ要素へアクセスし、
要素を変更することはない。ブラウザ外（テスト・MCPツール）では
シリアライズされた ElementSnapshot を検査対象として使う。
"""

from typing import Any, Protocol

from pydantic import BaseModel, Field

# 算出スタイルの既定値（ブラウザの初期値に準拠）
_DEFAULT_STYLE: dict[str, str] = {
    "color": "rgb(0, 0, 0)",
    "background-color": "rgba(0, 0, 0, 0)",
    "outline": "none",
    "box-shadow": "none",
    "transition": "none",
    "animation": "none",
    "opacity": "1",
    "visibility": "visible",
    "display": "block",
    "position": "static",
    "z-index": "auto",
}


class DocumentContext(Protocol):
    """要素が属する文書・ウィンドウの状態。"""

    @property
    def hostname(self) -> str: ...

    def has_selector_containing(self, fragment: str) -> bool:
        """有効なスタイルシートにセレクタが fragment を含むルールがあるか。"""
        ...

    def prefers_reduced_motion(self) -> bool: ...


class InspectableElement(Protocol):
    """バリデータが読み取る要素のケイパビリティ。"""

    @property
    def tag_name(self) -> str: ...

    @property
    def document(self) -> DocumentContext: ...

    @property
    def inner_html(self) -> str: ...

    @property
    def text_content(self) -> str: ...

    @property
    def class_name(self) -> str: ...

    def get_attribute(self, name: str) -> str | None: ...

    def has_attribute(self, name: str) -> bool: ...

    def computed_style(self, prop: str) -> str: ...

    def bounding_size(self) -> tuple[float, float]: ...

    def descendants(self) -> list["InspectableElement"]: ...

    def framework_props(self) -> dict[str, Any]: ...

    def force_layout(self) -> None: ...


class DocumentSnapshot(BaseModel):
    """文書状態のスナップショット。"""

    hostname: str = "localhost"
    selectors: list[str] = Field(default_factory=list)
    reduced_motion: bool = False

    def has_selector_containing(self, fragment: str) -> bool:
        return any(fragment in selector for selector in self.selectors)

    def prefers_reduced_motion(self) -> bool:
        return self.reduced_motion


class ElementSnapshot(BaseModel):
    """シリアライズ可能な要素スナップショット。InspectableElement を満たす。"""

    tag: str = "div"
    attributes: dict[str, str] = Field(default_factory=dict)
    style: dict[str, str] = Field(default_factory=dict)
    width: float = 0
    height: float = 0
    text: str = ""
    html: str | None = None
    children: list["ElementSnapshot"] = Field(default_factory=list)
    props: dict[str, Any] = Field(default_factory=dict)
    context: DocumentSnapshot = Field(default_factory=DocumentSnapshot)

    @property
    def tag_name(self) -> str:
        return self.tag.upper()

    @property
    def document(self) -> DocumentSnapshot:
        return self.context

    @property
    def inner_html(self) -> str:
        if self.html is not None:
            return self.html
        return self.text + "".join(child.outer_html for child in self.children)

    @property
    def outer_html(self) -> str:
        tag = self.tag.lower()
        attrs = "".join(f' {name}="{value}"' for name, value in self.attributes.items())
        return f"<{tag}{attrs}>{self.inner_html}</{tag}>"

    @property
    def text_content(self) -> str:
        return self.text + "".join(child.text_content for child in self.children)

    @property
    def class_name(self) -> str:
        return self.attributes.get("class", "")

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def computed_style(self, prop: str) -> str:
        return self.style.get(prop, _DEFAULT_STYLE.get(prop, ""))

    def bounding_size(self) -> tuple[float, float]:
        return self.width, self.height

    def descendants(self) -> list["ElementSnapshot"]:
        """文書順（深さ優先）の全子孫要素。"""
        result: list[ElementSnapshot] = []
        for child in self.children:
            result.append(child)
            result.extend(child.descendants())
        return result

    def framework_props(self) -> dict[str, Any]:
        return self.props

    def force_layout(self) -> None:
        # スナップショットにはレイアウトエンジンがないため、寸法の読み取りのみ行う
        self.bounding_size()
