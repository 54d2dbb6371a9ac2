"""ElementSnapshotのユニットテスト。"""

from rubric.models.element import DocumentSnapshot, ElementSnapshot


class TestElementSnapshot:
    def test_defaults(self) -> None:
        element = ElementSnapshot()
        assert element.tag_name == "DIV"
        assert element.computed_style("background-color") == "rgba(0, 0, 0, 0)"
        assert element.computed_style("outline") == "none"
        assert element.computed_style("unknown-prop") == ""
        assert element.bounding_size() == (0, 0)
        assert element.document.hostname == "localhost"

    def test_attributes(self) -> None:
        element = ElementSnapshot(tag="a", attributes={"href": "/docs", "disabled": "", "class": "link"})
        assert element.get_attribute("href") == "/docs"
        assert element.get_attribute("rel") is None
        assert element.has_attribute("disabled") is True
        assert element.class_name == "link"

    def test_descendants_in_document_order(self) -> None:
        element = ElementSnapshot(
            tag="ul",
            children=[
                ElementSnapshot(tag="li", children=[ElementSnapshot(tag="img")]),
                ElementSnapshot(tag="li"),
            ],
        )
        assert [d.tag_name for d in element.descendants()] == ["LI", "IMG", "LI"]

    def test_inner_html_and_text_from_children(self) -> None:
        element = ElementSnapshot(
            tag="p",
            text="Hello ",
            children=[ElementSnapshot(tag="b", attributes={"class": "x"}, text="world")],
        )
        assert element.inner_html == 'Hello <b class="x">world</b>'
        assert element.text_content == "Hello world"

    def test_explicit_html_overrides_rendering(self) -> None:
        element = ElementSnapshot(tag="div", text="x", html="<em>x</em>")
        assert element.inner_html == "<em>x</em>"

    def test_serialization_roundtrip(self) -> None:
        element = ElementSnapshot(
            tag="button",
            style={"opacity": "0.5"},
            children=[ElementSnapshot(tag="span", text="Go")],
            context=DocumentSnapshot(selectors=["button:focus"], reduced_motion=True),
        )
        restored = ElementSnapshot.model_validate(element.model_dump())
        assert restored == element
        assert restored.document.has_selector_containing(":focus") is True
        assert restored.document.prefers_reduced_motion() is True
