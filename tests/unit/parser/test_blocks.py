"""parse_key_value_pairsのユニットテスト。"""

from rubric.parser.blocks import parse_key_value_pairs


class TestParseKeyValuePairs:
    def test_flat_pairs(self) -> None:
        result = parse_key_value_pairs("\n  element: button\n  interactive: true\n")
        assert result == {"element": "button", "interactive": True}

    def test_skips_blank_and_comment_lines(self) -> None:
        result = parse_key_value_pairs("a: 1\n\n  # comment\nb: 2")
        assert result == {"a": 1.0, "b": 2.0}

    def test_ignores_lines_without_colon(self) -> None:
        assert parse_key_value_pairs("just text\nkey: value") == {"key": "value"}

    def test_nested_object_under_empty_value(self) -> None:
        content = "naming:\n    pattern: BEM\n    example: block__element\nother: x"
        assert parse_key_value_pairs(content) == {
            "naming": {"pattern": "BEM", "example": "block__element"},
            "other": "x",
        }

    def test_nested_object_under_open_brace(self) -> None:
        content = "  tokens: {\n    colors: [primary, secondary]\n    spacing: [compact]\n  "
        assert parse_key_value_pairs(content) == {
            "tokens": {"colors": ["primary", "secondary"], "spacing": ["compact"]},
        }

    def test_deeper_indentation_joins_same_nested_object(self) -> None:
        content = "outer:\n  a: 1\n      b: 2"
        assert parse_key_value_pairs(content) == {"outer": {"a": 1.0, "b": 2.0}}

    def test_pending_key_without_nested_lines_is_not_stored(self) -> None:
        assert parse_key_value_pairs("empty:\nnext: 1") == {"next": 1.0}

    def test_indented_line_after_stored_value_is_top_level(self) -> None:
        content = "  first: 1\n    second: 2"
        assert parse_key_value_pairs(content) == {"first": 1.0, "second": 2.0}

    def test_multiline_array_is_not_supported(self) -> None:
        content = 'guidelines: [\n    "Use semantic elements",\n    "Ensure focus"\n  ]'
        assert parse_key_value_pairs(content) == {"guidelines": "["}
