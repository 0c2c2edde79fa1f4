"""Tests for the block reader."""

import pytest

from nestcss.errors import NestingTooDeepError, UnclosedBlockError
from nestcss.model import Document, Rule, Severity
from nestcss.parser.block_reader import read_block


def _read(text: str, start: int = 0, **kwargs) -> tuple[int, Document]:
    doc = Document()
    end = read_block(text.splitlines(), start, (), doc, **kwargs)
    return end, doc


class TestReadBlock:
    def test_returns_index_past_close_marker(self):
        end, doc = _read("a {\n  color: red;\n}\nb {\n}")
        assert end == 3
        assert len(doc) == 1

    def test_ancestors_prefix_the_path(self):
        doc = Document()
        read_block(["b {", "}"], 0, ("a",), doc)
        assert doc.nodes[0].selector_path == ("a", "b")

    def test_every_level_becomes_a_rule(self):
        source = "a {\n b {\n  c {\n   x: 1;\n  }\n }\n}"
        _, doc = _read(source)
        assert [r.selector_path for r in doc.rules] == [
            ("a",),
            ("a", "b"),
            ("a", "b", "c"),
        ]
        assert doc.rules[0].properties == {}
        assert doc.rules[2].properties == {"x": "1"}

    def test_siblings_share_parent_path(self):
        source = "a {\n b {\n }\n c {\n }\n}"
        _, doc = _read(source)
        assert [r.selector_path for r in doc.rules] == [("a",), ("a", "b"), ("a", "c")]

    def test_property_split_on_first_colon_only(self):
        _, doc = _read("a {\n  background: url(http://x/y.png);\n}")
        assert doc.rules[0].properties == {"background": "url(http://x/y.png)"}

    def test_property_without_colon_is_skipped(self):
        _, doc = _read("a {\n  nonsense\n  color: red;\n}")
        assert doc.rules[0].properties == {"color": "red"}
        diag = doc.diagnostics[0]
        assert diag.rule == "malformed_declaration"
        assert diag.severity is Severity.WARNING
        assert diag.line == 2

    def test_variable_line_inside_block_is_a_property(self):
        _, doc = _read("a {\n  @c: red;\n}")
        assert doc.rules[0].properties == {"@c": "red"}

    def test_line_numbers_are_one_based(self):
        _, doc = _read("\n\na {\n  b {\n  }\n}", start=2)
        assert [r.line for r in doc.rules] == [3, 4]


class TestUnclosed:
    def test_error_policy_raises_for_innermost_block(self):
        with pytest.raises(UnclosedBlockError) as exc_info:
            _read("a {\n  b {\n    x: 1;", source="s.less")
        err = exc_info.value
        assert err.selector_path == ("a", "b")
        assert err.line == 2
        assert err.source == "s.less"
        assert "a b" in str(err)

    def test_drop_policy_removes_partial_rules(self):
        doc = Document(nodes=[Rule(selector_path=("keep",))])
        end = read_block(["a {", " b {", " }"], 0, (), doc, on_unclosed="drop")
        assert end == 3
        assert [r.selector_path for r in doc.rules] == [("keep",)]
        assert doc.diagnostics[0].rule == "unclosed_block"
        assert doc.diagnostics[0].line == 1

    def test_open_line_at_end_of_input(self):
        with pytest.raises(UnclosedBlockError):
            _read("a {")


class TestDepthLimit:
    def test_nesting_beyond_limit_raises(self):
        source = "a {\n b {\n  c {\n  }\n }\n}"
        with pytest.raises(NestingTooDeepError) as exc_info:
            _read(source, max_depth=2)
        assert exc_info.value.line == 3
        assert exc_info.value.limit == 2

    def test_nesting_at_limit_is_fine(self):
        source = "a {\n b {\n }\n}"
        _, doc = _read(source, max_depth=2)
        assert len(doc.rules) == 2

    def test_deep_nesting_does_not_recurse(self):
        depth = 2000
        lines = [f"s{n} {{" for n in range(depth)] + ["x: 1;"] + ["}"] * depth
        doc = Document()
        end = read_block(lines, 0, (), doc, max_depth=depth)
        assert end == len(lines)
        assert len(doc.rules) == depth
        assert doc.rules[-1].properties == {"x": "1"}


class TestEmptySelector:
    def test_block_without_selector_is_skipped(self):
        source = "a {\n  x: 1;\n  {\n    y: 2;\n    b {\n      z: 3;\n    }\n  }\n  w: 4;\n}"
        end, doc = _read(source)
        assert end == 10
        assert [r.selector_path for r in doc.rules] == [("a",)]
        assert doc.rules[0].properties == {"x": "1", "w": "4"}
        diag = doc.diagnostics[0]
        assert diag.rule == "empty_selector"
        assert diag.severity is Severity.WARNING
        assert diag.line == 3

    def test_top_level_block_without_selector(self):
        _, doc = _read("{\n  x: 1;\n}")
        assert doc.rules == []
        assert doc.diagnostics[0].rule == "empty_selector"

    def test_rules_carry_their_source(self):
        _, doc = _read("a {\n}", source="s.less")
        assert doc.rules[0].source == "s.less"
