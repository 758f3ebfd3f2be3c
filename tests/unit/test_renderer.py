"""Tests for the result renderer."""
import pytest

from xpathcat.engine.base import (
    BooleanResult,
    NodeCollectionResult,
    NodeKind,
    NodeRef,
    NumberResult,
    StringResult,
)
from xpathcat.engine.renderer import ResultRenderer


class TestScalarResults:
    def test_string_trimmed(self, fake_tree):
        result = StringResult(value="\t  some text \n")
        assert ResultRenderer().render(result, fake_tree, "-") == "'some text'\n"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (2, "'2.000000'\n"),
            (0.5, "'0.500000'\n"),
            (-1.25, "'-1.250000'\n"),
            (1 / 3, "'0.333333'\n"),
            (float("inf"), "'inf'\n"),
            (float("nan"), "'nan'\n"),
        ],
    )
    def test_number(self, fake_tree, value, expected):
        assert ResultRenderer().render(NumberResult(value=value), fake_tree, "-") == expected

    def test_boolean(self, fake_tree):
        renderer = ResultRenderer()
        assert renderer.render(BooleanResult(value=True), fake_tree, "-") == "'true'\n"
        assert renderer.render(BooleanResult(value=False), fake_tree, "-") == "'false'\n"


class TestNodeCollection:
    def test_absent_collection(self, fake_tree):
        result = NodeCollectionResult(nodes=None)
        assert ResultRenderer().render(result, fake_tree, "-") == "NULL\n"

    def test_empty_collection(self, fake_tree):
        result = NodeCollectionResult(nodes=[])
        assert ResultRenderer().render(result, fake_tree, "-") == "'[\n]'\n"

    def test_mixed_nodes(self, fake_tree, element_result):
        rendered = ResultRenderer().render(element_result, fake_tree, "-")
        assert rendered == "'[\n \"child2\": \"hello\",\n\"loose text\"\n]'\n"

    def test_element_without_text(self, fake_tree):
        result = NodeCollectionResult(nodes=[NodeRef(kind=NodeKind.ELEMENT, name="unknown")])
        assert ResultRenderer().render(result, fake_tree, "-") == "'[\n \"unknown\": \"\",\n]'\n"

    def test_other_nodes_skipped(self, fake_tree):
        result = NodeCollectionResult(nodes=[NodeRef(kind=NodeKind.OTHER)] * 3)
        assert ResultRenderer().render(result, fake_tree, "-") == "'[\n]'\n"


class TestLabels:
    def test_every_record_prefixed(self, fake_tree, element_result):
        rendered = ResultRenderer().render(element_result, fake_tree, "doc.xml")
        assert rendered == (
            "doc.xml: '[\n"
            "doc.xml:  \"child2\": \"hello\",\n"
            "doc.xml: \"loose text\"\n"
            "doc.xml: ]'\n"
        )

    def test_scalar_prefixed(self, fake_tree):
        rendered = ResultRenderer().render(NumberResult(value=2), fake_tree, "a.xml")
        assert rendered == "a.xml: '2.000000'\n"

    def test_null_prefixed(self, fake_tree):
        rendered = ResultRenderer().render(NodeCollectionResult(nodes=None), fake_tree, "a.xml")
        assert rendered == "a.xml: NULL\n"

    def test_embedded_newline_prefixed_once(self, fake_tree):
        rendered = ResultRenderer().render(StringResult(value="a\nb"), fake_tree, "a.xml")
        assert rendered == "a.xml: 'a\nb'\n"


def test_records_unprefixed(fake_tree):
    assert ResultRenderer().records(BooleanResult(value=True), fake_tree) == ["'true'\n"]


def test_unknown_result_type(fake_tree):
    with pytest.raises(TypeError):
        ResultRenderer().records("not a result", fake_tree)
