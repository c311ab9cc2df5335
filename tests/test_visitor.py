"""Tests for the tree visitor and transform utilities."""

import dataclasses

import pytest

from papier import parse
from papier.nodes import Document, Line, Node, Plain, SubDocument, Tag
from papier.visitor import BaseVisitor, transform

SOURCE = "hello #one\n\n* Title #two {\n#not-visited\n}\nbye #three\n"


class TagCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.tags: list[str] = []

    def visit_tag(self, node: Tag) -> None:
        self.tags.append(node.payload)


class KindCounter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.seen: list[str] = []

    def visit_default(self, node: Node) -> None:
        self.seen.append(type(node).__name__)


class TestVisitor:
    def test_collects_tags_in_order(self) -> None:
        collector = TagCollector()
        collector.visit(parse(SOURCE))
        assert collector.tags == ["one", "two", "three"]

    def test_contents_are_not_walked(self) -> None:
        collector = TagCollector()
        collector.visit(parse(SOURCE))
        assert "not-visited" not in collector.tags

    def test_default_sees_every_node(self) -> None:
        counter = KindCounter()
        counter.visit(parse("a #b\n* T {\n}\n"))
        assert counter.seen == [
            "Document",
            "Text",
            "Line",
            "Plain",
            "Tag",
            "SubDocument",
            "Plain",
        ]

    def test_return_value(self) -> None:
        class Namer(BaseVisitor[str]):
            def visit_default(self, node: Node) -> str:
                return type(node).__name__

        assert Namer().visit(parse("x\n")) == "Document"


class TestTransform:
    def test_drop_blank_lines(self) -> None:
        def drop_blank(node: Node) -> Node | None:
            if isinstance(node, Line) and node.is_blank:
                return None
            return node

        doc = transform(parse("a\n\n\nb\n"), drop_blank)
        assert [line.text for line in doc.children[0].lines] == ["a", "b"]

    def test_rewrite_words(self) -> None:
        def upper_tags(node: Node) -> Node:
            if isinstance(node, Tag):
                return dataclasses.replace(node, payload=node.payload.upper())
            return node

        original = parse(SOURCE)
        doc = transform(original, upper_tags)
        assert doc.children[1].title[1].payload == "TWO"
        assert original.children[1].title[1].payload == "two"

    def test_remove_title_word(self) -> None:
        def drop_plain(node: Node) -> Node | None:
            return None if isinstance(node, Plain) else node

        doc = transform(parse("* Title #t {\n}\n"), drop_plain)
        sub = doc.children[0]
        assert isinstance(sub, SubDocument)
        assert [w.literal for w in sub.title] == ["#t"]

    def test_identity_returns_same_objects(self) -> None:
        doc = parse(SOURCE)
        assert transform(doc, lambda n: n) is doc

    def test_root_cannot_be_removed(self) -> None:
        with pytest.raises(TypeError):
            transform(parse("x\n"), lambda n: None if isinstance(n, Document) else n)
