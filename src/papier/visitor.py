"""Tree visitor and transformer for Papier.

Example, collect every tag:

    class TagCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.tags: list[str] = []

        def visit_tag(self, node: Tag) -> None:
            self.tags.append(node.payload)

    collector = TagCollector()
    collector.visit(doc)

Example, drop blank lines:

    def drop_blank(node: Node) -> Node | None:
        if isinstance(node, Line) and node.is_blank:
            return None
        return node

    new_doc = transform(doc, drop_blank)

Thread Safety:
    Visitors may accumulate state; create one per thread. ``transform`` is
    pure.

"""

import dataclasses
from collections.abc import Callable
from typing import Generic, TypeVar

from papier.nodes import (
    Alias,
    Document,
    Fmt,
    Line,
    Node,
    Plain,
    Ref,
    SubDocument,
    Tag,
    Text,
    Uuid,
)


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base tree visitor with match-based dispatch.

    Override ``visit_*`` methods for the node types you care about.
    Unhandled types fall through to ``visit_default``. Children are walked
    automatically after the ``visit_*`` call; a sub-document's title words
    are children, its raw contents are not.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the matching ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        return None  # type: ignore[return-value]

    # -- Blocks ----------------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_sub_document(self, node: SubDocument) -> T:
        return self.visit_default(node)

    def visit_line(self, node: Line) -> T:
        return self.visit_default(node)

    # -- Words -----------------------------------------------------------------

    def visit_uuid(self, node: Uuid) -> T:
        return self.visit_default(node)

    def visit_alias(self, node: Alias) -> T:
        return self.visit_default(node)

    def visit_ref(self, node: Ref) -> T:
        return self.visit_default(node)

    def visit_tag(self, node: Tag) -> T:
        return self.visit_default(node)

    def visit_fmt(self, node: Fmt) -> T:
        return self.visit_default(node)

    def visit_plain(self, node: Plain) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Text():
                return self.visit_text(node)
            case SubDocument():
                return self.visit_sub_document(node)
            case Line():
                return self.visit_line(node)
            case Uuid():
                return self.visit_uuid(node)
            case Alias():
                return self.visit_alias(node)
            case Ref():
                return self.visit_ref(node)
            case Tag():
                return self.visit_tag(node)
            case Fmt():
                return self.visit_fmt(node)
            case Plain():
                return self.visit_plain(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Document(children=children):
                for child in children:
                    self.visit(child)
            case Text(lines=lines):
                for line in lines:
                    self.visit(line)
            case SubDocument(title=title):
                for word in title:
                    self.visit(word)
            case Line(words=words):
                for word in words:
                    self.visit(word)
            case _:
                pass  # Words are leaves


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply ``fn`` to every node bottom-up, returning a new tree.

    Children are transformed first, so ``fn`` always receives a node whose
    children are already rewritten. Return ``None`` to remove a node. The
    root Document cannot be removed; returning None for it raises TypeError.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    return fn(_transform_children(node, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(
            result for c in children
            if (result := _transform_node(c, fn)) is not None
        )

    match node:
        case Document(children=children):
            new_children = _filtered(children)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case Text(lines=lines):
            new_lines = _filtered(lines)
            if new_lines != lines:
                return dataclasses.replace(node, lines=new_lines)
        case SubDocument(title=title):
            new_title = _filtered(title)
            if new_title != title:
                return dataclasses.replace(node, title=new_title)
        case Line(words=words):
            new_words = _filtered(words)
            if new_words != words:
                return dataclasses.replace(node, words=new_words)
        case _:
            pass

    return node
