"""Typed document tree for Papier.

All nodes are frozen dataclasses with slots: immutable, cheap, and usable
with ``match`` statements.

Node Hierarchy:
Node (base)
├── Document
├── Text            (Block)
├── SubDocument     (Block)
├── Line
└── WordNode        (Word)
    ├── Uuid
    ├── Alias
    ├── Ref
    ├── Tag
    ├── Fmt
    └── Plain

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from papier.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""

    location: SourceLocation


# =============================================================================
# Words
# =============================================================================


@dataclass(frozen=True, slots=True)
class WordNode(Node):
    """Common shape of every word variant.

    ``payload`` excludes the prefix and the trailing punctuation mark.

    """

    payload: str
    punctuation: str | None = None

    prefix: ClassVar[str] = ""

    @property
    def literal(self) -> str:
        """The word as written: prefix, payload, punctuation."""
        return f"{self.prefix}{self.payload}{self.punctuation or ''}"


@dataclass(frozen=True, slots=True)
class Uuid(WordNode):
    """Identifier. Papier: ``!0f8fad5b-d9cb-469f-a165-70867728950e``"""

    prefix: ClassVar[str] = "!"


@dataclass(frozen=True, slots=True)
class Alias(WordNode):
    """Human-readable name for a document. Papier: ``!!home``"""

    prefix: ClassVar[str] = "!!"


@dataclass(frozen=True, slots=True)
class Ref(WordNode):
    """Reference to an alias, identifier or anything else. Papier: ``!?home``"""

    prefix: ClassVar[str] = "!?"


@dataclass(frozen=True, slots=True)
class Tag(WordNode):
    """Case-insensitive tag. Papier: ``#todo``"""

    prefix: ClassVar[str] = "#"


@dataclass(frozen=True, slots=True)
class Fmt(WordNode):
    """Format marker. Papier: ``@code``"""

    prefix: ClassVar[str] = "@"


@dataclass(frozen=True, slots=True)
class Plain(WordNode):
    """Any other word, including prefixed text with a malformed payload."""


Word: TypeAlias = Uuid | Alias | Ref | Tag | Fmt | Plain


# =============================================================================
# Lines and blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Line(Node):
    """One line of prose. Zero words means a blank line."""

    words: tuple[Word, ...]

    @property
    def is_blank(self) -> bool:
        return not self.words

    @property
    def text(self) -> str:
        """Words joined by single spaces."""
        return " ".join(word.literal for word in self.words)


@dataclass(frozen=True, slots=True)
class Text(Node):
    """A run of consecutive prose lines."""

    lines: tuple[Line, ...]


@dataclass(frozen=True, slots=True)
class SubDocument(Node):
    """A titled, brace-delimited block.

    Papier:
        * Title words {
        raw content line
        }

    ``contents`` holds the raw lines between the braces. They are not parsed
    further, so a ``* `` inside them is plain content.

    """

    title: tuple[Word, ...]
    contents: tuple[str, ...]

    @property
    def title_text(self) -> str:
        return " ".join(word.literal for word in self.title)


Block: TypeAlias = Text | SubDocument


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node: the top-level blocks in source order."""

    children: tuple[Block, ...]

    @property
    def sub_documents(self) -> tuple[SubDocument, ...]:
        return tuple(b for b in self.children if isinstance(b, SubDocument))

    def iter_words(self):
        """Yield every word in the tree, titles included, in source order."""
        for block in self.children:
            if isinstance(block, SubDocument):
                yield from block.title
            else:
                for line in block.lines:
                    yield from line.words


WORD_CLASSES: tuple[type[WordNode], ...] = (Uuid, Alias, Ref, Tag, Fmt, Plain)
