"""
Papier: parser for a small, strict, recursive plain-text document language.

Papier mixes prose lines with brace-delimited sub-documents and prefixed
words: ``!uuid`` identifiers, ``!!alias`` names, ``!?ref`` references,
``#tag`` tags and ``@fmt`` format markers. Parsing is a single O(n) pass
producing an immutable, typed tree; zero runtime dependencies.

Quick Start:
    >>> from papier import parse
    >>> doc = parse("hello #world\\n* Intro {\\nsome text\\n}\\n")
    >>> [w.literal for w in doc.children[0].lines[0].words]
    ['hello', '#world']
    >>> doc.children[1].contents
    ('some text',)

Malformed prefixed words never fail; they become plain words. Broken
sub-document structure raises StructuralError with the exact position:

    >>> parse("* Open {\\nunterminated\\n")
    Traceback (most recent call last):
    ...
    papier.errors.StructuralError: 3:1 sub-document opened at line 1 is never closed with '}'

"""

from collections.abc import Iterable

from papier.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from papier.errors import (
    PapierError,
    ParseError,
    StructuralError,
    StructuralErrorKind,
)
from papier.lexer import Scanner, ScanMode, scan
from papier.location import SourceLocation
from papier.nodes import (
    Alias,
    Block,
    Document,
    Fmt,
    Line,
    Plain,
    Ref,
    SubDocument,
    Tag,
    Text,
    Uuid,
    Word,
    WordNode,
)
from papier.parser import Parser, build
from papier.parsing import assemble
from papier.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from papier.serialization import from_dict, from_json, to_dict, to_json
from papier.tokens import Token, TokenType
from papier.unparse import unparse
from papier.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse Papier source into a typed tree.

    Args:
        source: Papier source text
        source_file: Optional source file path for error messages
        config: Parse configuration for this call (defaults to the one
            active in the current context)

    Returns:
        Document root node

    Raises:
        StructuralError: On an unterminated sub-document or an opener
            without ``{``

    Example:
        >>> doc = parse("!!my-alias.\\n")
        >>> doc.children[0].lines[0].words[0]
        Alias(location=..., payload='my-alias', punctuation='.')

    """
    if config is None:
        doc = build(source, source_file=source_file)
    else:
        with parse_config_context(config):
            doc = build(source, source_file=source_file)

    acc = get_parse_accumulator()
    if acc is not None:
        acc.record_parse(
            source_length=len(source),
            block_count=len(doc.children),
            word_count=sum(1 for _ in doc.iter_words()),
        )
    return doc


class Papier:
    """Parser bound to one configuration.

    Usage:
        >>> papier = Papier(config=ParseConfig(fold_tag_case=True))
        >>> doc = papier.parse("#TODO fix this\\n")
        >>> doc.children[0].lines[0].words[0].payload
        'todo'

    Thread Safety:
        The configuration is immutable and applied per call via ContextVar,
        so one instance can be shared across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, config: ParseConfig | None = None) -> None:
        self._config = config or ParseConfig()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse one source with this instance's configuration."""
        return parse(source, source_file=source_file, config=self._config)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[Document]:
        """Parse several sources, setting the configuration once.

        Stops at the first StructuralError.
        """
        with parse_config_context(self._config):
            return [parse(source, source_file=source_file) for source in sources]


__all__ = [  # noqa: RUF022 grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "build",
    "scan",
    "assemble",
    "unparse",
    "Papier",
    # Components
    "Parser",
    "Scanner",
    "ScanMode",
    "Token",
    "TokenType",
    # Nodes
    "Block",
    "Document",
    "Text",
    "SubDocument",
    "Line",
    "Word",
    "WordNode",
    "Uuid",
    "Alias",
    "Ref",
    "Tag",
    "Fmt",
    "Plain",
    # Errors
    "PapierError",
    "ParseError",
    "StructuralError",
    "StructuralErrorKind",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Profiling
    "ParseAccumulator",
    "profiled_parse",
    "get_parse_accumulator",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Location
    "SourceLocation",
]
