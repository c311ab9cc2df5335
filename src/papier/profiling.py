"""Opt-in parse profiling.

Accumulates metrics across ``papier.parse`` calls made inside a
``profiled_parse()`` block. Zero overhead when disabled
(``get_parse_accumulator()`` returns None).

Example:
    from papier import parse
    from papier.profiling import profiled_parse

    with profiled_parse() as metrics:
        doc = parse("hello #world\\n")

    print(metrics.summary())
    # {"total_ms": 0.1, "source_length": 13, "block_count": 1, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ParseAccumulator:
    """Accumulated metrics during parsing.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources parsed.
        block_count: Top-level blocks produced.
        word_count: Words produced, sub-document titles included.
        parse_calls: Number of parse() calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    block_count: int = 0
    word_count: int = 0
    parse_calls: int = 0

    def record_parse(self, source_length: int, block_count: int, word_count: int) -> None:
        self.parse_calls += 1
        self.source_length += source_length
        self.block_count += block_count
        self.word_count += word_count

    @property
    def total_duration_ms(self) -> float:
        """Time since profiling started, in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Metrics as a plain dict for logging or JSON output.

        ``total_ms`` is wall time since the accumulator was created, not the
        sum of parse durations. ``word_count`` includes sub-document title
        words but not raw contents, which are never scanned.
        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "block_count": self.block_count,
            "word_count": self.word_count,
            "parse_calls": self.parse_calls,
        }


_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "papier_parse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Current accumulator, or None outside ``profiled_parse()``."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Collect parse metrics for the duration of the with block.

    Yields:
        ParseAccumulator populated by parse calls inside the block.

    """
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
