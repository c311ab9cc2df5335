"""ContextVar-based parse configuration for Papier.

Provides context-local configuration using Python's ContextVars (PEP 567).
The scanner reads it once per instance, so every parse sees a consistent
configuration even when several threads parse concurrently.

Usage:
    from papier.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(fold_tag_case=True)):
        doc = build(source)

    # Or let the high-level API do it
    doc = papier.parse(source, config=ParseConfig(fold_tag_case=True))

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

DEFAULT_PUNCTUATION: frozenset[str] = frozenset(".,;:!?")


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is per-call state, not configuration. It stays on the
    Parser instance.

    Attributes:
        punctuation: Characters that may trail a word and are attached to it
            as its punctuation mark instead of being part of the payload
        fold_tag_case: Lowercase ``#Tag`` payloads. Tags are
            case-insensitive, so this gives a canonical spelling at the cost
            of exact re-serialization.

    """

    punctuation: frozenset[str] = DEFAULT_PUNCTUATION
    fold_tag_case: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ParseConfig":
        """Create ParseConfig from a mapping, ignoring unknown keys.

        ``punctuation`` may be given as any iterable of characters
        (a string works).

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "punctuation": ".!",
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.punctuation)
            ['!', '.']

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "punctuation" in filtered:
            filtered["punctuation"] = frozenset(filtered["punctuation"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "papier_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the parse configuration active in the current context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(fold_tag_case=True)):
        ...     doc = build("#Hello\\n")
        >>> doc.children[0].lines[0].words[0].payload
        'hello'

    """
    token = _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.reset(token)


__all__ = [
    "DEFAULT_PUNCTUATION",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
