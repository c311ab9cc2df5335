"""Word classification mixins for the Papier scanner."""

from papier.lexer.classifiers.prefix import (
    PREFIX_RULES,
    PrefixClassifierMixin,
    PrefixRule,
)

__all__ = ["PREFIX_RULES", "PrefixClassifierMixin", "PrefixRule"]
