"""Token classifiers for the Yuri scanner.

Each classifier is a mixin that decides whether a token of one kind
starts at a given position. Classifiers are pure: they return the kind
and length of the match and never move the cursor.
"""

from yuri.lexer.classifiers.identifier import (
    IdentifierClassifierMixin,
)
from yuri.lexer.classifiers.symbol import (
    SYMBOL_KINDS,
    SymbolClassifierMixin,
)

__all__ = [
    "IdentifierClassifierMixin",
    "SYMBOL_KINDS",
    "SymbolClassifierMixin",
]
