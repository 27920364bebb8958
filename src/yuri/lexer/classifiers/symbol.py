"""Single-character symbol classifier mixin."""

from __future__ import annotations

from yuri.tokens import TokenKind

# Checked before the identifier rule. Symbol characters are disjoint from
# identifier characters, so the order never changes which rule wins.
SYMBOL_KINDS: dict[str, TokenKind] = {
    "(": TokenKind.PAREN_OPEN,
    ")": TokenKind.PAREN_CLOSE,
    "{": TokenKind.BRACE_OPEN,
    "}": TokenKind.BRACE_CLOSE,
    ":": TokenKind.COLON,
    "=": TokenKind.EQUAL,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
}


class SymbolClassifierMixin:
    """Mixin providing symbol classification."""

    _source: str

    def _try_classify_symbol(self, start: int) -> tuple[TokenKind, int] | None:
        """Try to classify the character at start as a symbol.

        Args:
            start: Position in source of the candidate character

        Returns:
            (kind, 1) if the character is a symbol, None otherwise.
        """
        kind = SYMBOL_KINDS.get(self._source[start])
        if kind is None:
            return None
        return kind, 1
