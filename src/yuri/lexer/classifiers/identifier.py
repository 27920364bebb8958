"""Identifier classifier mixin."""

from __future__ import annotations

from yuri.lexer.charsets import IDENTIFIER_CONTINUE, IDENTIFIER_START
from yuri.tokens import TokenKind


class IdentifierClassifierMixin:
    """Mixin providing identifier classification."""

    _source: str
    _source_len: int

    def _try_classify_identifier(self, start: int) -> tuple[TokenKind, int] | None:
        """Try to classify text at start as an identifier.

        An identifier is an ASCII letter followed by any run of ASCII
        letters and digits. The run is consumed greedily, so ``abc123``
        is one token and a lone letter is a valid identifier.

        Args:
            start: Position in source of the candidate first character

        Returns:
            (IDENTIFIER, length) if an identifier starts here, None otherwise.
        """
        source = self._source
        if source[start] not in IDENTIFIER_START:
            return None

        end = start + 1
        source_len = self._source_len
        while end < source_len and source[end] in IDENTIFIER_CONTINUE:
            end += 1
        return TokenKind.IDENTIFIER, end - start
