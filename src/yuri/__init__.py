"""
Yuri — Lexical scanner for a small expression language

Turns source text into a lazy, single-pass stream of typed tokens, each
carrying its line, column and length. Zero runtime dependencies.

Quick Start:
    >>> from yuri import tokenize
    >>> for token in tokenize("f = (x + y)"):
    ...     print(token.kind.name, token.text, token.position)
    IDENTIFIER f 1:1
    EQUAL = 1:3
    PAREN_OPEN ( 1:5
    IDENTIFIER x 1:6
    PLUS + 1:8
    IDENTIFIER y 1:10
    PAREN_CLOSE ) 1:11

Errors:
    >>> list(tokenize("1abc"))
    Traceback (most recent call last):
    ...
    yuri.errors.UnrecognizedCharacterError: 1:1 unrecognized character '1'
"""

from yuri.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from yuri.errors import UnrecognizedCharacterError, YuriError
from yuri.lexer import Scanner
from yuri.location import Position
from yuri.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(source: str, *, source_file: str | None = None) -> Scanner:
    """Scan source lazily.

    Args:
        source: Source text
        source_file: Optional source file path for positions and errors

    Returns:
        A new Scanner positioned at the start of source. Iterate it to
        pull tokens; it raises UnrecognizedCharacterError on the pull
        where an unrecognized character is reached.
    """
    return Scanner(source, source_file=source_file)


def first_token(source: str) -> tuple[int, Token] | None:
    """Scan only the first token of source.

    Returns:
        (trivia_length, token) where trivia_length is the number of
        whitespace characters skipped before the token, or None if
        source contains only whitespace.

    Raises:
        UnrecognizedCharacterError: The first non-whitespace character
            does not start a token.
    """
    token = Scanner(source).next_token()
    if token is None:
        return None
    return token.position.offset, token


__all__ = [
    # Main API
    "tokenize",
    "first_token",
    "Scanner",
    # Tokens
    "Token",
    "TokenKind",
    "Position",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "YuriError",
    "UnrecognizedCharacterError",
]
