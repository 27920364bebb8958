"""Pull-based scanner for the Yuri expression language.

This package turns source text into a lazy stream of positioned tokens.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (mixin composition + cursor)
├── charsets.py          # Trivia and identifier character sets
└── classifiers/         # Token classification mixins
    ├── symbol.py        # Single-character symbols
    └── identifier.py    # Identifiers

Usage:
    >>> from yuri.lexer import Scanner
    >>> for token in Scanner("a\nb"):
    ...     print(token)
Token(IDENTIFIER, 'a', 1:1)
Token(IDENTIFIER, 'b', 2:1)

"""

from yuri.lexer.core import Scanner

__all__ = ["Scanner"]
