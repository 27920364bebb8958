"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Identifier characters are ASCII only. A non-ASCII letter is not an
identifier character and is reported as unrecognized.

Usage:
    from yuri.lexer.charsets import TRIVIA

    if char in TRIVIA:  # O(1) lookup
        ...
"""

import string

# Whitespace consumed between tokens and never emitted
TRIVIA: frozenset[str] = frozenset(" \t\n\r")

# Characters that may start an identifier
IDENTIFIER_START: frozenset[str] = frozenset(string.ascii_letters)

# Characters that may continue an identifier
IDENTIFIER_CONTINUE: frozenset[str] = IDENTIFIER_START | frozenset(string.digits)
