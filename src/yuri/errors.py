"""Exception classes for Yuri.

Provides standardized exceptions for error handling throughout Yuri.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yuri.location import Position


class YuriError(Exception):
    """Base exception for all Yuri errors.

    Subclass this for specific error categories.
    """

    pass


class UnrecognizedCharacterError(YuriError):
    """No token can start at the scanner's cursor.

    Raised when the character at the cursor, after trivia has been
    skipped, is neither a symbol nor the start of an identifier. The
    scanner does not skip past it and reports no further tokens.
    """

    def __init__(self, char: str, position: Position) -> None:
        """Initialize error with the offending character and its position.

        Args:
            char: The unrecognized character
            position: Where it occurs (length 1)
        """
        self.char = char
        self.position = position

        super().__init__(f"{position} unrecognized character {char!r}")

    @property
    def lineno(self) -> int:
        """Line of the offending character (1-indexed)."""
        return self.position.line

    @property
    def col_offset(self) -> int:
        """Column of the offending character (1-indexed)."""
        return self.position.column

    @property
    def source_file(self) -> str | None:
        """Source file path, if the scanner was given one."""
        return self.position.source_file
