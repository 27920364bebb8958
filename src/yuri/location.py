"""Source positions for tokens and error messages.

Provides the Position dataclass attached to every token the scanner emits
and to every UnrecognizedCharacterError it raises.

Thread Safety:
Position is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Start and extent of a token in source text.

    Line and column are 1-indexed and describe the token's first character.
    Length is the token's extent in characters and is always >= 1 for
    emitted tokens.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        length: Number of characters covered
        offset: Absolute start offset in the source string (0-indexed)
        source_file: Source file path (optional, for error messages)

    Examples:
            >>> pos = Position(line=1, column=8, length=1, offset=7)
            >>> str(pos)
        '1:8'
            >>> pos.end_offset
        8

    """

    line: int
    column: int
    length: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format position for error messages.

        Returns:
            Formatted string like "expr.yu:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"

    @property
    def end_offset(self) -> int:
        """Offset one past the last covered character."""
        return self.offset + self.length
