"""Token and TokenKind definitions for the Yuri scanner.

The scanner produces a stream of Token objects that a parser consumes.
Each Token has a kind, a borrowed slice of the source, and a position.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores a reference to the source plus raw coordinates. The token
text is sliced on access and Position is created lazily, so emitting a
token allocates neither.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from yuri.location import Position


class TokenKind(Enum):
    """Token kinds produced by the scanner.

    The set is closed: symbols map one character to one kind, and
    everything else that scans is an identifier.

    """

    IDENTIFIER = auto()  # abc123

    # Grouping
    PAREN_OPEN = auto()  # (
    PAREN_CLOSE = auto()  # )
    BRACE_OPEN = auto()  # {
    BRACE_CLOSE = auto()  # }

    # Punctuation and operators
    COLON = auto()  # :
    EQUAL = auto()  # =
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    The token does not own its text. It keeps the source string it was
    scanned from and the ``[start, end)`` range it covers; ``text`` slices
    that range on demand. A token must not be used after its source has
    been discarded by the caller.

    Attributes:
        kind: The token kind (from TokenKind enum)
        _source: The complete source string the token borrows from
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    kind: TokenKind
    _source: str = field(repr=False)
    _start_offset: int
    _end_offset: int
    _lineno: int
    _col: int
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _position_cache: Position | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def text(self) -> str:
        """The slice of source covered by this token."""
        return self._source[self._start_offset : self._end_offset]

    @property
    def position(self) -> Position:
        """Get source position (lazily created and cached).

        Returns:
            Position object for this token.
        """
        if self._position_cache is not None:
            return self._position_cache

        pos = Position(
            line=self._lineno,
            column=self._col,
            length=self._end_offset - self._start_offset,
            offset=self._start_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_position_cache", pos)
        return pos

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Token({self.kind.name}, {text!r}, {self._lineno}:{self._col})"

    @property
    def line(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def column(self) -> int:
        """Column (convenience accessor)."""
        return self._col

    @property
    def length(self) -> int:
        """Extent in characters (convenience accessor)."""
        return self._end_offset - self._start_offset
