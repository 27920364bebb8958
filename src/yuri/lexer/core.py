"""Pull-based scanner with O(n) guaranteed performance.

Each pull skips trivia, classifies the text at the cursor, then commits
the cursor past the match. Classification never moves the cursor and
every commit advances it by at least one character, so there are no
rewinds and scanning always terminates.

No regex in the hot path.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from yuri.config import ScanConfig, get_scan_config
from yuri.errors import UnrecognizedCharacterError
from yuri.lexer.charsets import TRIVIA
from yuri.lexer.classifiers import (
    IdentifierClassifierMixin,
    SymbolClassifierMixin,
)
from yuri.location import Position
from yuri.tokens import Token, TokenKind
from yuri.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    SymbolClassifierMixin,
    IdentifierClassifierMixin,
):
    """Lazy, single-pass scanner over a source string.

    The scanner is its own iterator. Each ``next()`` yields one token;
    iteration stops when only trivia remains. It never rewinds: scan the
    same text again by constructing a new Scanner.

    Usage:
            >>> for token in Scanner("abc123 + (x)"):
            ...     print(token)
        Token(IDENTIFIER, 'abc123', 1:1)
        Token(PLUS, '+', 1:8)
        Token(PAREN_OPEN, '(', 1:10)
        Token(IDENTIFIER, 'x', 1:11)
        Token(PAREN_CLOSE, ')', 1:12)

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_tab_width",
        "_trace_tokens",
        "_exhausted",  # Set at end of input and after an error
    )

    # Tried in order; the first match wins.
    _RECOGNIZERS: tuple[Callable[..., tuple[TokenKind, int] | None], ...] = (
        SymbolClassifierMixin._try_classify_symbol,
        IdentifierClassifierMixin._try_classify_identifier,
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        *,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Source text to scan
            source_file: Optional source file path for positions and errors
            config: Scan configuration (defaults to the active context config)
        """
        if config is None:
            config = get_scan_config()

        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._tab_width = config.tab_width
        self._trace_tokens = config.trace_tokens
        self._exhausted = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Token | None:
        """Scan the next token.

        Returns:
            The next Token, or None once only trivia remains.

        Raises:
            UnrecognizedCharacterError: No token starts at the cursor. The
                cursor is left on the offending character and the scanner
                reports no further tokens.
        """
        if self._exhausted:
            return None

        self._skip_trivia()
        start = self._pos
        if start >= self._source_len:
            self._exhausted = True
            return None

        for recognize in self._RECOGNIZERS:
            match = recognize(self, start)
            if match is not None:
                break
        else:
            self._exhausted = True
            char = self._source[start]
            position = Position(
                line=self._lineno,
                column=self._col,
                length=1,
                offset=start,
                source_file=self._source_file,
            )
            logger.debug("Unrecognized character %r at %s", char, position)
            raise UnrecognizedCharacterError(char, position)

        kind, length = match
        token = Token(
            kind=kind,
            _source=self._source,
            _start_offset=start,
            _end_offset=start + length,
            _lineno=self._lineno,
            _col=self._col,
            _source_file=self._source_file,
        )
        self._commit_to(start + length)

        if self._trace_tokens:
            logger.debug("Scanned %r", token)
        return token

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def _skip_trivia(self) -> None:
        """Advance past whitespace at the cursor, tracking line and column."""
        source = self._source
        source_len = self._source_len
        pos = self._pos
        while pos < source_len:
            char = source[pos]
            if char not in TRIVIA:
                break
            if char == "\n":
                self._lineno += 1
                self._col = 1
            elif char == "\t":
                self._col += self._tab_width - (self._col - 1) % self._tab_width
            else:
                self._col += 1
            pos += 1
        self._pos = pos

    def _commit_to(self, end: int) -> None:
        """Commit position to end, updating line and column.

        Uses str.count/rfind on the consumed segment instead of a
        character-by-character loop.

        Args:
            end: Position to commit to.
        """
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")

        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl  # chars after last newline + 1
        else:
            self._col += len(segment)

        self._pos = end
