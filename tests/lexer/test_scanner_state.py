"""Tests ensuring scanner state is consistent after each pull.

These tests verify where the cursor is left after tokens, trivia and
errors, and that a scanner reports nothing further once it has failed.
"""

from __future__ import annotations

import pytest

from yuri.errors import UnrecognizedCharacterError
from yuri.lexer import Scanner


class TestCursorAfterTokens:
    """Verify cursor bookkeeping after successful pulls."""

    def test_initial_state(self) -> None:
        scanner = Scanner("abc")

        assert scanner._pos == 0
        assert scanner._lineno == 1
        assert scanner._col == 1

    def test_cursor_past_token(self) -> None:
        scanner = Scanner("abc + d")
        scanner.next_token()

        assert scanner._pos == 3
        assert scanner._col == 4

    def test_trailing_trivia_consumed_at_end(self) -> None:
        scanner = Scanner("a  \n ")
        list(scanner)

        assert scanner._pos == len("a  \n ")
        assert scanner._lineno == 2
        assert scanner._col == 2


class TestStateAfterError:
    """Verify the scanner stops at an unrecognized character."""

    def test_cursor_left_on_offending_character(self) -> None:
        source = "ok\n  #rest"
        scanner = Scanner(source)
        scanner.next_token()

        with pytest.raises(UnrecognizedCharacterError):
            scanner.next_token()

        assert source[scanner._pos] == "#"
        assert (scanner._lineno, scanner._col) == (2, 3)

    def test_exhausted_after_error(self) -> None:
        scanner = Scanner("1abc")

        with pytest.raises(UnrecognizedCharacterError):
            next(scanner)

        assert scanner.next_token() is None
        assert list(scanner) == []

    def test_source_not_copied(self) -> None:
        source = "value"
        scanner = Scanner(source)
        token = scanner.next_token()

        assert scanner._source is source
        assert token._source is source


class TestIndependentScanners:
    """Scanners over the same text share no state."""

    def test_interleaved_scanners(self) -> None:
        source = "a b c"
        first = Scanner(source)
        second = Scanner(source)

        assert next(first).text == "a"
        assert next(first).text == "b"
        assert next(second).text == "a"
        assert next(first).text == "c"
        assert next(second).text == "b"
