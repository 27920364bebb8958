"""Error-path and malformed input tests.

Tests that exercise error construction, formatting and propagation for
input the scanner cannot tokenize.
"""

import logging

import pytest

from yuri import tokenize
from yuri.errors import UnrecognizedCharacterError, YuriError
from yuri.lexer import Scanner
from yuri.location import Position

# =========================================================================
# UnrecognizedCharacterError construction and formatting
# =========================================================================


class TestUnrecognizedCharacterFormatting:
    """Verify UnrecognizedCharacterError produces well-formatted messages."""

    def test_message(self) -> None:
        err = UnrecognizedCharacterError(";", Position(line=3, column=7, length=1))
        assert str(err) == "3:7 unrecognized character ';'"

    def test_with_source_file(self) -> None:
        pos = Position(line=1, column=1, length=1, source_file="expr.yu")
        err = UnrecognizedCharacterError("#", pos)
        assert str(err) == "expr.yu:1:1 unrecognized character '#'"
        assert err.source_file == "expr.yu"

    def test_non_printable_character_uses_repr(self) -> None:
        err = UnrecognizedCharacterError("\f", Position(line=1, column=1, length=1))
        assert "'\\x0c'" in str(err)

    def test_quote_character_is_readable(self) -> None:
        err = UnrecognizedCharacterError("'", Position(line=1, column=1, length=1))
        assert str(err) == "1:1 unrecognized character \"'\""

    def test_scanned_quote_message(self) -> None:
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            list(Scanner("'"))
        assert str(exc_info.value) == "1:1 unrecognized character \"'\""

    def test_location_shortcuts(self) -> None:
        err = UnrecognizedCharacterError("1", Position(line=2, column=5, length=1))
        assert err.lineno == 2
        assert err.col_offset == 5
        assert err.source_file is None

    def test_is_yuri_error(self) -> None:
        err = UnrecognizedCharacterError("x", Position(line=1, column=1, length=1))
        assert isinstance(err, YuriError)


# =========================================================================
# Errors raised while scanning
# =========================================================================


class TestScanningErrors:
    """Verify the scanner reports the first unrecognized character."""

    def test_leading_digit(self) -> None:
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            list(tokenize("1abc"))

        err = exc_info.value
        assert err.char == "1"
        assert err.position == Position(line=1, column=1, length=1, offset=0)

    def test_error_after_valid_tokens(self) -> None:
        scanner = tokenize("a = b;\nc")
        kinds = []
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            for token in scanner:
                kinds.append(token.text)

        assert kinds == ["a", "=", "b"]
        assert exc_info.value.char == ";"
        assert (exc_info.value.lineno, exc_info.value.col_offset) == (1, 6)

    def test_error_on_later_line(self) -> None:
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            list(tokenize("x\n\n  y #", source_file="prog.yu"))

        assert str(exc_info.value) == "prog.yu:3:5 unrecognized character '#'"

    def test_catchable_as_base_error(self) -> None:
        with pytest.raises(YuriError):
            list(Scanner("@"))

    def test_error_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="yuri"):
            with pytest.raises(UnrecognizedCharacterError):
                list(Scanner("a $"))

        records = [r for r in caplog.records if r.name == "yuri.lexer.core"]
        assert len(records) == 1
        assert "'$'" in records[0].getMessage()
        assert "1:3" in records[0].getMessage()
