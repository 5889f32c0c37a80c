"""Tests for input that ends in the middle of a construct.

By default the tokenizer drops a partial trailing token and reports EOF.
With ScanConfig(strict_eof=True) it reports INVALID with UNEXPECTED_EOF
at the end of input instead.
"""

from __future__ import annotations

import pytest

from xmltok.config import ScanConfig
from xmltok.errors import ErrorNote
from xmltok.lexer import ScanState, Tokenizer
from xmltok.tokens import Token, TokenTag

STRICT = ScanConfig(strict_eof=True)

TRUNCATED = [
    pytest.param(b"<", ScanState.DOCTYPE_Q, id="lt"),
    pytest.param(b"<?", ScanState.DOCTYPE_NAME_START, id="doctype-open"),
    pytest.param(b"<?xml", ScanState.DOCTYPE_NAME, id="doctype-name"),
    pytest.param(b"<?xml ", ScanState.DOCTYPE, id="doctype-attrs"),
    pytest.param(b"<?xml a", ScanState.DOCTYPE_ATTR_KEY, id="doctype-key"),
    pytest.param(b"<?xml a=", ScanState.DOCTYPE_ATTR_VALUE_Q, id="doctype-eq"),
    pytest.param(b'<?xml a="1', ScanState.DOCTYPE_ATTR_VALUE, id="doctype-value"),
    pytest.param(b"<?xml?", ScanState.DOCTYPE_END, id="doctype-end"),
    pytest.param(b"<?xml?>text", ScanState.CONTENT, id="content"),
    pytest.param(b"<?xml?><", ScanState.TAG_NAME_START, id="tag-open"),
    pytest.param(b"<?xml?><a", ScanState.TAG_NAME, id="tag-name"),
    pytest.param(b"<?xml?><a ", ScanState.TAG, id="tag-attrs"),
    pytest.param(b"<?xml?><a/", ScanState.TAG_END_EMPTY, id="tag-slash"),
    pytest.param(b"<?xml?><a b", ScanState.TAG_ATTR_KEY, id="tag-key"),
    pytest.param(b"<?xml?><a b=", ScanState.TAG_ATTR_VALUE_Q, id="tag-eq"),
    pytest.param(b'<?xml?><a b="1', ScanState.TAG_ATTR_VALUE, id="tag-value"),
    pytest.param(b"<?xml?></", ScanState.TAG_CLOSE_START, id="close-open"),
    pytest.param(b"<?xml?></a", ScanState.TAG_CLOSE_NAME, id="close-name"),
    pytest.param(b"<?xml?></a ", ScanState.TAG_CLOSE_TRAIL, id="close-trail"),
]


def _last(tokenizer: Tokenizer) -> Token:
    token = tokenizer.pull()
    while token.tag not in (TokenTag.EOF, TokenTag.INVALID):
        token = tokenizer.pull()
    return token


class TestLenientEOF:
    """Default behavior: partial trailing tokens are dropped."""

    @pytest.mark.parametrize(("source", "state"), TRUNCATED)
    def test_truncated_input_ends_with_eof(self, source: bytes, state: ScanState) -> None:
        tokenizer = Tokenizer(source)
        last = _last(tokenizer)

        assert last.tag == TokenTag.EOF
        assert tokenizer.state == state

    def test_trailing_text_is_not_emitted(self) -> None:
        tags = [t.tag for t in Tokenizer(b"<?xml?><a>tail").tokenize()]
        assert tags == [TokenTag.DOCTYPE, TokenTag.TAG_OPEN, TokenTag.EOF]

    def test_unterminated_declaration_emits_nothing(self) -> None:
        assert [t.tag for t in Tokenizer(b"<?xml").tokenize()] == [TokenTag.EOF]


class TestStrictEOF:
    """strict_eof reports truncation as a failure at end of input."""

    @pytest.mark.parametrize(("source", "state"), TRUNCATED)
    def test_truncated_input_is_invalid(self, source: bytes, state: ScanState) -> None:
        tokenizer = Tokenizer(source, config=STRICT)
        last = _last(tokenizer)

        assert last.tag == TokenTag.INVALID
        assert last.note == ErrorNote.UNEXPECTED_EOF
        assert last.offset == len(source)
        assert tokenizer.error_note == ErrorNote.UNEXPECTED_EOF
        assert tokenizer.state == state

    @pytest.mark.parametrize(
        "source",
        [b"", b"  \n", b"<?xml?>", b"<?xml?><a></a>\n", b"<?xml?><a/>  "],
    )
    def test_complete_input_ends_with_eof(self, source: bytes) -> None:
        last = _last(Tokenizer(source, config=STRICT))
        assert last.tag == TokenTag.EOF

    def test_position_is_end_of_input(self) -> None:
        source = b"<?xml?>\n<a>\n  tail"
        last = _last(Tokenizer(source, config=STRICT))
        assert (last.line, last.column) == (2, 6)

    def test_failure_is_sticky(self) -> None:
        tokenizer = Tokenizer(b"<?xml?><a", config=STRICT)
        first = _last(tokenizer)
        assert tokenizer.pull() is first

    def test_tokens_before_truncation_are_kept(self) -> None:
        tokenizer = Tokenizer(b"<?xml?><a>tail", config=STRICT)
        tags = [tokenizer.pull().tag for _ in range(3)]
        assert tags == [TokenTag.DOCTYPE, TokenTag.TAG_OPEN, TokenTag.INVALID]
