"""Body scanner mixin.

Handles everything after the declaration: text runs, opening tags with
attributes, self-closing tags and closing tags.
"""

from __future__ import annotations

from xmltok.errors import ErrorNote
from xmltok.lexer.modes import (
    ANGLE_BRACKETS,
    EQUALS,
    GT,
    LT,
    NEWLINE,
    QUOTE,
    SLASH,
    WHITESPACE,
    ScanState,
)
from xmltok.tokens import Token, TokenTag


class BodyScannerMixin:
    """Mixin providing the body and tag states of the state table.

    Same handler contract as PrologScannerMixin: None consumes the byte,
    a Token ends the current pull.

    """

    # These will be set by the Tokenizer class
    _state: ScanState
    _pos: int
    _tok_end: int

    def _mark(self) -> None:
        """Record the current byte as the start of a token."""
        raise NotImplementedError

    def _emit(
        self,
        tag: TokenTag,
        next_state: ScanState,
        *,
        inclusive: bool = False,
        end: int | None = None,
        consume: bool = True,
    ) -> Token:
        """Emit the marked token and consume the delimiter."""
        raise NotImplementedError

    def _fail(self, note: ErrorNote) -> Token:
        """Return an INVALID token at the current byte."""
        raise NotImplementedError

    # =========================================================================
    # Between tags
    # =========================================================================

    def _scan_body(self, byte: int) -> Token | None:
        if byte in WHITESPACE:
            return None
        if byte == LT:
            self._state = ScanState.TAG_NAME_START
            return None
        self._mark()
        self._state = ScanState.CONTENT
        return None

    def _scan_content(self, byte: int) -> Token | None:
        """Accumulate raw text up to the next <.

        Whitespace inside the run (including trailing whitespace) is part
        of the token; only leading whitespace is skipped by BODY.
        """
        if byte == LT:
            return self._emit(TokenTag.CONTENT, ScanState.TAG_NAME_START)
        return None

    # =========================================================================
    # Opening and self-closing tags
    # =========================================================================

    def _scan_tag_name_start(self, byte: int) -> Token | None:
        if byte in WHITESPACE:
            return None
        if byte == SLASH:
            self._state = ScanState.TAG_CLOSE_START
            return None
        if byte in ANGLE_BRACKETS:
            return self._fail(ErrorNote.INVALID_BYTE)
        self._mark()
        self._state = ScanState.TAG_NAME
        return None

    def _scan_tag_name(self, byte: int) -> Token | None:
        if byte in WHITESPACE:
            return self._emit(TokenTag.TAG_OPEN, ScanState.TAG)
        if byte == GT:
            return self._emit(TokenTag.TAG_OPEN, ScanState.BODY)
        if byte == SLASH:
            # <a/>: leave the / for TAG to mark as TAG_CLOSE_EMPTY
            return self._emit(TokenTag.TAG_OPEN, ScanState.TAG, consume=False)
        if byte == LT:
            return self._fail(ErrorNote.INVALID_BYTE)
        return None

    def _scan_tag(self, byte: int) -> Token | None:
        """Inside an opening tag, after its name."""
        if byte in WHITESPACE:
            return None
        if byte == GT:
            self._state = ScanState.BODY
            return None
        if byte == SLASH:
            self._mark()
            self._state = ScanState.TAG_END_EMPTY
            return None
        if byte == LT:
            return self._fail(ErrorNote.INVALID_BYTE)
        self._mark()
        self._state = ScanState.TAG_ATTR_KEY
        return None

    def _scan_tag_end_empty(self, byte: int) -> Token | None:
        if byte == GT:
            # Token bytes are the marked "/" alone
            return self._emit(TokenTag.TAG_CLOSE_EMPTY, ScanState.BODY)
        return self._fail(ErrorNote.INVALID_BYTE)

    def _scan_tag_attr_key(self, byte: int) -> Token | None:
        if byte == EQUALS:
            return self._emit(TokenTag.ATTR_KEY, ScanState.TAG_ATTR_VALUE_Q)
        if byte in ANGLE_BRACKETS:
            return self._fail(ErrorNote.INVALID_BYTE)
        return None

    def _scan_tag_attr_value_q(self, byte: int) -> Token | None:
        if byte == QUOTE:
            self._mark()
            self._state = ScanState.TAG_ATTR_VALUE
            return None
        return self._fail(ErrorNote.INVALID_BYTE)

    def _scan_tag_attr_value(self, byte: int) -> Token | None:
        if byte == QUOTE:
            return self._emit(TokenTag.ATTR_VALUE, ScanState.TAG, inclusive=True)
        if byte == NEWLINE:
            return self._fail(ErrorNote.INVALID_BYTE)
        return None

    # =========================================================================
    # Closing tags
    # =========================================================================

    def _scan_tag_close_start(self, byte: int) -> Token | None:
        if byte in WHITESPACE:
            return None
        if byte in ANGLE_BRACKETS:
            return self._fail(ErrorNote.INVALID_BYTE)
        self._mark()
        self._state = ScanState.TAG_CLOSE_NAME
        return None

    def _scan_tag_close_name(self, byte: int) -> Token | None:
        if byte == GT:
            return self._emit(TokenTag.TAG_CLOSE, ScanState.BODY)
        if byte in WHITESPACE:
            # Name is complete; TAG_CLOSE is emitted once > is seen
            self._tok_end = self._pos
            self._state = ScanState.TAG_CLOSE_TRAIL
            return None
        if byte == LT:
            return self._fail(ErrorNote.INVALID_BYTE)
        return None

    def _scan_tag_close_trail(self, byte: int) -> Token | None:
        if byte in WHITESPACE:
            return None
        if byte == GT:
            return self._emit(TokenTag.TAG_CLOSE, ScanState.BODY, end=self._tok_end)
        return self._fail(ErrorNote.INVALID_BYTE)
