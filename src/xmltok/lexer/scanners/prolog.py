"""Declaration scanner mixin.

Handles the leading <?name key="value" ...?> construct. The document must
open with it; anything else before the first < is an invalid byte.
"""

from __future__ import annotations

from xmltok.errors import ErrorNote
from xmltok.lexer.modes import (
    ANGLE_BRACKETS,
    EQUALS,
    GT,
    LT,
    NEWLINE,
    QUESTION,
    QUOTE,
    WHITESPACE,
    ScanState,
)
from xmltok.tokens import Token, TokenTag


class PrologScannerMixin:
    """Mixin providing the declaration states of the state table.

    Each handler classifies one byte. It returns None to consume the byte
    and keep scanning, or a Token to end the current pull.

    """

    # These will be set by the Tokenizer class
    _state: ScanState

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

    def _scan_start(self, byte: int) -> Token | None:
        if byte in WHITESPACE:
            return None
        if byte == LT:
            self._state = ScanState.DOCTYPE_Q
            return None
        return self._fail(ErrorNote.INVALID_BYTE)

    def _scan_doctype_q(self, byte: int) -> Token | None:
        if byte in WHITESPACE:
            return None
        if byte == QUESTION:
            self._state = ScanState.DOCTYPE_NAME_START
            return None
        return self._fail(ErrorNote.INVALID_BYTE)

    def _scan_doctype_name_start(self, byte: int) -> Token | None:
        if byte in WHITESPACE:
            return None
        if byte in ANGLE_BRACKETS:
            return self._fail(ErrorNote.INVALID_BYTE)
        self._mark()
        self._state = ScanState.DOCTYPE_NAME
        return None

    def _scan_doctype_name(self, byte: int) -> Token | None:
        if byte in WHITESPACE:
            return self._emit(TokenTag.DOCTYPE, ScanState.DOCTYPE)
        if byte == QUESTION:
            return self._emit(TokenTag.DOCTYPE, ScanState.DOCTYPE_END)
        if byte in ANGLE_BRACKETS:
            return self._fail(ErrorNote.INVALID_BYTE)
        return None

    def _scan_doctype(self, byte: int) -> Token | None:
        """Between declaration attributes: whitespace, ?, or a key."""
        if byte in WHITESPACE:
            return None
        if byte == QUESTION:
            self._state = ScanState.DOCTYPE_END
            return None
        if byte in ANGLE_BRACKETS:
            return self._fail(ErrorNote.INVALID_BYTE)
        self._mark()
        self._state = ScanState.DOCTYPE_ATTR_KEY
        return None

    def _scan_doctype_attr_key(self, byte: int) -> Token | None:
        if byte == EQUALS:
            return self._emit(TokenTag.ATTR_KEY, ScanState.DOCTYPE_ATTR_VALUE_Q)
        if byte == QUESTION or byte in ANGLE_BRACKETS:
            return self._fail(ErrorNote.INVALID_BYTE)
        return None

    def _scan_doctype_attr_value_q(self, byte: int) -> Token | None:
        if byte == QUOTE:
            # The opening quote is part of the value token
            self._mark()
            self._state = ScanState.DOCTYPE_ATTR_VALUE
            return None
        return self._fail(ErrorNote.INVALID_BYTE)

    def _scan_doctype_attr_value(self, byte: int) -> Token | None:
        if byte == QUOTE:
            return self._emit(TokenTag.ATTR_VALUE, ScanState.DOCTYPE, inclusive=True)
        if byte == NEWLINE:
            return self._fail(ErrorNote.INVALID_BYTE)
        return None

    def _scan_doctype_end(self, byte: int) -> Token | None:
        if byte == GT:
            self._state = ScanState.BODY
            return None
        return self._fail(ErrorNote.INVALID_BYTE)
