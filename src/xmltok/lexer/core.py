"""Pull-based state-machine tokenizer.

Implements a single-pass, non-backtracking scanner: each byte is classified
once by the handler for the active state, with at most one byte of
lookahead. Token bytes are memoryview slices of the input, never copies.

Thread Safety:
Tokenizer instances are single-use. Create one per input buffer.
All state is instance-local; do not share an instance between threads.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from xmltok.config import ScanConfig, get_scan_config
from xmltok.errors import ErrorNote, TokenizeError
from xmltok.lexer.modes import CLEAN_EOF_STATES, NEWLINE, ScanState
from xmltok.lexer.scanners import BodyScannerMixin, PrologScannerMixin
from xmltok.tokens import Token, TokenTag
from xmltok.utils.logger import get_logger

logger = get_logger(__name__)


class Tokenizer(
    PrologScannerMixin,
    BodyScannerMixin,
):
    """Pull-based XML tokenizer over an immutable byte buffer.

    Call pull() repeatedly; each call returns exactly one token. After EOF,
    pull() keeps returning EOF. After INVALID, pull() keeps returning the
    same INVALID token and never consumes more input.

    Usage:
        >>> tokenizer = Tokenizer(b'<?xml?><a b="1"/>')
        >>> tokenizer.pull()
        Token(DOCTYPE, 'xml', 0:2)
        >>> [t.tag.name for t in tokenizer]
        ['TAG_OPEN', 'ATTR_KEY', 'ATTR_VALUE', 'TAG_CLOSE_EMPTY', 'EOF']

    Thread Safety:
        Tokenizer instances are single-use. Create one per input buffer.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_line",
        "_col",
        "_state",
        "_source_file",
        "_config",
        "_transitions",  # ScanState -> bound handler
        # Marked token start
        "_tok_start",
        "_tok_line",
        "_tok_col",
        "_tok_end",  # Name end for closing tags with trailing whitespace
        # Failure
        "_error_note",
        "_failure",
        "_eof",
    )

    def __init__(
        self,
        source: bytes | bytearray | memoryview | str,
        source_file: str | None = None,
        *,
        config: ScanConfig | None = None,
    ) -> None:
        """Bind the tokenizer to one input buffer.

        Args:
            source: XML input. A str is encoded as UTF-8 once; bytes-like
                objects are wrapped without copying and must not be mutated
                while the tokenizer or its tokens are alive.
            source_file: Optional source file path for error messages
            config: Scan configuration (defaults to the active context config)

        Raises:
            TypeError: If source is neither str nor a bytes-like object.
        """
        if isinstance(source, str):
            source = source.encode("utf-8")
        try:
            view = memoryview(source)
        except TypeError:
            raise TypeError(
                f"source must be str or bytes-like, not {type(source).__name__}"
            ) from None
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")

        self._source = view.toreadonly()
        self._source_len = len(self._source)
        self._pos = 0
        self._line = 0
        self._col = 0
        self._state = ScanState.START
        self._source_file = source_file
        self._config = config if config is not None else get_scan_config()

        self._tok_start = 0
        self._tok_line = 0
        self._tok_col = 0
        self._tok_end = 0

        self._error_note: ErrorNote | None = None
        self._failure: Token | None = None
        self._eof: Token | None = None

        self._transitions: dict[ScanState, Callable[[int], Token | None]] = {
            ScanState.START: self._scan_start,
            ScanState.DOCTYPE_Q: self._scan_doctype_q,
            ScanState.DOCTYPE_NAME_START: self._scan_doctype_name_start,
            ScanState.DOCTYPE_NAME: self._scan_doctype_name,
            ScanState.DOCTYPE: self._scan_doctype,
            ScanState.DOCTYPE_ATTR_KEY: self._scan_doctype_attr_key,
            ScanState.DOCTYPE_ATTR_VALUE_Q: self._scan_doctype_attr_value_q,
            ScanState.DOCTYPE_ATTR_VALUE: self._scan_doctype_attr_value,
            ScanState.DOCTYPE_END: self._scan_doctype_end,
            ScanState.BODY: self._scan_body,
            ScanState.CONTENT: self._scan_content,
            ScanState.TAG_NAME_START: self._scan_tag_name_start,
            ScanState.TAG_NAME: self._scan_tag_name,
            ScanState.TAG: self._scan_tag,
            ScanState.TAG_END_EMPTY: self._scan_tag_end_empty,
            ScanState.TAG_ATTR_KEY: self._scan_tag_attr_key,
            ScanState.TAG_ATTR_VALUE_Q: self._scan_tag_attr_value_q,
            ScanState.TAG_ATTR_VALUE: self._scan_tag_attr_value,
            ScanState.TAG_CLOSE_START: self._scan_tag_close_start,
            ScanState.TAG_CLOSE_NAME: self._scan_tag_close_name,
            ScanState.TAG_CLOSE_TRAIL: self._scan_tag_close_trail,
        }

    # =========================================================================
    # Public API
    # =========================================================================

    def pull(self) -> Token:
        """Return the next token.

        Resumes at the offset left by the previous call. Returns EOF when
        the input is exhausted and INVALID on the first malformed byte.

        Complexity: O(bytes consumed by this call)
        """
        if self._failure is not None:
            return self._failure

        source = self._source
        source_len = self._source_len
        transitions = self._transitions
        while self._pos < source_len:
            token = transitions[self._state](source[self._pos])
            if token is not None:
                return token
            self._advance()

        return self._finish()

    def tokenize(self) -> Iterator[Token]:
        """Pull tokens until EOF.

        Yields:
            Token objects one at a time, ending with a single EOF token.

        Raises:
            TokenizeError: On the first INVALID token. Tokens already
                yielded remain valid.
        """
        while True:
            token = self.pull()
            if token.tag is TokenTag.INVALID:
                raise TokenizeError.from_token(token)
            yield token
            if token.tag is TokenTag.EOF:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    @property
    def offset(self) -> int:
        """Byte offset of the cursor."""
        return self._pos

    @property
    def line(self) -> int:
        """Line of the cursor (0-based)."""
        return self._line

    @property
    def column(self) -> int:
        """Column of the cursor (0-based, in bytes)."""
        return self._col

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def error_note(self) -> ErrorNote | None:
        """Reason for the last INVALID token, or None if pull() never failed."""
        return self._error_note

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def config(self) -> ScanConfig:
        return self._config

    # =========================================================================
    # Emission helpers (used by the scanner mixins)
    # =========================================================================

    def _mark(self) -> None:
        """Record the current byte as the start of a token."""
        self._tok_start = self._pos
        self._tok_line = self._line
        self._tok_col = self._col

    def _emit(
        self,
        tag: TokenTag,
        next_state: ScanState,
        *,
        inclusive: bool = False,
        end: int | None = None,
        consume: bool = True,
    ) -> Token:
        """Emit the marked token, switch state and consume the delimiter.

        Args:
            tag: Tag of the emitted token.
            next_state: State to resume in on the next pull.
            inclusive: Include the delimiter byte (closing quote) in the token.
            end: Explicit end offset, overriding the current position.
            consume: Consume the delimiter byte. When False, the next pull
                classifies it again in next_state.

        Returns:
            Token spanning from the mark to the delimiter.
        """
        if end is None:
            end = self._pos + 1 if inclusive else self._pos
        token = Token(
            tag=tag,
            raw=self._source[self._tok_start : end],
            offset=self._tok_start,
            line=self._tok_line,
            column=self._tok_col,
            source_file=self._source_file,
        )
        self._state = next_state
        if consume:
            self._advance()
        return token

    def _fail(self, note: ErrorNote) -> Token:
        """Return an INVALID token at the current byte without consuming it.

        The token is remembered; every later pull() returns it again.
        """
        self._error_note = note
        self._failure = Token(
            tag=TokenTag.INVALID,
            raw=self._source[self._pos : self._pos],
            offset=self._pos,
            line=self._line,
            column=self._col,
            note=note,
            source_file=self._source_file,
        )
        logger.debug(
            "tokenize failed in state %s: %s at %d:%d (offset %d)",
            self._state.name,
            note.value,
            self._line,
            self._col,
            self._pos,
        )
        return self._failure

    def _finish(self) -> Token:
        """Handle end of input."""
        if self._eof is not None:
            return self._eof
        if self._config.strict_eof and self._state not in CLEAN_EOF_STATES:
            return self._fail(ErrorNote.UNEXPECTED_EOF)
        if self._state not in CLEAN_EOF_STATES:
            logger.debug("input ended in state %s; dropping partial token", self._state.name)
        self._eof = Token(
            tag=TokenTag.EOF,
            raw=self._source[self._source_len :],
            offset=self._source_len,
            line=self._line,
            column=self._col,
            source_file=self._source_file,
        )
        return self._eof

    def _advance(self) -> None:
        """Consume one byte, updating line/column tracking."""
        if self._source[self._pos] == NEWLINE:
            self._line += 1
            self._col = 0
        else:
            self._col += 1
        self._pos += 1
