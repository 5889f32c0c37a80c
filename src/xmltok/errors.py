"""Exception classes and failure notes for xmltok.

The tokenizer itself never raises on malformed input: it returns an INVALID
token carrying an ErrorNote. TokenizeError is how higher-level drivers
(`Tokenizer.tokenize()`, the command line) surface that failure.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xmltok.tokens import Token


class ErrorNote(Enum):
    """Reason attached to an INVALID token."""

    INVALID_BYTE = "invalid byte"
    # Only produced when ScanConfig.strict_eof is enabled
    UNEXPECTED_EOF = "unexpected end of input"


class XmlTokError(Exception):
    """Base exception for all xmltok errors.

    Subclass this for specific error categories.
    """

    pass


class TokenizeError(XmlTokError):
    """Input could not be tokenized.

    Raised when a driver receives an INVALID token from the tokenizer.
    """

    def __init__(
        self,
        note: ErrorNote,
        offset: int | None = None,
        line: int | None = None,
        column: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize tokenize error with optional location.

        Args:
            note: Reason the tokenizer stopped
            offset: Byte offset of the failure
            line: Line where the failure occurred (0-based)
            column: Column where the failure occurred (0-based)
            source_file: Path to source file (optional)
        """
        self.note = note
        self.offset = offset
        self.line = line
        self.column = column
        self.source_file = source_file

        # Build formatted message, 1-based for humans
        location = ""
        if source_file:
            location = f"{source_file}:"
        if line is not None:
            location += f"{line + 1}:"
            if column is not None:
                location += f"{column + 1}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{note.value}")

    @classmethod
    def from_token(cls, token: Token) -> TokenizeError:
        """Build an error from an INVALID token.

        Raises:
            ValueError: If the token is not an INVALID token.
        """
        if token.note is None:
            raise ValueError(f"not an error token: {token!r}")
        return cls(
            token.note,
            offset=token.offset,
            line=token.line,
            column=token.column,
            source_file=token.source_file,
        )
