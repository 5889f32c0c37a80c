"""Token and TokenTag definitions for the xmltok scanner.

The tokenizer produces a stream of Token objects, pulled one at a time.
Each Token has a tag, a zero-copy view of its bytes, and a source position.

Thread Safety:
Token is frozen (immutable) and safe to share across threads, as long as
the underlying input buffer is not mutated.
TokenTag is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Token bytes are a memoryview slice of the input buffer, never a copy.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xmltok.errors import ErrorNote
    from xmltok.location import SourceLocation


class TokenTag(Enum):
    """Lexical role of a token.

    Organized by category:
    - Stream structure (INVALID, EOF)
    - Declaration (DOCTYPE)
    - Elements (TAG_OPEN, TAG_CLOSE, TAG_CLOSE_EMPTY)
    - Attributes (ATTR_KEY, ATTR_VALUE)
    - Text (CONTENT)

    """

    # Stream structure
    INVALID = auto()  # Malformed input; empty bytes at the failing offset
    EOF = auto()  # Input exhausted; empty bytes at end of input

    # Declaration
    DOCTYPE = auto()  # <?xml ...?> -> xml

    # Elements
    TAG_OPEN = auto()  # <head> -> head
    TAG_CLOSE = auto()  # </head> -> head
    TAG_CLOSE_EMPTY = auto()  # <head/> -> /

    # Attributes
    ATTR_KEY = auto()  # name="value" -> name
    ATTR_VALUE = auto()  # name="value" -> "value" (quotes included)

    # Text
    CONTENT = auto()  # Raw bytes between tags


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        tag: The lexical role (from TokenTag enum)
        raw: Read-only view over the token's bytes in the input buffer
        offset: Absolute start position in the input buffer
        line: Start line (0-based)
        column: Start column (0-based)
        note: Failure reason, set only on INVALID tokens
        source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    """

    tag: TokenTag
    raw: memoryview
    offset: int
    line: int
    column: int
    note: ErrorNote | None = None
    source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def end_offset(self) -> int:
        """Absolute end position (exclusive)."""
        return self.offset + len(self.raw)

    @property
    def text(self) -> str:
        """Token bytes decoded as UTF-8 for display. Does no entity decoding."""
        return str(self.raw, "utf-8", "replace")

    @property
    def is_error(self) -> bool:
        return self.tag is TokenTag.INVALID

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached).

        Returns:
            SourceLocation object for this token.
        """
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from xmltok.location import SourceLocation

        loc = SourceLocation(
            line=self.line,
            column=self.column,
            offset=self.offset,
            end_offset=self.end_offset,
            source_file=self.source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.tag.name}, {val!r}, {self.line}:{self.column})"
