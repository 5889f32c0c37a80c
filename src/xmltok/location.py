"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in the input buffer.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Positions are stored 0-based, as the tokenizer counts them.
    String formatting is 1-based, as editors and compilers display them.

    Attributes:
        line: Starting line (0-based)
        column: Starting column (0-based), counted in bytes
        offset: Absolute start offset in the input buffer
        end_offset: Absolute end offset in the input buffer (exclusive)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(line=0, column=4, offset=4, end_offset=7)
            >>> str(loc)
            '1:5'

            >>> loc = SourceLocation(2, 0, 30, 30, "maps/level.xml")
            >>> str(loc)
            'maps/level.xml:3:1'

    """

    line: int
    column: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.xml:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.line + 1}:{self.column + 1}"
        return f"{self.line + 1}:{self.column + 1}"
