"""State-machine tokenizer for the xmltok scanner.

This package provides a pull-based, single-pass byte scanner.
Every byte is classified once; the cursor never moves backwards.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, ScanState
├── core.py              # Tokenizer class (dispatch table + cursor)
├── modes.py             # ScanState enum, byte-class constants
└── scanners/            # State handlers
    ├── prolog.py        # <?name key="value"?> declaration
    └── body.py          # Text, opening, closing and empty tags

Usage:
    >>> from xmltok.lexer import Tokenizer
    >>> tokenizer = Tokenizer(b"<?xml?>\\n<map></map>")
    >>> for token in tokenizer.tokenize():
    ...     print(token)
Token(DOCTYPE, 'xml', 0:2)
Token(TAG_OPEN, 'map', 1:1)
Token(TAG_CLOSE, 'map', 1:7)
Token(EOF, '', 1:11)

"""

from xmltok.lexer.core import Tokenizer
from xmltok.lexer.modes import ScanState

__all__ = ["ScanState", "Tokenizer"]
