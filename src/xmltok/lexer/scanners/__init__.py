"""State handlers for the tokenizer, grouped by document region.

Each mixin contributes the handlers for one region of the state table;
the Tokenizer binds them into its ScanState -> handler dispatch table.
"""

from xmltok.lexer.scanners.body import BodyScannerMixin
from xmltok.lexer.scanners.prolog import PrologScannerMixin

__all__ = [
    "BodyScannerMixin",
    "PrologScannerMixin",
]
