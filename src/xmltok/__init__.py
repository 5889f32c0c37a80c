"""
xmltok — Streaming, zero-copy tokenizer for a small subset of XML

Scans a leading <?name ...?> declaration followed by nested elements with
double-quoted attribute values. No tree is built and nothing is decoded:
every token is a tag plus a memoryview slice of the input buffer.

Quick Start:
    >>> from xmltok import Tokenizer, TokenTag
    >>> tokenizer = Tokenizer(b'<?xml?><a b="1"/>')
    >>> token = tokenizer.pull()
    >>> token.tag, bytes(token.raw)
    (<TokenTag.DOCTYPE: 3>, b'xml')

    >>> # Or iterate; malformed input raises TokenizeError
    >>> from xmltok import tokenize
    >>> [t.text for t in tokenize('<?xml?><a b="1"/>')]
    ['xml', 'a', 'b', '"1"', '/', '']

Supported syntax:
    <?name key="value"?>   declaration (required, first)
    <name key="value">     opening tag
    </name>                closing tag
    <name/>                self-closing tag
    text                   raw content between tags

Not supported: comments, CDATA, namespaces, entity decoding.
"""

from collections.abc import Iterator

from xmltok.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from xmltok.errors import ErrorNote, TokenizeError, XmlTokError
from xmltok.lexer import ScanState, Tokenizer
from xmltok.location import SourceLocation
from xmltok.tokens import Token, TokenTag

__version__ = "0.1.0"


def tokenize(
    source: bytes | bytearray | memoryview | str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> Iterator[Token]:
    """Tokenize XML source into a token stream.

    Args:
        source: XML input (str is encoded as UTF-8)
        source_file: Optional source file path for error messages
        config: Scan configuration (defaults to the active context config)

    Yields:
        Tokens in document order, ending with a single EOF token

    Raises:
        TokenizeError: If the input is malformed

    Example:
        >>> [t.tag.name for t in tokenize("<?xml?>\\n<map></map>")]
        ['DOCTYPE', 'TAG_OPEN', 'TAG_CLOSE', 'EOF']
    """
    return Tokenizer(source, source_file, config=config).tokenize()


__all__ = [
    # Tokenizer
    "Tokenizer",
    "ScanState",
    "tokenize",
    # Tokens
    "Token",
    "TokenTag",
    "SourceLocation",
    # Errors
    "ErrorNote",
    "TokenizeError",
    "XmlTokError",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "__version__",
]
