"""Command-line token dump.

Loads a whole file into memory, pulls tokens until EOF and prints one
"tag: text" line per token.

Usage:
    python -m xmltok map.xml
    xmltok --strict -v map.xml
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from xmltok.config import ScanConfig, get_scan_config
from xmltok.errors import TokenizeError
from xmltok.lexer import Tokenizer
from xmltok.tokens import TokenTag
from xmltok.utils.logger import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def read_source(path: Path, max_bytes: int) -> bytes:
    """Read a file fully into memory.

    Raises:
        ValueError: If the file is larger than max_bytes.
        OSError: If the file cannot be read.
    """
    size = path.stat().st_size
    if size > max_bytes:
        raise ValueError(f"{path}: file is {size} bytes, limit is {max_bytes}")
    data = path.read_bytes()
    logger.debug("loaded %s (%d bytes)", path, len(data))
    return data


def dump_tokens(tokenizer: Tokenizer, out: TextIO) -> TokenizeError | None:
    """Print tokens until EOF. Returns the error if tokenizing fails."""
    while True:
        token = tokenizer.pull()
        if token.tag is TokenTag.INVALID:
            return TokenizeError.from_token(token)
        out.write(f"{token.tag.name.lower()}: {token.text}\n")
        if token.tag is TokenTag.EOF:
            return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xmltok",
        description="Print the lexical tokens of an XML file",
    )
    parser.add_argument("file", type=Path, help="XML file to tokenize")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat input ending inside a tag, value or text run as an error",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    config: ScanConfig = get_scan_config()
    if args.strict:
        config = replace(config, strict_eof=True)

    try:
        data = read_source(args.file, config.max_file_bytes)
    except (OSError, ValueError) as e:
        print(f"xmltok: {e}", file=sys.stderr)
        return EXIT_USAGE

    tokenizer = Tokenizer(data, str(args.file), config=config)
    error = dump_tokens(tokenizer, sys.stdout)
    sys.stdout.flush()
    if error is not None:
        print(f"xmltok: {error}", file=sys.stderr)
        return EXIT_INVALID
    return EXIT_OK
