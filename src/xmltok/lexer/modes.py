"""Scanner states and byte-class constants.

This module defines the finite state machine states for the tokenizer
and the byte values that drive its transitions.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """Tokenizer scanning states.

    Exactly one state is active at a time. The next byte is classified
    according to the active state:
    - START .. DOCTYPE_END: the leading <?name key="value"?> declaration
    - BODY, CONTENT: between tags
    - TAG_*: inside an opening, closing or self-closing tag

    """

    # Declaration
    START = auto()  # Before the first <
    DOCTYPE_Q = auto()  # After <, expecting ?
    DOCTYPE_NAME_START = auto()  # After <?
    DOCTYPE_NAME = auto()  # Inside the declaration name
    DOCTYPE = auto()  # Between declaration attributes
    DOCTYPE_ATTR_KEY = auto()
    DOCTYPE_ATTR_VALUE_Q = auto()  # After =, expecting "
    DOCTYPE_ATTR_VALUE = auto()
    DOCTYPE_END = auto()  # After ?, expecting >

    # Body
    BODY = auto()  # Between tags
    CONTENT = auto()  # Inside a text run

    # Opening and self-closing tags
    TAG_NAME_START = auto()  # After <
    TAG_NAME = auto()
    TAG = auto()  # After the name, between attributes
    TAG_END_EMPTY = auto()  # After /, expecting >
    TAG_ATTR_KEY = auto()
    TAG_ATTR_VALUE_Q = auto()  # After =, expecting "
    TAG_ATTR_VALUE = auto()

    # Closing tags
    TAG_CLOSE_START = auto()  # After </
    TAG_CLOSE_NAME = auto()
    TAG_CLOSE_TRAIL = auto()  # Whitespace between the name and >


# States in which running out of input is a clean end of document
CLEAN_EOF_STATES = frozenset({ScanState.START, ScanState.BODY})

# Byte classes
LT = ord("<")
GT = ord(">")
QUESTION = ord("?")
SLASH = ord("/")
EQUALS = ord("=")
QUOTE = ord('"')
NEWLINE = ord("\n")

WHITESPACE = frozenset(b" \t\r\n")
ANGLE_BRACKETS = frozenset((LT, GT))
