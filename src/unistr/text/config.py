"""
Configuration for the text value type.

Contains search modes, HTML quoting policies and the constants shared by
the transform modules.
"""

import re
from enum import Enum


class SearchMode(str, Enum):
    """How `replace` interprets its pattern."""

    AUTO = "auto"
    REGULAR = "regular"
    SUBSTRING = "substring"


class QuoteStyle(str, Enum):
    """Which quotes `html_escape` converts to entities."""

    BOTH = "both"
    DOUBLE = "double"
    NONE = "none"


DEFAULT_ENCODING = "utf-8"

# Undecodable bytes map to lone surrogates and back, so every buffer has a
# lossless codepoint view.
DECODE_ERRORS = "surrogateescape"

DEFAULT_TRIM_CHARS = " \t\n\r\0\x0b"

HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}

QUOTES_ESCAPED = {
    QuoteStyle.BOTH: ('"', "'"),
    QuoteStyle.DOUBLE: ('"',),
    QuoteStyle.NONE: (),
}

# U (ungreedy), A, J and X have no re equivalent and are rejected
REGEX_MODIFIERS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,  # text is always Unicode
    "D": 0,  # applied to the body by compile_pattern
}

BRACKET_DELIMITERS = {
    "(": ")",
    "[": "]",
    "{": "}",
    "<": ">",
}

PATTERN_CACHE_SIZE = 256

CRYPT_CONFIG = {
    "md5_salt_size": 8,
    "sha_salt_size": 16,
    "sha_default_rounds": 5000,
    "des_salt_size": 2,
}
