"""
Text package: the StringValue type and the pure transforms behind it.

Provides codepoint-addressed access over encoded buffers, paired
value/in-place transforms, digests and PCRE-style pattern replacement.
"""

from .value import StringValue
from .patterns import looks_like_delimited_regex
from .config import (
    SearchMode,
    QuoteStyle,
    DEFAULT_ENCODING,
    DEFAULT_TRIM_CHARS,
)

__all__ = [
    # Value type
    "StringValue",

    # Mode inference
    "looks_like_delimited_regex",

    # Configuration
    "SearchMode",
    "QuoteStyle",
    "DEFAULT_ENCODING",
    "DEFAULT_TRIM_CHARS",
]
