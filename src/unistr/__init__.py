"""
unistr - Unicode-aware string values

Codepoint-indexed text over encoded buffers, with paired value/in-place
transforms, digests and PCRE-style pattern replacement.
"""

__version__ = "1.0.0"

# Core exports
from unistr.text import (
    StringValue,
    SearchMode,
    QuoteStyle,
    looks_like_delimited_regex,
)
from unistr.exceptions import (
    UnistrError,
    NotFoundError,
    InvalidArgumentError,
    ConfigError,
)

__all__ = [
    "__version__",
    "StringValue",
    "SearchMode",
    "QuoteStyle",
    "looks_like_delimited_regex",
    "UnistrError",
    "NotFoundError",
    "InvalidArgumentError",
    "ConfigError",
]
