"""
Pure buffer transforms.

Each public function here has the signature
``f(buffer: bytes, encoding: str, *args) -> bytes`` and is the single
implementation behind both the value form and the in-place form of a
StringValue operation.
"""

import functools
import re
from typing import Callable, Optional, Union

from unistr.exceptions import InvalidArgumentError
from . import codepoints, patterns
from .config import (
    DEFAULT_TRIM_CHARS,
    HTML_ENTITIES,
    QUOTES_ESCAPED,
    QuoteStyle,
    SearchMode,
)

# Letters, optionally joined by an apostrophe ("they're", "l’eau")
_WORD = re.compile(r"[^\W\d_]+(?:['’][^\W\d_]+)*")


def textual(func: Callable[..., str]) -> Callable[..., bytes]:
    """Lift a ``(text, *args) -> str`` function into a buffer transform."""

    @functools.wraps(func)
    def wrapper(buffer: bytes, encoding: str, *args, **kwargs) -> bytes:
        result = func(codepoints.decode(buffer, encoding), *args, **kwargs)
        return codepoints.encode(result, encoding)

    return wrapper


def expand_charset(chars: str) -> str:
    """
    Expand ``a..z`` style ranges in a trim character list.

    Ranges whose bounds are out of order are kept literally.
    """
    expanded = []
    i = 0
    while i < len(chars):
        if chars[i + 1:i + 3] == ".." and i + 3 < len(chars) and chars[i] <= chars[i + 3]:
            expanded.extend(chr(c) for c in range(ord(chars[i]), ord(chars[i + 3]) + 1))
            i += 4
            continue
        expanded.append(chars[i])
        i += 1
    return "".join(expanded)


def _strip_set(chars: Optional[str]) -> str:
    if chars is None:
        return DEFAULT_TRIM_CHARS
    return expand_charset(codepoints.as_text(chars))


@textual
def append(text: str, suffix) -> str:
    return text + codepoints.as_text(suffix)


@textual
def substring(text: str, start: int = 0, count: Optional[int] = None) -> str:
    return codepoints.substring(text, start, count)


@textual
def upper_case(text: str) -> str:
    return text.upper()


@textual
def lower_case(text: str) -> str:
    return text.lower()


@textual
def upper_first(text: str) -> str:
    return codepoints.splice(text, 0, codepoints.codepoint_at(text, 0).upper())


@textual
def lower_first(text: str) -> str:
    return codepoints.splice(text, 0, codepoints.codepoint_at(text, 0).lower())


@textual
def upper_words(text: str) -> str:
    """Capitalize each run of letters; apostrophes inside a word do not start a new one."""
    return _WORD.sub(lambda match: match.group(0).capitalize(), text)


@textual
def html_escape(text: str, quote_style: Union[QuoteStyle, str] = QuoteStyle.DOUBLE) -> str:
    """Convert ``& < >`` and the quotes selected by quote_style to HTML entities."""
    try:
        style = QuoteStyle(quote_style)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown quote style '{quote_style}'") from e

    table = {"&": HTML_ENTITIES["&"], "<": HTML_ENTITIES["<"], ">": HTML_ENTITIES[">"]}
    for quote in QUOTES_ESCAPED[style]:
        table[quote] = HTML_ENTITIES[quote]
    return text.translate(str.maketrans(table))


@textual
def trim(text: str, chars: Optional[str] = None) -> str:
    return text.strip(_strip_set(chars))


@textual
def trim_left(text: str, chars: Optional[str] = None) -> str:
    return text.lstrip(_strip_set(chars))


@textual
def trim_right(text: str, chars: Optional[str] = None) -> str:
    return text.rstrip(_strip_set(chars))


@textual
def replace(text: str, pattern, replacement, mode: Union[SearchMode, str] = SearchMode.AUTO) -> str:
    return patterns.replace(text, codepoints.as_text(pattern), replacement, mode)
