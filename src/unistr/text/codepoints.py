"""
Codepoint arithmetic over encoded buffers.

Buffers are decoded once per operation and all offsets below are codepoint
offsets into the decoded text. Byte offsets never leak out of this module.
"""

import codecs
from typing import Optional, Tuple

from unistr.exceptions import InvalidArgumentError
from .config import DECODE_ERRORS


def normalize_encoding(encoding: str) -> str:
    """
    Resolve an encoding name to its canonical codec name.

    Raises:
        InvalidArgumentError: If Python has no codec by that name.
    """
    try:
        return codecs.lookup(encoding).name
    except (LookupError, TypeError) as e:
        raise InvalidArgumentError(f"Unknown encoding '{encoding}'") from e


def decode(buffer: bytes, encoding: str) -> str:
    return buffer.decode(encoding, DECODE_ERRORS)


def encode(text: str, encoding: str) -> bytes:
    """
    Encode text with the buffer's error policy.

    Raises:
        InvalidArgumentError: If the text has codepoints the encoding cannot represent.
    """
    try:
        return text.encode(encoding, DECODE_ERRORS)
    except UnicodeEncodeError as e:
        raise InvalidArgumentError(f"Text cannot be encoded as {encoding}: {e.reason}") from e


def slice_bounds(length: int, start: int = 0, count: Optional[int] = None) -> Tuple[int, int]:
    """
    Resolve (start, count) into [begin, end) codepoint bounds.

    Negative start counts from the end and is clamped at 0. A start past the
    end yields an empty range. Negative count leaves that many codepoints off
    the end.
    """
    if start < 0:
        start = max(0, length + start)
    if start >= length:
        return length, length

    if count is None:
        end = length
    elif count < 0:
        end = length + count
    else:
        end = min(length, start + count)

    if end < start:
        end = start
    return start, end


def substring(text: str, start: int = 0, count: Optional[int] = None) -> str:
    begin, end = slice_bounds(len(text), start, count)
    return text[begin:end]


def in_range(text: str, index: int) -> bool:
    return 0 <= index < len(text)


def codepoint_at(text: str, index: int) -> str:
    """Codepoint at index, or an empty string when out of range."""
    if not in_range(text, index):
        return ""
    return text[index]


def splice(text: str, index: int, replacement: str) -> str:
    """Replace the codepoint at index with replacement (no-op when out of range)."""
    if not in_range(text, index):
        return text
    return text[:index] + replacement + text[index + 1:]


def remove_at(text: str, index: int) -> str:
    """Drop the codepoint at index (no-op when out of range)."""
    return splice(text, index, "")


def as_text(value) -> str:
    """Coerce an argument (str, bytes, StringValue, number...) to text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", DECODE_ERRORS)
    return str(value)
