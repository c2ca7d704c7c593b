"""
StringValue: a Unicode-aware string value over an owned encoded buffer.

Every transformation is implemented once, as a pure buffer function in
``transforms`` or ``digests``. ``_paired`` turns each of those into two
methods: the value form returns a new independent StringValue, the ``_me``
form rewrites the receiver and returns it for chaining.
"""

import functools
from collections.abc import Sequence
from pathlib import Path
from typing import List, Optional, Union

from unistr.exceptions import InvalidArgumentError
from unistr.files import read_contents
from . import codepoints, digests, patterns, transforms
from .config import DEFAULT_ENCODING


def _paired(transform):
    """Build (value_form, mutating_form) methods around one buffer transform."""

    @functools.wraps(transform)
    def value_form(self, *args, **kwargs):
        return self._derive(transform(self._buffer, self._encoding, *args, **kwargs))

    @functools.wraps(transform)
    def mutating_form(self, *args, **kwargs):
        self._buffer = transform(self._buffer, self._encoding, *args, **kwargs)
        return self

    mutating_form.__name__ = f"{transform.__name__}_me"
    mutating_form.__qualname__ = mutating_form.__name__
    return value_form, mutating_form


class StringValue:
    """
    Encoded text addressed by codepoint.

    The buffer is bytes in the instance's encoding (UTF-8 unless given).
    Lengths, offsets and indexes are all counted in codepoints. Undecodable
    bytes, e.g. after ``hash(raw_output=True)``, count as one codepoint each.

    A single internal cursor backs the iteration protocol (reset, advance,
    has_current, current_index, current_value), so one instance must not be
    iterated from two places at once.
    """

    __hash__ = None

    def __init__(self, value=None, encoding: str = DEFAULT_ENCODING):
        self._encoding = codepoints.normalize_encoding(encoding)
        self._buffer = self._to_buffer(value)
        self._cursor = 0

    def _to_buffer(self, value) -> bytes:
        if value is None:
            return b""
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if isinstance(value, StringValue):
            if value.encoding == self._encoding:
                return value.buffer
            return codepoints.encode(value.text, self._encoding)
        return codepoints.encode(codepoints.as_text(value), self._encoding)

    def _derive(self, buffer: bytes) -> "StringValue":
        return type(self)(buffer, self._encoding)

    def _text(self) -> str:
        return codepoints.decode(self._buffer, self._encoding)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_raw(cls, value=None, encoding: str = DEFAULT_ENCODING) -> "StringValue":
        """Wrap a str, bytes, StringValue or any str()-able value as-is."""
        return cls(value, encoding)

    @classmethod
    def from_file_contents(
        cls,
        path: Union[str, Path],
        encoding: str = DEFAULT_ENCODING,
    ) -> "StringValue":
        """
        Wrap the full contents of a file.

        Raises:
            NotFoundError: If path is not an existing, readable regular file.
        """
        return cls(read_contents(path), encoding)

    @classmethod
    def from_joined(
        cls,
        items,
        separator="",
        encoding: str = DEFAULT_ENCODING,
    ) -> "StringValue":
        """
        Join a sequence of values with separator.

        Raises:
            InvalidArgumentError: If items is not a list, tuple or other
                non-string sequence.
        """
        if not isinstance(items, Sequence) or isinstance(items, (str, bytes, bytearray)):
            raise InvalidArgumentError(f"Expected a sequence, got {type(items).__name__}")
        joined = codepoints.as_text(separator).join(codepoints.as_text(item) for item in items)
        return cls(joined, encoding)

    # ------------------------------------------------------------------
    # Accessors and Python protocols
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        """The buffer decoded as text."""
        return self._text()

    @property
    def buffer(self) -> bytes:
        return self._buffer

    @property
    def encoding(self) -> str:
        return self._encoding

    def byte_length(self) -> int:
        return len(self._buffer)

    def copy(self) -> "StringValue":
        """Independent copy (same buffer and encoding, cursor at 0)."""
        return self._derive(self._buffer)

    __copy__ = copy

    def __str__(self) -> str:
        return self._text()

    def __bytes__(self) -> bytes:
        return self._buffer

    def __len__(self) -> int:
        return self.length()

    def __repr__(self) -> str:
        return f"StringValue({self._text()!r}, encoding={self._encoding!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, StringValue):
            return self._text() == other._text()
        if isinstance(other, str):
            return self._text() == other
        if isinstance(other, (bytes, bytearray)):
            return self._buffer == bytes(other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Paired transforms
    # ------------------------------------------------------------------

    append, append_me = _paired(transforms.append)
    substring, substring_me = _paired(transforms.substring)
    upper_case, upper_case_me = _paired(transforms.upper_case)
    lower_case, lower_case_me = _paired(transforms.lower_case)
    upper_first, upper_first_me = _paired(transforms.upper_first)
    lower_first, lower_first_me = _paired(transforms.lower_first)
    upper_words, upper_words_me = _paired(transforms.upper_words)
    html_escape, html_escape_me = _paired(transforms.html_escape)
    trim, trim_me = _paired(transforms.trim)
    trim_left, trim_left_me = _paired(transforms.trim_left)
    trim_right, trim_right_me = _paired(transforms.trim_right)
    replace, replace_me = _paired(transforms.replace)

    crypt, crypt_me = _paired(digests.crypt)
    md5, md5_me = _paired(digests.md5)
    sha1, sha1_me = _paired(digests.sha1)
    hash, hash_me = _paired(digests.hash)
    crc32, crc32_me = _paired(digests.crc32)

    # Short names kept for callers of the older API
    substr = substring
    upper, upper_me = upper_case, upper_case_me
    lower, lower_me = lower_case, lower_case_me
    html, html_me = html_escape, html_escape_me
    hashify, hashify_me = hash, hash_me

    def split(self, delimiter) -> List[str]:
        """
        Split the text on delimiter.

        Raises:
            InvalidArgumentError: If delimiter is empty.
        """
        delimiter = codepoints.as_text(delimiter)
        if not delimiter:
            raise InvalidArgumentError("Empty delimiter")
        return self._text().split(delimiter)

    # ------------------------------------------------------------------
    # Pattern matching
    # ------------------------------------------------------------------

    def count_matches(self, pattern) -> int:
        """Number of non-overlapping matches of a delimited regex literal."""
        return patterns.count_matches(self._text(), codepoints.as_text(pattern))

    def first_match_groups(self, pattern) -> List[str]:
        """[full match, group 1, ...] of the first match, [] if none."""
        return patterns.first_match_groups(self._text(), codepoints.as_text(pattern))

    def all_match_groups(self, pattern) -> List[List[str]]:
        """Group lists for every match, [] if none."""
        return patterns.all_match_groups(self._text(), codepoints.as_text(pattern))

    # ------------------------------------------------------------------
    # Length
    # ------------------------------------------------------------------

    def length(self) -> int:
        """Number of codepoints."""
        return len(self._text())

    count = length

    def truncate(self, new_length: int) -> "StringValue":
        """Keep the first new_length codepoints, in place."""
        return self.substring_me(0, new_length)

    # ------------------------------------------------------------------
    # Codepoint-indexed access
    # ------------------------------------------------------------------

    def has(self, index: int) -> bool:
        return codepoints.in_range(self._text(), index)

    def get(self, index: int) -> str:
        """Codepoint at index; empty string when out of range."""
        return codepoints.codepoint_at(self._text(), index)

    def set(self, index: int, value) -> "StringValue":
        """Replace the codepoint at index with value (any length). No-op when out of range."""
        text = self._text()
        if codepoints.in_range(text, index):
            spliced = codepoints.splice(text, index, codepoints.as_text(value))
            self._buffer = codepoints.encode(spliced, self._encoding)
        return self

    def remove(self, index: int) -> "StringValue":
        """Delete the codepoint at index. No-op when out of range."""
        text = self._text()
        if codepoints.in_range(text, index):
            self._buffer = codepoints.encode(codepoints.remove_at(text, index), self._encoding)
        return self

    # ------------------------------------------------------------------
    # Iteration protocol
    # ------------------------------------------------------------------

    def reset(self) -> "StringValue":
        self._cursor = 0
        return self

    def advance(self) -> "StringValue":
        self._cursor += 1
        return self

    def has_current(self) -> bool:
        return self.has(self._cursor)

    def current_index(self) -> int:
        return self._cursor

    def current_value(self) -> Optional[str]:
        if not self.has_current():
            return None
        return self.get(self._cursor)
