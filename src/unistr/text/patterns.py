"""
Pattern search and replace.

Regular expressions are written as PCRE-style delimited literals
(``/body/modifiers``) and translated to Python ``re`` patterns here.
``replace`` can also work on plain substrings and, by default, guesses which
of the two the caller meant from the pattern's shape.
"""

import re
from functools import lru_cache
from typing import Callable, List, Union

from unistr.exceptions import InvalidArgumentError
from unistr.logging_config import logger
from .codepoints import as_text
from .config import (
    BRACKET_DELIMITERS,
    PATTERN_CACHE_SIZE,
    REGEX_MODIFIERS,
    SearchMode,
)

# \\ and \$ escapes, then \N, ${N} and $N back references in replacement templates
_BACKREF = re.compile(r"\\([\\$])|\\(\d{1,2})|\$\{(\d{1,2})\}|\$(\d{1,2})")

# PCRE (?<name>...) -> Python (?P<name>...); lookbehinds are left alone
_PCRE_NAMED_GROUP = re.compile(r"(?<!\\)\(\?<(?=[A-Za-z_])")

Replacement = Union[str, Callable[[re.Match], str]]


def looks_like_delimited_regex(pattern: str) -> bool:
    """
    Guess whether pattern is a delimited regular expression literal.

    The first character is taken as the delimiter and the whole pattern must
    look like ``<d>anything<d>word-chars``. The delimiter is spliced into the
    probe unescaped (except ``@``), so delimiters that are regex syntax give
    odd or uncompilable probes; an uncompilable probe means "not a regex".

    The delimiter is a single byte, so a pattern starting with a non-ASCII
    character is never a regex.

    Known limitation: literal text that happens to start and end with the
    same character, e.g. ``"/usr/"`` or ``"abca"``, is classified as a regex.
    """
    if not pattern or not pattern[0].isascii():
        return False
    delimiter = r"\@" if pattern[0] == "@" else pattern[0]
    probe = "^" + delimiter + ".*" + delimiter + r"\w*$"
    try:
        return re.search(probe, pattern, re.ASCII) is not None
    except re.error:
        return False


def resolve_mode(mode: Union[SearchMode, str]) -> SearchMode:
    try:
        return SearchMode(mode)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown search mode '{mode}'") from e


def infer_mode(pattern: str) -> SearchMode:
    """Pick REGULAR or SUBSTRING for an AUTO-mode pattern."""
    mode = SearchMode.REGULAR if looks_like_delimited_regex(pattern) else SearchMode.SUBSTRING
    logger.debug(f"Inferred {mode.value} search mode for pattern {pattern!r}")
    return mode


def split_delimited(pattern: str):
    """
    Split a delimited regex literal into (body, modifiers).

    Backslash-escaped delimiters do not close the body. Bracket delimiters
    nest, so ``{a{2}}i`` has body ``a{2}``.

    Raises:
        InvalidArgumentError: On a missing or unusable delimiter.
    """
    if not pattern:
        raise InvalidArgumentError("Empty regular expression")

    opening = pattern[0]
    if opening.isalnum() or opening == "\\" or opening.isspace():
        raise InvalidArgumentError(
            f"Delimiter must not be alphanumeric, backslash or whitespace: {pattern!r}"
        )
    closing = BRACKET_DELIMITERS.get(opening, opening)

    depth = 1
    i = 1
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            i += 2
            continue
        if char == closing:
            depth -= 1
            if depth == 0:
                return pattern[1:i], pattern[i + 1:]
        elif char == opening:
            depth += 1
        i += 1

    raise InvalidArgumentError(f"No ending delimiter '{closing}' found in {pattern!r}")


def _anchor_dollar_at_end(body: str) -> str:
    """Rewrite unescaped ``$`` outside character classes to ``\\Z``."""
    out = []
    in_class = False
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\":
            out.append(body[i:i + 2])
            i += 2
            continue
        if in_class:
            in_class = char != "]"
        elif char == "[":
            # ] right after [ or [^ is a literal member
            end = i + 1
            if body[end:end + 1] == "^":
                end += 1
            if body[end:end + 1] == "]":
                end += 1
            out.append(body[i:end])
            i = end
            in_class = True
            continue
        elif char == "$":
            char = r"\Z"
        out.append(char)
        i += 1
    return "".join(out)


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def compile_pattern(pattern: str) -> re.Pattern:
    """
    Compile a delimited regex literal to a Python pattern.

    Supported modifiers are ``i m s x u`` and ``D`` (``$`` matches only at
    the very end; ignored together with ``m``). ``U`` and the other PCRE
    modifiers are rejected.

    Raises:
        InvalidArgumentError: On bad delimiters, unknown modifiers or a body
            that Python's re module rejects.
    """
    body, modifiers = split_delimited(pattern)

    flags = 0
    for modifier in modifiers:
        if modifier.isspace():
            continue
        if modifier not in REGEX_MODIFIERS:
            raise InvalidArgumentError(f"Unknown modifier '{modifier}' in {pattern!r}")
        flags |= REGEX_MODIFIERS[modifier]

    if "D" in modifiers and "m" not in modifiers:
        body = _anchor_dollar_at_end(body)
    body = _PCRE_NAMED_GROUP.sub("(?P<", body)
    try:
        return re.compile(body, flags)
    except re.error as e:
        raise InvalidArgumentError(f"Invalid regular expression {pattern!r}: {e}") from e


def _group(match: re.Match, index: int) -> str:
    if index > match.re.groups:
        return ""
    return match.group(index) or ""


def compile_replacement(template: str) -> Callable[[re.Match], str]:
    """
    Turn a PCRE replacement template into a per-match function.

    Back references ``\\N``, ``$N`` and ``${N}`` (N up to 99) expand to the
    matching group; missing or unmatched groups expand to an empty string.
    ``\\\\`` and ``\\$`` are escapes for a literal backslash and dollar, so
    ``\\$1`` gives ``$1``. Everything else is literal.
    """
    parts = []
    pos = 0
    for ref in _BACKREF.finditer(template):
        parts.append(template[pos:ref.start()])
        escaped, *numbers = ref.groups()
        if escaped is not None:
            parts.append(escaped)
        else:
            parts.append(int(next(g for g in numbers if g is not None)))
        pos = ref.end()
    parts.append(template[pos:])

    def expand(match: re.Match) -> str:
        return "".join(
            _group(match, part) if isinstance(part, int) else part
            for part in parts
        )

    return expand


def _groups_of(match: re.Match) -> List[str]:
    return [match.group(0)] + [g or "" for g in match.groups()]


def count_matches(text: str, pattern: str) -> int:
    """Number of non-overlapping matches of pattern in text."""
    return sum(1 for _ in compile_pattern(pattern).finditer(text))


def first_match_groups(text: str, pattern: str) -> List[str]:
    """[full match, group 1, ...] for the first match, or [] without a match."""
    match = compile_pattern(pattern).search(text)
    if match is None:
        return []
    return _groups_of(match)


def all_match_groups(text: str, pattern: str) -> List[List[str]]:
    """
    One group list (as in first_match_groups) per match, in order.

    This is the per-match layout (PREG_SET_ORDER), not preg_match_all's
    default per-group layout: result[i][g] is group g of match i.
    """
    return [_groups_of(match) for match in compile_pattern(pattern).finditer(text)]


def replace(
    text: str,
    pattern: str,
    replacement: Replacement,
    mode: Union[SearchMode, str] = SearchMode.AUTO,
) -> str:
    """
    Replace occurrences of pattern in text.

    Args:
        text: Text to search
        pattern: Delimited regex literal or plain substring. Empty means no-op.
        replacement: Template string, or (regex mode only) a callable that
            receives each re.Match and returns the replacement text.
        mode: AUTO (guess from the pattern shape), REGULAR or SUBSTRING

    Returns:
        The rewritten text. An AUTO-inferred regex that does not compile
        logs a warning and yields an empty string.

    Raises:
        InvalidArgumentError: For an explicit REGULAR pattern that does not
            compile, or a callable replacement in substring mode.
    """
    if not pattern:
        return text

    mode = resolve_mode(mode)
    inferred = mode is SearchMode.AUTO
    if inferred:
        mode = infer_mode(pattern)

    if mode is SearchMode.REGULAR:
        try:
            regex = compile_pattern(pattern)
        except InvalidArgumentError as e:
            if not inferred:
                raise
            logger.warning(f"Pattern {pattern!r} looked like a regex but did not compile: {e}")
            return ""
        if callable(replacement):
            return regex.sub(lambda match: as_text(replacement(match)), text)
        return regex.sub(compile_replacement(as_text(replacement)), text)

    if callable(replacement):
        raise InvalidArgumentError("Callback replacements need a regular expression pattern")
    return text.replace(pattern, as_text(replacement))
