from pydantic import BaseModel, Field, field_validator
from typing import List

from unistr.exceptions import InvalidArgumentError
from unistr.text.codepoints import normalize_encoding
from unistr.text.config import DEFAULT_ENCODING, QuoteStyle, SearchMode


class TextSettings(BaseModel):
    """
    Defaults applied by the command line when an option is not given.
    """
    encoding: str = DEFAULT_ENCODING
    quote_style: QuoteStyle = QuoteStyle.DOUBLE
    hash_algorithm: str = "md5"
    search_mode: SearchMode = SearchMode.AUTO

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, value: str) -> str:
        try:
            return normalize_encoding(value)
        except InvalidArgumentError as e:
            raise ValueError(str(e)) from e


class CodepointInfo(BaseModel):
    """
    One codepoint of a value, as reported by `unistr inspect`.
    """
    index: int
    char: str
    codepoint: str  # U+XXXX
    byte_length: int


class MatchReport(BaseModel):
    """
    Result of `unistr match`.
    """
    pattern: str
    count: int
    groups: List[List[str]] = Field(default_factory=list)
