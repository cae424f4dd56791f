"""Data types passed between the normalizer, the word converter and the API.

Every object here lives for a single conversion call; nothing is cached or
persisted between requests.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_INTEGER_PART = "INVALID_INTEGER_PART"
    INVALID_FRACTION_PART = "INVALID_FRACTION_PART"
    UNSUPPORTED_MAGNITUDE = "UNSUPPORTED_MAGNITUDE"


class CaseMode(StrEnum):
    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"
    SENTENCE = "sentence"


class CanonicalNumber(BaseModel):
    """A numeric string with its separators resolved.

    ``integer_digits`` always holds at least one digit; leading zeros are kept
    as typed. ``fractional_digits`` is empty when the input had no fraction.
    """

    sign: str = Field(default="", pattern=r"^[+-]?$")
    integer_digits: str = Field(pattern=r"^[0-9]+$")
    fractional_digits: str = Field(default="", pattern=r"^[0-9]*$")

    @property
    def negative(self) -> bool:
        return self.sign == "-"

    @property
    def normalized(self) -> str:
        """Canonical ``sign+integer[.fraction]`` form."""
        text = self.sign + self.integer_digits
        if self.fractional_digits:
            text += "." + self.fractional_digits
        return text


class WordsResult(BaseModel):
    """Spelled-out form of a whole canonical number."""

    words: str
    negative: bool = False
    integer: str
    fraction: str = ""


class CurrencyResult(BaseModel):
    """Rupiah phrasing of a canonical number, rounded to whole sen."""

    main_words: str
    sen: int = Field(default=0, ge=0, le=99)
    sen_words: str = ""
