"""Terbilang exception hierarchy."""

from __future__ import annotations

from .models.terbilang import ErrorCode

_DEFAULT_DETAIL: dict[ErrorCode, str] = {
    ErrorCode.EMPTY_INPUT: "Input is empty",
    ErrorCode.INVALID_INTEGER_PART: "Integer part contains non-digit characters",
    ErrorCode.INVALID_FRACTION_PART: "Fraction part contains non-digit characters",
    ErrorCode.UNSUPPORTED_MAGNITUDE: "Integer part is larger than the kuintiliun scale",
}


class TerbilangError(ValueError):
    """Base exception for all terbilang conversion errors."""


class NumberParseError(TerbilangError):
    """Input could not be turned into a number that can be spelled out."""

    def __init__(self, code: ErrorCode, raw: str | None = None, detail: str | None = None) -> None:
        self.code = code
        self.raw = raw
        self.detail = detail or _DEFAULT_DETAIL[code]
        super().__init__(f"{code}: {self.detail}")
