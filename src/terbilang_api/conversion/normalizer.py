"""Separator-agnostic parsing of numeric strings.

Indonesian input mixes ``1.234,56`` and ``1,234.56`` freely, so the decimal
separator is guessed from the string itself rather than from a locale.
"""
from __future__ import annotations
import re

from ..errors import NumberParseError
from ..models.terbilang import CanonicalNumber, ErrorCode

_WHITESPACE = re.compile(r"[\u00a0\s]")
_DIGITS = re.compile(r"[0-9]+")

# A lone separator followed by this many digits is read as a decimal point
MAX_SINGLE_SEPARATOR_FRACTION = 6


def split_separators(body: str) -> tuple[str, str]:
    """Split an unsigned numeric string into (integer, fraction) parts.

    Algorithm:
    - Both ',' and '.' present: whichever occurs rightmost is the decimal
      separator, every occurrence of the other one is a thousands separator.
      Everything after the first decimal separator becomes the fraction.
    - Only one kind present: it is a decimal separator when it occurs exactly
      once and is followed by 1-6 digits, otherwise all occurrences are
      thousands separators.

    No validation is done here; the parts may still contain junk.
    """
    has_comma = "," in body
    has_dot = "." in body

    if has_comma and has_dot:
        decimal_sep = "," if body.rfind(",") > body.rfind(".") else "."
        thousands_sep = "." if decimal_sep == "," else ","
        parts = body.split(decimal_sep)
        return parts[0].replace(thousands_sep, ""), "".join(parts[1:])

    for sep in (",", "."):
        if sep not in body:
            continue
        parts = body.split(sep)
        if len(parts) == 2 and 0 < len(parts[1]) <= MAX_SINGLE_SEPARATOR_FRACTION:
            return parts[0], parts[1]
        return body.replace(sep, ""), ""

    return body, ""


def normalize(raw: str | None) -> CanonicalNumber:
    """Parse a raw numeric string into a ``CanonicalNumber``.

    Handles:
    - "1.234,56" / "1,234.56" -> 1234.56
    - "1.234.567" / "1,234,567" -> 1234567
    - "-2001", "+15", " 12 500 " (inner spaces and NBSP are dropped)

    Raises ``NumberParseError`` with EMPTY_INPUT, INVALID_INTEGER_PART or
    INVALID_FRACTION_PART.
    """
    cleaned = (raw or "").strip()
    if not cleaned:
        raise NumberParseError(ErrorCode.EMPTY_INPUT, raw)

    cleaned = _WHITESPACE.sub("", cleaned)

    sign = ""
    if cleaned[0] in "+-":
        sign, cleaned = cleaned[0], cleaned[1:]

    integer_part, fractional_part = split_separators(cleaned)

    if not _DIGITS.fullmatch(integer_part):
        raise NumberParseError(ErrorCode.INVALID_INTEGER_PART, raw)
    if fractional_part and not _DIGITS.fullmatch(fractional_part):
        raise NumberParseError(ErrorCode.INVALID_FRACTION_PART, raw)

    return CanonicalNumber(
        sign=sign,
        integer_digits=integer_part,
        fractional_digits=fractional_part,
    )

