"""Indonesian number words (terbilang)."""
from __future__ import annotations
import re

from ..errors import NumberParseError
from ..models.terbilang import CanonicalNumber, ErrorCode, WordsResult

WORDS_0_11: tuple[str, ...] = (
    "nol", "satu", "dua", "tiga", "empat", "lima", "enam",
    "tujuh", "delapan", "sembilan", "sepuluh", "sebelas",
)

SCALES: tuple[str, ...] = ("", "ribu", "juta", "miliar", "triliun", "kuadriliun", "kuintiliun")

# 999 kuintiliun is the largest number with a scale word
MAX_INTEGER_DIGITS = len(SCALES) * 3

_SPACES = re.compile(r"\s+")


def _squash(text: str) -> str:
    return _SPACES.sub(" ", text).strip()


def three_digits_to_words(n: int) -> str:
    """Spell out 0..999. Zero gives an empty string; callers handle "nol"."""
    if not 0 <= n <= 999:
        raise ValueError(f"Chunk out of range: {n}")
    if n == 0:
        return ""
    if n < 12:
        return WORDS_0_11[n]
    if n < 20:
        return f"{WORDS_0_11[n - 10]} belas"
    if n < 100:
        tens, ones = divmod(n, 10)
        head = f"{WORDS_0_11[tens]} puluh"
        return f"{head} {WORDS_0_11[ones]}" if ones else head
    if n < 200:
        rest = n - 100
        return f"seratus {three_digits_to_words(rest)}" if rest else "seratus"
    hundreds, rest = divmod(n, 100)
    head = f"{WORDS_0_11[hundreds]} ratus"
    return f"{head} {three_digits_to_words(rest)}" if rest else head


def split_chunks(digits: str) -> list[int]:
    """Cut a digit string into 3-digit groups, least significant first."""
    chunks = []
    for end in range(len(digits), 0, -3):
        chunks.append(int(digits[max(0, end - 3):end]))
    return chunks


def integer_to_words(digits: str) -> str:
    """Spell out an unsigned integer given as a digit string.

    Empty or all-zero input gives "nol". Leading zeros are ignored, so
    "0001000" reads as "seribu".

    Raises ``NumberParseError`` (UNSUPPORTED_MAGNITUDE) when the number needs
    a scale word past kuintiliun.
    """
    significant = digits.lstrip("0")
    if not significant:
        return "nol"
    if len(significant) > MAX_INTEGER_DIGITS:
        raise NumberParseError(
            ErrorCode.UNSUPPORTED_MAGNITUDE,
            digits,
            f"Integer part has {len(significant)} digits, at most {MAX_INTEGER_DIGITS} are supported",
        )

    parts: list[str] = []
    for scale_index, chunk in enumerate(split_chunks(significant)):
        if not chunk:
            continue
        if scale_index == 1 and chunk == 1:
            parts.append("seribu")
            continue
        words = three_digits_to_words(chunk)
        scale = SCALES[scale_index]
        parts.append(f"{words} {scale}" if scale else words)

    return _squash(" ".join(reversed(parts)))


def fraction_to_words(digits: str) -> str:
    """Read fraction digits one by one: "56" -> "lima enam"."""
    return _squash(" ".join(WORDS_0_11[int(d)] for d in digits))


def make_terbilang(number: CanonicalNumber) -> WordsResult:
    """Spell out a whole canonical number, sign and fraction included."""
    words = integer_to_words(number.integer_digits)
    if number.fractional_digits:
        words = f"{words} koma {fraction_to_words(number.fractional_digits)}"
    if number.negative:
        words = f"minus {words}"

    return WordsResult(
        words=words,
        negative=number.negative,
        integer=number.integer_digits,
        fraction=number.fractional_digits,
    )
