"""Rupiah/sen phrasing on top of the word converter."""
from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal, localcontext

from ..models.terbilang import CanonicalNumber, CurrencyResult
from .words import integer_to_words

SEN_PER_RUPIAH = 100


def round_to_sen(fractional_digits: str) -> int:
    """Round ``0.<digits>`` to whole sen, half up. Result is in 0..100."""
    if not fractional_digits:
        return 0
    # Enough precision that shifting by two places never rounds
    with localcontext() as ctx:
        ctx.prec = len(fractional_digits) + 3
        amount = Decimal(f"0.{fractional_digits}").scaleb(2)
        return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def increment_digits(digits: str) -> str:
    """Add one to a decimal digit string without converting it to an int."""
    result = list(digits or "0")
    i = len(result) - 1
    while i >= 0:
        if result[i] != "9":
            result[i] = str(int(result[i]) + 1)
            return "".join(result)
        result[i] = "0"
        i -= 1
    return "1" + "".join(result)


def to_rupiah(number: CanonicalNumber) -> CurrencyResult:
    """Spell out a canonical number as Rupiah with whole sen.

    Fractions round to the nearest sen; 100 sen carries into the rupiah part
    ("999.996" -> "seribu rupiah"). The sign comes from the input and is not
    touched by the carry.
    """
    integer_digits = number.integer_digits
    sen = round_to_sen(number.fractional_digits)
    if sen == SEN_PER_RUPIAH:
        sen = 0
        integer_digits = increment_digits(integer_digits)

    main = integer_to_words(integer_digits)
    if number.negative:
        main = f"minus {main}"
    full = f"{main} rupiah"

    sen_words = ""
    if sen > 0:
        sen_words = integer_to_words(str(sen))
        full = f"{full} {sen_words} sen"

    return CurrencyResult(main_words=full, sen=sen, sen_words=sen_words)
