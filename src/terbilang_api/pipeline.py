"""Conversion pipeline: normalize, spell out, optional rupiah, case, payload."""
from __future__ import annotations
import structlog

from .conversion.casing import apply_case
from .conversion.currency import to_rupiah
from .conversion.normalizer import normalize
from .conversion.words import make_terbilang
from .errors import NumberParseError

logger = structlog.get_logger(__name__)

CURRENCY_ALIASES = frozenset({"idr", "rupiah"})

ERROR_HINT = 'Kirim parameter ?angka=1234 atau body JSON {"angka":"1.234,56"}'


def wants_rupiah(currency: str | None) -> bool:
    return (currency or "").strip().lower() in CURRENCY_ALIASES


def convert(raw: str | None, case: str | None = None, currency: str | None = None) -> dict:
    """Run one conversion and return the success payload.

    Raises ``NumberParseError`` when the input cannot be spelled out.
    """
    number = normalize(raw)
    spelled = make_terbilang(number)

    result = {
        "ok": True,
        "input": raw,
        "normalized": number.normalized,
        "negative": spelled.negative,
        "integer": spelled.integer,
        "fraction": spelled.fraction,
        "terbilang": apply_case(spelled.words, case),
    }

    if wants_rupiah(currency):
        rupiah = to_rupiah(number)
        result["terbilang_idr"] = apply_case(rupiah.main_words, case)
        if rupiah.sen > 0:
            result["sen"] = rupiah.sen
            result["sen_terbilang"] = apply_case(f"{rupiah.sen_words} sen", case)

    logger.info(
        "terbilang_converted",
        normalized=number.normalized,
        currency=wants_rupiah(currency),
        case=case,
    )
    return result


def error_payload(error: NumberParseError) -> dict:
    """Failure payload for a rejected input."""
    logger.info("terbilang_rejected", error=str(error.code), raw=error.raw)
    return {
        "ok": False,
        "error": str(error.code),
        "detail": error.detail,
        "hint": ERROR_HINT,
    }
