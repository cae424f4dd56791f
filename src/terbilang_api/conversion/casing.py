"""Case transforms applied to finished phrases."""
from __future__ import annotations
import re

from ..models.terbilang import CaseMode

_WORD = re.compile(r"\w\S*")


def resolve_case(mode: str | None, default: str = CaseMode.LOWER) -> CaseMode:
    """Map a user-supplied mode onto ``CaseMode``; unknown values mean lower."""
    try:
        return CaseMode((mode or default).strip().lower())
    except ValueError:
        return CaseMode.LOWER


def apply_case(text: str, mode: str | None = None) -> str:
    """Apply a case mode to a lower-case phrase."""
    case = resolve_case(mode)
    if case is CaseMode.UPPER:
        return text.upper()
    if case is CaseMode.TITLE:
        return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:], text)
    if case is CaseMode.SENTENCE:
        return text[:1].upper() + text[1:]
    return text.lower()
