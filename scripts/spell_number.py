#!/usr/bin/env python3
"""Spell out a number in Indonesian from the command line.

Usage:
    python scripts/spell_number.py <angka> [--currency] [--case MODE]

Example:
    python scripts/spell_number.py 12.500,75 --currency --case sentence
"""
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from terbilang_api.config import Settings
from terbilang_api.errors import NumberParseError
from terbilang_api.pipeline import convert


def parse_args(argv: list[str]) -> tuple[str | None, bool, str | None]:
    raw = None
    currency = False
    case = None
    args = iter(argv[1:])
    for arg in args:
        if arg == "--currency":
            currency = True
        elif arg == "--case":
            case = next(args, None)
        elif raw is None:
            raw = arg
    return raw, currency, case


def main() -> int:
    raw, currency, case = parse_args(sys.argv)
    if raw is None:
        print("Usage: python scripts/spell_number.py <angka> [--currency] [--case MODE]")
        return 1

    settings = Settings()
    try:
        result = convert(raw, case=case or settings.default_case.value,
                         currency="idr" if currency else None)
    except NumberParseError as e:
        # stdout stays clean for piping
        print(f"ERROR: {e.code}", file=sys.stderr)
        return 2

    print(result["terbilang"])
    if currency:
        print(result["terbilang_idr"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
