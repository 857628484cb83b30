#!/usr/bin/env python3
"""Verify the static currency tables against Babel CLDR data.

The tables are authoritative for this package; CLDR moves independently,
so differences are reported for review rather than fixed automatically.

Checks:
    1. Structural: Table codes Babel does not recognize.
    2. Precision: Standard rounding scale differs from
       babel.numbers.get_currency_precision().
    3. Regions: Current tender currency differs from the first entry of
       babel.numbers.get_territory_currencies().
    4. Languages: Language table currency differs from the currency of the
       CLDR likely region. Shown only with --verbose.

Exit codes:
    0: No structural errors (differences are warnings, not failures).
    1: Structural errors (unknown codes, import failures).

Usage:
    verify_tables.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys
from datetime import date


def _check_unrecognized(codes: list[str], babel_currencies: set[str]) -> list[str]:
    """Table codes unknown to Babel."""
    return [f"  {code}: In code table but not recognized by Babel" for code in codes
            if code not in babel_currencies]


def _check_precision(codes: list[str]) -> list[str]:
    """Compare standard scale against Babel precision."""
    from babel.numbers import get_currency_precision  # noqa: PLC0415

    from isocurrency import Kind, must_parse_iso  # noqa: PLC0415

    result: list[str] = []
    for code in codes:
        scale, _ = Kind.STANDARD.rounding(must_parse_iso(code))
        babel_val = get_currency_precision(code)
        if scale != babel_val:
            result.append(f"  {code}: table={scale}, Babel CLDR={babel_val}")
    return result


def _check_regions(today: date) -> list[str]:
    """Compare each region's current currency with Babel's."""
    from babel.numbers import get_territory_currencies  # noqa: PLC0415

    from isocurrency import from_region  # noqa: PLC0415
    from isocurrency.data import REGION_CURRENCIES  # noqa: PLC0415

    result: list[str] = []
    for region in sorted({row.region for row in REGION_CURRENCIES}):
        currency, ok = from_region(region, at=today)
        ours = str(currency) if ok else None
        babel_list = get_territory_currencies(region, start_date=today, tender=True)
        theirs = babel_list[0] if babel_list else None
        if ours != theirs:
            result.append(f"  {region}: table={ours}, Babel CLDR={theirs}")
    return result


def _check_languages(today: date) -> list[str]:
    """Compare the language table with CLDR likely regions."""
    from isocurrency import from_region, must_parse_tag  # noqa: PLC0415
    from isocurrency.data import LANGUAGE_CURRENCIES  # noqa: PLC0415

    result: list[str] = []
    for row in LANGUAGE_CURRENCIES:
        region = must_parse_tag(row.language).likely_region()
        if region is None:
            result.append(f"  {row.language}: table={row.currency}, no CLDR likely region")
            continue
        currency, ok = from_region(region, at=today)
        if not ok or str(currency) != row.currency:
            result.append(
                f"  {row.language}: table={row.currency},"
                f" likely region {region} uses {currency if ok else None}"
            )
    return result


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the static currency tables against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List language table differences.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run table verification checks."""
    args = _parse_args(argv)

    try:
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from isocurrency import list_currencies as table_currencies  # noqa: PLC0415

    today = date.today()
    codes = [str(code) for code in table_currencies()]
    babel_currencies = list_currencies()

    errors = _check_unrecognized(codes, babel_currencies)
    precision = _check_precision([c for c in codes if c in babel_currencies])
    regions = _check_regions(today)
    languages = _check_languages(today)

    print("Currency Table Verification")
    print("=" * 50)
    print(f"Code table entries: {len(codes)}")
    print(f"Babel currencies:   {len(babel_currencies)}")
    print()

    _print_section("[ERROR] Structural errors", "Code not recognized by Babel", errors)
    _print_section(
        "[WARN] Precision differences",
        "Table rounding is authoritative; CLDR may differ",
        precision,
    )
    _print_section(
        "[WARN] Region differences",
        "Current tender currency at " + today.isoformat(),
        regions,
    )
    if languages:
        if args.verbose:
            _print_section(
                "[INFO] Language differences",
                "Language table versus CLDR likely region",
                languages,
            )
        else:
            print(f"[INFO] {len(languages)} language difference(s). Use --verbose to list.")
            print()

    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    print(
        f"[PASS] {len(precision)} precision, {len(regions)} region,"
        f" {len(languages)} language difference(s)."
    )
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
