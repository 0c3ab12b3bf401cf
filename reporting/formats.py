"""Locale pattern to chart format translation.

Locale providers describe dates and numbers with CLDR-style patterns
(`M/d/yy`, `#,##0.###`). The chart front-end expects d3 specifiers
(`%m/%d/%y`, `,.3f`). Translation is table driven: unknown number patterns
translate to None rather than a best-effort guess.
"""

from __future__ import annotations

import re

from .dto import FormatSet, NativeFormats, ShortDateFormats

# Tokens stripped from the short date pattern for each scale's label.
SHORT_DATE_REMOVALS: dict[str, tuple[str, ...]] = {
    "day": ("y",),
    "month": ("d",),
    "year": ("d", "m"),
}

# Ordered rule groups. Within a group the first token present wins, even when a
# later, longer token would also match.
SHORT_DATE_SUBSTITUTIONS: tuple[tuple[tuple[str, str], ...], ...] = (
    (("dd", "%d"), ("d", "%d")),
    (("MM", "%m"), ("M", "%m")),
    (("yyyy", "%Y"), ("yy", "%y"), ("y", "%y")),
)

DECIMAL_FORMATS: dict[str, str] = {
    "#,##,##0.###": ",.3f",
    "#,##0.###": ",.3f",
    "#0.######": ".6f",
    "#0.###;#0.###-": ".3f",
    "0 mil": ",.3f",
}

PERCENT_FORMATS: dict[str, str] = {
    "#,##,##0%": ",.2%",
    "#,##0%": ",.2%",
    "#,##0 %": ",.2%",
    "#0%": ",.0%",
    "%#,##0": ",.2%",
}

# `¤` is the currency symbol placeholder and is matched literally.
CURRENCY_FORMATS: dict[str, str] = {
    "#,##0.00 ¤": "$,.2f",
    "#,##0.00 ¤;(#,##0.00 ¤)": "$,.2f",
    "¤#,##0.00": "$,.2f",
    "¤#,##0.00;(¤#,##0.00)": "$,.2f",
    "¤#,##0.00;¤-#,##0.00": "$,.2f",
    "¤#0.00": "$.2f",
    "¤ #,##,##0.00": "$,.2f",
    "¤ #,##0.00": "$,.2f",
    "¤ #,##0.00;¤-#,##0.00": "$,.2f",
    "¤ #0.00": "$.2f",
    "¤ #0.00;¤ #0.00-": "$.2f",
}


def _strip_token(pattern: str, char: str) -> str:
    """Remove runs of `char` together with one adjacent separator run."""

    token = re.escape(char)
    return re.sub(rf"(^[{token}]+\W+|\W+[{token}]+)", "", pattern, flags=re.IGNORECASE)


def _substitute_tokens(pattern: str) -> str:
    """Replace native date tokens with d3 directives, first match per group."""

    for group in SHORT_DATE_SUBSTITUTIONS:
        for native, directive in group:
            if re.search(native, pattern, flags=re.IGNORECASE):
                pattern = re.sub(native, directive, pattern, flags=re.IGNORECASE)
                break
    return pattern


def translate_short_date_format(pattern: str) -> ShortDateFormats:
    """Derive per-scale d3 date formats from a native short date pattern.

    Args:
        pattern: Native short date pattern, e.g. `M/d/yy`.

    Returns:
        ShortDateFormats where `day` drops the year, `month` drops the day and
        `year` keeps only the year.
    """

    formats: dict[str, str] = {}
    for unit, chars in SHORT_DATE_REMOVALS.items():
        stripped = pattern
        for char in chars:
            stripped = _strip_token(stripped, char)
        formats[unit] = _substitute_tokens(stripped)
    return ShortDateFormats(**formats)


def translate_decimal_format(pattern: str) -> str | None:
    """Return the d3 specifier for a native decimal pattern, if known."""

    return DECIMAL_FORMATS.get(pattern)


def translate_percent_format(pattern: str) -> str | None:
    """Return the d3 specifier for a native percent pattern, if known."""

    return PERCENT_FORMATS.get(pattern)


def translate_currency_format(pattern: str) -> str | None:
    """Return the d3 specifier for a native currency pattern, if known."""

    return CURRENCY_FORMATS.get(pattern)


def translate_formats(native: NativeFormats) -> FormatSet:
    """Translate all native patterns of a locale into a FormatSet."""

    return FormatSet(
        short_date_formats=translate_short_date_format(native.short_date),
        decimal_format=translate_decimal_format(native.decimal),
        percent_format=translate_percent_format(native.percent),
        currency_format=translate_currency_format(native.currency),
    )
