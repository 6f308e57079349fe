"""Locale formatting helpers for amounts, dates and file sizes.

All helpers are pure: the same input and settings always give the same string. The locale is fixed by
``Settings`` (Brazilian Portuguese and BRL by default), so ``500`` renders as ``R$ 500,00`` and
``2020-05-24T00:00:00Z`` as ``24/05/2020``.
"""

import math
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal
from zoneinfo import ZoneInfo

from finview.core.settings import Settings, get_settings

CENTS = Decimal("0.01")
SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
SIZE_BASE = 1024


def _group_thousands(digits: str, separator: str) -> str:
    groups = []
    while len(digits) > 3:  # noqa: PLR2004
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return separator.join(groups)


def format_currency(amount: Decimal | float | str, settings: Settings | None = None) -> str:
    """Format an amount as a currency string, e.g. ``R$ 1.234,56``."""
    settings = settings or get_settings()
    value = Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer, _, fraction = f"{abs(value):f}".partition(".")
    grouped = _group_thousands(integer, settings.thousands_separator)
    return f"{sign}{settings.currency_symbol} {grouped}{settings.decimal_separator}{fraction}"


def format_local_date(iso_string: str, settings: Settings | None = None) -> str:
    """Format an ISO-8601 timestamp as a local date string, e.g. ``24/05/2020``."""
    settings = settings or get_settings()
    moment = datetime.fromisoformat(iso_string)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    zone = UTC if settings.display_timezone.upper() == "UTC" else ZoneInfo(settings.display_timezone)
    return moment.astimezone(zone).strftime(settings.date_format)


def readable_size(size: int) -> str:
    """Return a human readable size as the ``filesize`` package does by default (base 2, 2 decimals)."""
    if size <= 0:
        return "0 B"
    exponent = min(int(math.log(size, SIZE_BASE)), len(SIZE_UNITS) - 1)
    value = round(size / SIZE_BASE**exponent, 2)
    if value >= SIZE_BASE and exponent < len(SIZE_UNITS) - 1:
        value = 1
        exponent += 1
    return f"{value:g} {SIZE_UNITS[exponent]}"
