"""Gregorian calendar predicates."""

from __future__ import annotations

import operator
from datetime import date


def is_leap_year(year: int | date) -> bool:
    """Return True if ``year`` is a Gregorian leap year.

    Accepts a year number or a ``date``/``datetime``, whose year is used.
    """
    if isinstance(year, date):
        year = year.year
    y = operator.index(year)
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)
