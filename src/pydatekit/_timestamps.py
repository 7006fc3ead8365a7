"""Timestamp coercion helpers.

An instant may be given as a ``datetime`` or as milliseconds since the Unix
epoch. Naive datetimes are read as UTC so results never depend on the host
timezone.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from fractions import Fraction

from pydatekit._errors import (
    ERR_MSG_NON_FINITE_TIMESTAMP,
    ERR_MSG_TIMESTAMP_OUT_OF_RANGE,
    InvalidTimestampError,
)

Timestamp = datetime | int | float
"""Accepted instant representations."""

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_MICROSECOND = timedelta(microseconds=1)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def check_epoch_millis(value: object) -> None:
    """Validate a numeric instant.

    Raises:
        TypeError: If ``value`` is not an int or float (``bool`` included).
        InvalidTimestampError: If ``value`` is NaN or infinite.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"expected datetime or epoch milliseconds, got {type(value).__name__}"
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidTimestampError(
            ERR_MSG_NON_FINITE_TIMESTAMP,
            f"epoch milliseconds {value!r} is not finite",
        )


def _out_of_range(value: Timestamp, e: OverflowError) -> InvalidTimestampError:
    return InvalidTimestampError(
        ERR_MSG_TIMESTAMP_OUT_OF_RANGE,
        f"{value!r} cannot be expressed as a UTC datetime: {e}",
        wrapped=e,
    )


def to_utc_datetime(value: Timestamp) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    Raises:
        TypeError: If ``value`` is not a datetime or a number.
        InvalidTimestampError: If ``value`` is not finite or falls outside
            the range ``datetime`` can represent in UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        try:
            return value.astimezone(timezone.utc)
        except OverflowError as e:
            raise _out_of_range(value, e) from e

    check_epoch_millis(value)
    try:
        return EPOCH + timedelta(milliseconds=value)
    except OverflowError as e:
        raise _out_of_range(value, e) from e


def _aware(value: Timestamp) -> datetime:
    # Aware subtraction needs no UTC conversion and cannot overflow.
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    return to_utc_datetime(value)


def to_epoch_millis(value: Timestamp) -> int:
    """Return ``value`` as whole milliseconds since the Unix epoch."""
    return (_aware(value) - EPOCH) // _ONE_MILLISECOND


def elapsed_millis(start: Timestamp, end: Timestamp) -> Fraction:
    """Exact signed milliseconds from ``start`` to ``end``.

    Kept as a Fraction so sub-millisecond precision survives.
    """
    delta = _aware(end) - _aware(start)
    return Fraction(delta // _ONE_MICROSECOND, 1000)
