"""Analog clock hand geometry."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from pydatekit._constants import (
    CLOCK_HOURS,
    DEFAULT_UTC_OFFSET_MINUTES,
    HOUR_HAND_DEG_PER_MINUTE,
    MINUTE_HAND_DEG_PER_MINUTE,
    MINUTES_PER_HOUR,
    MS_PER_MINUTE,
)
from pydatekit._timestamps import Timestamp, check_epoch_millis

_ONE_SECOND = timedelta(seconds=1)
_MINUTES_PER_DIAL = CLOCK_HOURS * MINUTES_PER_HOUR


def _dial_minute(instant: Timestamp, utc_offset_minutes: int) -> int:
    """Minutes past twelve on the dial, read at UTC shifted by the offset."""
    if isinstance(instant, datetime):
        offset = instant.utcoffset() or timedelta(0)
        seconds = instant.hour * 3600 + instant.minute * 60 + instant.second
        utc_minute = (seconds - offset // _ONE_SECOND) // 60
    else:
        check_epoch_millis(instant)
        utc_minute = int(instant // MS_PER_MINUTE)
    return (utc_minute + utc_offset_minutes) % _MINUTES_PER_DIAL


def hand_angles(
    instant: Timestamp,
    *,
    utc_offset_minutes: int = DEFAULT_UTC_OFFSET_MINUTES,
) -> tuple[float, float]:
    """Return (hour hand, minute hand) positions in degrees clockwise from 12.

    Seconds are ignored; both hands move in whole-minute steps.
    """
    hours, minutes = divmod(_dial_minute(instant, utc_offset_minutes), MINUTES_PER_HOUR)

    hour_hand = HOUR_HAND_DEG_PER_MINUTE * (MINUTES_PER_HOUR * hours + minutes)
    minute_hand = MINUTE_HAND_DEG_PER_MINUTE * minutes
    return hour_hand, minute_hand


def clock_angle(
    instant: Timestamp,
    *,
    utc_offset_minutes: int = DEFAULT_UTC_OFFSET_MINUTES,
) -> float:
    """Return the smaller angle between the clock hands, in radians.

    The instant is read in UTC shifted by ``utc_offset_minutes``; the host
    timezone is never consulted. The result lies in ``[0, pi]``.
    """
    hour_hand, minute_hand = hand_angles(instant, utc_offset_minutes=utc_offset_minutes)
    degrees = abs(hour_hand - minute_hand)
    if degrees > 180:
        degrees = 360 - degrees
    # Convert once, after normalization.
    return degrees / 180 * math.pi
