"""Unit constants and defaults for date and duration handling."""

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60

DEFAULT_DURATION_TEMPLATE = "HH:mm:ss.sss"
"""Output layout of format_duration."""

DEFAULT_UTC_OFFSET_MINUTES = 0
"""Offset added to an instant before reading clock hands."""

MAX_TEMPLATE_LENGTH = 256
"""Maximum accepted duration template length."""

TEMPLATE_CACHE_SIZE = 64
"""Number of compiled templates kept in memory."""

HOUR_HAND_DEG_PER_MINUTE = 0.5
MINUTE_HAND_DEG_PER_MINUTE = 6.0
CLOCK_HOURS = 12
