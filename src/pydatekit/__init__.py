"""pydatekit - Date parsing, leap years, duration formatting and clock angles."""

from __future__ import annotations

__version__ = "0.1.0"

import logging

from pydatekit._calendar import is_leap_year
from pydatekit._clock import clock_angle, hand_angles
from pydatekit._constants import DEFAULT_DURATION_TEMPLATE
from pydatekit._errors import (
    DateKitError,
    InvalidDurationError,
    InvalidFormatError,
    InvalidTimestampError,
    ParseError,
)
from pydatekit._formatter import format_timespan
from pydatekit._parsing import (
    format_iso8601,
    format_rfc2822,
    parse_iso8601,
    parse_rfc2822,
)
from pydatekit._scanner import compile_template
from pydatekit._timestamps import (
    Timestamp,
    elapsed_millis,
    to_epoch_millis,
    to_utc_datetime,
)
from pydatekit.template import FieldSpec, Template, TimeUnit

__all__ = [
    "clock_angle",
    "compile_template",
    "format_duration",
    "format_iso8601",
    "format_rfc2822",
    "format_timespan",
    "hand_angles",
    "is_leap_year",
    "parse_iso8601",
    "parse_rfc2822",
    "to_epoch_millis",
    "to_utc_datetime",
    "DateKitError",
    "FieldSpec",
    "InvalidDurationError",
    "InvalidFormatError",
    "InvalidTimestampError",
    "ParseError",
    "Template",
    "TimeUnit",
    "Timestamp",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def format_duration(
    start: Timestamp,
    end: Timestamp,
    *,
    template: str = DEFAULT_DURATION_TEMPLATE,
) -> str:
    """Format the time span between two instants.

    The span is the absolute distance between the instants, so argument
    order does not matter.

    Args:
        start: First instant (datetime or epoch milliseconds).
        end: Second instant.
        template: Output layout. Defaults to ``"HH:mm:ss.sss"``.

    Returns:
        The formatted span, e.g. ``"05:20:10.453"``.

    Raises:
        InvalidFormatError: If the template is malformed.
    """
    return format_timespan(template, abs(elapsed_millis(start, end)))
