"""RFC 2822 and ISO 8601 parsing and formatting.

Parsing is delegated to ``email.utils`` (RFC 2822) and ``dateutil`` (ISO 8601).
Inputs without an offset are read as UTC.
"""

from __future__ import annotations

import email.utils
import logging
import re
from datetime import datetime, timezone

from dateutil.parser import isoparse

from pydatekit._errors import (
    ERR_MSG_INVALID_ISO8601,
    ERR_MSG_INVALID_RFC2822,
    ParseError,
)
from pydatekit._timestamps import Timestamp, to_utc_datetime

logger = logging.getLogger(__name__)

# Trailing "GMT+01" style zone, east-positive as in browser date parsers.
_GMT_OFFSET_RE = re.compile(
    r"\b(?:GMT|UTC|UT)([+-])(\d{1,2})(?::?(\d{2}))?\s*$",
    re.IGNORECASE,
)


def _require_str(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text


def _numeric_zone(text: str) -> str:
    """Rewrite a trailing ``GMT+hh[mm]`` zone as an RFC 2822 ``+hhmm`` offset."""
    return _GMT_OFFSET_RE.sub(
        lambda m: f"{m.group(1)}{int(m.group(2)):02d}{m.group(3) or '00'}",
        text,
    )


def _assume_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_rfc2822(text: str) -> datetime:
    """Parse an RFC 2822 date such as ``Tue, 26 Jan 2016 13:48:02 GMT``.

    A ``GMT+01`` style zone is read as one hour east of UTC.

    Returns:
        An aware datetime. ``-0000`` and missing zones are read as UTC.

    Raises:
        ParseError: If the text is not an RFC 2822 date.
    """
    _require_str(text)
    try:
        parsed = email.utils.parsedate_to_datetime(_numeric_zone(text))
    except (TypeError, ValueError) as e:
        err = ParseError(
            ERR_MSG_INVALID_RFC2822,
            f"cannot parse {text!r} as RFC 2822: {e}",
            wrapped=e,
        )
        logger.debug("rejected date input: %s", err.internal())
        raise err from e
    return _assume_utc(parsed)


def parse_iso8601(text: str) -> datetime:
    """Parse an ISO 8601 date such as ``2016-01-19T08:07:37Z``.

    Raises:
        ParseError: If the text is not an ISO 8601 date.
    """
    _require_str(text)
    try:
        parsed = isoparse(text)
    except (OverflowError, ValueError) as e:
        err = ParseError(
            ERR_MSG_INVALID_ISO8601,
            f"cannot parse {text!r} as ISO 8601: {e}",
            wrapped=e,
        )
        logger.debug("rejected date input: %s", err.internal())
        raise err from e
    return _assume_utc(parsed)


def format_rfc2822(instant: Timestamp) -> str:
    """Format an instant as an RFC 2822 GMT date. Sub-second parts are dropped."""
    return email.utils.format_datetime(to_utc_datetime(instant), usegmt=True)


def format_iso8601(instant: Timestamp) -> str:
    """Format an instant as ISO 8601 in UTC with millisecond precision."""
    text = to_utc_datetime(instant).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")
