"""Template types for duration formatting."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pydatekit._constants import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    SECONDS_PER_MINUTE,
)


class TimeUnit(enum.StrEnum):
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def millis(self) -> int:
        """Length of one unit in milliseconds."""
        return _UNIT_MILLIS[self]

    @property
    def modulus(self) -> int:
        """Value at which the field wraps back to zero."""
        return _UNIT_MODULUS[self]


_UNIT_MILLIS: dict[TimeUnit, int] = {
    TimeUnit.HOUR: MS_PER_HOUR,
    TimeUnit.MINUTE: MS_PER_MINUTE,
    TimeUnit.SECOND: MS_PER_SECOND,
}

_UNIT_MODULUS: dict[TimeUnit, int] = {
    TimeUnit.HOUR: HOURS_PER_DAY,
    TimeUnit.MINUTE: MINUTES_PER_HOUR,
    TimeUnit.SECOND: SECONDS_PER_MINUTE,
}

UNIT_CODES: dict[str, TimeUnit] = {
    "H": TimeUnit.HOUR,
    "m": TimeUnit.MINUTE,
    "s": TimeUnit.SECOND,
}
"""Leading template character -> unit."""


@dataclass(frozen=True)
class FieldSpec:
    """A single placeholder in a duration template.

    ``width`` is the rendered width, which is the length of ``code``.
    ``fraction_digits`` is zero for integer fields.
    """

    code: str
    unit: TimeUnit
    width: int
    fraction_digits: int = 0

    @property
    def is_fractional(self) -> bool:
        return self.fraction_digits > 0


Segment = FieldSpec | str
"""A template segment: a field or literal text."""


@dataclass(frozen=True)
class Template:
    """A scanned duration template."""

    source: str
    segments: tuple[Segment, ...] = ()

    @property
    def fields(self) -> list[FieldSpec]:
        return [s for s in self.segments if isinstance(s, FieldSpec)]

    def __len__(self) -> int:
        return len(self.segments)
