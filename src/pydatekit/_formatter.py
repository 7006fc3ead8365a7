"""Duration rendering - fills a scanned template from a millisecond magnitude."""

from __future__ import annotations

import math
from fractions import Fraction
from io import StringIO
from numbers import Rational, Real

from pydatekit._errors import (
    ERR_MSG_NEGATIVE_DURATION,
    ERR_MSG_NON_FINITE_DURATION,
    InvalidDurationError,
)
from pydatekit._scanner import compile_template
from pydatekit.template import FieldSpec, Template


def _to_fraction(duration_ms: Real) -> Fraction:
    if isinstance(duration_ms, bool) or not isinstance(duration_ms, Real):
        raise TypeError(
            f"duration must be a real number of milliseconds, got {type(duration_ms).__name__}"
        )
    if not isinstance(duration_ms, Rational) and not math.isfinite(duration_ms):
        raise InvalidDurationError(
            ERR_MSG_NON_FINITE_DURATION,
            f"duration {duration_ms!r} is not finite",
        )
    value = Fraction(duration_ms)
    if value < 0:
        raise InvalidDurationError(
            ERR_MSG_NEGATIVE_DURATION,
            f"duration {duration_ms!r} ms is negative",
        )
    return value


def render_field(spec: FieldSpec, duration_ms: Fraction) -> str:
    """Render one field of a non-negative duration.

    The unit value is truncated to ``fraction_digits`` decimals, wrapped into
    the unit's natural range, then left-padded with zeros to the field width.
    """
    scale = 10**spec.fraction_digits
    scaled = math.floor(duration_ms * scale / spec.unit.millis)
    scaled %= spec.unit.modulus * scale

    whole, fraction = divmod(scaled, scale)
    text = str(whole)
    if spec.fraction_digits:
        text += f".{fraction:0{spec.fraction_digits}d}"
    return text.rjust(spec.width, "0")


def render(template: Template, duration_ms: Fraction) -> str:
    w = StringIO()
    for segment in template.segments:
        if isinstance(segment, FieldSpec):
            w.write(render_field(segment, duration_ms))
        else:
            w.write(segment)
    return w.getvalue()


def format_timespan(template: str, duration_ms: Real) -> str:
    """Format a millisecond magnitude through a duration template.

    Fields wrap independently (hours mod 24, minutes and seconds mod 60) and
    are truncated, never rounded.

    Args:
        template: Layout such as ``"HH:mm:ss.sss"``.
        duration_ms: Non-negative magnitude in milliseconds.

    Returns:
        The template with every field replaced by its rendered value.

    Raises:
        InvalidFormatError: If the template is malformed.
        InvalidDurationError: If the magnitude is negative or not finite.
    """
    compiled = compile_template(template)
    return render(compiled, _to_fraction(duration_ms))
