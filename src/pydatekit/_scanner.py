"""Duration template scanner - splits a template into fields and literals.

A field is a run of word characters, optionally joined by a single ``.`` to a
second run holding the fractional digits (``ss.sss``). Everything else is
literal text.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from pydatekit._constants import MAX_TEMPLATE_LENGTH, TEMPLATE_CACHE_SIZE
from pydatekit._errors import (
    ERR_MSG_INVALID_TEMPLATE,
    ERR_MSG_MALFORMED_FIELD,
    ERR_MSG_TEMPLATE_TOO_LONG,
    ERR_MSG_UNKNOWN_UNIT,
    InvalidFormatError,
)
from pydatekit.template import UNIT_CODES, FieldSpec, Segment, Template

logger = logging.getLogger(__name__)

_GRAMMAR = r"""
    template: (field | literal)*

    field: FIELD_CODE
    literal: LITERAL

    FIELD_CODE: /\w+(?:\.\w+)?/
    LITERAL: /[^\w]+/
"""

_parser = Lark(_GRAMMAR, start="template", parser="lalr")


def _field_spec(code: str) -> FieldSpec:
    """Build a FieldSpec from a field code such as ``HH`` or ``ss.sss``."""
    integer_run, _, fraction_run = code.partition(".")
    unit = UNIT_CODES.get(integer_run[0])
    if unit is None:
        raise InvalidFormatError(
            ERR_MSG_UNKNOWN_UNIT,
            f"field '{code}' starts with unknown unit code '{integer_run[0]}'",
        )
    for run in (integer_run, fraction_run):
        if run and len(set(run)) != 1:
            raise InvalidFormatError(
                ERR_MSG_MALFORMED_FIELD,
                f"field '{code}' mixes characters in '{run}'",
            )
    return FieldSpec(
        code=code,
        unit=unit,
        width=len(code),
        fraction_digits=len(fraction_run),
    )


def _segment(node: Tree) -> Segment:
    text = str(node.children[0])
    if node.data == "field":
        return _field_spec(text)
    return text


@lru_cache(maxsize=TEMPLATE_CACHE_SIZE)
def compile_template(template: str) -> Template:
    """Scan a duration template into its field and literal segments.

    Raises:
        InvalidFormatError: If the template is too long, contains a field
            with an unrecognized unit, or a field mixing characters.
    """
    if not isinstance(template, str):
        raise TypeError(f"template must be str, got {type(template).__name__}")
    if len(template) > MAX_TEMPLATE_LENGTH:
        raise InvalidFormatError(
            ERR_MSG_TEMPLATE_TOO_LONG,
            f"template length {len(template)} exceeds limit {MAX_TEMPLATE_LENGTH}",
        )

    try:
        tree = _parser.parse(template)
    except UnexpectedInput as e:
        raise InvalidFormatError(
            ERR_MSG_INVALID_TEMPLATE,
            f"cannot scan template {template!r}: {e}",
            wrapped=e,
        ) from e

    segments = tuple(_segment(node) for node in tree.children)
    logger.debug("compiled duration template %r into %d segments", template, len(segments))
    return Template(source=template, segments=segments)
