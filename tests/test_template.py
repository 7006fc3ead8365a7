"""Template scanning tests."""

from fractions import Fraction

import pytest

from pydatekit import InvalidFormatError, compile_template
from pydatekit._constants import MAX_TEMPLATE_LENGTH
from pydatekit._formatter import render_field
from pydatekit.template import FieldSpec, Template, TimeUnit


class TestCompileTemplate:
    def test_default_layout_segments(self):
        template = compile_template("HH:mm:ss.sss")
        assert template.segments == (
            FieldSpec(code="HH", unit=TimeUnit.HOUR, width=2),
            ":",
            FieldSpec(code="mm", unit=TimeUnit.MINUTE, width=2),
            ":",
            FieldSpec(code="ss.sss", unit=TimeUnit.SECOND, width=6, fraction_digits=3),
        )

    def test_source_kept(self):
        assert compile_template("HH:mm").source == "HH:mm"

    def test_fields_property(self):
        template = compile_template("HH:mm:ss.sss")
        assert [f.code for f in template.fields] == ["HH", "mm", "ss.sss"]
        assert len(template) == 5

    def test_literal_runs_are_merged(self):
        template = compile_template("HH :: mm")
        assert template.segments[1] == " :: "

    def test_cached(self):
        assert compile_template("mm:ss") is compile_template("mm:ss")

    def test_empty(self):
        assert compile_template("") == Template(source="", segments=())

    def test_unknown_unit(self):
        with pytest.raises(InvalidFormatError, match="unrecognized time unit"):
            compile_template("DD:HH")

    def test_mixed_integer_run(self):
        with pytest.raises(InvalidFormatError, match="malformed"):
            compile_template("Hm")

    def test_mixed_fraction_run(self):
        with pytest.raises(InvalidFormatError, match="malformed"):
            compile_template("ss.s1")

    def test_too_long(self):
        with pytest.raises(InvalidFormatError, match="too long"):
            compile_template("H" * (MAX_TEMPLATE_LENGTH + 1))

    def test_non_string(self):
        with pytest.raises(TypeError):
            compile_template(42)


class TestFieldSpec:
    def test_is_fractional(self):
        assert FieldSpec("ss.sss", TimeUnit.SECOND, 6, 3).is_fractional
        assert not FieldSpec("ss", TimeUnit.SECOND, 2).is_fractional

    def test_frozen(self):
        spec = FieldSpec("HH", TimeUnit.HOUR, 2)
        with pytest.raises(AttributeError):
            spec.width = 3


class TestTimeUnit:
    @pytest.mark.parametrize(
        ("unit", "millis", "modulus"),
        [
            (TimeUnit.HOUR, 3_600_000, 24),
            (TimeUnit.MINUTE, 60_000, 60),
            (TimeUnit.SECOND, 1_000, 60),
        ],
    )
    def test_unit_constants(self, unit, millis, modulus):
        assert unit.millis == millis
        assert unit.modulus == modulus

    def test_string_values(self):
        assert TimeUnit.HOUR == "hour"


class TestRenderField:
    def test_hour_field(self):
        spec = FieldSpec("HH", TimeUnit.HOUR, 2)
        assert render_field(spec, Fraction(19_210_453)) == "05"

    def test_value_wider_than_field(self):
        spec = FieldSpec("H", TimeUnit.HOUR, 1)
        assert render_field(spec, Fraction(23 * 3_600_000)) == "23"
