"""Tests for mediaviz.utilities.unit_converter: whole-spec unit conversion."""

from __future__ import annotations

import logging

import pytest

from mediaviz.schemas.diagnostics import LayoutWarning, WarningKind
from mediaviz.schemas.media import LINEAR_FIELDS, MediaSpec, MediaType, MeasurementUnit
from mediaviz.utilities.unit_converter import convert, convert_value, resolve_unit, to_inches

_INCH_SPEC = MediaSpec(
    media_type=MediaType.LABEL,
    width=2.0,
    length=4.0,
    gap_down=0.125,
    left_margin=0.125,
    right_margin=0.25,
    corner_radius=0.0625,
)


class TestConvert:
    def test_same_unit_is_noop(self):
        assert convert(_INCH_SPEC, MeasurementUnit.INCHES) is _INCH_SPEC

    def test_inches_to_millimeters_all_fields(self):
        mm = convert(_INCH_SPEC, MeasurementUnit.MILLIMETERS)
        assert mm.measurement_unit is MeasurementUnit.MILLIMETERS
        assert mm.width == pytest.approx(50.8)
        assert mm.length == pytest.approx(101.6)
        assert mm.gap_down == pytest.approx(3.175)
        assert mm.left_margin == pytest.approx(3.175)
        assert mm.right_margin == pytest.approx(6.35)
        assert mm.corner_radius == pytest.approx(1.5875)

    def test_millimeters_to_inches_rounds_to_four_places(self):
        spec = MediaSpec(
            media_type=MediaType.TAG,
            width=10.0,
            length=100.0,
            measurement_unit=MeasurementUnit.MILLIMETERS,
        )
        inches = convert(spec, MeasurementUnit.INCHES)
        assert inches.width == 0.3937
        assert inches.length == 3.937

    def test_scenario_one_inch_square_to_millimeters(self):
        spec = MediaSpec(media_type=MediaType.LABEL, width=1.0, length=1.0)
        mm = convert(spec, MeasurementUnit.MILLIMETERS)
        assert mm.width == pytest.approx(25.4, abs=1e-4)
        assert mm.length == pytest.approx(25.4, abs=1e-4)

    def test_absent_fields_stay_absent(self):
        spec = MediaSpec(media_type=MediaType.LABEL, width=1.0)
        mm = convert(spec, MeasurementUnit.MILLIMETERS)
        assert mm.length is None
        assert mm.gap_down is None
        assert mm.corner_radius is None

    def test_non_linear_fields_untouched(self):
        mm = convert(_INCH_SPEC, MeasurementUnit.MILLIMETERS)
        assert mm.media_type is _INCH_SPEC.media_type
        assert mm.shape is _INCH_SPEC.shape
        assert mm.standard_perforation is _INCH_SPEC.standard_perforation

    def test_returns_new_spec_and_leaves_input_alone(self):
        mm = convert(_INCH_SPEC, MeasurementUnit.MILLIMETERS)
        assert mm is not _INCH_SPEC
        assert _INCH_SPEC.width == 2.0
        assert _INCH_SPEC.measurement_unit is MeasurementUnit.INCHES

    def test_string_token_accepted(self):
        mm = convert(_INCH_SPEC, "Millimeters")
        assert mm.measurement_unit is MeasurementUnit.MILLIMETERS

    def test_unrecognised_token_is_logged_noop(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mediaviz"):
            result = convert(_INCH_SPEC, "Millimeter")
        assert result is _INCH_SPEC
        assert "unrecognised measurement unit" in caplog.text


class TestRoundTrip:
    @pytest.mark.parametrize(
        "values",
        [
            (2.0, 4.0, 0.125, 0.125, 0.125, 0.125),
            (1.0, 6.0, 0.1, 0.2, 0.3, 0.05),
            (3.3333, 0.7777, 0.0, 0.0, 0.0, 0.0),
            (0.0, -1.5, 1.0, 0.5, 0.25, 0.5),
        ],
    )
    def test_inches_round_trip_within_tolerance(self, values):
        spec = MediaSpec(media_type=MediaType.LABEL, **dict(zip(LINEAR_FIELDS, values)))
        back = convert(convert(spec, MeasurementUnit.MILLIMETERS), MeasurementUnit.INCHES)
        assert back.measurement_unit is MeasurementUnit.INCHES
        for name in LINEAR_FIELDS:
            assert getattr(back, name) == pytest.approx(getattr(spec, name), abs=1e-4)

    def test_inch_aligned_millimeters_round_trip_within_tolerance(self):
        spec = MediaSpec(
            media_type=MediaType.TAG,
            width=25.4,
            length=152.4,
            gap_down=3.175,
            measurement_unit=MeasurementUnit.MILLIMETERS,
        )
        back = convert(convert(spec, MeasurementUnit.INCHES), MeasurementUnit.MILLIMETERS)
        for name in ("width", "length", "gap_down"):
            assert getattr(back, name) == pytest.approx(getattr(spec, name), abs=1e-4)
        assert back.left_margin is None

    def test_millimeters_round_trip_drift_bounded(self):
        spec = MediaSpec(
            media_type=MediaType.TAG,
            width=1.0,
            length=100.0,
            gap_down=3.0,
            measurement_unit=MeasurementUnit.MILLIMETERS,
        )
        back = convert(convert(spec, MeasurementUnit.INCHES), MeasurementUnit.MILLIMETERS)
        assert back.width == pytest.approx(1.0008)
        for name in ("width", "length", "gap_down"):
            assert abs(getattr(back, name) - getattr(spec, name)) <= 0.00132


class TestResolveUnit:
    def test_enum_passes_through(self):
        assert resolve_unit(MeasurementUnit.INCHES) is MeasurementUnit.INCHES

    def test_member_name_accepted(self):
        assert resolve_unit("millimeters") is MeasurementUnit.MILLIMETERS

    def test_unknown_token_returns_warning(self):
        result = resolve_unit("cm")
        assert isinstance(result, LayoutWarning)
        assert result.kind is WarningKind.UNIT_MISMATCH


class TestConvertValue:
    def test_same_unit_returns_value(self):
        assert convert_value(1.23456789, MeasurementUnit.INCHES, MeasurementUnit.INCHES, 4) == 1.23456789

    def test_to_millimeters(self):
        assert convert_value(0.5, MeasurementUnit.INCHES, MeasurementUnit.MILLIMETERS, 4) == 12.7


class TestToInches:
    def test_inches_unchanged(self):
        assert to_inches(2.5, MeasurementUnit.INCHES) == 2.5

    def test_millimeters_converted(self):
        assert to_inches(50.8, MeasurementUnit.MILLIMETERS) == pytest.approx(2.0)

    def test_not_rounded(self):
        assert to_inches(1.0, MeasurementUnit.MILLIMETERS) == pytest.approx(1 / 25.4, abs=1e-12)
