"""
End-to-end integration tests for the full preview pipeline.

Exercises: form values → MediaSpec → unit conversion → layout → SVG, for
both media types, checking that converted specs lay out identically to the
originals and that every documented scenario holds through the whole chain.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from mediaviz.api.preview import preview, preview_from_mapping
from mediaviz.layout import layout
from mediaviz.render.svg import SVG_NS
from mediaviz.schemas.media import MediaSpec, MediaType, MeasurementUnit, SensingDetails, Shape
from mediaviz.utilities.unit_converter import convert

_LABEL_FORM = {
    "mediaType": "Label",
    "width": "2",
    "length": "4",
    "shape": "Square/Rectangle",
    "standardPerforation": "true",
    "measurementUnit": "Inches",
}

_TAG_FORM = {
    "mediaType": "Tag",
    "width": "1",
    "length": "6",
    "sensingDetails": "Black Sensing Mark",
    "finishedFormat": "Roll",
}


def test_label_form_to_svg():
    report = preview_from_mapping(_LABEL_FORM)
    assert report.passed
    result = report.layout
    assert (result.liner_width, result.liner_height) == (192.0, 384.0)
    assert result.repetition == 2
    assert len(result.separators) == 1
    root = ET.fromstring(report.rendering)
    assert root.tag == f"{{{SVG_NS}}}svg"


def test_tag_form_to_svg():
    report = preview_from_mapping(_TAG_FORM)
    assert report.passed
    (unit,) = report.layout.units
    (mark,) = unit.cutouts
    assert mark.rect.height == 10.0
    assert report.layout.liner_height - mark.rect.bottom == 20.0
    assert "Tag preview (Roll)" in report.rendering


@pytest.mark.parametrize(
    "spec",
    [
        MediaSpec(media_type=MediaType.LABEL, width=2.0, length=4.0),
        MediaSpec(
            media_type=MediaType.LABEL,
            width=3.5,
            length=2.25,
            shape=Shape.JEWELRY_RAT_TAIL,
            left_margin=0.1,
        ),
        MediaSpec(
            media_type=MediaType.TAG,
            width=1.5,
            length=3.0,
            sensing_details=SensingDetails.LEFT_RIGHT_NOTCHES,
        ),
    ],
)
def test_converted_spec_lays_out_the_same(spec):
    inches = layout(spec)
    millimeters = layout(convert(spec, MeasurementUnit.MILLIMETERS))
    assert millimeters.repetition == inches.repetition
    assert millimeters.liner_width == pytest.approx(inches.liner_width, abs=1e-3)
    assert millimeters.liner_height == pytest.approx(inches.liner_height, abs=1e-3)
    assert millimeters.container_size.height == pytest.approx(
        inches.container_size.height, abs=1e-2
    )
    assert len(millimeters.separators) == len(inches.separators)
    for a, b in zip(inches.units, millimeters.units):
        assert len(a.cutouts) == len(b.cutouts)


def test_unit_change_round_trip_preview():
    spec = MediaSpec(media_type=MediaType.LABEL, width=1.0, length=1.0)
    mm = convert(spec, "Millimeters")
    assert mm.width == pytest.approx(25.4, abs=1e-4)
    assert mm.length == pytest.approx(25.4, abs=1e-4)
    back = convert(mm, MeasurementUnit.INCHES)
    assert preview(back).layout == preview(spec).layout


def test_missing_dimensions_never_raise():
    report = preview_from_mapping({"mediaType": "Label"})
    assert not report.passed
    assert report.layout is None
