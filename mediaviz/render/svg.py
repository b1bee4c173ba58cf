"""
Renderers: interpret a LayoutResult as a drawable document.

The layout engine decides every position and size; a renderer only maps the
value tree onto a drawing surface. SvgRenderer emits a standalone SVG string:

  container   rounded background rectangle
  stack       group translated to ``stack_origin``
    units     liner/tag body and label silhouette, one group per unit
    edges     side, top, bottom and separator lines (dashed when perforated)
    cutouts   notches, slots and marks, drawn last so they occlude the edges
  caption     centred note at the bottom of the container

SVG cannot draw shapes with a non-positive size. Such shapes are left out of
the drawing (the LayoutResult still reports them as warnings).
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Protocol, runtime_checkable

from mediaviz.config import Palette, get_config
from mediaviz.schemas.layout import (
    CutoutFill,
    EdgeStyle,
    LayoutResult,
    MediaUnit,
    Point,
    Rect,
    Silhouette,
)
from mediaviz.schemas.media import MediaType

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
DASH_PATTERN = "6,4"
CONTAINER_RADIUS = 5


@runtime_checkable
class Renderer(Protocol):
    """Protocol for layout renderers."""

    def render(self, result: LayoutResult) -> str: ...


def _fmt(value: float) -> str:
    return f"{round(value, 3):.10g}"


def _points(points: tuple[Point, ...]) -> str:
    return " ".join(f"{_fmt(p.x)},{_fmt(p.y)}" for p in points)


class SvgRenderer:
    """Render a LayoutResult to an SVG document string."""

    def __init__(self, palette: Palette | None = None) -> None:
        self.palette = palette or get_config().palette

    def render(self, result: LayoutResult) -> str:
        """
        Build the SVG document for *result*.

        Parameters
        ----------
        result:
            A LayoutResult from ``mediaviz.layout.layout``.

        Returns
        -------
        str
            The serialised ``<svg>`` element.
        """
        width = result.container_size.width
        height = result.container_size.height
        svg = ET.Element(
            "svg",
            xmlns=SVG_NS,
            width=_fmt(width),
            height=_fmt(height),
            viewBox=f"0 0 {_fmt(width)} {_fmt(height)}",
        )
        ET.SubElement(svg, "title").text = self._title(result)
        ET.SubElement(
            svg,
            "rect",
            x="0",
            y="0",
            width=_fmt(width),
            height=_fmt(height),
            rx=str(CONTAINER_RADIUS),
            fill=self.palette.container_fill,
            stroke=self.palette.container_border,
        )

        stack = ET.SubElement(
            svg,
            "g",
            transform=f"translate({_fmt(result.stack_origin.x)},{_fmt(result.stack_origin.y)})",
        )
        stack.set("class", "stack")
        body_fill = (
            self.palette.liner_fill
            if result.media_type is MediaType.LABEL
            else self.palette.tag_fill
        )
        for unit in result.units:
            self._draw_unit(stack, unit, body_fill)
        self._draw_edges(stack, result)
        for unit in result.units:
            self._draw_cutouts(stack, unit)

        self._draw_caption(svg, result)
        return ET.tostring(svg, encoding="unicode")

    # ── Parts ──────────────────────────────────────────────────────────────────

    def _title(self, result: LayoutResult) -> str:
        title = f"{result.media_type.value} preview"
        if result.finished_format is not None:
            title += f" ({result.finished_format.value})"
        return title

    def _unit_group(self, parent: ET.Element, unit: MediaUnit, css_class: str) -> ET.Element:
        group = ET.SubElement(
            parent,
            "g",
            transform=f"translate({_fmt(unit.bounds.x)},{_fmt(unit.bounds.y)})",
        )
        group.set("class", css_class)
        group.set("data-index", str(unit.index))
        return group

    def _draw_unit(self, parent: ET.Element, unit: MediaUnit, body_fill: str) -> None:
        group = self._unit_group(parent, unit, "unit")
        self._rect(group, unit.body, fill=body_fill)
        if unit.silhouette is not None:
            self._draw_silhouette(group, unit.silhouette)

    def _draw_silhouette(self, parent: ET.Element, silhouette: Silhouette) -> None:
        if silhouette.width <= 0 or silhouette.height <= 0:
            logger.debug(
                f"Skipping degenerate {silhouette.shape.value} silhouette "
                f"({silhouette.width} x {silhouette.height} px)"
            )
            return
        if not silhouette.is_polygon:
            self._rect(
                parent,
                Rect(
                    silhouette.x,
                    silhouette.y,
                    silhouette.width,
                    silhouette.height,
                    silhouette.corner_radius,
                ),
                fill=self.palette.label_fill,
                stroke=self.palette.stroke,
            )
            return
        # Outer polygon forms the border ring around the inset copy
        ET.SubElement(
            parent,
            "polygon",
            points=_points(silhouette.outline),
            fill=self.palette.stroke,
        )
        inset = silhouette.inset
        if inset is not None and inset.width > 0 and inset.height > 0:
            ET.SubElement(
                parent,
                "polygon",
                points=_points(inset.outline),
                fill=self.palette.label_fill,
            )

    def _draw_edges(self, parent: ET.Element, result: LayoutResult) -> None:
        right = result.liner_width
        bottom = result.stack_height
        self._line(parent, 0.0, 0.0, 0.0, bottom, result.side_edge)
        self._line(parent, right, 0.0, right, bottom, result.side_edge)
        self._line(parent, 0.0, 0.0, right, 0.0, result.top_edge)
        self._line(parent, 0.0, bottom, right, bottom, result.bottom_edge)
        for separator in result.separators:
            self._line(
                parent,
                separator.x_start,
                separator.y,
                separator.x_end,
                separator.y,
                separator.style,
            )

    def _draw_cutouts(self, parent: ET.Element, unit: MediaUnit) -> None:
        if not unit.cutouts:
            return
        group = self._unit_group(parent, unit, "cutouts")
        for cutout in unit.cutouts:
            fill = (
                self.palette.mark_fill
                if cutout.fill is CutoutFill.BLACK
                else self.palette.container_fill
            )
            element = self._rect(group, cutout.rect, fill=fill)
            if element is not None:
                element.set("class", cutout.kind.value)

    def _draw_caption(self, parent: ET.Element, result: LayoutResult) -> None:
        caption = result.caption
        text = ET.SubElement(
            parent,
            "text",
            x=_fmt(caption.x + caption.width / 2),
            y=_fmt(caption.y),
            fill=self.palette.caption_fill,
        )
        text.set("font-size", _fmt(caption.font_size))
        text.set("font-style", "italic")
        text.set("font-weight", "bold")
        text.set("text-anchor", "middle")
        line_height = caption.height / len(caption.lines) if caption.lines else 0.0
        for i, line in enumerate(caption.lines):
            tspan = ET.SubElement(
                text,
                "tspan",
                x=_fmt(caption.x + caption.width / 2),
                y=_fmt(caption.y + (i + 1) * line_height - (line_height - caption.font_size) / 2),
            )
            tspan.text = line

    # ── Element helpers ────────────────────────────────────────────────────────

    def _rect(
        self,
        parent: ET.Element,
        rect: Rect,
        fill: str,
        stroke: str | None = None,
    ) -> ET.Element | None:
        if rect.width <= 0 or rect.height <= 0:
            logger.debug(f"Skipping degenerate rectangle {rect}")
            return None
        element = ET.SubElement(
            parent,
            "rect",
            x=_fmt(rect.x),
            y=_fmt(rect.y),
            width=_fmt(rect.width),
            height=_fmt(rect.height),
            fill=fill,
        )
        if rect.corner_radius > 0:
            element.set("rx", _fmt(rect.corner_radius))
        if stroke is not None:
            element.set("stroke", stroke)
            element.set("stroke-width", _fmt(self.palette.stroke_width))
        return element

    def _line(
        self,
        parent: ET.Element,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        style: EdgeStyle,
    ) -> None:
        element = ET.SubElement(
            parent,
            "line",
            x1=_fmt(x1),
            y1=_fmt(y1),
            x2=_fmt(x2),
            y2=_fmt(y2),
            stroke=self.palette.stroke,
        )
        element.set("stroke-width", _fmt(self.palette.stroke_width))
        element.set("class", f"edge {style.value}")
        if style is EdgeStyle.DASHED:
            element.set("stroke-dasharray", DASH_PATTERN)
