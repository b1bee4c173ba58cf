"""
Sensing overlay builder: notch, slot and mark cutouts for Tag media.

A cutout is an occlusion rectangle layered over a perforation line, not a
geometric subtraction: notches and slots are drawn in the background colour
so the dashed line appears interrupted; the black sensing mark is drawn
opaque black.

Edges annotated per unit (unit coordinates, y = 0 at the unit's top):

  TOP     -- always
  BOTTOM  -- when the unit is not the last in the stack, or is the only one

Variants:

  LEFT_NOTCH / RIGHT_NOTCH / LEFT_RIGHT_NOTCHES
      40px deep x 14px tall, centred on the edge, flush left and/or right
  CENTRAL_SENSING_SLOT
      40px wide x 14px tall, centred horizontally and on the edge
  BLACK_SENSING_MARK
      full-width 10px bar whose lower side sits 20px above the bottom
      perforation; bottom edge only
  NONE
      no cutouts
"""

from __future__ import annotations

from mediaviz.config import GeometryConfig, get_config
from mediaviz.schemas.layout import Cutout, CutoutFill, CutoutKind, Rect, UnitEdge
from mediaviz.schemas.media import SensingDetails


def annotated_edges(unit_index: int, total_units: int) -> tuple[tuple[UnitEdge, float], ...]:
    """
    Return the (edge, relative y) pairs that receive cutouts.

    The relative y is 0 for TOP and 1 for BOTTOM; callers multiply by the
    unit height.
    """
    if total_units < 1 or not 0 <= unit_index < total_units:
        raise ValueError(f"unit_index {unit_index} is outside a stack of {total_units}")
    edges: list[tuple[UnitEdge, float]] = [(UnitEdge.TOP, 0.0)]
    if unit_index < total_units - 1 or total_units == 1:
        edges.append((UnitEdge.BOTTOM, 1.0))
    return tuple(edges)


def build_overlay(
    sensing_details: SensingDetails,
    unit_index: int,
    total_units: int,
    liner_width: float,
    liner_height: float,
    config: GeometryConfig | None = None,
) -> list[Cutout]:
    """
    Return the cutouts for one Tag unit, in unit coordinates.

    Raises:
        ValueError: If *unit_index* does not address a unit of the stack.
    """
    cfg = config or get_config()
    edges = annotated_edges(unit_index, total_units)
    cutouts: list[Cutout] = []

    match sensing_details:
        case SensingDetails.NONE:
            pass
        case SensingDetails.LEFT_NOTCH | SensingDetails.RIGHT_NOTCH | SensingDetails.LEFT_RIGHT_NOTCHES:
            depth = cfg.notch.depth_px
            height = cfg.notch.height_px
            xs: list[float] = []
            if sensing_details is not SensingDetails.RIGHT_NOTCH:
                xs.append(0.0)
            if sensing_details is not SensingDetails.LEFT_NOTCH:
                xs.append(liner_width - depth)
            for edge, fraction in edges:
                y = fraction * liner_height - height / 2
                for x in xs:
                    cutouts.append(
                        Cutout(
                            kind=CutoutKind.NOTCH,
                            edge=edge,
                            rect=Rect(x, y, depth, height),
                            fill=CutoutFill.BACKGROUND,
                        )
                    )
        case SensingDetails.CENTRAL_SENSING_SLOT:
            width = cfg.slot.width_px
            height = cfg.slot.height_px
            x = liner_width / 2 - width / 2
            for edge, fraction in edges:
                cutouts.append(
                    Cutout(
                        kind=CutoutKind.SLOT,
                        edge=edge,
                        rect=Rect(x, fraction * liner_height - height / 2, width, height),
                        fill=CutoutFill.BACKGROUND,
                    )
                )
        case SensingDetails.BLACK_SENSING_MARK:
            height = cfg.black_mark.height_px
            if any(edge is UnitEdge.BOTTOM for edge, _ in edges):
                y = liner_height - cfg.black_mark.offset_px - height
                cutouts.append(
                    Cutout(
                        kind=CutoutKind.MARK,
                        edge=UnitEdge.BOTTOM,
                        rect=Rect(0.0, y, liner_width, height),
                        fill=CutoutFill.BLACK,
                    )
                )
        case _:
            raise ValueError(f"unsupported sensing details: {sensing_details!r}")

    return cutouts
