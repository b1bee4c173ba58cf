"""
Layout result schema: the resolution-independent description of a preview.

All coordinates are CSS pixels with y growing downwards. Three frames are
used:

  container  -- the whole preview; Caption and ``stack_origin`` live here
  stack      -- origin at ``stack_origin``; MediaUnit.bounds and Separators
  unit       -- origin at a unit's top-left corner; body, silhouette, cutouts

Every object is a frozen value. The engine builds a fresh tree per call and
no primitive is shared between units.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mediaviz.schemas.diagnostics import LayoutWarning
from mediaviz.schemas.media import FinishedFormat, MediaType, MeasurementUnit, Shape

# ── Enums ──────────────────────────────────────────────────────────────────────


class EdgeStyle(str, Enum):
    DASHED = "dashed"  # perforated tear line
    SOLID = "solid"


class UnitEdge(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


class CutoutKind(str, Enum):
    NOTCH = "notch"
    SLOT = "slot"
    MARK = "mark"


class CutoutFill(str, Enum):
    """Occlusion colour: cutouts hide the perforation beneath them."""

    BACKGROUND = "background"
    BLACK = "black"


# ── Primitives ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    corner_radius: float = 0.0

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    def translated(self, dx: float, dy: float) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height, self.corner_radius)


@dataclass(frozen=True)
class Padding:
    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True)
class Silhouette:
    """
    The label shape drawn on a liner.

    Rounded rectangles carry an empty ``outline``; polygon shapes list their
    vertices in ``outline`` and keep ``corner_radius`` at 0. ``inset`` is an
    optional inner copy drawn on top of the outer one to form a border ring.
    """

    shape: Shape
    x: float
    y: float
    width: float
    height: float
    corner_radius: float = 0.0
    outline: tuple[Point, ...] = ()
    inset: Silhouette | None = None

    @property
    def is_polygon(self) -> bool:
        return bool(self.outline)

    def translated(self, dx: float, dy: float) -> Silhouette:
        return Silhouette(
            shape=self.shape,
            x=self.x + dx,
            y=self.y + dy,
            width=self.width,
            height=self.height,
            corner_radius=self.corner_radius,
            outline=tuple(p.translated(dx, dy) for p in self.outline),
            inset=self.inset.translated(dx, dy) if self.inset is not None else None,
        )


@dataclass(frozen=True)
class Cutout:
    """A rectangle layered over a perforation to show a notch, slot or mark."""

    kind: CutoutKind
    edge: UnitEdge
    rect: Rect
    fill: CutoutFill


# ── Composite objects ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MediaUnit:
    """
    One stacked copy of the liner or tag.

    Attributes:
        index: Position in the stack, 0 at the top.
        bounds: Unit rectangle in stack coordinates.
        body: Liner (Label) or tag (Tag) rectangle in unit coordinates.
        silhouette: Centred label shape (Label only), unit coordinates.
        cutouts: Sensing cutouts (Tag only), unit coordinates.
    """

    index: int
    bounds: Rect
    body: Rect
    silhouette: Silhouette | None = None
    cutouts: tuple[Cutout, ...] = ()


@dataclass(frozen=True)
class Separator:
    """A horizontal perforation line between two stacked units."""

    y: float
    x_start: float
    x_end: float
    style: EdgeStyle = EdgeStyle.DASHED


@dataclass(frozen=True)
class Caption:
    text: str
    lines: tuple[str, ...]
    x: float
    y: float
    width: float
    height: float
    font_size: float


@dataclass(frozen=True)
class LayoutResult:
    """Fully positioned preview of one MediaSpec."""

    media_type: MediaType
    measurement_unit: MeasurementUnit
    scale: float  # pixels per measurement unit
    container_size: Size
    padding: Padding
    stack_origin: Point
    liner_width: float
    liner_height: float
    label_size: Size | None  # None for Tag media
    repetition: int
    units: tuple[MediaUnit, ...]
    separators: tuple[Separator, ...]
    top_edge: EdgeStyle
    bottom_edge: EdgeStyle
    side_edge: EdgeStyle
    caption: Caption
    warnings: tuple[LayoutWarning, ...] = ()
    finished_format: FinishedFormat | None = None

    @property
    def stack_height(self) -> float:
        return self.repetition * self.liner_height

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)
