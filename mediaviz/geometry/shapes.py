"""
Shape builder: the label silhouette drawn on a liner.

build_shape returns a Silhouette anchored at the origin; the layout engine
centres it inside the liner. Sizes are used exactly as given: a zero or
negative width or height (margins larger than the liner) propagates into the
silhouette so the caller can detect it.

Shapes
------
SQUARE_RECTANGLE  -- rectangle rounded by the spec's corner radius
OTHER             -- same geometry as SQUARE_RECTANGLE, tagged as OTHER
CIRCULAR_OVAL     -- rectangle rounded by half its smaller side
JEWELRY_RAT_TAIL  -- double-chevron polygon with an inset copy forming a ring
"""

from __future__ import annotations

from mediaviz.config import GeometryConfig, get_config
from mediaviz.schemas.layout import Point, Silhouette
from mediaviz.schemas.media import Shape


def build_shape(
    shape: Shape,
    label_width: float,
    label_height: float,
    corner_radius_px: float,
    config: GeometryConfig | None = None,
) -> Silhouette:
    """
    Build the silhouette for *shape* at the origin.

    Parameters
    ----------
    shape:
        The label shape.
    label_width, label_height:
        Label size in pixels (liner size minus margins and gaps).
    corner_radius_px:
        Corner radius in pixels; ignored by CIRCULAR_OVAL and JEWELRY_RAT_TAIL.

    Returns
    -------
    Silhouette
        Positioned at (0, 0).
    """
    cfg = config or get_config()

    match shape:
        case Shape.SQUARE_RECTANGLE:
            return _rounded(shape, label_width, label_height, corner_radius_px)
        case Shape.OTHER:
            # No distinct geometry is defined for OTHER yet
            return _rounded(shape, label_width, label_height, corner_radius_px)
        case Shape.CIRCULAR_OVAL:
            return _rounded(shape, label_width, label_height, 0.5 * min(label_width, label_height))
        case Shape.JEWELRY_RAT_TAIL:
            return _jewelry_silhouette(label_width, label_height, cfg)
    raise ValueError(f"unsupported label shape: {shape!r}")


def scale_outline(
    fractions: tuple[tuple[float, float], ...],
    x: float,
    y: float,
    width: float,
    height: float,
) -> tuple[Point, ...]:
    """Map fractional (0..1) outline points onto a box at (x, y)."""
    return tuple(Point(x + fx * width, y + fy * height) for fx, fy in fractions)


def _rounded(shape: Shape, width: float, height: float, radius: float) -> Silhouette:
    return Silhouette(shape=shape, x=0.0, y=0.0, width=width, height=height, corner_radius=radius)


def _jewelry_silhouette(width: float, height: float, cfg: GeometryConfig) -> Silhouette:
    fractions = cfg.jewelry.outline
    inset_px = cfg.jewelry.inset_px
    inner_width = width - 2 * inset_px
    inner_height = height - 2 * inset_px

    inset = Silhouette(
        shape=Shape.JEWELRY_RAT_TAIL,
        x=inset_px,
        y=inset_px,
        width=inner_width,
        height=inner_height,
        outline=scale_outline(fractions, inset_px, inset_px, inner_width, inner_height),
    )
    return Silhouette(
        shape=Shape.JEWELRY_RAT_TAIL,
        x=0.0,
        y=0.0,
        width=width,
        height=height,
        outline=scale_outline(fractions, 0.0, 0.0, width, height),
        inset=inset,
    )
