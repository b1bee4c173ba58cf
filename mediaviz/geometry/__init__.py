"""geometry: label silhouettes and tag sensing cutouts."""

from mediaviz.geometry.sensing import annotated_edges, build_overlay
from mediaviz.geometry.shapes import build_shape, scale_outline

__all__ = ["annotated_edges", "build_overlay", "build_shape", "scale_outline"]
