"""layout: LayoutEngine public API."""

from mediaviz.layout.engine import layout, split_caption, validate_spec

__all__ = ["layout", "split_caption", "validate_spec"]
