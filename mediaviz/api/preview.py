"""
Public preview API.

preview() lays out a MediaSpec and renders it. It returns a PreviewReport
whether or not layout and rendering succeed, so a UI event handler can show
the problem instead of crashing. preview_from_mapping() does the same for raw
form values, reporting parse failures as errors.

The default renderer is SvgRenderer. For tests, inject any object satisfying
the Renderer Protocol.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from mediaviz.config import GeometryConfig
from mediaviz.layout.engine import layout
from mediaviz.render.svg import Renderer, SvgRenderer
from mediaviz.schemas.diagnostics import LayoutWarning, ValidationError
from mediaviz.schemas.layout import LayoutResult
from mediaviz.schemas.media import MediaSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviewReport:
    """Outcome of previewing a media specification.

    Attributes:
        passed: True only when both layout and rendering succeeded.
        layout: The LayoutResult, or None if the spec failed validation.
        rendering: The renderer's output, or None if layout or rendering failed.
        errors: Messages for every failure, in the order they occurred.
        warnings: Non-fatal findings from the layout (e.g. degenerate geometry).
    """

    passed: bool
    layout: LayoutResult | None
    rendering: str | None
    errors: tuple[str, ...]
    warnings: tuple[LayoutWarning, ...]


def preview(
    spec: MediaSpec,
    renderer: Renderer | None = None,
    config: GeometryConfig | None = None,
) -> PreviewReport:
    """
    Lay out and render *spec*.

    Parameters
    ----------
    spec:
        The media specification.
    renderer:
        A Renderer implementation. If None, an SvgRenderer is created.
    config:
        Optional configuration; defaults to the module singleton.

    Returns
    -------
    PreviewReport
        Always returned; never raises.  Inspect ``passed``, ``errors`` and
        ``warnings`` for details.
    """
    if renderer is None:
        renderer = SvgRenderer(config.palette if config is not None else None)

    try:
        result = layout(spec, config)
    except ValidationError as exc:
        logger.error(f"Cannot preview media: {exc}")
        return PreviewReport(
            passed=False,
            layout=None,
            rendering=None,
            errors=(str(exc),),
            warnings=(),
        )

    try:
        rendering = renderer.render(result)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Renderer failed")
        return PreviewReport(
            passed=False,
            layout=result,
            rendering=None,
            errors=(f"rendering failed: {exc}",),
            warnings=result.warnings,
        )

    return PreviewReport(
        passed=True,
        layout=result,
        rendering=rendering,
        errors=(),
        warnings=result.warnings,
    )


def preview_from_mapping(
    data: Mapping[str, Any],
    renderer: Renderer | None = None,
    config: GeometryConfig | None = None,
) -> PreviewReport:
    """Parse raw form values into a MediaSpec, then preview it."""
    try:
        spec = MediaSpec.from_mapping(data)
    except ValidationError as exc:
        logger.error(f"Cannot parse media form: {exc}")
        return PreviewReport(
            passed=False,
            layout=None,
            rendering=None,
            errors=(str(exc),),
            warnings=(),
        )
    return preview(spec, renderer, config)
