"""
Error and warning types shared by the converter, the layout engine and the
preview API.

Errors are fatal to the call that raised them and produce no partial result.
Warnings are non-fatal values: the engine still returns its result and
records the warning alongside it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValidationError(ValueError):
    """A media specification is incomplete or holds an unusable value."""


class WarningKind(str, Enum):
    DEGENERATE_GEOMETRY = "DEGENERATE_GEOMETRY"  # inset size is zero or negative
    UNIT_MISMATCH = "UNIT_MISMATCH"  # unrecognised unit token; conversion skipped


@dataclass(frozen=True)
class LayoutWarning:
    """A single non-fatal finding about a media specification."""

    kind: WarningKind
    message: str
