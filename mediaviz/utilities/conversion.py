"""
Numeric conversion between inches and millimeters.

All functions are pure: no side effects, no state.
"""

from __future__ import annotations

MM_PER_INCH: float = 25.4


def inches_to_mm(inches: float) -> float:
    """Convert inches to millimeters."""
    return inches * MM_PER_INCH


def mm_to_inches(mm: float) -> float:
    """Convert millimeters to inches."""
    return mm / MM_PER_INCH


def inches_to_mm_rounded(inches: float, places: int) -> float:
    """Convert inches to millimeters, rounded to *places* decimals."""
    return round(inches_to_mm(inches), places)


def mm_to_inches_rounded(mm: float, places: int) -> float:
    """Convert millimeters to inches, rounded to *places* decimals."""
    return round(mm_to_inches(mm), places)
