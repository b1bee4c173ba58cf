"""planner: repetition planning public API."""

from mediaviz.planner.repetition import plan_repetition, thresholds_for

__all__ = ["plan_repetition", "thresholds_for"]
