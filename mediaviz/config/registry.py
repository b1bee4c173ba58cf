"""
Geometry configuration: loads every layout constant from YAML at startup,
validates the tables, and exposes them as frozen dataclasses.

The configuration is a module-level singleton; call get_config() to obtain
it. All tables are loaded and validated once at import time. Nothing writes
to the configuration after startup.

Tables
------
units.yaml     -- pixel density, rounding, default and maximum linear values
layout.yaml    -- repetition thresholds, container padding, caption
features.yaml  -- notch, slot, black mark and jewelry outline dimensions
palette.yaml   -- renderer colours
"""

from __future__ import annotations

import re
from pathlib import Path

import yaml

from .types import (
    BlackMarkSettings,
    CaptionSettings,
    JewelrySettings,
    NotchSettings,
    PaddingSettings,
    Palette,
    RepetitionSettings,
    SlotSettings,
    UnitSettings,
)

_DATA_DIR = Path(__file__).parent / "data"

_COLOUR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class GeometryConfig:
    """
    Immutable set of layout constants.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_config() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        self._load_all()
        self._validate()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"malformed configuration table {filename}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"configuration table {filename} must be a mapping")
        return data

    def _load_all(self) -> None:
        try:
            self._load_units()
            self._load_layout()
            self._load_features()
            self._load_palette()
        except (KeyError, TypeError) as exc:
            raise ValueError(f"configuration table is missing or mistyped: {exc}") from exc

    def _load_units(self) -> None:
        data = self._load_yaml("units.yaml")["units"]
        self.units = UnitSettings(
            pixels_per_inch=float(data["pixels_per_inch"]),
            rounding_places=int(data["rounding_places"]),
            default_linear_in=float(data["default_linear_in"]),
            max_dimension_in=float(data["max_dimension_in"]),
        )

    def _load_layout(self) -> None:
        data = self._load_yaml("layout.yaml")
        self.repetition = RepetitionSettings(
            thresholds_in=tuple(float(t) for t in data["repetition"]["thresholds_in"]),
        )
        padding = data["padding"]
        self.padding = PaddingSettings(
            horizontal_px=float(padding["horizontal_px"]),
            top_px=float(padding["top_px"]),
            bottom_narrow_px=float(padding["bottom_narrow_px"]),
            bottom_wide_px=float(padding["bottom_wide_px"]),
            narrow_width_px=float(padding["narrow_width_px"]),
        )
        caption = data["caption"]
        self.caption = CaptionSettings(
            text=" ".join(str(caption["text"]).split()),
            font_size_px=float(caption["font_size_px"]),
            line_height_px=float(caption["line_height_px"]),
            bottom_offset_px=float(caption["bottom_offset_px"]),
        )

    def _load_features(self) -> None:
        data = self._load_yaml("features.yaml")
        self.notch = NotchSettings(
            depth_px=float(data["notch"]["depth_px"]),
            height_px=float(data["notch"]["height_px"]),
        )
        self.slot = SlotSettings(
            width_px=float(data["slot"]["width_px"]),
            height_px=float(data["slot"]["height_px"]),
        )
        self.black_mark = BlackMarkSettings(
            height_px=float(data["black_mark"]["height_px"]),
            offset_px=float(data["black_mark"]["offset_px"]),
        )
        jewelry = data["jewelry"]
        self.jewelry = JewelrySettings(
            inset_px=float(jewelry["inset_px"]),
            outline=tuple((float(fx), float(fy)) for fx, fy in jewelry["outline"]),
        )

    def _load_palette(self) -> None:
        data = self._load_yaml("palette.yaml")["palette"]
        self.palette = Palette(
            container_fill=data["container_fill"],
            container_border=data["container_border"],
            liner_fill=data["liner_fill"],
            tag_fill=data["tag_fill"],
            label_fill=data["label_fill"],
            stroke=data["stroke"],
            stroke_width=float(data["stroke_width"]),
            caption_fill=data["caption_fill"],
            mark_fill=data["mark_fill"],
        )

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        """
        Run at startup. Raises ValueError listing all problems found if any
        table holds a value the engine cannot use.
        """
        errors: list[str] = []

        if self.units.pixels_per_inch <= 0:
            errors.append("units.pixels_per_inch must be positive")
        if self.units.rounding_places < 0:
            errors.append("units.rounding_places must not be negative")
        if self.units.default_linear_in < 0:
            errors.append("units.default_linear_in must not be negative")
        if self.units.max_dimension_in <= 0:
            errors.append("units.max_dimension_in must be positive")

        thresholds = self.repetition.thresholds_in
        if not thresholds:
            errors.append("repetition.thresholds_in must not be empty")
        if any(t <= 0 for t in thresholds):
            errors.append("repetition.thresholds_in must all be positive")
        # Strictly descending keeps the repeat count non-increasing in length
        if any(a <= b for a, b in zip(thresholds, thresholds[1:])):
            errors.append(f"repetition.thresholds_in must be strictly descending, got {thresholds}")

        for name in ("horizontal_px", "top_px", "bottom_narrow_px", "bottom_wide_px"):
            if getattr(self.padding, name) < 0:
                errors.append(f"padding.{name} must not be negative")

        if not self.caption.text:
            errors.append("caption.text must not be empty")
        if self.caption.font_size_px <= 0 or self.caption.line_height_px <= 0:
            errors.append("caption font size and line height must be positive")

        for section, values in (
            ("notch", (self.notch.depth_px, self.notch.height_px)),
            ("slot", (self.slot.width_px, self.slot.height_px)),
            ("black_mark", (self.black_mark.height_px,)),
        ):
            if any(v <= 0 for v in values):
                errors.append(f"{section} dimensions must be positive")
        if self.black_mark.offset_px < 0:
            errors.append("black_mark.offset_px must not be negative")

        if self.jewelry.inset_px < 0:
            errors.append("jewelry.inset_px must not be negative")
        if len(self.jewelry.outline) < 3:
            errors.append("jewelry.outline needs at least 3 points")
        for fx, fy in self.jewelry.outline:
            if not (0.0 <= fx <= 1.0 and 0.0 <= fy <= 1.0):
                errors.append(f"jewelry.outline point ({fx}, {fy}) lies outside the unit square")

        for name in (
            "container_fill",
            "container_border",
            "liner_fill",
            "tag_fill",
            "label_fill",
            "stroke",
            "caption_fill",
            "mark_fill",
        ):
            value = getattr(self.palette, name)
            if not isinstance(value, str) or not _COLOUR_RE.match(value):
                errors.append(f"palette.{name} is not a hex colour: {value!r}")
        if self.palette.stroke_width <= 0:
            errors.append("palette.stroke_width must be positive")

        if errors:
            raise ValueError(
                "Geometry configuration validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Loaded eagerly at import time; read-only after construction.

_config: GeometryConfig = GeometryConfig()


def get_config() -> GeometryConfig:
    """Return the module-level configuration singleton."""
    return _config
