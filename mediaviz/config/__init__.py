from .registry import GeometryConfig, get_config
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

__all__ = [
    # Settings entries (frozen, loaded from YAML)
    "UnitSettings",
    "RepetitionSettings",
    "PaddingSettings",
    "CaptionSettings",
    "NotchSettings",
    "SlotSettings",
    "BlackMarkSettings",
    "JewelrySettings",
    "Palette",
    # Configuration
    "GeometryConfig",
    "get_config",
]
