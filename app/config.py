from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens
# - Centralized here so CSS (components/styles.py) and Plotly (figures/theme.py) agree.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F2F2F7",     # page background (grouped list)
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",        # card surface
    # Accents
    "accent_primary": "#0A84FF",
    "accent_secondary": "#409CFF",  # hover
    "navy_900": "#1C1C1E",
    "navy_800": "#2C2C2E",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "rgba(60, 60, 67, 0.72)",
    "border_color": "#E5E5EA",
    "grid": "rgba(60, 60, 67, 0.12)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 12,
    # Status colors
    "success": "#34C759",
    "warning": "#FF9500",
    "danger": "#FF3B30",
}

# Named palette used as color-picker defaults across the charts.
CHART_COLORS = {
    "blue": "#0A84FF",
    "orange": "#FF9500",
    "red": "#FF3B30",
    "green": "#34C759",
    "yellow": "#FFCC00",
    "purple": "#AF52DE",
    "pink": "#FF2D55",
    "teal": "#30B0C7",
    "gray": "#8E8E93",
    "black": "#000000",
    "white": "#FFFFFF",
}

PREVIEW_CHART_HEIGHT = 100
DETAIL_CHART_HEIGHT = 300

CATEGORY_ALL = "all"


@dataclass(frozen=True)
class AppConfig:
    # Gallery
    default_category: str
    random_seed: Optional[int]

    # Microphone monitor
    mic_sample_interval_s: float
    mic_window: int
    mic_min_decibels: float

    # Logging
    log_level: str
    log_dir: str

    @property
    def preview_height(self) -> int:
        return PREVIEW_CHART_HEIGHT

    @property
    def detail_height(self) -> int:
        return DETAIL_CHART_HEIGHT


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getenv_int(name: str, default: Optional[int]) -> Optional[int]:
    v = _getenv(name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {v!r}") from None


def _getenv_float(name: str, default: float) -> float:
    v = _getenv(name)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {v!r}") from None


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Every setting has a default, so the gallery runs with no env at all
    """
    load_dotenv(override=False)

    interval = _getenv_float("MIC_SAMPLE_INTERVAL_S", 0.1)
    window = _getenv_int("MIC_WINDOW", 30)
    if interval <= 0:
        raise ValueError("MIC_SAMPLE_INTERVAL_S must be positive")
    if window < 1:
        raise ValueError("MIC_WINDOW must be at least 1")

    return AppConfig(
        default_category=(_getenv("GALLERY_DEFAULT_CATEGORY", CATEGORY_ALL) or CATEGORY_ALL).lower(),
        random_seed=_getenv_int("GALLERY_RANDOM_SEED", None),
        mic_sample_interval_s=interval,
        mic_window=window,
        mic_min_decibels=_getenv_float("MIC_MIN_DECIBELS", -80.0),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
        log_dir=_getenv("LOG_DIR", "logs") or "logs",
    )
