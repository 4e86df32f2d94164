"""Compatibility lookups over the static matrices defined in config.py.

Every color-family pair and style pair resolves to a score, falling back to
a neutral 0.5 for values outside the enums.
"""
from __future__ import annotations

from typing import Optional

from config import (
    BRAND_TIERS,
    COLOR_HARMONY,
    DEFAULT_BRAND_TIER,
    DEFAULT_COLOR_FAMILY,
    DEFAULT_STYLE,
    NEUTRAL_SCORE,
    STYLE_COMPATIBILITY,
)


def color_harmony(first: Optional[str], second: Optional[str]) -> float:
    row = COLOR_HARMONY.get(first or DEFAULT_COLOR_FAMILY, {})
    return row.get(second or DEFAULT_COLOR_FAMILY, NEUTRAL_SCORE)


def style_compatibility(first: Optional[str], second: Optional[str]) -> float:
    row = STYLE_COMPATIBILITY.get(first or DEFAULT_STYLE, {})
    return row.get(second or DEFAULT_STYLE, NEUTRAL_SCORE)


def brand_tier(brand_name: Optional[str]) -> int:
    """Tier 1 (budget) to 5 (ultra-luxury); case-insensitive, unknown -> mid-tier."""
    return BRAND_TIERS.get((brand_name or "").strip().lower(), DEFAULT_BRAND_TIER)
