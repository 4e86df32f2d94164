"""Centralized configuration for Outfit Studio.

Single source of truth for product enums, compatibility matrices, scoring
weights, and shared constants. Every module that needs a color family, style,
season or weight should import from here.
"""
from __future__ import annotations

# ── Product enums (canonical set) ──────────────────────────────────────
# Used by: catalog validation, scoring engine, Streamlit UI, CLI.

COLOR_FAMILIES = [
    "black", "white", "gray", "navy", "brown", "beige", "cream",
    "green", "blue", "red", "pink", "purple", "orange", "multi",
]

STYLES = ["streetwear", "casual", "athletic", "formal", "luxury", "minimalist"]

SEASONS = ["winter", "spring", "summer", "fall", "all"]
ALL_SEASONS = "all"

CATEGORIES = ["tops", "bottoms", "footwear", "accessories"]

# Sets for fast lookup (used by validation and scoring)
COLOR_FAMILIES_SET = set(COLOR_FAMILIES)
STYLES_SET = set(STYLES)
SEASONS_SET = set(SEASONS)
CATEGORIES_SET = set(CATEGORIES)

BESTSELLER_TAG = "bestseller"

# ── Fallbacks ──────────────────────────────────────────────────────────

DEFAULT_COLOR_FAMILY = "black"
DEFAULT_STYLE = "casual"
DEFAULT_BRAND_TIER = 2  # mid-tier
NEUTRAL_SCORE = 0.5

# ── Color harmony matrix ───────────────────────────────────────────────
# 1 = perfect match, 0 = poor match. Complementary, analogous and neutral
# combinations score high; self-pairs are kept low ("too matchy").
COLOR_HARMONY = {
    "black":  {"black": 0.7, "white": 1.0, "gray": 0.95, "navy": 0.9, "brown": 0.8, "beige": 0.9, "cream": 0.95,
               "green": 0.8, "blue": 0.85, "red": 0.75, "pink": 0.7, "purple": 0.7, "orange": 0.7, "multi": 0.6},
    "white":  {"black": 1.0, "white": 0.6, "gray": 0.9, "navy": 0.95, "brown": 0.85, "beige": 0.9, "cream": 0.85,
               "green": 0.85, "blue": 0.9, "red": 0.85, "pink": 0.8, "purple": 0.8, "orange": 0.85, "multi": 0.7},
    "gray":   {"black": 0.95, "white": 0.9, "gray": 0.7, "navy": 0.9, "brown": 0.75, "beige": 0.85, "cream": 0.9,
               "green": 0.8, "blue": 0.85, "red": 0.7, "pink": 0.75, "purple": 0.75, "orange": 0.7, "multi": 0.6},
    "navy":   {"black": 0.9, "white": 0.95, "gray": 0.9, "navy": 0.7, "brown": 0.9, "beige": 0.95, "cream": 0.95,
               "green": 0.75, "blue": 0.8, "red": 0.7, "pink": 0.7, "purple": 0.7, "orange": 0.65, "multi": 0.6},
    "brown":  {"black": 0.8, "white": 0.85, "gray": 0.75, "navy": 0.9, "brown": 0.7, "beige": 0.95, "cream": 0.95,
               "green": 0.85, "blue": 0.75, "red": 0.65, "pink": 0.6, "purple": 0.6, "orange": 0.8, "multi": 0.6},
    "beige":  {"black": 0.9, "white": 0.9, "gray": 0.85, "navy": 0.95, "brown": 0.95, "beige": 0.7, "cream": 0.8,
               "green": 0.85, "blue": 0.85, "red": 0.7, "pink": 0.75, "purple": 0.7, "orange": 0.8, "multi": 0.65},
    "cream":  {"black": 0.95, "white": 0.85, "gray": 0.9, "navy": 0.95, "brown": 0.95, "beige": 0.8, "cream": 0.65,
               "green": 0.85, "blue": 0.85, "red": 0.75, "pink": 0.8, "purple": 0.75, "orange": 0.8, "multi": 0.65},
    "green":  {"black": 0.8, "white": 0.85, "gray": 0.8, "navy": 0.75, "brown": 0.85, "beige": 0.85, "cream": 0.85,
               "green": 0.6, "blue": 0.7, "red": 0.5, "pink": 0.55, "purple": 0.6, "orange": 0.6, "multi": 0.55},
    "blue":   {"black": 0.85, "white": 0.9, "gray": 0.85, "navy": 0.8, "brown": 0.75, "beige": 0.85, "cream": 0.85,
               "green": 0.7, "blue": 0.6, "red": 0.6, "pink": 0.65, "purple": 0.7, "orange": 0.55, "multi": 0.55},
    "red":    {"black": 0.75, "white": 0.85, "gray": 0.7, "navy": 0.7, "brown": 0.65, "beige": 0.7, "cream": 0.75,
               "green": 0.5, "blue": 0.6, "red": 0.5, "pink": 0.65, "purple": 0.6, "orange": 0.5, "multi": 0.5},
    "pink":   {"black": 0.7, "white": 0.8, "gray": 0.75, "navy": 0.7, "brown": 0.6, "beige": 0.75, "cream": 0.8,
               "green": 0.55, "blue": 0.65, "red": 0.65, "pink": 0.5, "purple": 0.7, "orange": 0.5, "multi": 0.5},
    "purple": {"black": 0.7, "white": 0.8, "gray": 0.75, "navy": 0.7, "brown": 0.6, "beige": 0.7, "cream": 0.75,
               "green": 0.6, "blue": 0.7, "red": 0.6, "pink": 0.7, "purple": 0.5, "orange": 0.5, "multi": 0.5},
    "orange": {"black": 0.7, "white": 0.85, "gray": 0.7, "navy": 0.65, "brown": 0.8, "beige": 0.8, "cream": 0.8,
               "green": 0.6, "blue": 0.55, "red": 0.5, "pink": 0.5, "purple": 0.5, "orange": 0.5, "multi": 0.55},
    "multi":  {"black": 0.6, "white": 0.7, "gray": 0.6, "navy": 0.6, "brown": 0.6, "beige": 0.65, "cream": 0.65,
               "green": 0.55, "blue": 0.55, "red": 0.5, "pink": 0.5, "purple": 0.5, "orange": 0.55, "multi": 0.4},
}

# ── Style compatibility matrix ─────────────────────────────────────────
# How well two aesthetics work together in one look (0-1).
STYLE_COMPATIBILITY = {
    "streetwear": {"streetwear": 1.0, "casual": 0.85, "athletic": 0.8, "formal": 0.3, "luxury": 0.7, "minimalist": 0.75},
    "casual":     {"streetwear": 0.85, "casual": 1.0, "athletic": 0.75, "formal": 0.5, "luxury": 0.7, "minimalist": 0.9},
    "athletic":   {"streetwear": 0.8, "casual": 0.75, "athletic": 1.0, "formal": 0.2, "luxury": 0.5, "minimalist": 0.7},
    "formal":     {"streetwear": 0.3, "casual": 0.5, "athletic": 0.2, "formal": 1.0, "luxury": 0.85, "minimalist": 0.8},
    "luxury":     {"streetwear": 0.7, "casual": 0.7, "athletic": 0.5, "formal": 0.85, "luxury": 1.0, "minimalist": 0.85},
    "minimalist": {"streetwear": 0.75, "casual": 0.9, "athletic": 0.7, "formal": 0.8, "luxury": 0.85, "minimalist": 1.0},
}

# ── Brand tiers ────────────────────────────────────────────────────────
# 1 = budget, 5 = ultra-luxury. Keys are lower-case; unknown brands fall
# back to DEFAULT_BRAND_TIER.
BRAND_TIERS = {
    # Ultra-luxury
    "jacquemus": 5, "omega": 5, "swatch x omega": 5, "amiri": 5, "balmain": 5, "gucci": 5,
    # Luxury
    "fear of god": 4, "kenzo": 4, "polo ralph lauren": 4, "yeezy": 4, "ami paris": 4,
    "karl lagerfeld": 4, "all saints": 4,
    # Premium
    "nike": 3, "adidas": 3, "new balance": 3, "on": 3, "jordan": 3, "air jordan": 3, "supreme": 3,
    # Mid-tier
    "dickies": 2, "casio": 2, "stanley": 2, "hashway": 2, "myugen": 2, "blacklist co": 2,
    "young grandpa": 2, "forfksake": 2, "denim co": 2, "basics": 2, "streetwear": 2,
    # Budget
    "nofomo": 1, "anti matter": 1, "saucy club": 1, "bearcare": 1,
}

# ── Scoring weights ────────────────────────────────────────────────────

# Per-candidate weights used while filling an outfit slot.
SELECTION_WEIGHTS = {"color": 0.40, "style": 0.35, "brand": 0.15, "bestseller": 0.10}

# Outfit-level weights used only for ranking. price_balance is reported
# but carries no weight.
OUTFIT_WEIGHTS = {
    "color_harmony": 0.35,
    "style_match": 0.30,
    "brand_cohesion": 0.20,
    "price_balance": 0.00,
    "season_fit": 0.15,
}

# Brand-tier spread that fully zeroes cohesion (tiers 1 vs 5).
MAX_TIER_VARIANCE = 4.0
# Tier gap at which the selector's proximity bonus reaches zero.
TIER_PROXIMITY_RANGE = 3.0

# ── Outfit assembly ────────────────────────────────────────────────────

DEFAULT_NUM_OUTFITS = 3
ATTEMPTS_PER_OUTFIT = 5
SELECTION_POOL_SIZE = 3  # randomized pick among the top-N candidates

# ── Reasoning thresholds ───────────────────────────────────────────────

REASONING_STRONG = 0.85
REASONING_GOOD = 0.70
REASONING_BRAND = 0.80
REASONING_PRICE = 0.80

# ── UI defaults ────────────────────────────────────────────────────────

PRODUCTS_PER_PAGE = 8
CURRENCY_SYMBOL = "₹"
SCORE_LABELS = [(0.85, "Excellent Match"), (0.70, "Great Match"), (0.0, "Good Match")]

# ── Environment ────────────────────────────────────────────────────────

CATALOG_PATH_ENV = "OUTFIT_STUDIO_CATALOG"
