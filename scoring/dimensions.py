"""Outfit dimension scoring: color harmony, style match, brand cohesion,
price balance and season fit over a set of items.

Each scorer returns a float in [0, 1]. The ranking composite and the
human-readable reasoning are built from the resulting breakdown.
"""
from __future__ import annotations

from itertools import combinations
from typing import Callable, List, Optional, Sequence

from config import (
    ALL_SEASONS,
    DEFAULT_STYLE,
    MAX_TIER_VARIANCE,
    NEUTRAL_SCORE,
    OUTFIT_WEIGHTS,
    REASONING_BRAND,
    REASONING_GOOD,
    REASONING_PRICE,
    REASONING_STRONG,
)
from scoring.compatibility import brand_tier, color_harmony, style_compatibility
from scoring.models import Product, ScoreBreakdown


def _pairwise_mean(values: List[str], lookup: Callable[[str, str], float]) -> float:
    scores = [lookup(a, b) for a, b in combinations(values, 2)]
    if not scores:
        return NEUTRAL_SCORE
    return sum(scores) / len(scores)


def score_color_harmony(items: Sequence[Product]) -> float:
    """Mean color-matrix score over all unordered item pairs."""
    return _pairwise_mean([i.color_family for i in items], color_harmony)


def score_style_match(items: Sequence[Product]) -> float:
    """Mean style-compatibility score over all unordered item pairs."""
    return _pairwise_mean([i.style for i in items], style_compatibility)


def score_brand_cohesion(items: Sequence[Product]) -> float:
    """Lower spread of brand tiers means a more cohesive look."""
    tiers = [brand_tier(i.brand_name) for i in items]
    if not tiers:
        return NEUTRAL_SCORE
    avg = sum(tiers) / len(tiers)
    variance = sum((t - avg) ** 2 for t in tiers) / len(tiers)
    return max(0.0, 1.0 - variance / MAX_TIER_VARIANCE)


def score_price_balance(items: Sequence[Product]) -> float:
    prices = [i.lowest_price for i in items if i.lowest_price > 0]
    if not prices:
        return NEUTRAL_SCORE
    avg = sum(prices) / len(prices)
    # variance of deviations relative to the mean price
    variance = sum(((p - avg) / avg) ** 2 for p in prices) / len(prices)
    return max(0.0, 1.0 - variance)


def score_season_fit(items: Sequence[Product], season: Optional[str] = None) -> float:
    if not season or season == ALL_SEASONS:
        return 1.0
    if not items:
        return NEUTRAL_SCORE
    matches = sum(1 for i in items if i.season in (ALL_SEASONS, season))
    return matches / len(items)


def build_score_breakdown(items: Sequence[Product], season: Optional[str] = None) -> ScoreBreakdown:
    return ScoreBreakdown(
        color_harmony=score_color_harmony(items),
        style_match=score_style_match(items),
        brand_cohesion=score_brand_cohesion(items),
        price_balance=score_price_balance(items),
        season_fit=score_season_fit(items, season),
    )


def composite_score(breakdown: ScoreBreakdown) -> float:
    """Weighted aggregate used only to rank outfits, never shown to callers."""
    return (
        OUTFIT_WEIGHTS["color_harmony"] * breakdown.color_harmony
        + OUTFIT_WEIGHTS["style_match"] * breakdown.style_match
        + OUTFIT_WEIGHTS["brand_cohesion"] * breakdown.brand_cohesion
        + OUTFIT_WEIGHTS["price_balance"] * breakdown.price_balance
        + OUTFIT_WEIGHTS["season_fit"] * breakdown.season_fit
    )


def build_reasoning(breakdown: ScoreBreakdown, items: Sequence[Product]) -> str:
    reasons: List[str] = []

    if breakdown.color_harmony >= REASONING_STRONG:
        dominant = list(dict.fromkeys(i.color_family for i in items))[:2]
        reasons.append(
            f"Excellent color harmony with {' and '.join(dominant)} creating a cohesive palette"
        )
    elif breakdown.color_harmony >= REASONING_GOOD:
        reasons.append("Well-balanced color coordination throughout")

    if breakdown.style_match >= REASONING_STRONG:
        style = items[0].style if items else DEFAULT_STYLE
        reasons.append(f"Strong {style} aesthetic unity")
    elif breakdown.style_match >= REASONING_GOOD:
        reasons.append("Versatile style mix that transitions well")

    if breakdown.brand_cohesion >= REASONING_BRAND:
        reasons.append("Matched brand positioning for a polished look")

    if breakdown.price_balance >= REASONING_PRICE:
        reasons.append("Balanced investment across all pieces")

    if not reasons:
        return "A versatile combination suitable for various occasions."
    return ". ".join(reasons) + "."
