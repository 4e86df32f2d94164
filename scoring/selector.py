"""Item selection: picks the next piece for a partially built outfit.

Candidates are scored against the items already chosen (color, style, brand
tier proximity, bestseller bonus), then one is drawn at random from the top
few so repeated requests produce varied looks.
"""
from __future__ import annotations

import random
from typing import Optional, Sequence

from config import BESTSELLER_TAG, SELECTION_POOL_SIZE, SELECTION_WEIGHTS, TIER_PROXIMITY_RANGE
from scoring.compatibility import brand_tier, color_harmony, style_compatibility
from scoring.models import Product


def selection_score(
    candidate: Product,
    selected: Sequence[Product],
    preferred_style: Optional[str] = None,
) -> float:
    score = 0.0

    if selected:
        color = sum(color_harmony(candidate.color_family, s.color_family) for s in selected) / len(selected)
        score += SELECTION_WEIGHTS["color"] * color
    else:
        score += SELECTION_WEIGHTS["color"]

    if selected:
        style = sum(style_compatibility(candidate.style, s.style) for s in selected) / len(selected)
        score += SELECTION_WEIGHTS["style"] * style
    elif preferred_style:
        score += SELECTION_WEIGHTS["style"] * style_compatibility(candidate.style, preferred_style)
    else:
        score += SELECTION_WEIGHTS["style"]

    if selected:
        avg_tier = sum(brand_tier(s.brand_name) for s in selected) / len(selected)
        tier_gap = abs(avg_tier - brand_tier(candidate.brand_name))
        score += SELECTION_WEIGHTS["brand"] * max(0.0, 1.0 - tier_gap / TIER_PROXIMITY_RANGE)
    else:
        score += SELECTION_WEIGHTS["brand"]

    if BESTSELLER_TAG in candidate.tags:
        score += SELECTION_WEIGHTS["bestseller"]

    return score


def select_best_item(
    candidates: Sequence[Product],
    selected: Sequence[Product],
    preferred_style: Optional[str] = None,
    rng=None,
) -> Optional[Product]:
    """Return one of the top-scoring candidates, or None for an empty pool.

    ``rng`` is anything with a ``randrange(n)`` method; defaults to the
    ``random`` module.
    """
    if not candidates:
        return None
    rng = rng or random

    scored = sorted(
        candidates,
        key=lambda c: selection_score(c, selected, preferred_style),
        reverse=True,
    )
    top = scored[:SELECTION_POOL_SIZE]
    return top[rng.randrange(len(top))]
