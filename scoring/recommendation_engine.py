"""Recommendation engine: builds complete outfits around a single base product.

Pipeline per request:
1. Resolve the base product and split the in-stock catalog into slot pools.
2. Repeatedly fill the top / bottom / footwear slots with the item selector,
   skipping incomplete or duplicate combinations, then add 1-2 accessories.
3. Score each outfit across five dimensions (scoring/dimensions.py).
4. Rank by the weighted composite, cap to the requested count and package
   the response with timing metadata.

The displayed ``match_score`` is the style-match dimension alone; ranking
uses the composite, which is kept out of the public Outfit type.

Weights and attempt limits are defined in config.py (single source of truth).
"""
from __future__ import annotations

import logging
import time
import uuid
from typing import Dict, FrozenSet, List, NamedTuple, Optional, Set

from config import ATTEMPTS_PER_OUTFIT
from components.product_catalog import CatalogProvider, get_default_catalog
from scoring.dimensions import build_reasoning, build_score_breakdown, composite_score
from scoring.models import Outfit, Product, RecommendationRequest, RecommendationResponse
from scoring.selector import select_best_item

logger = logging.getLogger(__name__)

SLOT_ORDER = ("tops", "bottoms", "footwear")
ACCESSORIES = "accessories"


class RankedOutfit(NamedTuple):
    outfit: Outfit
    sort_score: float


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def _generate_outfit_id() -> str:
    return f"outfit_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def _build_pools(catalog: CatalogProvider) -> Dict[str, List[Product]]:
    return {
        category: [p for p in catalog.get_products_by_category(category) if p.in_stock]
        for category in (*SLOT_ORDER, ACCESSORIES)
    }


def _base_slot(base: Product, pools: Dict[str, List[Product]]) -> Optional[str]:
    """Pool the base product belongs to, checked tops -> bottoms -> footwear -> accessories."""
    for category in (*SLOT_ORDER, ACCESSORIES):
        if any(p.sku_id == base.sku_id for p in pools[category]):
            return category
    return None


def _available(pool: List[Product], chosen: List[Product]) -> List[Product]:
    chosen_ids = {p.sku_id for p in chosen}
    return [p for p in pool if p.sku_id not in chosen_ids]


def _build_outfit(
    attempt: int,
    base: Product,
    base_slot: Optional[str],
    pools: Dict[str, List[Product]],
    request: RecommendationRequest,
    seen: Set[FrozenSet[str]],
    rng,
) -> Optional[RankedOutfit]:
    slots: Dict[str, Product] = {}
    selected: List[Product] = []
    accessories: List[Product] = []

    if base_slot in SLOT_ORDER:
        slots[base_slot] = base
        selected.append(base)
    elif base_slot == ACCESSORIES:
        accessories.append(base)
        selected.append(base)

    for category in SLOT_ORDER:
        if category in slots:
            continue
        item = select_best_item(
            _available(pools[category], selected), selected, request.preferred_style, rng=rng
        )
        if item is None:
            logger.debug("Attempt %d: no candidate left for %s", attempt, category)
            return None
        slots[category] = item
        selected.append(item)

    top, bottom, footwear = slots["tops"], slots["bottoms"], slots["footwear"]
    key = frozenset((top.sku_id, bottom.sku_id, footwear.sku_id))
    if key in seen:
        logger.debug("Attempt %d: duplicate combination %s", attempt, sorted(key))
        return None
    seen.add(key)

    # even attempts carry one accessory, odd attempts two
    num_accessories = 1 + attempt % 2
    mandatory = [top, bottom, footwear]
    while len(accessories) < num_accessories:
        accessory = select_best_item(
            _available(pools[ACCESSORIES], accessories),
            mandatory + accessories,
            request.preferred_style,
            rng=rng,
        )
        if accessory is None:
            break
        accessories.append(accessory)

    items = mandatory + accessories
    breakdown = build_score_breakdown(items, request.season)
    outfit = Outfit(
        id=_generate_outfit_id(),
        top=top,
        bottom=bottom,
        footwear=footwear,
        accessories=accessories,
        match_score=round(breakdown.style_match, 2),
        score_breakdown=breakdown,
        reasoning=build_reasoning(breakdown, items),
        total_price=sum(i.lowest_price for i in items),
    )
    return RankedOutfit(outfit, composite_score(breakdown))


def rank_outfits(candidates: List[RankedOutfit], limit: int) -> List[Outfit]:
    ordered = sorted(candidates, key=lambda r: r.sort_score, reverse=True)
    return [r.outfit for r in ordered[:limit]]


def generate_outfit_recommendations(
    request: RecommendationRequest,
    catalog: Optional[CatalogProvider] = None,
    rng=None,
) -> RecommendationResponse:
    start = time.perf_counter()
    catalog = catalog if catalog is not None else get_default_catalog()

    base = catalog.get_product_by_id(request.base_product_id)
    if base is None:
        logger.warning("Unknown base product id %r", request.base_product_id)
        return RecommendationResponse(
            outfits=[],
            base_product=Product.placeholder(),
            processing_time_ms=_elapsed_ms(start),
            cache_hit=False,
        )

    pools = _build_pools(catalog)
    base_slot = _base_slot(base, pools)
    num_outfits = request.outfit_count

    candidates: List[RankedOutfit] = []
    seen: Set[FrozenSet[str]] = set()
    attempt = 0
    while attempt < num_outfits * ATTEMPTS_PER_OUTFIT and len(candidates) < num_outfits:
        ranked = _build_outfit(attempt, base, base_slot, pools, request, seen, rng)
        if ranked is not None:
            candidates.append(ranked)
        attempt += 1

    outfits = rank_outfits(candidates, num_outfits)
    elapsed = round(_elapsed_ms(start), 2)
    logger.info(
        "Built %d/%d outfits for %s in %d attempts (%.2f ms)",
        len(outfits), num_outfits, base.sku_id, attempt, elapsed,
    )
    return RecommendationResponse(
        outfits=outfits,
        base_product=base,
        processing_time_ms=elapsed,
        cache_hit=False,
    )


def get_base_product_options(catalog: Optional[CatalogProvider] = None) -> List[Product]:
    """All in-stock products, in catalog order."""
    catalog = catalog if catalog is not None else get_default_catalog()
    return [p for p in catalog.products if p.in_stock]
