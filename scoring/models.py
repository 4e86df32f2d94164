"""Data types shared by the catalog, the scoring engine and the presentation layer.

Products are immutable once loaded. Score breakdowns and outfits are derived
per request and never persisted.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Tuple

from config import ALL_SEASONS, DEFAULT_COLOR_FAMILY, DEFAULT_NUM_OUTFITS, DEFAULT_STYLE


def _coerce_price(value: Any) -> int:
    """Whole-rupee price; anything unparseable counts as sold out."""
    try:
        return int(float(value or 0))
    except (TypeError, ValueError, OverflowError):
        return 0


def _coerce_tags(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(tag) for tag in value)


@dataclass(frozen=True)
class Product:
    sku_id: str
    title: str = ""
    brand_name: str = ""
    featured_image: str = ""
    category: str = ""
    sector: str = ""
    sub_category: str = ""
    lowest_price: int = 0  # 0 means sold out / unavailable
    color_family: str = DEFAULT_COLOR_FAMILY
    style: str = DEFAULT_STYLE
    season: str = ALL_SEASONS
    tags: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Product":
        """Build a product from a catalog record, filling scoring defaults."""
        category = raw.get("category") or raw.get("sector") or ""
        return cls(
            sku_id=str(raw.get("sku_id", "")),
            title=raw.get("title", ""),
            brand_name=raw.get("brand_name", ""),
            featured_image=raw.get("featured_image", ""),
            category=category,
            sector=raw.get("sector") or category,
            sub_category=raw.get("sub_category", ""),
            lowest_price=_coerce_price(raw.get("lowest_price")),
            color_family=raw.get("color_family") or DEFAULT_COLOR_FAMILY,
            style=raw.get("style") or DEFAULT_STYLE,
            season=raw.get("season") or ALL_SEASONS,
            tags=_coerce_tags(raw.get("tags")),
        )

    @classmethod
    def placeholder(cls) -> "Product":
        """Empty product returned when a base product id does not resolve."""
        return cls(sku_id="")

    @property
    def in_stock(self) -> bool:
        return self.lowest_price > 0

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["tags"] = list(self.tags)
        return out


@dataclass(frozen=True)
class ScoreBreakdown:
    color_harmony: float
    style_match: float
    brand_cohesion: float
    price_balance: float
    season_fit: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass
class Outfit:
    id: str
    top: Product
    bottom: Product
    footwear: Product
    accessories: List[Product]
    match_score: float
    score_breakdown: ScoreBreakdown
    reasoning: str
    total_price: int

    @property
    def items(self) -> Iterator[Product]:
        yield self.top
        yield self.bottom
        yield self.footwear
        yield from self.accessories

    @property
    def combination_key(self) -> FrozenSet[str]:
        return frozenset((self.top.sku_id, self.bottom.sku_id, self.footwear.sku_id))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "top": self.top.to_dict(),
            "bottom": self.bottom.to_dict(),
            "footwear": self.footwear.to_dict(),
            "accessories": [a.to_dict() for a in self.accessories],
            "match_score": self.match_score,
            "score_breakdown": self.score_breakdown.to_dict(),
            "reasoning": self.reasoning,
            "total_price": self.total_price,
        }


@dataclass(frozen=True)
class RecommendationRequest:
    base_product_id: str
    preferred_style: Optional[str] = None
    season: Optional[str] = None  # None or "all" means no seasonal constraint
    num_outfits: Optional[int] = DEFAULT_NUM_OUTFITS

    @property
    def outfit_count(self) -> int:
        """Requested count, with None/0 falling back to the default."""
        return max(self.num_outfits or DEFAULT_NUM_OUTFITS, 0)


@dataclass
class RecommendationResponse:
    outfits: List[Outfit] = field(default_factory=list)
    base_product: Product = field(default_factory=Product.placeholder)
    processing_time_ms: float = 0.0
    cache_hit: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outfits": [o.to_dict() for o in self.outfits],
            "base_product": self.base_product.to_dict(),
            "processing_time_ms": self.processing_time_ms,
            "cache_hit": self.cache_hit,
        }
