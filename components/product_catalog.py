"""Product catalog: loads, validates, and indexes products for the outfit engine.

The catalog is a static JSON list (data/products.json by default, or the file
named by the OUTFIT_STUDIO_CATALOG environment variable). It is read once and
never mutated; the engine only queries it by category and by sku id.

Validation is non-blocking: unknown enum values and duplicate ids are logged
so the scoring engine still sees every usable product.
"""
from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from config import CATALOG_PATH_ENV, CATEGORIES_SET, COLOR_FAMILIES_SET, SEASONS_SET, STYLES_SET
from scoring.models import Product

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

_REQUIRED_FIELDS = ("sku_id", "title", "brand_name")


class CatalogProvider:
    """Read-only view over a list of products, in catalog order."""

    def __init__(self, products: Sequence[Product]):
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id: Dict[str, Product] = {}
        for product in self._products:
            self._by_id.setdefault(product.sku_id, product)

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    def __len__(self) -> int:
        return len(self._products)

    def get_products_by_category(self, category: str) -> List[Product]:
        # category already falls back to sector, so each product sits in one pool
        return [p for p in self._products if p.category == category]

    def get_product_by_id(self, sku_id: str) -> Optional[Product]:
        return self._by_id.get(sku_id)


def _validate_product(raw: Dict, index: int) -> List[str]:
    """Validate a raw record against the canonical schema. Returns list of warnings."""
    warnings = []
    name = raw.get("sku_id") or f"product[{index}]"

    for field in _REQUIRED_FIELDS:
        if not raw.get(field):
            warnings.append(f"{name}: missing required field '{field}'")

    category = raw.get("category") or raw.get("sector")
    if category not in CATEGORIES_SET:
        warnings.append(f"{name}: unknown category '{category}'")

    color = raw.get("color_family")
    if color is not None and color not in COLOR_FAMILIES_SET:
        warnings.append(f"{name}: unknown color_family '{color}'")

    style = raw.get("style")
    if style is not None and style not in STYLES_SET:
        warnings.append(f"{name}: unknown style '{style}'")

    season = raw.get("season")
    if season is not None and season not in SEASONS_SET:
        warnings.append(f"{name}: unknown season '{season}'")

    price = raw.get("lowest_price", 0)
    if not isinstance(price, (int, float)) or price < 0:
        warnings.append(f"{name}: invalid lowest_price {price!r}")

    tags = raw.get("tags")
    if tags is not None and not isinstance(tags, list):
        warnings.append(f"{name}: tags should be a list, got {type(tags).__name__}")

    return warnings


def build_catalog(records: List[Dict]) -> CatalogProvider:
    all_warnings = []
    products: List[Product] = []
    seen = set()

    for i, raw in enumerate(records):
        all_warnings.extend(_validate_product(raw, i))
        product = Product.from_dict(raw)
        if product.sku_id in seen:
            all_warnings.append(f"{product.sku_id}: duplicate sku_id, keeping first occurrence")
            continue
        seen.add(product.sku_id)
        products.append(product)

    if all_warnings:
        logger.warning("Product catalog validation found %d issues:", len(all_warnings))
        for w in all_warnings[:20]:  # cap log output
            logger.warning("  - %s", w)

    return CatalogProvider(products)


def resolve_catalog_path(base_dir: Path, path: Optional[Path] = None) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv(CATALOG_PATH_ENV)
    if env_path:
        return Path(env_path)
    return base_dir / "data" / "products.json"


def load_catalog(base_dir: Path, path: Optional[Path] = None) -> Tuple[CatalogProvider, Path]:
    chosen_path = resolve_catalog_path(base_dir, path)
    if not chosen_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {chosen_path}")

    records = json.loads(chosen_path.read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError("Catalog must be a JSON list of products.")

    catalog = build_catalog(records)
    logger.info("Loaded %d products from %s", len(catalog), chosen_path)
    return catalog, chosen_path


@lru_cache(maxsize=1)
def get_default_catalog() -> CatalogProvider:
    """Process-wide catalog, loaded on first use."""
    catalog, _ = load_catalog(PROJECT_ROOT)
    return catalog
