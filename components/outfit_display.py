"""Presentation helpers for the product picker and outfit cards.

Pure functions only; the Streamlit page (app.py) renders their output.
"""
from __future__ import annotations

import math
from typing import Dict, List, Sequence, Tuple

from config import CURRENCY_SYMBOL, PRODUCTS_PER_PAGE, SCORE_LABELS
from scoring.models import Product

ALL_CATEGORIES = "all"


def list_categories(products: Sequence[Product]) -> List[str]:
    """'all' followed by each distinct category, in catalog order."""
    seen = dict.fromkeys(p.category or p.sector for p in products)
    return [ALL_CATEGORIES] + [c for c in seen if c]


def filter_by_category(products: Sequence[Product], category: str) -> List[Product]:
    if category == ALL_CATEGORIES:
        return list(products)
    return [p for p in products if (p.category or p.sector) == category]


def paginate(
    products: Sequence[Product],
    page: int,
    per_page: int = PRODUCTS_PER_PAGE,
) -> Tuple[List[Product], int]:
    """Return the slice for ``page`` (1-based, clamped) and the total page count."""
    total_pages = max(1, math.ceil(len(products) / per_page))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * per_page
    return list(products[start:start + per_page]), total_pages


def group_by_sub_category(products: Sequence[Product]) -> Dict[str, List[Product]]:
    groups: Dict[str, List[Product]] = {}
    for product in products:
        groups.setdefault(product.sub_category or "other", []).append(product)
    return groups


def format_price(amount: int) -> str:
    """Rupee amount with Indian digit grouping, e.g. ₹1,23,456."""
    digits = str(abs(int(amount)))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        digits = ",".join(pairs + [tail])
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{digits}"


def score_label(score: float) -> str:
    for threshold, label in SCORE_LABELS:
        if score >= threshold:
            return label
    return SCORE_LABELS[-1][1]


def score_percent(score: float) -> int:
    return int(round(score * 100))


def slot_label(index: int, accessory_count: int) -> str:
    """Heading for the n-th item of an outfit (top, bottom, footwear, accessories)."""
    fixed = ("Top", "Bottom", "Footwear")
    if index < len(fixed):
        return fixed[index]
    if accessory_count > 1:
        return f"Accessory {index - len(fixed) + 1}"
    return "Accessory"
