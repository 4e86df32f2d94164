from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from config import DEFAULT_NUM_OUTFITS, SEASONS, STYLES
from components.product_catalog import PROJECT_ROOT, load_catalog
from scoring.models import RecommendationRequest
from scoring.recommendation_engine import generate_outfit_recommendations, get_base_product_options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Recommend complete outfits around a base product.")
    parser.add_argument("--base-product", help="sku_id of the product to build around")
    parser.add_argument("--style", choices=STYLES, default=None, help="Preferred style")
    parser.add_argument("--season", choices=SEASONS, default=None, help="Season filter")
    parser.add_argument("--num-outfits", type=int, default=DEFAULT_NUM_OUTFITS)
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible picks")
    parser.add_argument("--catalog", default=None, help="Path to a catalog JSON file")
    parser.add_argument("--list-products", action="store_true", help="Print base product options and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def run(args: argparse.Namespace) -> dict:
    catalog_path = Path(args.catalog) if args.catalog else None
    catalog, _ = load_catalog(PROJECT_ROOT, catalog_path)

    if args.list_products:
        return {"products": [p.to_dict() for p in get_base_product_options(catalog)]}

    rng = random.Random(args.seed) if args.seed is not None else None
    request = RecommendationRequest(
        base_product_id=args.base_product,
        preferred_style=args.style,
        season=args.season,
        num_outfits=args.num_outfits,
    )
    response = generate_outfit_recommendations(request, catalog=catalog, rng=rng)
    return response.to_dict()


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(PROJECT_ROOT / ".env")
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.list_products and not args.base_product:
        parser.error("--base-product is required unless --list-products is given")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    payload = run(args)
    json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
