from __future__ import annotations

import io
import json
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tools.recommend import build_parser, main


class RecommendCliTests(unittest.TestCase):
    def _run(self, argv):
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = main(argv)
        self.assertEqual(code, 0)
        return json.loads(out.getvalue())

    def test_recommendations_payload(self) -> None:
        payload = self._run(["--base-product", "TOP_001", "--num-outfits", "2", "--seed", "7"])
        self.assertEqual(payload["base_product"]["sku_id"], "TOP_001")
        self.assertFalse(payload["cache_hit"])
        self.assertEqual(len(payload["outfits"]), 2)
        outfit = payload["outfits"][0]
        for key in ("id", "top", "bottom", "footwear", "accessories", "match_score",
                    "score_breakdown", "reasoning", "total_price"):
            self.assertIn(key, outfit)
        self.assertTrue(outfit["id"].startswith("outfit_"))

    def test_seed_makes_picks_reproducible(self) -> None:
        argv = ["--base-product", "BOTTOM_002", "--season", "summer", "--seed", "42"]
        first = self._run(argv)
        second = self._run(argv)

        def combos(payload):
            return [(o["top"]["sku_id"], o["bottom"]["sku_id"], o["footwear"]["sku_id"],
                     [a["sku_id"] for a in o["accessories"]]) for o in payload["outfits"]]

        self.assertEqual(combos(first), combos(second))

    def test_unknown_product(self) -> None:
        payload = self._run(["--base-product", "NOT_REAL"])
        self.assertEqual(payload["outfits"], [])
        self.assertEqual(payload["base_product"]["sku_id"], "")

    def test_list_products(self) -> None:
        payload = self._run(["--list-products"])
        ids = [p["sku_id"] for p in payload["products"]]
        self.assertIn("TOP_001", ids)
        self.assertNotIn("TOP_009", ids)
        self.assertTrue(all(p["lowest_price"] > 0 for p in payload["products"]))

    @patch("sys.stderr", new_callable=io.StringIO)
    def test_rejects_unknown_style(self, _stderr) -> None:
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["--base-product", "TOP_001", "--style", "grunge"])

    @patch("sys.stderr", new_callable=io.StringIO)
    def test_requires_base_product(self, _stderr) -> None:
        with self.assertRaises(SystemExit):
            main([])


if __name__ == "__main__":
    unittest.main()
