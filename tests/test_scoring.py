"""Unit tests for scoring modules: compatibility, dimensions, selector."""
from __future__ import annotations

import random
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from config import COLOR_FAMILIES, STYLES
from scoring.compatibility import brand_tier, color_harmony, style_compatibility
from scoring.dimensions import (
    build_reasoning,
    build_score_breakdown,
    composite_score,
    score_brand_cohesion,
    score_color_harmony,
    score_price_balance,
    score_season_fit,
    score_style_match,
)
from scoring.models import Product, ScoreBreakdown
from scoring.selector import select_best_item, selection_score


class FixedIndex:
    """Random source that always picks the same slot of the top-N slice."""

    def __init__(self, index: int = 0):
        self.index = index
        self.calls = []

    def randrange(self, n: int) -> int:
        self.calls.append(n)
        return min(self.index, n - 1)


def make_product(sku_id, **overrides):
    fields = {
        "title": sku_id,
        "brand_name": "Basics",
        "category": "tops",
        "lowest_price": 1000,
        "color_family": "black",
        "style": "casual",
        "season": "all",
    }
    fields.update(overrides)
    return Product.from_dict({"sku_id": sku_id, **fields})


# ══════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════

@pytest.fixture
def white_tee():
    return make_product("TOP_001", color_family="white", lowest_price=1000, brand_name="Anon Label")


@pytest.fixture
def navy_jeans():
    return make_product("BOTTOM_001", category="bottoms", color_family="navy", lowest_price=1500,
                        brand_name="Anon Label")


@pytest.fixture
def white_sneaker():
    return make_product("SHOE_001", category="footwear", color_family="white", lowest_price=2000,
                        brand_name="Anon Label")


@pytest.fixture
def black_watch():
    return make_product("ACC_001", category="accessories", color_family="black", lowest_price=500,
                        brand_name="Anon Label", tags=["bestseller"])


@pytest.fixture
def outfit_items(white_tee, navy_jeans, white_sneaker, black_watch):
    return [white_tee, navy_jeans, white_sneaker, black_watch]


# ══════════════════════════════════════════════════════════════════════
# Compatibility lookups
# ══════════════════════════════════════════════════════════════════════

class TestCompatibility:
    def test_color_matrix_is_total_and_in_range(self):
        for a in COLOR_FAMILIES:
            for b in COLOR_FAMILIES:
                assert 0.0 <= color_harmony(a, b) <= 1.0

    def test_color_matrix_is_symmetric(self):
        for a in COLOR_FAMILIES:
            for b in COLOR_FAMILIES:
                assert color_harmony(a, b) == color_harmony(b, a), f"{a}/{b}"

    def test_self_pair_scores_below_contrast(self):
        assert color_harmony("black", "black") == 0.7
        assert color_harmony("black", "white") == 1.0
        assert color_harmony("white", "white") == 0.6

    def test_style_matrix_is_total_and_symmetric(self):
        for a in STYLES:
            assert style_compatibility(a, a) == 1.0
            for b in STYLES:
                assert 0.0 <= style_compatibility(a, b) <= 1.0
                assert style_compatibility(a, b) == style_compatibility(b, a)

    def test_unknown_values_fall_back_to_neutral(self):
        assert color_harmony("chartreuse", "black") == 0.5
        assert style_compatibility("goth", "casual") == 0.5

    def test_missing_values_use_defaults(self):
        # missing color -> black, missing style -> casual
        assert color_harmony(None, "white") == color_harmony("black", "white")
        assert style_compatibility("", "formal") == style_compatibility("casual", "formal")

    def test_lookup_is_stable(self):
        assert color_harmony("navy", "beige") == color_harmony("navy", "beige")

    def test_brand_tier_case_insensitive(self):
        assert brand_tier("Gucci") == 5
        assert brand_tier("GUCCI") == brand_tier("gucci")
        assert brand_tier("Polo Ralph Lauren") == 4
        assert brand_tier("nofomo") == 1

    def test_unknown_brand_is_mid_tier(self):
        assert brand_tier("Some Indie Label") == 2
        assert brand_tier("") == 2
        assert brand_tier(None) == 2


# ══════════════════════════════════════════════════════════════════════
# Dimension scorers
# ══════════════════════════════════════════════════════════════════════

class TestColorAndStyle:
    def test_color_harmony_pairwise_mean(self, outfit_items):
        # white-navy .95, white-white .6, white-black 1.0, navy-white .95, navy-black .9, white-black 1.0
        assert score_color_harmony(outfit_items) == pytest.approx(5.4 / 6)

    def test_color_harmony_single_item_is_neutral(self, white_tee):
        assert score_color_harmony([white_tee]) == 0.5

    def test_style_match_uniform(self, outfit_items):
        assert score_style_match(outfit_items) == pytest.approx(1.0)

    def test_style_match_mixed(self):
        items = [make_product("A", style="formal"), make_product("B", style="athletic")]
        assert score_style_match(items) == pytest.approx(0.2)


class TestBrandCohesion:
    def test_same_tier_is_fully_cohesive(self):
        items = [make_product("A", brand_name="Gucci"), make_product("B", brand_name="Amiri")]
        assert score_brand_cohesion(items) == 1.0

    def test_max_spread_zeroes_score(self):
        items = [make_product("A", brand_name="Nofomo"), make_product("B", brand_name="Gucci")]
        assert score_brand_cohesion(items) == 0.0

    def test_partial_spread(self):
        # tiers 3 and 2 -> variance 0.25
        items = [make_product("A", brand_name="Nike"), make_product("B", brand_name="Unknown")]
        assert score_brand_cohesion(items) == pytest.approx(1 - 0.25 / 4)


class TestPriceBalance:
    def test_relative_variance(self, outfit_items):
        # mean 1250, relative deviations -0.2, 0.2, 0.6, -0.6
        assert score_price_balance(outfit_items) == pytest.approx(0.8)

    def test_equal_prices(self):
        items = [make_product("A"), make_product("B")]
        assert score_price_balance(items) == 1.0

    def test_zero_prices_ignored(self):
        items = [make_product("A", lowest_price=1000), make_product("B", lowest_price=0)]
        assert score_price_balance(items) == 1.0

    def test_all_zero_is_neutral(self):
        items = [make_product("A", lowest_price=0), make_product("B", lowest_price=0)]
        assert score_price_balance(items) == 0.5

    def test_floor_at_zero(self):
        items = [make_product("A", lowest_price=100), make_product("B", lowest_price=100), make_product("C", lowest_price=100000)]
        assert score_price_balance(items) == 0.0


class TestSeasonFit:
    @pytest.fixture
    def mixed_seasons(self):
        return [
            make_product("A", season="summer"),
            make_product("B", season="all"),
            make_product("C", season="winter"),
        ]

    def test_no_filter(self, mixed_seasons):
        assert score_season_fit(mixed_seasons) == 1.0
        assert score_season_fit(mixed_seasons, "all") == 1.0

    def test_fraction_matching(self, mixed_seasons):
        assert score_season_fit(mixed_seasons, "summer") == pytest.approx(2 / 3)

    def test_no_match(self):
        items = [make_product("A", season="winter"), make_product("B", season="fall")]
        assert score_season_fit(items, "summer") == 0.0


class TestBreakdownAndComposite:
    def test_breakdown_fields_in_range(self, outfit_items):
        breakdown = build_score_breakdown(outfit_items, "summer")
        for value in breakdown.to_dict().values():
            assert 0.0 <= value <= 1.0

    def test_composite_ignores_price_balance(self):
        low = ScoreBreakdown(0.8, 0.7, 0.6, 0.0, 1.0)
        high = ScoreBreakdown(0.8, 0.7, 0.6, 1.0, 1.0)
        assert composite_score(low) == composite_score(high)
        assert composite_score(low) == pytest.approx(0.35 * 0.8 + 0.30 * 0.7 + 0.20 * 0.6 + 0.15 * 1.0)


class TestReasoning:
    def test_strong_outfit(self, white_tee, navy_jeans):
        breakdown = ScoreBreakdown(0.9, 0.9, 0.9, 0.9, 1.0)
        text = build_reasoning(breakdown, [white_tee, navy_jeans, white_tee])
        assert text == (
            "Excellent color harmony with white and navy creating a cohesive palette. "
            "Strong casual aesthetic unity. "
            "Matched brand positioning for a polished look. "
            "Balanced investment across all pieces."
        )

    def test_moderate_outfit(self, white_tee):
        breakdown = ScoreBreakdown(0.75, 0.72, 0.5, 0.5, 1.0)
        text = build_reasoning(breakdown, [white_tee])
        assert text == "Well-balanced color coordination throughout. Versatile style mix that transitions well."

    def test_fallback_text(self, white_tee):
        breakdown = ScoreBreakdown(0.5, 0.5, 0.5, 0.5, 1.0)
        assert build_reasoning(breakdown, [white_tee]) == "A versatile combination suitable for various occasions."


# ══════════════════════════════════════════════════════════════════════
# Item selector
# ══════════════════════════════════════════════════════════════════════

class TestSelectionScore:
    def test_empty_selection_flat_score(self):
        assert selection_score(make_product("A"), []) == pytest.approx(0.9)

    def test_bestseller_bonus(self, black_watch):
        assert selection_score(black_watch, []) == pytest.approx(1.0)

    def test_preferred_style_without_selection(self):
        candidate = make_product("A", style="athletic")
        assert selection_score(candidate, [], preferred_style="formal") == pytest.approx(0.4 + 0.35 * 0.2 + 0.15)

    def test_against_selected_items(self):
        selected = [make_product("S", color_family="black", brand_name="Nike")]
        candidate = make_product("C", color_family="white", brand_name="Gucci")
        # color 1.0, style 1.0, tier gap 2 -> proximity 1/3
        expected = 0.4 * 1.0 + 0.35 * 1.0 + 0.15 * (1 - 2 / 3)
        assert selection_score(candidate, selected) == pytest.approx(expected)

    def test_selected_items_override_preferred_style(self):
        selected = [make_product("S", style="casual")]
        candidate = make_product("C", style="casual")
        with_pref = selection_score(candidate, selected, preferred_style="formal")
        without_pref = selection_score(candidate, selected)
        assert with_pref == without_pref


class TestSelectBestItem:
    @pytest.fixture
    def candidates(self):
        return [
            make_product("POOR", color_family="black", style="formal", brand_name="Gucci"),
            make_product("BEST", color_family="white", style="casual", tags=["bestseller"]),
            make_product("GOOD", color_family="white", style="casual"),
            make_product("OK", color_family="gray", style="casual"),
            make_product("WORST", color_family="black", style="athletic", brand_name="Nofomo"),
        ]

    def test_empty_pool_returns_none(self):
        assert select_best_item([], []) is None

    def test_deterministic_stub_picks_highest(self, candidates):
        selected = [make_product("BASE", color_family="black", category="bottoms")]
        rng = FixedIndex(0)
        assert select_best_item(candidates, selected, rng=rng).sku_id == "BEST"
        assert rng.calls == [3]

    def test_pick_limited_to_top_three(self, candidates):
        selected = [make_product("BASE", color_family="black", category="bottoms")]
        picks = {
            select_best_item(candidates, selected, rng=random.Random(seed)).sku_id
            for seed in range(60)
        }
        assert picks <= {"BEST", "GOOD", "OK"}
        assert len(picks) > 1

    def test_small_pool(self, candidates):
        rng = FixedIndex(2)
        pick = select_best_item(candidates[:1], [], rng=rng)
        assert pick.sku_id == "POOR"
        assert rng.calls == [1]

    def test_ties_keep_catalog_order(self):
        pool = [make_product(f"T{i}") for i in range(5)]
        assert select_best_item(pool, [], rng=FixedIndex(2)).sku_id == "T2"
