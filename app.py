from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

import streamlit as st

from config import DEFAULT_NUM_OUTFITS, SEASONS, STYLES
from components.outfit_display import (
    filter_by_category,
    format_price,
    group_by_sub_category,
    list_categories,
    paginate,
    slot_label,
)
from components.product_catalog import load_catalog
from components.ui_theme import apply_theme, hero_block, price_caption, score_badge, section_header, slot_heading
from scoring.models import Product, RecommendationRequest
from scoring.recommendation_engine import generate_outfit_recommendations, get_base_product_options

st.set_page_config(page_title="Outfit Studio", page_icon="✨", layout="wide")
apply_theme()

for key, default in {
    "selected_sku": None,
    "_response": None,
    "_page": 1,
    "_category": "all",
}.items():
    if key not in st.session_state:
        st.session_state[key] = default

base_dir = Path(__file__).resolve().parent


@st.cache_resource
def _catalog():
    catalog, _ = load_catalog(base_dir)
    return catalog


def _product_tile(product: Product, selectable: bool) -> None:
    if product.featured_image:
        st.image(product.featured_image, width="stretch")
    st.markdown(f"**{product.title}**")
    st.caption(f"{product.brand_name} · {format_price(product.lowest_price)}")
    if selectable:
        is_selected = st.session_state.selected_sku == product.sku_id
        if st.button(
            "Selected" if is_selected else "Select",
            key=f"select_{product.sku_id}",
            type="primary" if is_selected else "secondary",
            width="stretch",
        ):
            st.session_state.selected_sku = product.sku_id
            st.session_state._response = None
            st.rerun()


catalog = _catalog()
base_products = get_base_product_options(catalog)

hero_block()

section_header("1) Choose a base product", "Filter by category and pick the piece to build around.")

categories = list_categories(base_products)
category = st.radio(
    "Category",
    categories,
    index=categories.index(st.session_state._category) if st.session_state._category in categories else 0,
    horizontal=True,
)
if category != st.session_state._category:
    st.session_state._category = category
    st.session_state._page = 1

filtered = filter_by_category(base_products, category)
page_items, total_pages = paginate(filtered, st.session_state._page)

for sub_category, items in group_by_sub_category(page_items).items():
    st.markdown(f"#### {sub_category.replace('_', ' ').title()}")
    cols = st.columns(4)
    for idx, product in enumerate(items):
        with cols[idx % 4]:
            _product_tile(product, selectable=True)

if total_pages > 1:
    c_prev, c_info, c_next = st.columns([1, 2, 1])
    with c_prev:
        if st.button("Previous", disabled=st.session_state._page <= 1, width="stretch"):
            st.session_state._page -= 1
            st.rerun()
    with c_info:
        st.caption(f"Page {st.session_state._page} of {total_pages}")
    with c_next:
        if st.button("Next", disabled=st.session_state._page >= total_pages, width="stretch"):
            st.session_state._page += 1
            st.rerun()

selected = catalog.get_product_by_id(st.session_state.selected_sku) if st.session_state.selected_sku else None

if selected:
    section_header("2) Style it", f"Building around {selected.title} ({selected.brand_name}).")

    col_a, col_b, col_c = st.columns(3)
    with col_a:
        style_choice = st.selectbox("Preferred style (optional)", ["any"] + STYLES)
    with col_b:
        season_choice = st.selectbox("Season", SEASONS, index=SEASONS.index("all"))
    with col_c:
        num_outfits = st.number_input("Outfits", min_value=1, max_value=10, value=DEFAULT_NUM_OUTFITS, step=1)

    if st.button("Generate outfits", type="primary", width="stretch"):
        request = RecommendationRequest(
            base_product_id=selected.sku_id,
            preferred_style=None if style_choice == "any" else style_choice,
            season=season_choice,
            num_outfits=int(num_outfits),
        )
        with st.spinner("Styling your looks..."):
            st.session_state._response = generate_outfit_recommendations(request, catalog=catalog)

response = st.session_state.get("_response")
if response is not None:
    section_header("3) Your looks", f"Generated in {response.processing_time_ms:.2f} ms.")

    if not response.outfits:
        st.info("No complete outfits could be built for this product.")

    for idx, outfit in enumerate(response.outfits, start=1):
        with st.container(border=True):
            head_left, head_right = st.columns([3, 1])
            with head_left:
                st.markdown(f"### Look {idx}")
                st.write(outfit.reasoning)
            with head_right:
                score_badge(outfit.match_score)
                price_caption(outfit.total_price)

            items = list(outfit.items)
            cols = st.columns(len(items))
            for i, item in enumerate(items):
                with cols[i]:
                    slot_heading(slot_label(i, len(outfit.accessories)))
                    _product_tile(item, selectable=False)

            with st.expander("Style analysis", expanded=False):
                st.caption(f"Style match {outfit.score_breakdown.style_match:.2f}")
