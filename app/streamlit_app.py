"""Streamlit UI for innovation inspiration.

Features:
- Category and brand selection
- "Inspire me" generation against the innovation API
- Product grid with favorites and a detail panel
- Session analytics with Plotly charts
"""

from __future__ import annotations

import json
import logging
import sys
import time
from pathlib import Path

import streamlit as st

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.analytics import SessionAnalytics
from core.client import GenerationError, InnovationClient
from core.config import Settings
from core.models import Product
from core.placeholder import decode_data_url, is_data_url
from core.store import InnovationStore
from prompts.templates import BRANDS_BY_CATEGORY, CATEGORIES

settings = Settings.from_env()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

ANY_BRAND = "(any brand)"

# ============================================================================
# Page config and custom CSS
# ============================================================================

st.set_page_config(
    page_title="Innovation Inspiration",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown("""
<style>
    .stTabs [data-baseweb="tab"] { padding: 10px 24px; font-weight: 600; }
    div[data-testid="metric-container"] {
        background: linear-gradient(135deg, #1e3a8a22, #3b82f622);
        border: 1px solid #e0e0e0;
        border-radius: 10px;
        padding: 12px;
    }
</style>
""", unsafe_allow_html=True)

# ============================================================================
# Session state initialization
# ============================================================================


def init_session_state():
    defaults = {
        "store": InnovationStore(),
        "analytics": SessionAnalytics(),
        "client": None,
        "client_url": "",
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val


def get_client(api_url: str) -> InnovationClient:
    if st.session_state["client"] is None or st.session_state["client_url"] != api_url:
        if st.session_state["client"] is not None:
            st.session_state["client"].close()
        st.session_state["client"] = InnovationClient(base_url=api_url)
        st.session_state["client_url"] = api_url
    return st.session_state["client"]


def show_product_image(product: Product, **kwargs) -> None:
    if is_data_url(product.image_url):
        data = decode_data_url(product.image_url)
        if data:
            st.image(data, **kwargs)
            return
    elif product.image_url:
        st.image(product.image_url, **kwargs)
        return
    st.caption("No image available")


init_session_state()
store: InnovationStore = st.session_state["store"]
analytics: SessionAnalytics = st.session_state["analytics"]

# ============================================================================
# Sidebar: API connection
# ============================================================================

with st.sidebar:
    st.markdown("### Connection")
    api_url = st.text_input("API URL", value=settings.api_url)
    client = get_client(api_url)

    if st.button("Check API health", use_container_width=True):
        try:
            status = client.health()
            st.success(status.get("message", "API is running"))
            env = status.get("env", {})
            st.caption(f"OpenAI key: {env.get('keyPrefix', 'unknown')}")
        except Exception as e:
            st.error(f"Health check failed: {e}")

    count = st.slider("Concepts per click", 1, 9, 3)
    st.caption(f"Session: {store.session_id[:8]}")

# ============================================================================
# Main area
# ============================================================================

st.title("CHURCH & DWIGHT")
st.subheader("INNOVATION INSPIRATION")

tab_inspire, tab_favorites, tab_analytics = st.tabs(["Inspire", "Favorites", "Analytics"])

# ============================================================================
# TAB: Inspire
# ============================================================================

with tab_inspire:
    cat_cols = st.columns(4)
    for i, (category_id, label) in enumerate(CATEGORIES.items()):
        with cat_cols[i % 4]:
            selected = store.selected_category == category_id
            if st.button(
                label,
                key=f"cat_{category_id}",
                type="primary" if selected else "secondary",
                use_container_width=True,
            ):
                if not selected:
                    store.set_selected_category(category_id)
                    store.set_selected_brand(None)
                    st.rerun()

    if store.selected_category:
        brands = BRANDS_BY_CATEGORY.get(store.selected_category, [])
        options = [ANY_BRAND] + brands
        current = store.selected_brand if store.selected_brand in brands else ANY_BRAND
        brand_choice = st.selectbox("Brand", options=options, index=options.index(current))
        store.set_selected_brand(None if brand_choice == ANY_BRAND else brand_choice)

    st.divider()

    if st.button(
        "GENERATING INSPIRATION..." if store.is_generating else "INSPIRE ME!",
        type="primary",
        disabled=not store.can_generate,
        use_container_width=True,
    ):
        if store.begin_generation():
            start = time.time()
            with st.spinner("Generating concepts..."):
                try:
                    products = client.generate_products(
                        category=store.selected_category,
                        brand=store.selected_brand,
                        count=count,
                        session_id=store.session_id,
                    )
                except GenerationError as e:
                    store.fail_generation(str(e))
                    analytics.record_error(store.selected_category, str(e))
                except Exception as e:
                    logger.exception("Generate failed unexpectedly")
                    store.fail_generation(f"Failed to generate products: {e}")
                    analytics.record_error(store.selected_category, str(e))
                else:
                    store.complete_generation(products)
                    analytics.record_products(products, request_time_s=time.time() - start)

    if not store.selected_category:
        st.info("Select a category to begin.")

    if store.error:
        st.error(store.error)

    # ---------------------------------------------------------------------------
    # Product grid
    # ---------------------------------------------------------------------------

    if store.generated_products:
        st.header(f"Concepts ({len(store.generated_products)})")
        grid_cols = st.columns(3)
        for i, product in enumerate(store.generated_products):
            with grid_cols[i % 3]:
                show_product_image(product, use_container_width=True)
                st.markdown(f"**{product.name}**")
                st.caption(f"{product.brand} | {product.innovation}")
                fav_col, detail_col = st.columns(2)
                with fav_col:
                    fav_label = "Unfavorite" if store.is_favorite(product.id) else "Favorite"
                    if st.button(fav_label, key=f"fav_{product.id}", use_container_width=True):
                        store.toggle_favorite(product.id)
                        st.rerun()
                with detail_col:
                    if st.button("Details", key=f"detail_{product.id}", use_container_width=True):
                        store.set_selected_product(product)

    # ---------------------------------------------------------------------------
    # Detail panel
    # ---------------------------------------------------------------------------

    product = store.selected_product
    if product is not None:
        st.divider()
        head_col, close_col = st.columns([5, 1])
        with head_col:
            st.header(product.product_name or product.name)
        with close_col:
            if st.button("Close", key="close_detail"):
                store.set_selected_product(None)
                st.rerun()

        img_col, info_col = st.columns([1, 1])
        with img_col:
            show_product_image(product, use_container_width=True)
            if product.is_placeholder:
                st.caption("Placeholder image (generation unavailable)")
        with info_col:
            if product.sustainability_score:
                st.metric("Sustainability", f"{product.sustainability_score}%")
            st.markdown(f"**Innovation:** {product.innovation}")
            st.markdown(f"**Market disruption:** {product.market_disruption}")
            st.markdown(f"**Consumer insight:** {product.consumer_insight}")
            st.markdown("**Key features:**")
            for feature in product.features:
                st.markdown(f"- {feature}")
            st.markdown(f"**Ingredients:** {product.ingredients}")
            st.markdown(f"**Usage:** {product.usage}")
            st.markdown(f"**Price:** {product.price}")
            st.markdown(f"**Sustainability:** {product.sustainability}")
            with st.expander("Image prompt"):
                st.code(product.prompt, language=None)

# ============================================================================
# TAB: Favorites
# ============================================================================

with tab_favorites:
    favorites = store.favorite_products()
    if not favorites:
        st.info("No favorites yet. Favorite concepts from the Inspire tab.")
    else:
        fav_cols = st.columns(3)
        for i, product in enumerate(favorites):
            with fav_cols[i % 3]:
                show_product_image(product, use_container_width=True)
                st.markdown(f"**{product.name}**")
                st.caption(product.market_disruption)
                if st.button("Remove", key=f"rm_fav_{product.id}"):
                    store.toggle_favorite(product.id)
                    st.rerun()

# ============================================================================
# TAB: Analytics
# ============================================================================

with tab_analytics:
    st.header("Session Analytics")
    summary = analytics.get_summary()

    if analytics.total_products == 0:
        st.info("Generate some concepts to see analytics.")
    else:
        kpi1, kpi2, kpi3, kpi4 = st.columns(4)
        kpi1.metric("Concepts", summary["total_products"])
        kpi2.metric("Placeholders", summary["placeholders"])
        kpi3.metric("Avg Request", f"{summary['avg_request_time_s']:.1f}s")
        kpi4.metric("Errors", summary["errors"])

        import pandas as pd

        chart_col1, chart_col2 = st.columns(2)
        with chart_col1:
            st.subheader("By Category")
            cat_df = pd.DataFrame(list(summary["categories"].items()), columns=["Category", "Concepts"])
            try:
                import plotly.express as px
                fig = px.pie(cat_df, values="Concepts", names="Category", hole=0.4)
                fig.update_layout(height=300, margin=dict(t=20, b=20, l=20, r=20))
                st.plotly_chart(fig, use_container_width=True)
            except ImportError:
                st.bar_chart(cat_df.set_index("Category"))

        with chart_col2:
            st.subheader("By Brand")
            brand_df = pd.DataFrame(list(summary["brands"].items()), columns=["Brand", "Concepts"])
            try:
                import plotly.express as px
                fig = px.bar(brand_df, x="Brand", y="Concepts", color="Concepts")
                fig.update_layout(height=300, margin=dict(t=20, b=20, l=20, r=20))
                st.plotly_chart(fig, use_container_width=True)
            except ImportError:
                st.bar_chart(brand_df.set_index("Brand"))

        log_records = analytics.to_dataframe_records()
        if log_records:
            st.subheader("Generation Log")
            st.dataframe(pd.DataFrame(log_records), use_container_width=True, hide_index=True)

        st.download_button(
            "Export Analytics (JSON)",
            data=json.dumps(summary, indent=2),
            file_name="analytics.json",
            mime="application/json",
        )
