"""Brand summary page."""

import asyncio

import plotly.express as px
import streamlit as st

from catalog_viewer.services import BrandStatistics, ProductStore
from catalog_viewer.ui.components.sidebar import navigate


def show(store: ProductStore):
    """Display the brand summary page."""
    st.title("📊 Brand Summary")

    # First visit, or a product changed since the last fetch
    if store.summary_is_stale:
        asyncio.run(store.load_summary())

    state = store.state("summary")
    if state.is_error:
        st.error(state.error)
        if st.button("Retry"):
            asyncio.run(store.load_summary())
            st.rerun()
        return

    render_summary(BrandStatistics.from_summary(store.summary))

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Refresh Data"):
            asyncio.run(store.load_summary())
            st.rerun()
    with col2:
        if st.button("Add New Product"):
            navigate("Add Product")
            st.rerun()


def render_summary(stats: BrandStatistics):
    """Render totals, per-brand bars and summary statistics."""
    col1, col2 = st.columns(2)
    col1.metric("Total Products", stats.total_products)
    col2.metric("Total Brands", stats.total_brands)

    if not stats.buckets:
        st.info("No brand data available.")
        return

    st.subheader("Products by Brand")
    for bucket in stats.buckets:
        st.write(
            f"**{bucket.brand}** {bucket.count} products ({stats.percentage(bucket)}%)"
        )
        st.progress(int(round(stats.relative_bar_width(bucket))))

    fig = px.bar(
        x=[bucket.brand for bucket in stats.buckets],
        y=[bucket.count for bucket in stats.buckets],
        labels={"x": "Brand", "y": "Products"},
        title="Products per Brand",
    )
    st.plotly_chart(fig, use_container_width=True)

    st.subheader("Statistics")
    top = stats.most_popular
    col1, col2, col3 = st.columns(3)
    col1.metric("Most Popular Brand", top.brand, f"{top.count} products")
    col2.metric("Average Products per Brand", stats.average_per_brand)
    col3.metric("Brands with Single Product", stats.singleton_brand_count)
