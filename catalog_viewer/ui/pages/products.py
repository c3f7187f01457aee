"""Product catalog page: list and search."""

import asyncio

import pandas as pd
import streamlit as st

from catalog_viewer.schemas.product import SearchField
from catalog_viewer.services import ProductStore, SearchDispatcher
from catalog_viewer.ui.components.sidebar import navigate
from catalog_viewer.utils.formatting import display_value, format_price

SEARCH_LABELS = {
    SearchField.NAME: "Product Name",
    SearchField.BRAND: "Brand",
}


def show(store: ProductStore):
    """Display the product catalog page."""
    st.title("📦 Product Catalog")

    dispatcher = SearchDispatcher(store)

    # First visit, or a mutation elsewhere invalidated the snapshot
    if "catalog_operation" not in st.session_state or store.is_stale:
        asyncio.run(store.load())
        st.session_state.catalog_operation = "load"

    search_form(dispatcher)

    state = store.state(st.session_state.catalog_operation)
    if state.is_error:
        st.error(state.error)
        if st.button("Retry"):
            asyncio.run(store.load())
            st.session_state.catalog_operation = "load"
            st.rerun()

    st.write(f"Total products: {len(store.products)}")
    show_products_table(store)


def search_form(dispatcher: SearchDispatcher):
    """Search box with a single-field selector."""
    with st.form("search_form"):
        col1, col2 = st.columns([3, 1])
        with col1:
            term = st.text_input("Search Products", placeholder="Enter search term...")
        with col2:
            field = st.selectbox(
                "Search by",
                options=list(SearchField),
                format_func=lambda f: SEARCH_LABELS[f],
            )

        col3, col4 = st.columns(2)
        with col3:
            searched = st.form_submit_button("Search", type="primary")
        with col4:
            cleared = st.form_submit_button("Clear")

    if searched:
        asyncio.run(dispatcher.dispatch(term, field))
        st.session_state.catalog_operation = "search" if term.strip() else "load"
    elif cleared:
        asyncio.run(dispatcher.clear())
        st.session_state.catalog_operation = "load"


def products_frame(products) -> pd.DataFrame:
    """Tabular view of products for display."""
    return pd.DataFrame(
        [
            {
                "Key": p.product_key,
                "Product Name": p.product_name,
                "Brand": display_value(p.brand),
                "Price": format_price(p.price),
                "Model": display_value(p.model),
                "Retailer": display_value(p.retailer),
            }
            for p in products
        ]
    )


def show_products_table(store: ProductStore):
    """Display the current snapshot and a way to open one product."""
    if not store.products:
        st.info("No products found.")
        if st.button("Add First Product"):
            navigate("Add Product")
            st.rerun()
        return

    st.dataframe(products_frame(store.products), hide_index=True, use_container_width=True)

    names = {p.product_key: p.product_name for p in store.products}
    selected = st.selectbox(
        "Select a product",
        options=list(names.keys()),
        format_func=lambda key: f"{key} - {names[key]}",
    )
    if st.button("View Details"):
        st.session_state.selected_product_key = selected
        navigate("Product Details")
        st.rerun()
