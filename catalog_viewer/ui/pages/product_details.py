"""Product details page: view, edit and delete one product."""

import asyncio

import streamlit as st

from catalog_viewer.schemas.product import Product, ProductDraft
from catalog_viewer.services import ProductStore
from catalog_viewer.ui.components.sidebar import flash, navigate
from catalog_viewer.ui.pages.add_product import product_form, show_operation_errors
from catalog_viewer.utils.formatting import display_value, format_price


def show(store: ProductStore):
    """Display the product details page."""
    st.title("🔍 Product Details")

    key = st.session_state.get("selected_product_key")
    if key is None:
        st.info("Select a product from the catalog to see its details.")
        return

    if store.current is None or store.current.product_key != key:
        asyncio.run(store.load_one(key))

    state = store.state("load_one")
    if state.is_error:
        st.error(state.error)
        if st.button("Retry"):
            asyncio.run(store.load_one(key))
            st.rerun()
        return

    product = store.current
    show_product(product)

    tab1, tab2 = st.tabs(["Edit", "Delete"])
    with tab1:
        edit_product(store, product)
    with tab2:
        delete_product(store, product)


def show_product(product: Product):
    col1, col2, col3 = st.columns(3)
    col1.metric("Product Key", product.product_key)
    col2.metric("Price", format_price(product.price))
    col3.metric("Brand", display_value(product.brand))

    st.subheader(product.product_name)
    st.write(f"**Model:** {display_value(product.model)}")
    st.write(f"**Retailer:** {display_value(product.retailer)}")
    st.write(f"**Description:** {display_value(product.product_description, 'No description')}")


def edit_product(store: ProductStore, product: Product):
    """Edit form; the server's echo replaces the displayed product."""
    draft = product_form(
        f"edit_product_{product.product_key}",
        ProductDraft.from_product(product),
        "Save Changes",
        lock_key=True,
    )
    if draft is None:
        return

    if asyncio.run(store.apply_update(draft)):
        flash("✅ Product updated")
        st.rerun()
    else:
        show_operation_errors(store, "update")


def delete_product(store: ProductStore, product: Product):
    """Delete after an explicit confirmation."""
    st.warning(f"Deleting **{product.product_name}** cannot be undone.")
    confirmed = st.checkbox("Yes, delete this product", key=f"confirm_delete_{product.product_key}")

    if st.button("Delete Product", type="primary", disabled=not confirmed):
        if asyncio.run(store.apply_delete(product.product_key)):
            st.session_state.selected_product_key = None
            flash(f"✅ Product {product.product_key} deleted")
            navigate("Product Catalog")
            st.rerun()
        else:
            show_operation_errors(store, "delete")
