"""Add product page."""

import asyncio

import streamlit as st

from catalog_viewer.schemas.product import (
    BRAND_MAX_LENGTH,
    MODEL_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    RETAILER_MAX_LENGTH,
    ProductDraft,
)
from catalog_viewer.services import ProductStore
from catalog_viewer.ui.components.sidebar import flash, navigate

FIELD_LABELS = {
    "product_key": "Product Key",
    "product_name": "Product Name",
    "brand": "Brand",
    "model": "Model",
    "retailer": "Retailer",
    "price": "Price",
    "product_description": "Description",
}


def show(store: ProductStore):
    """Display the add product page."""
    st.title("➕ Add New Product")

    draft = product_form("add_product_form", ProductDraft(), "Create Product")
    if draft is not None:
        if asyncio.run(store.apply_create(draft)):
            flash(f"✅ Product added successfully: {draft.product_name}")
            navigate("Product Catalog")
            st.rerun()
        else:
            show_operation_errors(store, "create")

    with st.expander("Form Guidelines"):
        st.markdown(
            f"""
- Fields marked with * are required
- Product Key must be unique and positive
- Product Name is limited to {PRODUCT_NAME_MAX_LENGTH} characters
- Brand and Retailer are limited to {BRAND_MAX_LENGTH} characters
- Model is limited to {MODEL_MAX_LENGTH} characters
- Price must be a non-negative number
"""
        )


def product_form(form_key: str, initial: ProductDraft, submit_label: str, lock_key: bool = False):
    """
    Render a product form pre-filled from a draft.

    Args:
        form_key: Unique Streamlit form key
        initial: Values to pre-fill
        submit_label: Label of the submit button
        lock_key: Disable the product key field (edit mode)

    Returns:
        The submitted ProductDraft, or None if the form was not submitted
    """
    with st.form(form_key, clear_on_submit=False):
        product_key = st.text_input(
            "Product Key *", value=initial.product_key, disabled=lock_key,
            placeholder="Enter unique product key",
        )
        product_name = st.text_input(
            "Product Name *", value=initial.product_name, max_chars=PRODUCT_NAME_MAX_LENGTH
        )

        col1, col2 = st.columns(2)
        with col1:
            brand = st.text_input("Brand", value=initial.brand, max_chars=BRAND_MAX_LENGTH)
            retailer = st.text_input(
                "Retailer", value=initial.retailer, max_chars=RETAILER_MAX_LENGTH
            )
        with col2:
            model = st.text_input("Model", value=initial.model, max_chars=MODEL_MAX_LENGTH)
            price = st.text_input("Price *", value=initial.price, placeholder="0.00")

        description = st.text_area("Description", value=initial.product_description)

        submitted = st.form_submit_button(submit_label, type="primary")

    if not submitted:
        return None

    return ProductDraft(
        product_key=initial.product_key if lock_key else product_key,
        product_name=product_name,
        brand=brand,
        model=model,
        retailer=retailer,
        price=price,
        product_description=description,
    )


def show_operation_errors(store: ProductStore, operation: str):
    """Show the operation's error message and any per-field messages."""
    state = store.state(operation)
    if not state.is_error:
        return
    st.error(state.error)
    for field, message in state.field_errors.items():
        st.write(f"• **{FIELD_LABELS.get(field, field)}**: {message}")
