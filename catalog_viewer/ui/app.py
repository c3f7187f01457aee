"""Main Streamlit application for Catalog Viewer."""

import streamlit as st

from catalog_viewer.config import settings
from catalog_viewer.services import ProductApiClient, ProductStore
from catalog_viewer.ui.components.sidebar import (
    apply_pending_navigation,
    render_sidebar,
    show_flash,
)
from catalog_viewer.ui.pages import add_product, brand_summary, product_details, products
from catalog_viewer.utils.logger import logger


def init_session_state():
    """Initialize session state variables."""
    if "store" not in st.session_state:
        st.session_state.store = ProductStore(ProductApiClient(settings.api_base_url))
    if "selected_product_key" not in st.session_state:
        st.session_state.selected_product_key = None


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title=settings.app_name,
        page_icon="🛒",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    init_session_state()
    apply_pending_navigation()

    selected_page = render_sidebar()

    page_routes = {
        "Product Catalog": products.show,
        "Add Product": add_product.show,
        "Product Details": product_details.show,
        "Brand Summary": brand_summary.show,
    }

    if selected_page in page_routes:
        try:
            show_flash()
            page_routes[selected_page](st.session_state.store)
        except Exception as e:
            logger.error(f"Error displaying page {selected_page}: {e}")
            st.error(f"An error occurred: {str(e)}")
    else:
        st.error(f"Page not found: {selected_page}")


if __name__ == "__main__":
    main()
