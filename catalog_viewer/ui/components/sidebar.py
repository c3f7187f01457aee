"""Sidebar navigation component."""

import streamlit as st

from catalog_viewer.config import settings

PAGES = {
    "Product Catalog": "📦",
    "Add Product": "➕",
    "Product Details": "🔍",
    "Brand Summary": "📊",
}


def navigate(page: str) -> None:
    """Switch page on the next rerun."""
    st.session_state.next_page = page


def flash(message: str) -> None:
    """Queue a success message for the next rerun."""
    st.session_state.flash = message


def show_flash() -> None:
    """Show and clear a queued success message."""
    message = st.session_state.pop("flash", None)
    if message:
        st.success(message)


def apply_pending_navigation() -> None:
    """Move a requested page into the navigation widget before it renders."""
    if "next_page" in st.session_state:
        st.session_state.page = st.session_state.pop("next_page")


def render_sidebar() -> str:
    """Render the sidebar navigation and return selected page."""
    with st.sidebar:
        st.title("🛒 Catalog Viewer")
        st.caption(f"API: {settings.api_base_url}")
        st.divider()

        st.subheader("Navigation")
        selected_page = st.radio(
            "Select Page",
            options=list(PAGES.keys()),
            format_func=lambda x: f"{PAGES[x]} {x}",
            label_visibility="collapsed",
            key="page",
        )

    return selected_page
