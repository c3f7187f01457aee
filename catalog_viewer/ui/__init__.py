"""Streamlit user interface for Catalog Viewer."""
