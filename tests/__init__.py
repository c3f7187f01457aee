"""Test suite for Catalog Viewer."""
