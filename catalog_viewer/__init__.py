"""Catalog Viewer: client-side product catalog browser for a remote CRUD API."""

__version__ = "0.1.0"
