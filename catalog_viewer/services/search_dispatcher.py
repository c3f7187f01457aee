"""Search dispatcher choosing between listing and filtering."""

from typing import Union

from catalog_viewer.schemas.product import SearchCriteria, SearchField
from catalog_viewer.services.product_store import ProductStore


class SearchDispatcher:
    """Routes a raw search term to the right store operation."""

    def __init__(self, store: ProductStore):
        self.store = store

    async def dispatch(self, term: str, field: Union[SearchField, str] = SearchField.NAME) -> bool:
        """
        Run a search for the term against one field.

        A blank term lists every product instead of searching. Otherwise
        exactly one search is issued, on the selected field only.

        Args:
            term: Raw search text
            field: Field to match (name or brand)

        Returns:
            True if the store operation succeeded
        """
        if term is None or not term.strip():
            return await self.store.load()

        criteria = SearchCriteria(field=SearchField(field), term=term.strip())
        return await self.store.apply_search(criteria)

    async def clear(self) -> bool:
        """Drop any filter and list every product."""
        return await self.store.load()
