"""Tests for the search dispatcher."""

from unittest.mock import AsyncMock, Mock

import pytest

from catalog_viewer.schemas.product import SearchCriteria, SearchField
from catalog_viewer.services.search_dispatcher import SearchDispatcher


@pytest.fixture
def mock_store():
    store = Mock()
    store.load = AsyncMock(return_value=True)
    store.apply_search = AsyncMock(return_value=True)
    return store


class TestSearchDispatcher:
    """Test SearchDispatcher."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("term", ["", "   ", "\t\n", None])
    async def test_blank_term_loads_everything(self, mock_store, term):
        dispatcher = SearchDispatcher(mock_store)

        assert await dispatcher.dispatch(term, SearchField.BRAND) is True

        mock_store.load.assert_awaited_once()
        mock_store.apply_search.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", [SearchField.NAME, SearchField.BRAND, "name", "brand"])
    async def test_term_issues_one_search_on_selected_field(self, mock_store, field):
        dispatcher = SearchDispatcher(mock_store)

        await dispatcher.dispatch("  Acme ", field)

        mock_store.load.assert_not_called()
        mock_store.apply_search.assert_awaited_once_with(
            SearchCriteria(field=SearchField(field), term="Acme")
        )

    @pytest.mark.asyncio
    async def test_unknown_field_rejected(self, mock_store):
        with pytest.raises(ValueError):
            await SearchDispatcher(mock_store).dispatch("x", "model")

    @pytest.mark.asyncio
    async def test_clear_loads_everything(self, mock_store):
        await SearchDispatcher(mock_store).clear()
        mock_store.load.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_blank_search_matches_load_against_server(self, store, seeded_server):
        """Test a whitespace search yields the same collection as load()."""
        dispatcher = SearchDispatcher(store)

        await store.load()
        loaded = list(store.products)
        await dispatcher.dispatch("nothing-matches", SearchField.NAME)
        assert store.products == []

        await dispatcher.dispatch("  ", SearchField.NAME)

        assert store.products == loaded

    @pytest.mark.asyncio
    async def test_brand_search_against_server(self, store, seeded_server):
        await SearchDispatcher(store).dispatch("ACME", SearchField.BRAND)

        assert [p.product_key for p in store.products] == [1, 2, 3]
        _, _, params, _ = seeded_server.requests[-1]
        assert params == {"brand": "ACME"}
