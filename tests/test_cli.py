"""Tests for the command-line interface."""

from unittest.mock import patch

import pytest
import requests
from click.testing import CliRunner

from catalog_viewer.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def cli_store(store):
    """Point every CLI command at the fake-server store."""
    with patch("catalog_viewer.cli.build_store", return_value=store):
        yield store


class TestListAndSearch:
    """Test list and search commands."""

    def test_list(self, runner, cli_store, seeded_server):
        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 0
        assert "Found 4 products" in result.output
        assert "Key: 1 | Anvil Deluxe" in result.output
        assert "Price: $149.99" in result.output
        assert "Retailer: N/A" in result.output

    def test_list_limit(self, runner, cli_store, seeded_server):
        result = runner.invoke(cli, ["list", "--limit", "2"])

        assert "Key: 3" not in result.output
        assert "2 more" in result.output

    def test_list_empty(self, runner, cli_store, server):
        result = runner.invoke(cli, ["list"])
        assert "No products found." in result.output

    def test_list_unreachable(self, runner, cli_store, server):
        server.fail_with = requests.ConnectionError("down")

        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 1
        assert "Cannot reach the catalog server." in result.output

    def test_search_by_brand(self, runner, cli_store, seeded_server):
        result = runner.invoke(cli, ["search", "zeta", "--by", "brand"])

        assert result.exit_code == 0
        assert "Found 1 products" in result.output
        assert seeded_server.requests[-1][2] == {"brand": "zeta"}

    def test_search_blank_lists_all(self, runner, cli_store, seeded_server):
        result = runner.invoke(cli, ["search", "  "])

        assert "Found 4 products" in result.output
        assert seeded_server.requests[-1][1].endswith("/products")


class TestMutations:
    """Test add, update and delete commands."""

    def test_add(self, runner, cli_store, server):
        result = runner.invoke(
            cli, ["add", "--key", "101", "--name", "Widget", "--price", "9.99", "--brand", "Acme"]
        )

        assert result.exit_code == 0
        assert "✅ Product added: Widget (Key: 101)" in result.output
        assert server.products[101]["brand"] == "Acme"

    def test_add_prompts_for_required_fields(self, runner, cli_store, server):
        result = runner.invoke(cli, ["add"], input="7\nLamp\n3.50\n")

        assert result.exit_code == 0
        assert server.products[7]["productName"] == "Lamp"

    def test_add_invalid_shows_field_errors(self, runner, cli_store, server):
        result = runner.invoke(cli, ["add", "--key", "-1", "--name", "Widget", "--price", "abc"])

        assert result.exit_code == 1
        assert "product_key: Product Key must be a positive number" in result.output
        assert "price: Price must be a non-negative number" in result.output
        assert server.requests == []

    def test_add_duplicate(self, runner, cli_store, seeded_server):
        result = runner.invoke(cli, ["add", "--key", "1", "--name", "Dup", "--price", "1"])

        assert result.exit_code == 1
        assert "A product with this Product Key already exists." in result.output

    def test_update_keeps_unchanged_fields(self, runner, cli_store, seeded_server):
        result = runner.invoke(cli, ["update", "1", "--price", "120"])

        assert result.exit_code == 0
        assert "Price:       $120.00" in result.output
        stored = seeded_server.products[1]
        assert stored["price"] == "120"
        assert stored["model"] == "AD-1"
        assert stored["productName"] == "Anvil Deluxe"

    def test_update_nothing(self, runner, cli_store, seeded_server):
        result = runner.invoke(cli, ["update", "1"])

        assert "Nothing to update." in result.output
        assert seeded_server.requests == []

    def test_update_missing(self, runner, cli_store, server):
        result = runner.invoke(cli, ["update", "5", "--name", "X"])

        assert result.exit_code == 1
        assert "Product not found." in result.output

    def test_delete_requires_confirmation(self, runner, cli_store, seeded_server):
        result = runner.invoke(cli, ["delete", "2"], input="n\n")

        assert result.exit_code != 0
        assert 2 in seeded_server.products

    def test_delete_twice(self, runner, cli_store, seeded_server):
        first = runner.invoke(cli, ["delete", "2", "--yes"])
        second = runner.invoke(cli, ["delete", "2", "--yes"])

        assert first.exit_code == 0
        assert "✅ Product 2 deleted" in first.output
        assert second.exit_code == 1
        assert "Product not found." in second.output


class TestOptions:
    """Test group-level options."""

    def test_verbose_enables_debug_logging(self, runner, cli_store, server):
        with patch("catalog_viewer.cli.setup_logger") as mock_setup:
            result = runner.invoke(cli, ["--verbose", "count"])

        assert result.exit_code == 0
        mock_setup.assert_called_once_with(level="DEBUG")

    def test_default_keeps_configured_level(self, runner, cli_store, server):
        with patch("catalog_viewer.cli.setup_logger") as mock_setup:
            runner.invoke(cli, ["count"])

        mock_setup.assert_not_called()


class TestReports:
    """Test show, summary and count commands."""

    def test_show(self, runner, cli_store, seeded_server):
        result = runner.invoke(cli, ["show", "1"])

        assert result.exit_code == 0
        assert "Name:        Anvil Deluxe" in result.output
        assert "Description: Heavy" in result.output

    def test_summary(self, runner, cli_store, seeded_server):
        result = runner.invoke(cli, ["summary"])

        assert result.exit_code == 0
        assert "Total Products: 4" in result.output
        assert "Acme: 3 products (75.0%)" in result.output
        assert "Most Popular Brand: Acme (3 products)" in result.output
        assert "Average Products per Brand: 2.0" in result.output
        assert "Brands with Single Product: 1" in result.output

    def test_summary_empty(self, runner, cli_store, server):
        result = runner.invoke(cli, ["summary"])
        assert "No brand data available." in result.output

    def test_count(self, runner, cli_store, seeded_server):
        result = runner.invoke(cli, ["count"])
        assert "Total products: 4" in result.output
