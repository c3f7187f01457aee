"""Command-line interface for Catalog Viewer."""

import asyncio
import sys

import click
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from .config import settings
from .schemas.product import Product, ProductDraft, SearchField
from .services import BrandStatistics, ProductApiClient, ProductStore, SearchDispatcher
from .utils.formatting import display_value, format_price
from .utils.logger import logger, setup_logger


def build_store() -> ProductStore:
    """Create a store talking to the configured API."""
    return ProductStore(ProductApiClient(settings.api_base_url))


def run(store: ProductStore, coro):
    """Run one store coroutine to completion and release the HTTP session."""
    try:
        return asyncio.run(coro)
    finally:
        store.client.close()


def fail(store: ProductStore, operation: str) -> None:
    """Print the operation's error (and any field errors) and exit non-zero."""
    state = store.state(operation)
    click.echo(f"❌ Error: {state.error}", err=True)
    for field, message in state.field_errors.items():
        click.echo(f"   {field}: {message}", err=True)
    sys.exit(1)


def echo_products(products, limit=None):
    shown = products[:limit] if limit else products
    if not shown:
        click.echo("No products found.")
        return

    click.echo(f"\nFound {len(products)} products:\n")
    for p in shown:
        click.echo(f"Key: {p.product_key} | {p.product_name}")
        click.echo(f"   Brand: {display_value(p.brand)} | Price: {format_price(p.price)}")
        click.echo(f"   Model: {display_value(p.model)} | Retailer: {display_value(p.retailer)}")
        click.echo()
    if len(shown) < len(products):
        click.echo(f"... {len(products) - len(shown)} more (use --limit to show them)")


def echo_product(product: Product):
    click.echo(f"Key:         {product.product_key}")
    click.echo(f"Name:        {product.product_name}")
    click.echo(f"Brand:       {display_value(product.brand)}")
    click.echo(f"Model:       {display_value(product.model)}")
    click.echo(f"Retailer:    {display_value(product.retailer)}")
    click.echo(f"Price:       {format_price(product.price)}")
    click.echo(f"Description: {display_value(product.product_description)}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every API request")
def cli(verbose):
    """Catalog Viewer CLI."""
    if verbose:
        setup_logger(level="DEBUG")


@cli.command("list")
@click.option("--limit", default=settings.page_size, help="Number of products to show")
def list_products(limit):
    """List all products."""
    store = build_store()
    if not run(store, store.load()):
        fail(store, "load")
    echo_products(store.products, limit)


@cli.command()
@click.argument("term")
@click.option(
    "--by",
    "field",
    type=click.Choice([f.value for f in SearchField]),
    default=SearchField.NAME.value,
    help="Field to search",
)
@click.option("--limit", default=settings.page_size, help="Number of products to show")
def search(term, field, limit):
    """Search products by name or brand."""
    store = build_store()
    dispatcher = SearchDispatcher(store)
    if not run(store, dispatcher.dispatch(term, field)):
        fail(store, "search" if term.strip() else "load")
    echo_products(store.products, limit)


@cli.command()
@click.argument("key", type=int)
def show(key):
    """Show full details of one product."""
    store = build_store()
    if not run(store, store.load_one(key)):
        fail(store, "load_one")
    echo_product(store.current)


@cli.command()
@click.option("--key", prompt="Product key", help="Unique product key")
@click.option("--name", prompt="Product name", help="Product name")
@click.option("--price", prompt=True, help="Price")
@click.option("--brand", default="", help="Brand")
@click.option("--model", default="", help="Model")
@click.option("--retailer", default="", help="Retailer")
@click.option("--description", default="", help="Description")
def add(key, name, price, brand, model, retailer, description):
    """Add a new product."""
    store = build_store()
    draft = ProductDraft(
        product_key=key,
        product_name=name,
        brand=brand,
        model=model,
        retailer=retailer,
        price=price,
        product_description=description,
    )
    if not run(store, store.apply_create(draft)):
        fail(store, "create")
    click.echo(f"✅ Product added: {name} (Key: {key})")


@cli.command()
@click.argument("key", type=int)
@click.option("--name", help="Product name")
@click.option("--price", help="Price")
@click.option("--brand", help="Brand")
@click.option("--model", help="Model")
@click.option("--retailer", help="Retailer")
@click.option("--description", help="Description")
def update(key, name, price, brand, model, retailer, description):
    """Update a product; fields not given keep their current value."""
    changes = {
        "product_name": name,
        "price": price,
        "brand": brand,
        "model": model,
        "retailer": retailer,
        "product_description": description,
    }
    changes = {field: value for field, value in changes.items() if value is not None}
    if not changes:
        click.echo("Nothing to update.")
        return

    store = build_store()

    async def load_and_update():
        if not await store.load_one(key):
            return "load_one"
        current = ProductDraft.from_product(store.current)
        draft = ProductDraft(**{**current.model_dump(), **changes})
        if not await store.apply_update(draft):
            return "update"
        return None

    failed = run(store, load_and_update())
    if failed:
        fail(store, failed)
    click.echo("✅ Product updated:")
    echo_product(store.current)


@cli.command()
@click.argument("key", type=int)
@click.confirmation_option(prompt="Are you sure you want to delete this product?")
def delete(key):
    """Delete a product."""
    store = build_store()
    if not run(store, store.apply_delete(key)):
        fail(store, "delete")
    click.echo(f"✅ Product {key} deleted")


@cli.command()
def summary():
    """Show product counts per brand."""
    store = build_store()
    if not run(store, store.load_summary()):
        fail(store, "summary")

    stats = BrandStatistics.from_summary(store.summary)
    click.echo(f"\n📊 Brand Summary\n")
    click.echo(f"Total Products: {stats.total_products}")
    click.echo(f"Total Brands: {stats.total_brands}")
    if not stats.buckets:
        click.echo("\nNo brand data available.")
        return

    click.echo("\nProducts by Brand:")
    for bucket in stats.buckets:
        click.echo(f"   {bucket.brand}: {bucket.count} products ({stats.percentage(bucket)}%)")

    top = stats.most_popular
    click.echo("\nStatistics:")
    click.echo(f"   Most Popular Brand: {top.brand} ({top.count} products)")
    click.echo(f"   Average Products per Brand: {stats.average_per_brand}")
    click.echo(f"   Brands with Single Product: {stats.singleton_brand_count}")


@cli.command()
def count():
    """Show the total number of products."""
    store = build_store()
    if not run(store, store.load_count()):
        fail(store, "count")
    click.echo(f"Total products: {store.total_count}")
    logger.debug(f"Counted {store.total_count} products at {settings.api_base_url}")


if __name__ == "__main__":
    cli()
