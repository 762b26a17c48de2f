"""CLI commands for the Product entity."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.remove_product import RemoveProductHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.config import ConfigurationError
from catalog.infrastructure.persistence.cosmos_product_repository import (
    CosmosProductRepository,
)

T = TypeVar("T")


def _run(action: Callable[[CosmosProductRepository], Awaitable[T]]) -> T:
    """Run one use case against a fresh repository, then close it."""

    async def _main() -> T:
        repo = product_repository()
        try:
            return await action(repo)
        finally:
            await repo.close()

    try:
        return asyncio.run(_main())
    except (DomainException, ConfigurationError) as exc:
        raise click.ClickException(str(exc))


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--id", "product_id", default=None, help="Explicit product ID.")
def product_add(name: str, description: str, product_id: str | None) -> None:
    """Add a new product to the catalog."""
    product = _run(
        lambda repo: AddProductHandler(product_repo=repo).handle(
            name=name, description=description, product_id=product_id
        )
    )
    click.echo(f"Product #{product.id} '{product.name}' added")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    dto = _run(lambda repo: ShowProductHandler(product_repo=repo).handle(product_id))

    click.echo(f"ID:          {dto.id}")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Description: {dto.description}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = _run(lambda repo: ListProductsHandler(product_repo=repo).handle())

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} Description")
    click.echo("-" * 70)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<20} {p.description}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
def product_update(product_id: str, name: str | None, description: str | None) -> None:
    """Update a product's name or description."""
    if name is None and description is None:
        raise click.UsageError("Nothing to update: pass --name and/or --description")

    _run(
        lambda repo: UpdateProductHandler(product_repo=repo).handle(
            product_id=product_id, name=name, description=description
        )
    )
    click.echo(f"Product #{product_id} updated")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Remove a product from the catalog."""
    _run(lambda repo: RemoveProductHandler(product_repo=repo).handle(product_id))
    click.echo(f"Product #{product_id} removed")
