"""Contract tests for the ProductRepository convenience aliases."""

import pytest

from catalog.domain.model.product import Product
from tests.fakes import FakeProductRepository


@pytest.mark.asyncio
async def test_create_persists_product():
    repo = FakeProductRepository()
    product = Product(id="p1", name="Widget", description="A widget")

    result = await repo.create(product)

    assert result is None
    assert await repo.get_by_id("p1") == product


@pytest.mark.asyncio
async def test_get_returns_product():
    product = Product(id="p1", name="Widget", description="A widget")
    repo = FakeProductRepository([product])

    assert await repo.get("p1") == product


@pytest.mark.asyncio
async def test_get_unknown_returns_none():
    repo = FakeProductRepository()
    assert await repo.get("missing") is None


def test_product_equality_is_by_value():
    a = Product(id="p1", name="Widget", description="A widget")
    b = Product(id="p1", name="Widget", description="A widget")
    assert a == b
    assert a != Product(id="p1", name="Widget", description="Changed")
