"""Application service: Add Product use case."""

from __future__ import annotations

import uuid

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(
        self,
        name: str,
        description: str = "",
        product_id: str | None = None,
    ) -> Product:
        """Add a new product to the catalog.

        A random hex ID is assigned when the caller does not supply one.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        if product_id is not None:
            product_id = product_id.strip()
            if not product_id:
                raise ValidationError("Product ID cannot be blank")
            if await self._product_repo.get(product_id) is not None:
                raise ValidationError(f"Product with ID '{product_id}' already exists")
        else:
            product_id = uuid.uuid4().hex

        product = Product(id=product_id, name=name.strip(), description=description)
        await self._product_repo.create(product)
        return product
