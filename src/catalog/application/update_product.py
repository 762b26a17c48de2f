"""Application service: Update Product use case."""

from __future__ import annotations

from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
    ) -> Product:
        """Change a product's name and/or description.

        The stored document is replaced as a whole; fields not given
        keep their current value.
        """
        current = await self._product_repo.get(product_id)
        if current is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if name is not None and not name.strip():
            raise ValidationError("Product name cannot be blank")

        updated = Product(
            id=current.id,
            name=name.strip() if name is not None else current.name,
            description=description if description is not None else current.description,
        )
        await self._product_repo.save(updated)
        return updated
