"""Application service: List Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self) -> list[ProductDTO]:
        """Return every product, sorted by name for display.

        The store itself guarantees no order.
        """
        products = await self._product_repo.list_all()
        return [
            ProductDTO.from_product(p)
            for p in sorted(products, key=lambda p: (p.name.lower(), p.id))
        ]
