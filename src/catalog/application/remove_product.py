"""Application service: Remove Product use case."""

from __future__ import annotations

from catalog.domain.repository.product_repository import ProductRepository


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, product_id: str) -> None:
        # Removing an unknown product is not an error.
        await self._product_repo.delete(product_id)
