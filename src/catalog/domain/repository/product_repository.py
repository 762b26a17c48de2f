"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (Cosmos DB, in-memory)
live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):
    """Asynchronous persistence contract for products.

    A missing record is never an error: reads return ``None`` and
    ``delete`` succeeds. Every other failure propagates to the caller.
    """

    @abstractmethod
    async def save(self, product: Product) -> None:
        """Insert the product, or replace the stored one with the same ID."""

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    async def delete(self, product_id: str) -> None:
        """Remove a product. Removing an absent product is a no-op."""

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in the catalog, in no particular order."""

    # --- Convenience aliases --------------------------------------------------

    async def create(self, product: Product) -> None:
        """Persist a fully populated product."""
        await self.save(product)

    async def get(self, product_id: str) -> Product | None:
        return await self.get_by_id(product_id)
