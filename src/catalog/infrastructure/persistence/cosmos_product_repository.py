"""Azure Cosmos DB implementation of ProductRepository."""

from __future__ import annotations

import logging

from azure.cosmos.aio import CosmosClient
from azure.cosmos.exceptions import CosmosResourceNotFoundError
from azure.identity.aio import DefaultAzureCredential

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.product_document import (
    to_document,
    to_domain,
)

logger = logging.getLogger(__name__)

_LIST_QUERY = "SELECT * FROM c"


class CosmosProductRepository(ProductRepository):
    """Stores products as documents in a single Cosmos DB container.

    Every document is addressed by ``(id, partition_key)`` where the
    partition key is the fixed value given at construction. Building the
    repository performs no I/O; a bad endpoint or credential only shows up
    on the first operation.

    Documents carry no partition key field of their own, so the container
    must be provisioned such that every stored product resolves to the
    configured partition key value; otherwise reads and deletes addressed
    by ``(id, partition_key)`` will not find what ``save`` wrote.

    Without an access ``key`` the client authenticates through
    ``DefaultAzureCredential`` (managed identity, Azure CLI login, ...).
    """

    def __init__(
        self,
        endpoint: str,
        database_id: str,
        container_id: str,
        partition_key: str,
        key: str | None = None,
    ) -> None:
        self._partition_key = partition_key
        self._owned_credential: DefaultAzureCredential | None = None

        if key:
            credential = key
        else:
            self._owned_credential = DefaultAzureCredential()
            credential = self._owned_credential

        self._client = CosmosClient(endpoint, credential=credential)
        database = self._client.get_database_client(database_id)
        self._container = database.get_container_client(container_id)
        logger.debug(
            "Cosmos product repository ready for %s/%s",
            database_id,
            container_id,
        )

    # --- ProductRepository interface ------------------------------------------

    async def save(self, product: Product) -> None:
        try:
            await self._container.upsert_item(body=to_document(product))
        except Exception:
            logger.exception("Failed to save product %s", product.id)
            raise

    async def get_by_id(self, product_id: str) -> Product | None:
        try:
            item = await self._container.read_item(
                item=product_id, partition_key=self._partition_key
            )
            return to_domain(item) if item else None
        except CosmosResourceNotFoundError:
            return None
        except Exception:
            logger.exception("Failed to fetch product %s", product_id)
            raise

    async def delete(self, product_id: str) -> None:
        try:
            await self._container.delete_item(
                item=product_id, partition_key=self._partition_key
            )
        except CosmosResourceNotFoundError:
            return
        except Exception:
            logger.exception("Failed to delete product %s", product_id)
            raise

    async def list_all(self) -> list[Product]:
        try:
            return [
                to_domain(item)
                async for item in self._container.query_items(query=_LIST_QUERY)
            ]
        except Exception:
            logger.exception("Failed to list products")
            raise

    # --- Lifecycle ------------------------------------------------------------

    async def close(self) -> None:
        """Release the HTTP session and any credential this repository created."""
        await self._client.close()
        if self._owned_credential is not None:
            await self._owned_credential.close()

    async def __aenter__(self) -> CosmosProductRepository:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
