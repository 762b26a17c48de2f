"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.infrastructure.config import get_settings
from catalog.infrastructure.persistence.cosmos_product_repository import (
    CosmosProductRepository,
)


def product_repository() -> CosmosProductRepository:
    settings = get_settings()
    return CosmosProductRepository(
        endpoint=settings.endpoint,
        database_id=settings.database_id,
        container_id=settings.container_id,
        partition_key=settings.partition_key,
        key=settings.key,
    )
