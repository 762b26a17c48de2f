"""Storage shape of a product inside a Cosmos DB container.

Kept apart from the domain ``Product`` even though the fields currently
match, so the stored schema can grow storage-only metadata without the
domain noticing.
"""

from __future__ import annotations

from typing import Any, Mapping, TypedDict

from catalog.domain.model.product import Product


class ProductDocument(TypedDict):
    id: str
    name: str
    description: str


def to_document(product: Product) -> ProductDocument:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
    }


def to_domain(document: Mapping[str, Any]) -> Product:
    """Build a Product from a stored item.

    Only the known fields are read, so Cosmos system properties
    (``_rid``, ``_etag``, ``_ts`` ...) are dropped. A missing field
    raises ``KeyError``.
    """
    return Product(
        id=document["id"],
        name=document["name"],
        description=document["description"],
    )
