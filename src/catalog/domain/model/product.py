"""Product entity.

Products are identified by a caller-supplied string id. They are replaced
wholesale on update; there is no partial mutation at the storage level.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    description: str
