"""Settings for the Cosmos DB connection, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


class ConfigurationError(Exception):
    """Required configuration is missing."""


@dataclass(frozen=True)
class CosmosSettings:
    """Typed view of the COSMOS_* environment variables."""

    endpoint: str
    database_id: str
    container_id: str
    partition_key: str
    key: str | None = None


_REQUIRED = {
    "endpoint": "COSMOS_ENDPOINT",
    "database_id": "COSMOS_DATABASE_ID",
    "container_id": "COSMOS_CONTAINER_ID",
    "partition_key": "COSMOS_PARTITION_KEY",
}


@lru_cache
def get_settings() -> CosmosSettings:
    """Read the current environment and build a CosmosSettings instance."""
    values = {field: (os.getenv(var) or "").strip() for field, var in _REQUIRED.items()}
    missing = [_REQUIRED[field] for field, value in values.items() if not value]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    return CosmosSettings(key=(os.getenv("COSMOS_KEY") or "").strip() or None, **values)
