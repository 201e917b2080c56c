"""Content catalog gateway."""

from recommender.services.catalog.client import (
    CatalogClient,
    catalog_client,
    coerce_id,
    get_catalog_client,
)

__all__ = ["CatalogClient", "catalog_client", "coerce_id", "get_catalog_client"]
