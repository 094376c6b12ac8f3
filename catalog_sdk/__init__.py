from .catalog_client import CatalogClient, AsyncCatalogClient

__all__ = ["CatalogClient", "AsyncCatalogClient"]
