"""HTTP client for the crudhub API plus client-side cart state."""

from .api_client import ProjectsClient, StorefrontClient
from .cart import Cart, CartLine

__all__ = ["Cart", "CartLine", "ProjectsClient", "StorefrontClient"]
