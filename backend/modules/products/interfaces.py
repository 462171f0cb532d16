"""
Products module interfaces.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.exceptions import StorefrontError
from shared.models import AuthenticatedUser
from shared.result import Result

from .models import Product, ProductCreate, ProductUpdate


@runtime_checkable
class IProductRepository(Protocol):
    """Persistence contract for products."""

    def list_all(self) -> list[Product]:
        ...

    def get_by_id(self, product_id: int) -> Optional[Product]:
        ...

    def create(self, data: dict[str, Any]) -> Product:
        ...

    def update(self, product_id: int, data: dict[str, Any]) -> Optional[Product]:
        """Apply ``data`` and return the updated product, or None if absent."""
        ...

    def delete(self, product_id: int) -> bool:
        """Delete a product; False if it did not exist."""
        ...


@runtime_checkable
class IProductService(Protocol):
    """
    Interface for catalog operations.

    Product IDs arrive as the raw path segment and are validated here
    before any store access.
    """

    async def list_products(self) -> Result[list[Product], StorefrontError]:
        ...

    async def get_product(self, raw_id: str) -> Result[Product, StorefrontError]:
        """
        Returns:
            Ok(Product), Err(InvalidProductIdError) or Err(ProductNotFoundError)
        """
        ...

    async def create_product(
        self, payload: ProductCreate, actor: AuthenticatedUser
    ) -> Result[Product, StorefrontError]:
        ...

    async def update_product(
        self, raw_id: str, payload: ProductUpdate, actor: AuthenticatedUser
    ) -> Result[Product, StorefrontError]:
        """
        Returns:
            Ok(Product), Err(InvalidProductIdError) or Err(ProductNotFoundError)
        """
        ...

    async def delete_product(
        self, raw_id: str, actor: AuthenticatedUser
    ) -> Result[int, StorefrontError]:
        """
        Returns:
            Ok(deleted ID), Err(InvalidProductIdError) or Err(ProductNotFoundError)
        """
        ...
