"""
Product repository for database access.

Encapsulates the Supabase queries for the ``products`` table.
"""

from decimal import Decimal
from typing import Any, Optional

from shared.repository import BaseRepository

from .models import Product

PRODUCTS_TABLE = "products"


class ProductRepository(BaseRepository[Product]):
    """Repository for catalog products."""

    def list_all(self) -> list[Product]:
        result = self._db.table(PRODUCTS_TABLE).select("*").order("id").execute()
        return [self._map_to_product(row) for row in result.data]

    def get_by_id(self, product_id: int) -> Optional[Product]:
        result = self._db.table(PRODUCTS_TABLE).select("*").eq("id", product_id).execute()
        if not result.data:
            return None
        return self._map_to_product(result.data[0])

    def create(self, data: dict[str, Any]) -> Product:
        result = self._db.table(PRODUCTS_TABLE).insert(data).execute()
        return self._map_to_product(result.data[0])

    def update(self, product_id: int, data: dict[str, Any]) -> Optional[Product]:
        """
        Update a product.

        PostgREST returns the affected rows; none means the ID was absent.
        """
        result = self._db.table(PRODUCTS_TABLE).update(data).eq("id", product_id).execute()
        if not result.data:
            return None
        return self._map_to_product(result.data[0])

    def delete(self, product_id: int) -> bool:
        result = self._db.table(PRODUCTS_TABLE).delete().eq("id", product_id).execute()
        return bool(result.data)

    def delete_all(self) -> int:
        """Delete every product and return how many were removed."""
        # PostgREST refuses a DELETE without a filter.
        result = self._db.table(PRODUCTS_TABLE).delete().gt("id", 0).execute()
        return len(result.data or [])

    def _map_to_product(self, row: dict[str, Any]) -> Product:
        return Product(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            price=Decimal(str(row["price"])),
            image_url=row["image_url"],
            is_featured=bool(row.get("is_featured", False)),
        )
