"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access. Repositories are the only code that knows table
and column names.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Subclasses implement domain-specific data access methods and handle
    row-to-Pydantic model mapping internally.

    Example:
        class ProductRepository(BaseRepository[Product]):
            def get_by_id(self, product_id: int) -> Optional[Product]:
                result = self._db.table("products").select("*").eq("id", product_id).execute()
                if not result.data:
                    return None
                return self._map_to_product(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db
