"""
Products module data models.

Field names are snake_case in Python and in the database; the JSON
surface uses camelCase aliases (``imageUrl``, ``isFeatured``).

Prices are ``Decimal`` with at most two decimal places and ten whole
digits, matching the ``NUMERIC(12, 2)`` column. They are written to JSON
as numbers.
"""

from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 2


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CamelModel):
    """A catalog entry."""

    id: int
    title: str
    description: str
    price: Price
    image_url: str
    is_featured: bool = False


class ProductCreate(CamelModel):
    """Request body for creating a product."""

    title: str = Field(..., min_length=3, description="Product title")
    description: str = Field(..., min_length=10, description="Product description")
    price: Price = Field(
        ...,
        gt=0,
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        description="Unit price",
    )
    image_url: str = Field(..., min_length=1, description="Image URL or path")
    is_featured: bool = Field(default=False, description="Show on the front page")

    def to_record(self) -> dict[str, Any]:
        """Column values for the ``products`` table."""
        return self.model_dump(mode="json")


class ProductUpdate(CamelModel):
    """
    Request body for updating a product.

    Every field is optional; omitted fields are left untouched. An explicit
    ``null`` is rejected.
    """

    title: Optional[str] = Field(None, min_length=3)
    description: Optional[str] = Field(None, min_length=10)
    price: Optional[Price] = Field(
        None, gt=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    image_url: Optional[str] = Field(None, min_length=1)
    is_featured: Optional[bool] = None

    @field_validator("title", "description", "price", "image_url", "is_featured", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must not be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client sent, as column values."""
        return self.model_dump(mode="json", exclude_unset=True)


class ProductCreatedResponse(CamelModel):
    message: str
    new_product: Product


class ProductUpdatedResponse(CamelModel):
    message: str
    updated: Product
