"""
Products module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class InvalidProductIdError(ValidationError):
    """Raised when a product ID is not a positive integer."""

    def __init__(self, raw_id: str):
        super().__init__(
            "Invalid product ID",
            code="INVALID_PRODUCT_ID",
            details={"id": raw_id},
        )


class ProductNotFoundError(NotFoundError):
    """Raised when a product is not found."""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"id": product_id},
        )
