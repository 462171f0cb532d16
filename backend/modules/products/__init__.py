"""
Product catalog module.

Public API:
- IProductService / IProductRepository: Interfaces
- ProductService: Service implementation
- Product, ProductCreate, ProductUpdate: Models
- InvalidProductIdError, ProductNotFoundError: Exceptions
"""

from .interfaces import IProductService, IProductRepository
from .models import Product, ProductCreate, ProductUpdate
from .service import ProductService, parse_product_id
from .exceptions import InvalidProductIdError, ProductNotFoundError

__all__ = [
    "IProductService",
    "IProductRepository",
    "ProductService",
    "parse_product_id",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "InvalidProductIdError",
    "ProductNotFoundError",
]
