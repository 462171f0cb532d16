"""
Product catalog service.

A thin layer over the product repository: validates IDs, turns missing
rows into ``ProductNotFoundError`` and logs writes with the acting user.
Store calls run in worker threads; the Supabase client is synchronous.
"""

import asyncio
import logging

from shared.exceptions import StorefrontError
from shared.models import AuthenticatedUser
from shared.result import Ok, Err, Result

from .exceptions import InvalidProductIdError, ProductNotFoundError
from .interfaces import IProductRepository, IProductService
from .models import Product, ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

# Upper bound of the ``products.id`` bigint column.
MAX_PRODUCT_ID = 2**63 - 1


def parse_product_id(raw_id: str) -> Result[int, InvalidProductIdError]:
    """Accept only a plain positive decimal integer."""
    if not raw_id.isascii() or not raw_id.isdigit():
        return Err(InvalidProductIdError(raw_id))
    product_id = int(raw_id)
    if product_id <= 0 or product_id > MAX_PRODUCT_ID:
        return Err(InvalidProductIdError(raw_id))
    return Ok(product_id)


class ProductService(IProductService):
    """Catalog operations backed by an ``IProductRepository``."""

    def __init__(self, products: IProductRepository):
        self._products = products

    async def list_products(self) -> Result[list[Product], StorefrontError]:
        return Ok(await asyncio.to_thread(self._products.list_all))

    async def get_product(self, raw_id: str) -> Result[Product, StorefrontError]:
        parsed = parse_product_id(raw_id)
        if isinstance(parsed, Err):
            return parsed

        product = await asyncio.to_thread(self._products.get_by_id, parsed.value)
        if product is None:
            return Err(ProductNotFoundError(parsed.value))
        return Ok(product)

    async def create_product(
        self, payload: ProductCreate, actor: AuthenticatedUser
    ) -> Result[Product, StorefrontError]:
        product = await asyncio.to_thread(self._products.create, payload.to_record())
        logger.info("User %s created product %s", actor.id, product.id)
        return Ok(product)

    async def update_product(
        self, raw_id: str, payload: ProductUpdate, actor: AuthenticatedUser
    ) -> Result[Product, StorefrontError]:
        parsed = parse_product_id(raw_id)
        if isinstance(parsed, Err):
            return parsed
        product_id = parsed.value

        changes = payload.changes()
        if changes:
            product = await asyncio.to_thread(self._products.update, product_id, changes)
        else:
            product = await asyncio.to_thread(self._products.get_by_id, product_id)

        if product is None:
            return Err(ProductNotFoundError(product_id))

        logger.info("User %s updated product %s (%s)", actor.id, product_id, ", ".join(sorted(changes)))
        return Ok(product)

    async def delete_product(
        self, raw_id: str, actor: AuthenticatedUser
    ) -> Result[int, StorefrontError]:
        parsed = parse_product_id(raw_id)
        if isinstance(parsed, Err):
            return parsed
        product_id = parsed.value

        if not await asyncio.to_thread(self._products.delete, product_id):
            return Err(ProductNotFoundError(product_id))

        logger.info("User %s deleted product %s", actor.id, product_id)
        return Ok(product_id)
