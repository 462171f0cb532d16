"""
Product catalog API endpoints.

Reads are public; writes require a bearer token.
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_product_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser
from shared.result import unwrap

from .interfaces import IProductService
from .models import (
    Product,
    ProductCreate,
    ProductCreatedResponse,
    ProductUpdate,
    ProductUpdatedResponse,
)

router = APIRouter()


@router.get("", response_model=list[Product])
async def list_products(
    service: IProductService = Depends(get_product_service),
) -> list[Product]:
    """List the whole catalog."""
    return unwrap(await service.list_products())


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    service: IProductService = Depends(get_product_service),
) -> Product:
    return unwrap(await service.get_product(product_id))


@router.post("", response_model=ProductCreatedResponse, status_code=201)
async def create_product(
    payload: ProductCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProductService = Depends(get_product_service),
) -> ProductCreatedResponse:
    product = unwrap(await service.create_product(payload, user))
    return ProductCreatedResponse(message="Product created successfully", new_product=product)


@router.put("/{product_id}", response_model=ProductUpdatedResponse, status_code=201)
async def update_product(
    product_id: str,
    payload: ProductUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProductService = Depends(get_product_service),
) -> ProductUpdatedResponse:
    """Apply a partial update. Fields left out of the body are unchanged."""
    product = unwrap(await service.update_product(product_id, payload, user))
    return ProductUpdatedResponse(message="Product updated successfully", updated=product)


@router.delete("/{product_id}", status_code=204)
async def delete_product(
    product_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProductService = Depends(get_product_service),
) -> Response:
    """Delete a product. A 204 carries no body."""
    unwrap(await service.delete_product(product_id, user))
    return Response(status_code=204)
