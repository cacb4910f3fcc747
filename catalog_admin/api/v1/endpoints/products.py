"""Product management endpoints."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Response, status

from catalog_admin.dependencies import DbSession, Products
from catalog_admin.schemas.product import (
    BulkDeleteRequest,
    BulkDeleteResult,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
    QuantityUpdate,
)

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
async def list_products(
    db: DbSession,
    service: Products,
    search: Optional[str] = None,
) -> List[ProductResponse]:
    """List all products, optionally filtered by name, brand or type."""
    products = service.list_products(db, search=search)
    return [ProductResponse.model_validate(p) for p in products]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    db: DbSession,
    service: Products,
) -> ProductResponse:
    """Get a product by ID."""
    return ProductResponse.model_validate(service.get_product(db, product_id))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    db: DbSession,
    service: Products,
) -> ProductResponse:
    """Add a product. The stored name is prefixed with the brand."""
    product = service.add_product(db, product_in.model_dump())
    return ProductResponse.model_validate(product)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    product_in: ProductUpdate,
    db: DbSession,
    service: Products,
) -> ProductResponse:
    """Edit a product. Changing the brand swaps the name prefix."""
    update_data = product_in.model_dump(exclude_unset=True)
    product = service.update_product(db, product_id, update_data)
    return ProductResponse.model_validate(product)


@router.patch("/{product_id}/quantity", response_model=ProductResponse)
async def update_quantity(
    product_id: int,
    quantity_in: QuantityUpdate,
    db: DbSession,
    service: Products,
) -> ProductResponse:
    """Set or adjust the stock level. Stock never goes below zero."""
    if quantity_in.delta is not None:
        product = service.adjust_quantity(db, product_id, quantity_in.delta)
    else:
        product = service.set_quantity(db, product_id, quantity_in.quantity)
    return ProductResponse.model_validate(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    db: DbSession,
    service: Products,
) -> Response:
    """Delete a product."""
    if not service.delete_product(db, product_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/bulk-delete", response_model=BulkDeleteResult)
async def bulk_delete_products(
    request: BulkDeleteRequest,
    db: DbSession,
    service: Products,
) -> BulkDeleteResult:
    """Delete several products at once."""
    ids = set(request.ids)
    deleted = service.delete_products(db, ids)
    return BulkDeleteResult(requested=len(ids), deleted=deleted)
