"""Product type management endpoints."""

from typing import List

from fastapi import APIRouter, status

from catalog_admin.dependencies import DbSession, Types, Renamer
from catalog_admin.schemas.reference import (
    ProductTypeResponse,
    ReferenceCreate,
    ReferenceRename,
    RenameResponse,
)

router = APIRouter()


@router.get("", response_model=List[ProductTypeResponse])
async def list_types(
    db: DbSession,
    service: Types,
) -> List[ProductTypeResponse]:
    """List all product types."""
    return [ProductTypeResponse.model_validate(t) for t in service.list_all(db)]


@router.post("", response_model=ProductTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_type(
    type_in: ReferenceCreate,
    db: DbSession,
    service: Types,
) -> ProductTypeResponse:
    """Add a product type. Names are title-cased and unique regardless of case."""
    return ProductTypeResponse.model_validate(service.create_type(db, type_in.name))


@router.patch("/{type_name}", response_model=RenameResponse)
async def rename_type(
    type_name: str,
    rename_in: ReferenceRename,
    db: DbSession,
    renamer: Renamer,
) -> RenameResponse:
    """Rename a product type and every product that carries it."""
    result = renamer.rename_type(db, type_name, rename_in.new_name)
    return RenameResponse.model_validate(result)
