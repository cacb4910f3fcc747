"""Brand management endpoints."""

from typing import List

from fastapi import APIRouter, status

from catalog_admin.dependencies import Brands, DbSession, Renamer
from catalog_admin.schemas.reference import (
    BrandResponse,
    ReferenceCreate,
    ReferenceRename,
    RenameResponse,
)

router = APIRouter()


@router.get("", response_model=List[BrandResponse])
async def list_brands(
    db: DbSession,
    service: Brands,
) -> List[BrandResponse]:
    """List all brands."""
    return [BrandResponse.model_validate(b) for b in service.list_all(db)]


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
async def create_brand(
    brand_in: ReferenceCreate,
    db: DbSession,
    service: Brands,
) -> BrandResponse:
    """Add a brand. Names are title-cased and unique regardless of case."""
    return BrandResponse.model_validate(service.create_brand(db, brand_in.name))


@router.patch("/{brand_name}", response_model=RenameResponse)
async def rename_brand(
    brand_name: str,
    rename_in: ReferenceRename,
    db: DbSession,
    renamer: Renamer,
) -> RenameResponse:
    """Rename a brand and every product that carries it."""
    result = renamer.rename_brand(db, brand_name, rename_in.new_name)
    return RenameResponse.model_validate(result)
