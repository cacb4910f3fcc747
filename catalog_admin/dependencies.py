"""FastAPI dependencies for database access and catalog services."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from catalog_admin.database import SessionLocal
from catalog_admin.services import (
    BrandService,
    ProductService,
    ProductTypeService,
    ReloadScheduler,
    RenameCoordinator,
)


def get_db():
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_product_service() -> ProductService:
    return ProductService()


def get_brand_service() -> BrandService:
    return BrandService()


def get_type_service() -> ProductTypeService:
    return ProductTypeService()


def get_rename_coordinator() -> RenameCoordinator:
    return RenameCoordinator()


def get_reload_scheduler(request: Request) -> ReloadScheduler:
    """The scheduler created at startup, owning the inventory view."""
    return request.app.state.reload_scheduler


# Common dependency annotations
DbSession = Annotated[Session, Depends(get_db)]
Products = Annotated[ProductService, Depends(get_product_service)]
Brands = Annotated[BrandService, Depends(get_brand_service)]
Types = Annotated[ProductTypeService, Depends(get_type_service)]
Renamer = Annotated[RenameCoordinator, Depends(get_rename_coordinator)]
Scheduler = Annotated[ReloadScheduler, Depends(get_reload_scheduler)]
