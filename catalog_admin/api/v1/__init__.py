"""API v1 module."""

from fastapi import APIRouter

from catalog_admin.api.v1.endpoints import products, brands, types, inventory

api_router = APIRouter()

api_router.include_router(products.router, prefix="/products", tags=["Products"])
api_router.include_router(brands.router, prefix="/brands", tags=["Brands"])
api_router.include_router(types.router, prefix="/types", tags=["Types"])
api_router.include_router(inventory.router, prefix="/inventory", tags=["Inventory"])
