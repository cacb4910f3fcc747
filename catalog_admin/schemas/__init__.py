"""Pydantic schemas for API request/response validation."""

from catalog_admin.schemas.common import ErrorResponse
from catalog_admin.schemas.product import (
    BulkDeleteRequest,
    BulkDeleteResult,
    InventoryResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
    QuantityUpdate,
)
from catalog_admin.schemas.reference import (
    BrandResponse,
    ProductTypeResponse,
    ReferenceCreate,
    ReferenceRename,
    RenameResponse,
)

__all__ = [
    "ErrorResponse",
    "BulkDeleteRequest",
    "BulkDeleteResult",
    "InventoryResponse",
    "ProductCreate",
    "ProductResponse",
    "ProductUpdate",
    "QuantityUpdate",
    "BrandResponse",
    "ProductTypeResponse",
    "ReferenceCreate",
    "ReferenceRename",
    "RenameResponse",
]
