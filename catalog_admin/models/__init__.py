"""Database models for Catalog Admin."""

# Import all models
from catalog_admin.models.base import BaseModel
from catalog_admin.models.enums import CatalogTable, ChangeEventType, RenameState
from catalog_admin.models.brand import Brand
from catalog_admin.models.product_type import ProductType
from catalog_admin.models.product import Product

# Export all models and enums
__all__ = [
    # Base
    "BaseModel",
    # Enums
    "CatalogTable",
    "ChangeEventType",
    "RenameState",
    # Models
    "Brand",
    "ProductType",
    "Product",
]
