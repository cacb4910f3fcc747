"""Services for Catalog Admin."""

from .change_feed import ChangeEvent, ChangeFeed, change_feed
from .repository import (
    CatalogRepository,
    ReferenceRepository,
    ProductRepository,
    BrandRepository,
    ProductTypeRepository,
)
from .id_allocator import IdentifierAllocator
from .reference_service import BrandService, ProductTypeService
from .product_service import ProductService
from .rename_service import RenameCoordinator, RenameResult
from .inventory_view import InventoryView, ReloadScheduler, notification_message

__all__ = [
    "ChangeEvent",
    "ChangeFeed",
    "change_feed",
    "CatalogRepository",
    "ReferenceRepository",
    "ProductRepository",
    "BrandRepository",
    "ProductTypeRepository",
    "IdentifierAllocator",
    "BrandService",
    "ProductTypeService",
    "ProductService",
    "RenameCoordinator",
    "RenameResult",
    "InventoryView",
    "ReloadScheduler",
    "notification_message",
]
