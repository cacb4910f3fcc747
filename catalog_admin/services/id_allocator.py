"""Primary key allocation for catalog tables."""

from typing import Dict, Optional

from sqlalchemy.orm import Session

from catalog_admin.models.enums import CatalogTable
from catalog_admin.services.repository import (
    BrandRepository,
    CatalogRepository,
    ProductRepository,
    ProductTypeRepository,
)
from catalog_admin.utils.logger import logger


class IdentifierAllocator:
    """
    Allocate the next integer id of a table as ``max(id) + 1``.

    The first id of an empty table is 1 and gaps are never reused. Two
    allocations racing each other can return the same id; the insert that
    loses then fails on the primary key and surfaces as a PersistenceError.
    """

    def __init__(self, repositories: Optional[Dict[CatalogTable, CatalogRepository]] = None):
        self.repositories = repositories or {
            CatalogTable.PRODUCTS: ProductRepository(),
            CatalogTable.BRANDS: BrandRepository(),
            CatalogTable.TYPES: ProductTypeRepository(),
        }

    def next_id(self, db: Session, table: CatalogTable) -> int:
        """Return the id the next row inserted into ``table`` should use."""
        current = self.repositories[CatalogTable(table)].max_id(db)
        next_id = 1 if current is None else current + 1
        logger.debug(f"Allocated id {next_id} for {CatalogTable(table).value}")
        return next_id
