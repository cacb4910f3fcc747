"""Services for the Brands and Type reference tables."""

from typing import List, Optional

from sqlalchemy.orm import Session

from catalog_admin.exceptions import NotFoundError
from catalog_admin.models import Brand, ProductType
from catalog_admin.services.id_allocator import IdentifierAllocator
from catalog_admin.services.naming import normalize, validate_unique
from catalog_admin.services.repository import (
    BrandRepository,
    ProductTypeRepository,
    ReferenceRepository,
)
from catalog_admin.utils.logger import logger


class ReferenceService:
    """Shared add/list/lookup logic for name-keyed reference tables."""

    kind = "Name"

    def __init__(
        self,
        repository: ReferenceRepository,
        allocator: Optional[IdentifierAllocator] = None,
    ):
        self.repository = repository
        self.allocator = allocator or IdentifierAllocator()

    def list_all(self, db: Session) -> list:
        """Get every row ordered by id."""
        return self.repository.list_all(db)

    def list_names(self, db: Session) -> List[str]:
        """Get every name ordered by id."""
        return self.repository.names(db)

    def get_by_name(self, db: Session, name: str):
        """
        Find a row by name, ignoring case.

        Raises:
            NotFoundError: If no row has this name
        """
        row = self.repository.find_by_name(db, name)
        if row is None:
            raise NotFoundError(self.repository.table_name, name, field="name")
        return row

    def create(self, db: Session, raw_name: str):
        """
        Add a new row with a normalized, unique name.

        Args:
            db: Database session
            raw_name: Name as typed by the user

        Returns:
            Created row

        Raises:
            EmptyNameError: If the name is blank
            DuplicateNameError: If the name is already used (any casing)
            PersistenceError: If the store rejects the insert
        """
        name = validate_unique(
            normalize(raw_name), self.repository.names(db), kind=self.kind
        )
        new_id = self.allocator.next_id(db, self.repository.table)
        row = self.repository.insert(db, {"id": new_id, "name": name})
        logger.info(f"{self.kind} '{name}' added with id {new_id}")
        return row


class BrandService(ReferenceService):
    """Service for brand management."""

    kind = "Brand"

    def __init__(
        self,
        repository: Optional[BrandRepository] = None,
        allocator: Optional[IdentifierAllocator] = None,
    ):
        super().__init__(repository or BrandRepository(), allocator)

    def create_brand(self, db: Session, name: str) -> Brand:
        return self.create(db, name)


class ProductTypeService(ReferenceService):
    """Service for product type management."""

    kind = "Type"

    def __init__(
        self,
        repository: Optional[ProductTypeRepository] = None,
        allocator: Optional[IdentifierAllocator] = None,
    ):
        super().__init__(repository or ProductTypeRepository(), allocator)

    def create_type(self, db: Session, name: str) -> ProductType:
        return self.create(db, name)
