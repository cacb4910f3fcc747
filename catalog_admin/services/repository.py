"""Data access for the Products, Brands and Type tables."""

from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Type, TypeVar, Union

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_admin.exceptions import NotFoundError, PersistenceError
from catalog_admin.models import Brand, Product, ProductType
from catalog_admin.models.base import BaseModel
from catalog_admin.models.enums import CatalogTable, ChangeEventType
from catalog_admin.services.change_feed import ChangeEvent, ChangeFeed, change_feed
from catalog_admin.utils.logger import logger

ModelType = TypeVar("ModelType", bound=BaseModel)
Patch = Union[Dict[str, Any], Callable[[Any], Dict[str, Any]]]

_PENDING_KEY = "catalog_pending_changes"


class CatalogRepository(Generic[ModelType]):
    """
    Base repository providing CRUD operations for one catalog table.

    This class provides:
    - Standard CRUD operations keyed by the table's integer id
    - Wrapping of store failures in PersistenceError
    - Change events published to the change feed after each commit

    Each write commits on its own. Pass ``commit=False`` to stage several
    writes and finish them with ``commit()`` (or ``rollback()``); events of
    staged writes are only published once the commit succeeds.
    """

    model: Type[ModelType]
    table: CatalogTable

    def __init__(self, feed: Optional[ChangeFeed] = None):
        """
        Initialize repository.

        Args:
            feed: Change feed to publish to (the process-wide feed if None)
        """
        self.feed = feed if feed is not None else change_feed
        self.table_name = self.table.value

    # Reads

    def list_all(self, db: Session) -> List[ModelType]:
        """Get every row ordered by id."""
        try:
            return db.query(self.model).order_by(self.model.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error listing {self.table_name}: {e}")
            raise PersistenceError("list", self.table_name, e) from e

    def get(self, db: Session, id: int) -> Optional[ModelType]:
        """Get a row by id, or None."""
        try:
            return db.query(self.model).filter(self.model.id == id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching {self.table_name} with id {id}: {e}")
            raise PersistenceError("fetch", self.table_name, e) from e

    def max_id(self, db: Session) -> Optional[int]:
        """Get the largest id in the table, or None when it is empty."""
        try:
            return db.query(func.max(self.model.id)).scalar()
        except SQLAlchemyError as e:
            logger.error(f"Error reading max id of {self.table_name}: {e}")
            raise PersistenceError("read max id of", self.table_name, e) from e

    def find_where(self, db: Session, match_field: str, match_value: Any) -> List[ModelType]:
        """Get rows whose ``match_field`` equals ``match_value``."""
        column = self._column(match_field)
        try:
            return (
                db.query(self.model)
                .filter(column == match_value)
                .order_by(self.model.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error querying {self.table_name} by {match_field}: {e}")
            raise PersistenceError("query", self.table_name, e) from e

    def count(self, db: Session) -> int:
        """Count rows in the table."""
        try:
            return db.query(self.model).count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.table_name}: {e}")
            raise PersistenceError("count", self.table_name, e) from e

    # Writes

    def insert(self, db: Session, obj_in: Dict[str, Any], commit: bool = True) -> ModelType:
        """
        Insert a row.

        Args:
            db: Database session
            obj_in: Column values; must carry an allocated ``id``
            commit: Commit immediately

        Returns:
            Created model instance
        """
        if obj_in.get("id") is None:
            raise ValueError(f"Insert into {self.table_name} requires an allocated id")

        db_obj = self.model(**obj_in)
        try:
            db.add(db_obj)
            db.flush()
        except SQLAlchemyError as e:
            self.rollback(db)
            logger.error(f"Error inserting into {self.table_name}: {e}")
            raise PersistenceError("insert into", self.table_name, e) from e

        self._stage(db, ChangeEventType.INSERT, db_obj.to_dict())
        if commit:
            self.commit(db)
            db.refresh(db_obj)
        logger.info(f"Inserted {self.table_name} row with id {db_obj.id}")
        return db_obj

    def update_by_id(
        self, db: Session, id: int, patch: Dict[str, Any], commit: bool = True
    ) -> ModelType:
        """
        Apply a patch to one row.

        Raises:
            NotFoundError: If no row has this id
        """
        db_obj = self.get(db, id)
        if db_obj is None:
            raise NotFoundError(self.table_name, id)

        self._apply(db, db_obj, patch)
        if commit:
            self.commit(db)
            db.refresh(db_obj)
        logger.info(f"Updated {self.table_name} row with id {id}")
        return db_obj

    def update_where(
        self,
        db: Session,
        match_field: str,
        match_value: Any,
        patch: Patch,
        commit: bool = True,
    ) -> int:
        """
        Apply a patch to every row whose ``match_field`` equals ``match_value``.

        ``patch`` may be a dict, or a callable receiving each row and returning
        the dict for that row (used when a new value depends on the old one).

        Returns:
            Number of rows updated
        """
        rows = self.find_where(db, match_field, match_value)
        for db_obj in rows:
            values = patch(db_obj) if callable(patch) else patch
            self._apply(db, db_obj, values)

        if commit and rows:
            self.commit(db)
        logger.info(
            f"Updated {len(rows)} {self.table_name} row(s) where {match_field}={match_value!r}"
        )
        return len(rows)

    def delete_by_id(self, db: Session, id: int, commit: bool = True) -> bool:
        """
        Delete one row.

        Returns:
            True if a row was deleted, False if none had this id
        """
        db_obj = self.get(db, id)
        if db_obj is None:
            return False

        old_values = db_obj.to_dict()
        try:
            db.delete(db_obj)
            db.flush()
        except SQLAlchemyError as e:
            self.rollback(db)
            logger.error(f"Error deleting {self.table_name} row {id}: {e}")
            raise PersistenceError("delete from", self.table_name, e) from e

        self._stage(db, ChangeEventType.DELETE, old_values)
        if commit:
            self.commit(db)
        logger.info(f"Deleted {self.table_name} row with id {id}")
        return True

    def delete_by_ids(self, db: Session, ids: Iterable[int], commit: bool = True) -> int:
        """
        Delete every row whose id is in ``ids``.

        An empty set is a no-op and touches nothing.

        Returns:
            Number of rows deleted
        """
        id_set = set(ids)
        if not id_set:
            return 0

        try:
            rows = db.query(self.model).filter(self.model.id.in_(id_set)).all()
            old_values = [row.to_dict() for row in rows]
            for row in rows:
                db.delete(row)
            db.flush()
        except SQLAlchemyError as e:
            self.rollback(db)
            logger.error(f"Error bulk deleting from {self.table_name}: {e}")
            raise PersistenceError("bulk delete from", self.table_name, e) from e

        for values in old_values:
            self._stage(db, ChangeEventType.DELETE, values)
        if commit and rows:
            self.commit(db)
        logger.info(f"Deleted {len(rows)} {self.table_name} row(s)")
        return len(rows)

    # Transactions

    def commit(self, db: Session) -> None:
        """Commit the session and publish staged change events."""
        try:
            db.commit()
        except SQLAlchemyError as e:
            self.rollback(db)
            logger.error(f"Error committing {self.table_name} changes: {e}")
            raise PersistenceError("commit changes to", self.table_name, e) from e

        pending = db.info.pop(_PENDING_KEY, [])
        for event in pending:
            self.feed.publish(event)

    def rollback(self, db: Session) -> None:
        """Roll back the session and drop staged change events."""
        db.rollback()
        db.info.pop(_PENDING_KEY, None)

    # Helpers

    def _column(self, field: str):
        column = getattr(self.model, field, None)
        if column is None:
            raise ValueError(f"{self.table_name} has no field '{field}'")
        return column

    def _apply(self, db: Session, db_obj: ModelType, values: Dict[str, Any]) -> None:
        try:
            for field, value in values.items():
                if field == "id":
                    continue
                self._column(field)
                setattr(db_obj, field, value)
        except ValueError:
            # Validators reject before the value lands; drop earlier fields too
            self.rollback(db)
            raise
        try:
            db.flush()
        except SQLAlchemyError as e:
            self.rollback(db)
            logger.error(f"Error updating {self.table_name} row {db_obj.id}: {e}")
            raise PersistenceError("update", self.table_name, e) from e
        self._stage(db, ChangeEventType.UPDATE, db_obj.to_dict())

    def _stage(self, db: Session, event_type: ChangeEventType, payload: Dict[str, Any]) -> None:
        db.info.setdefault(_PENDING_KEY, []).append(
            ChangeEvent(event_type=event_type, table=self.table, payload=payload)
        )


class ReferenceRepository(CatalogRepository[ModelType]):
    """Repository for name-keyed reference tables (Brands, Type)."""

    def names(self, db: Session) -> List[str]:
        """Get every name in the table, ordered by id."""
        return [row.name for row in self.list_all(db)]

    def find_by_name(self, db: Session, name: str) -> Optional[ModelType]:
        """Find a row by name, ignoring case and surrounding whitespace."""
        try:
            return (
                db.query(self.model)
                .filter(func.lower(self.model.name) == (name or "").strip().lower())
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error finding {self.table_name} named {name!r}: {e}")
            raise PersistenceError("query", self.table_name, e) from e


class ProductRepository(CatalogRepository[Product]):
    """Repository for the Products table."""

    model = Product
    table = CatalogTable.PRODUCTS


class BrandRepository(ReferenceRepository[Brand]):
    """Repository for the Brands table."""

    model = Brand
    table = CatalogTable.BRANDS


class ProductTypeRepository(ReferenceRepository[ProductType]):
    """Repository for the Type table."""

    model = ProductType
    table = CatalogTable.TYPES
