"""Cascading renames of brands and product types."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from catalog_admin.config import settings
from catalog_admin.exceptions import NotFoundError, PartialCascadeFailure, PersistenceError
from catalog_admin.models.enums import RenameState
from catalog_admin.services.naming import normalize, rebrand_name, validate_unique
from catalog_admin.services.repository import (
    BrandRepository,
    ProductRepository,
    ProductTypeRepository,
    ReferenceRepository,
)
from catalog_admin.utils.logger import logger


@dataclass
class RenameResult:
    """Outcome of a completed rename."""

    table: str
    old_name: str
    new_name: str
    products_updated: int
    state: RenameState = RenameState.DONE
    history: List[RenameState] = field(default_factory=list)


class RenameCoordinator:
    """
    Rename a brand or type and carry the new name into every product row.

    Products hold a copy of the brand and type names, so a rename is two
    writes: the reference row, then its dependent products. For brands the
    product display name is recomposed with the new brand prefix as well.

    In atomic mode both writes share one transaction and a store failure
    leaves every row untouched. Otherwise each write commits on its own and a
    failure on the products raises PartialCascadeFailure with the reference
    row already renamed.
    """

    def __init__(
        self,
        products: Optional[ProductRepository] = None,
        brands: Optional[BrandRepository] = None,
        types: Optional[ProductTypeRepository] = None,
        atomic: Optional[bool] = None,
    ):
        self.products = products or ProductRepository()
        self.brands = brands or BrandRepository()
        self.types = types or ProductTypeRepository()
        self.atomic = settings.atomic_renames if atomic is None else atomic
        self.state = RenameState.IDLE
        self.history: List[RenameState] = [RenameState.IDLE]

    def rename_brand(self, db: Session, old_name: str, new_name: str) -> RenameResult:
        """
        Rename a brand and update every product that carries it.

        Raises:
            NotFoundError: If no brand is named ``old_name``
            EmptyNameError: If ``new_name`` is blank
            DuplicateNameError: If another brand already uses ``new_name``
            PersistenceError: If the store fails (atomic mode, nothing applied)
            PartialCascadeFailure: If the brand was renamed but products were not
        """

        def product_patch(old: str, new: str) -> Callable[[Any], Dict[str, Any]]:
            return lambda product: {
                "brand_name": new,
                "name": rebrand_name(product.name, old, new),
            }

        return self._rename(
            db,
            reference=self.brands,
            kind="Brand",
            product_field="brand_name",
            product_patch=product_patch,
            old_name=old_name,
            new_name=new_name,
        )

    def rename_type(self, db: Session, old_name: str, new_name: str) -> RenameResult:
        """Rename a product type and update every product that carries it."""

        def product_patch(old: str, new: str) -> Dict[str, Any]:
            return {"type_name": new}

        return self._rename(
            db,
            reference=self.types,
            kind="Type",
            product_field="type_name",
            product_patch=product_patch,
            old_name=old_name,
            new_name=new_name,
        )

    def _rename(
        self,
        db: Session,
        reference: ReferenceRepository,
        kind: str,
        product_field: str,
        product_patch: Callable[[str, str], Any],
        old_name: str,
        new_name: str,
    ) -> RenameResult:
        self.history = [RenameState.IDLE]
        self._transition(RenameState.VALIDATING, kind, old_name)

        try:
            existing = reference.find_by_name(db, old_name)
            if existing is None:
                raise NotFoundError(reference.table_name, old_name, field="name")
            new = validate_unique(
                normalize(new_name),
                reference.names(db),
                excluding=existing.name,
                kind=kind,
            )
        except Exception:
            self._transition(RenameState.FAILED, kind, old_name)
            raise

        old = existing.name
        commit_each = not self.atomic

        self._transition(RenameState.UPDATING_REFERENCE, kind, old)
        try:
            reference.update_where(db, "name", old, {"name": new}, commit=commit_each)
        except PersistenceError:
            self._transition(RenameState.FAILED, kind, old)
            raise

        self._transition(RenameState.UPDATING_DEPENDENTS, kind, old)
        try:
            updated = self.products.update_where(
                db, product_field, old, product_patch(old, new), commit=commit_each
            )
            if self.atomic:
                self.products.commit(db)
        except PersistenceError as e:
            self._transition(RenameState.FAILED, kind, old)
            if self.atomic:
                self.products.rollback(db)
                logger.error(f"{kind} rename '{old}' -> '{new}' rolled back: {e}")
                raise
            logger.error(
                f"{kind} '{old}' renamed to '{new}' but products were not updated: {e}"
            )
            raise PartialCascadeFailure(
                reference.table_name,
                old,
                new,
                completed=RenameState.UPDATING_REFERENCE.value,
                original=e,
            ) from e

        self._transition(RenameState.DONE, kind, old)
        logger.info(f"{kind} renamed '{old}' -> '{new}', {updated} product(s) updated")
        return RenameResult(
            table=reference.table_name,
            old_name=old,
            new_name=new,
            products_updated=updated,
            history=list(self.history),
        )

    def _transition(self, state: RenameState, kind: str, name: str) -> None:
        self.state = state
        self.history.append(state)
        logger.debug(f"{kind} rename of '{name}': {state.value}")
