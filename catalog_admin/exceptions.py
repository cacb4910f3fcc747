"""Exception hierarchy for catalog operations."""

from typing import Any, Optional


class CatalogError(Exception):
    """Base class for all catalog errors."""


class CatalogValidationError(CatalogError, ValueError):
    """Input rejected before any write was attempted."""


class EmptyNameError(CatalogValidationError):
    """A brand, type or product name was blank after trimming."""

    def __init__(self, field: str = "name"):
        self.field = field
        super().__init__(f"{field} cannot be empty")


class DuplicateNameError(CatalogValidationError):
    """A name collides case-insensitively with an existing one."""

    def __init__(self, name: str, existing: Optional[str] = None, kind: str = "Name"):
        self.name = name
        self.existing = existing if existing is not None else name
        self.kind = kind
        super().__init__(f"{kind} '{name}' already exists")


class PriceInvariantViolation(CatalogValidationError):
    """Selling price is greater than the list price (MRP)."""

    def __init__(self, selling_price: Any, list_price: Any):
        self.selling_price = selling_price
        self.list_price = list_price
        super().__init__(
            f"Selling price ({selling_price}) cannot be greater than MRP ({list_price})"
        )


class InvalidQuantityError(CatalogValidationError):
    """A stock quantity would drop below zero."""

    def __init__(self, quantity: int, product_id: Optional[int] = None):
        self.quantity = quantity
        self.product_id = product_id
        target = f" for product {product_id}" if product_id is not None else ""
        super().__init__(f"Quantity cannot be negative{target} (got {quantity})")


class NotFoundError(CatalogError, LookupError):
    """A referenced row does not exist."""

    def __init__(self, table: str, key: Any, field: str = "id"):
        self.table = table
        self.key = key
        self.field = field
        super().__init__(f"{table} with {field}={key!r} not found")


class PersistenceError(CatalogError):
    """The backing store failed to execute an operation."""

    def __init__(self, operation: str, table: str, original: Optional[BaseException] = None):
        self.operation = operation
        self.table = table
        self.original = original
        detail = f": {original}" if original is not None else ""
        super().__init__(f"Failed to {operation} {table}{detail}")


class PartialCascadeFailure(CatalogError):
    """
    A rename updated the reference row but not its dependent product rows.

    Kept apart from PersistenceError so callers can reconcile by hand:
    ``completed`` names the last step that was committed.
    """

    def __init__(
        self,
        table: str,
        old_name: str,
        new_name: str,
        completed: str,
        original: Optional[BaseException] = None,
    ):
        self.table = table
        self.old_name = old_name
        self.new_name = new_name
        self.completed = completed
        self.original = original
        super().__init__(
            f"{table} renamed '{old_name}' -> '{new_name}' but dependent products "
            f"still reference '{old_name}' (completed: {completed})"
        )
