"""Enum types for catalog models and events."""

import enum


class CatalogTable(str, enum.Enum):
    """Tables of the catalog store, valued by their stored name."""

    PRODUCTS = "Products"
    BRANDS = "Brands"
    TYPES = "Type"


class ChangeEventType(str, enum.Enum):
    """Kind of row change delivered by the change feed."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class RenameState(str, enum.Enum):
    """Progress of a cascading rename."""

    IDLE = "idle"
    VALIDATING = "validating"
    UPDATING_REFERENCE = "updating_reference"
    UPDATING_DEPENDENTS = "updating_dependents"
    DONE = "done"
    FAILED = "failed"
