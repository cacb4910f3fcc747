"""Base model class with common helpers for all models."""

from sqlalchemy import inspect
from catalog_admin.database import Base


class BaseModel(Base):
    """Abstract base model with common helpers."""

    __abstract__ = True

    def __repr__(self):
        """Default string representation."""
        if getattr(self, "id", None) is not None:
            return f"<{self.__class__.__name__}(id={self.id})>"
        return f"<{self.__class__.__name__}>"

    def to_dict(self):
        """Convert model to dictionary keyed by attribute name."""
        return {
            attr.key: getattr(self, attr.key)
            for attr in inspect(self.__class__).column_attrs
        }
