"""Product type reference table."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import validates
from catalog_admin.exceptions import EmptyNameError
from catalog_admin.models.base import BaseModel


class ProductType(BaseModel):
    """A product type (category). Names are unique case-insensitively."""

    __tablename__ = "Type"

    id = Column("Tid", Integer, primary_key=True, autoincrement=False)
    name = Column("Type", String(100), nullable=False)

    @validates("name")
    def validate_name(self, key, value):
        """Reject blank type names."""
        if not value or not value.strip():
            raise EmptyNameError("Type")
        return value.strip()

    def __repr__(self):
        return f"<ProductType(id={self.id}, name='{self.name}')>"
