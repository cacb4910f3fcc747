"""Brand reference table."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import validates
from catalog_admin.exceptions import EmptyNameError
from catalog_admin.models.base import BaseModel


class Brand(BaseModel):
    """A product brand. Names are unique case-insensitively."""

    __tablename__ = "Brands"

    id = Column("Bid", Integer, primary_key=True, autoincrement=False)
    name = Column("Brand", String(100), nullable=False)

    @validates("name")
    def validate_name(self, key, value):
        """Reject blank brand names."""
        if not value or not value.strip():
            raise EmptyNameError("Brand")
        return value.strip()

    def __repr__(self):
        return f"<Brand(id={self.id}, name='{self.name}')>"
