"""Product model for the inventory catalog."""

from sqlalchemy import Column, Integer, Numeric, String, Text, Index
from sqlalchemy.orm import validates
from catalog_admin.exceptions import EmptyNameError, InvalidQuantityError
from catalog_admin.models.base import BaseModel


class Product(BaseModel):
    """
    Product row in the inventory catalog.

    Brand and type names are stored on the row next to their ids so listings
    never need a join. They are kept in sync with the Brands and Type tables
    by the rename coordinator.

    Attributes:
        name: Display name, always the brand name followed by the base label
            (e.g., "Nike Air Max")
        type_name: Denormalized product type name
        image_url: Optional product image URL
        list_price: MRP
        selling_price: Selling price, never above list_price
        brand_name: Denormalized brand name
        quantity: Units in stock, never negative
        size: Optional size label (e.g., "UK 9", "500 ml")
    """

    __tablename__ = "Products"

    id = Column("Pid", Integer, primary_key=True, autoincrement=False)
    name = Column("Product", Text, nullable=False)
    type_name = Column("Type", String(100), nullable=False)
    type_id = Column("Tid", Integer, nullable=True)
    image_url = Column("ProductImg", Text, nullable=True)
    list_price = Column("Mrp", Numeric(12, 2), nullable=False)
    selling_price = Column("Sp", Numeric(12, 2), nullable=False)
    brand_name = Column("Brand", String(100), nullable=False)
    brand_id = Column("Bid", Integer, nullable=True)
    quantity = Column("Quantity", Integer, nullable=False, default=0)
    size = Column("Size", String(50), nullable=True)

    __table_args__ = (
        Index("idx_products_brand", "Brand"),
        Index("idx_products_type", "Type"),
    )

    @validates("name", "brand_name", "type_name")
    def validate_required_fields(self, key, value):
        """Validate required string fields are not empty."""
        if not value or not value.strip():
            raise EmptyNameError(key)
        return value.strip()

    @validates("image_url", "size")
    def validate_optional_fields(self, key, value):
        """Clean optional string fields."""
        return value.strip() if value else None

    @validates("quantity")
    def validate_quantity(self, key, value):
        """Stock can never go below zero."""
        if value is not None and value < 0:
            raise InvalidQuantityError(value, self.id)
        return value

    @property
    def has_valid_pricing(self):
        """Check the selling price does not exceed the MRP."""
        if self.list_price is None or self.selling_price is None:
            return False
        return self.selling_price <= self.list_price

    @property
    def in_stock(self):
        return bool(self.quantity)

    def __repr__(self):
        """String representation of Product."""
        return f"<Product(id={self.id}, name='{self.name}', brand='{self.brand_name}', type='{self.type_name}')>"
