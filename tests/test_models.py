"""Tests for database models."""

from decimal import Decimal

import pytest

from catalog_admin.exceptions import EmptyNameError, InvalidQuantityError
from catalog_admin.models import Brand, Product, ProductType


class TestBrandModel:
    """Test Brand model."""

    def test_create_brand(self, test_db):
        brand = Brand(id=1, name="  Nike ")
        test_db.add(brand)
        test_db.commit()

        assert brand.name == "Nike"
        assert brand.to_dict() == {"id": 1, "name": "Nike"}

    def test_blank_name(self):
        with pytest.raises(EmptyNameError):
            Brand(id=1, name="  ")


class TestProductTypeModel:
    def test_stored_in_type_table(self, test_db):
        test_db.add(ProductType(id=1, name="Shoes"))
        test_db.commit()

        assert ProductType.__tablename__ == "Type"
        assert test_db.query(ProductType).one().name == "Shoes"


class TestProductModel:
    """Test Product model."""

    def test_column_names(self):
        columns = {c.name for c in Product.__table__.columns}
        assert columns == {
            "Pid", "Product", "Type", "Tid", "ProductImg", "Mrp", "Sp",
            "Brand", "Bid", "Quantity", "Size",
        }

    def test_optional_fields_cleaned(self):
        product = Product(
            id=1, name="Nike Air", brand_name="Nike", type_name="Shoes",
            image_url="  ", size=" UK 9 ",
        )
        assert product.image_url is None
        assert product.size == "UK 9"

    def test_negative_quantity_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Product(id=1, name="Nike Air", brand_name="Nike", type_name="Shoes", quantity=-1)

    def test_pricing_and_stock(self, sample_catalog):
        air_max = sample_catalog.get(Product, 1)
        pegasus = sample_catalog.get(Product, 2)

        assert air_max.has_valid_pricing
        assert pegasus.has_valid_pricing
        assert air_max.in_stock
        assert not pegasus.in_stock
        assert air_max.list_price == Decimal("12995.00")
