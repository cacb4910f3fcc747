"""Tests for demo data seeding."""

from catalog_admin.models import Brand, Product
from catalog_admin.seed import DEMO_PRODUCTS, seed_if_empty


def test_seed_empty_database(test_db):
    assert seed_if_empty(test_db) is True

    assert test_db.query(Brand).count() == 3
    names = [p.name for p in test_db.query(Product).order_by(Product.id)]
    assert len(names) == len(DEMO_PRODUCTS)
    assert names[0] == "Nike Air Max 90"


def test_seed_skips_populated_database(sample_catalog):
    assert seed_if_empty(sample_catalog) is False
    assert sample_catalog.query(Product).count() == 3
