"""Tests for primary key allocation."""

from catalog_admin.models import Brand, ProductType
from catalog_admin.models.enums import CatalogTable


class TestIdentifierAllocator:
    """Test IdentifierAllocator."""

    def test_empty_table_starts_at_one(self, test_db, allocator):
        assert allocator.next_id(test_db, CatalogTable.BRANDS) == 1

    def test_max_plus_one(self, test_db, allocator):
        test_db.add_all([Brand(id=3, name="A"), Brand(id=7, name="B"), Brand(id=2, name="C")])
        test_db.commit()

        assert allocator.next_id(test_db, CatalogTable.BRANDS) == 8

    def test_gaps_are_not_reused(self, test_db, allocator, brand_repo):
        test_db.add_all([Brand(id=1, name="A"), Brand(id=2, name="B"), Brand(id=3, name="C")])
        test_db.commit()
        brand_repo.delete_by_id(test_db, 2)

        assert allocator.next_id(test_db, CatalogTable.BRANDS) == 4

    def test_tables_are_independent(self, test_db, allocator, sample_catalog):
        test_db.add(ProductType(id=9, name="Bags"))
        test_db.commit()

        assert allocator.next_id(test_db, CatalogTable.PRODUCTS) == 4
        assert allocator.next_id(test_db, CatalogTable.BRANDS) == 3
        assert allocator.next_id(test_db, CatalogTable.TYPES) == 10

    def test_accepts_table_name(self, test_db, allocator):
        assert allocator.next_id(test_db, "Type") == 1
