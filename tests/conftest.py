"""Pytest configuration and fixtures."""

import os

# Keep tests off the on-disk database, the log file and the reload thread
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ["RELOAD_ON_CHANGE"] = "false"
os.environ["SEED_DEMO_DATA"] = "false"

from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog_admin.database import Base
from catalog_admin.models import Brand, Product, ProductType
from catalog_admin.services import (
    BrandRepository,
    BrandService,
    ChangeFeed,
    IdentifierAllocator,
    ProductRepository,
    ProductService,
    ProductTypeRepository,
    ProductTypeService,
    RenameCoordinator,
)
from catalog_admin.models.enums import CatalogTable


@pytest.fixture(scope="function")
def engine():
    """In-memory SQLite engine shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def test_db(session_factory):
    """Create a test database session."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def feed():
    """A change feed private to the test."""
    return ChangeFeed()


@pytest.fixture
def product_repo(feed):
    return ProductRepository(feed=feed)


@pytest.fixture
def brand_repo(feed):
    return BrandRepository(feed=feed)


@pytest.fixture
def type_repo(feed):
    return ProductTypeRepository(feed=feed)


@pytest.fixture
def allocator(product_repo, brand_repo, type_repo):
    return IdentifierAllocator(
        {
            CatalogTable.PRODUCTS: product_repo,
            CatalogTable.BRANDS: brand_repo,
            CatalogTable.TYPES: type_repo,
        }
    )


@pytest.fixture
def product_service(product_repo, brand_repo, type_repo, allocator):
    return ProductService(
        products=product_repo, brands=brand_repo, types=type_repo, allocator=allocator
    )


@pytest.fixture
def brand_service(brand_repo, allocator):
    return BrandService(repository=brand_repo, allocator=allocator)


@pytest.fixture
def type_service(type_repo, allocator):
    return ProductTypeService(repository=type_repo, allocator=allocator)


@pytest.fixture
def coordinator(product_repo, brand_repo, type_repo):
    return RenameCoordinator(
        products=product_repo, brands=brand_repo, types=type_repo, atomic=True
    )


@pytest.fixture
def sample_catalog(test_db):
    """
    Two brands, two types and three products inserted directly.

    Products:
        1 Nike Air Max   (Nike, Shoes)
        2 Nike Pegasus   (Nike, Shoes)
        3 Puma Suede Tee (Puma, Apparel)
    """
    test_db.add_all(
        [
            Brand(id=1, name="Nike"),
            Brand(id=2, name="Puma"),
            ProductType(id=1, name="Shoes"),
            ProductType(id=2, name="Apparel"),
            Product(
                id=1,
                name="Nike Air Max",
                brand_name="Nike",
                brand_id=1,
                type_name="Shoes",
                type_id=1,
                list_price=Decimal("12995.00"),
                selling_price=Decimal("10999.00"),
                quantity=10,
                size="UK 9",
            ),
            Product(
                id=2,
                name="Nike Pegasus",
                brand_name="Nike",
                brand_id=1,
                type_name="Shoes",
                type_id=1,
                list_price=Decimal("9995.00"),
                selling_price=Decimal("9995.00"),
                quantity=0,
            ),
            Product(
                id=3,
                name="Puma Suede Tee",
                brand_name="Puma",
                brand_id=2,
                type_name="Apparel",
                type_id=2,
                list_price=Decimal("1499.00"),
                selling_price=Decimal("999.00"),
                quantity=25,
            ),
        ]
    )
    test_db.commit()
    return test_db
