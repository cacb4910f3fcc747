"""Database seeding for first-time startup."""

from sqlalchemy.orm import Session

from catalog_admin.services import BrandService, ProductService, ProductTypeService
from catalog_admin.utils.logger import logger

DEMO_BRANDS = ["Nike", "Adidas", "Puma"]
DEMO_TYPES = ["Shoes", "Apparel", "Accessories"]
DEMO_PRODUCTS = [
    {
        "name": "Air Max 90",
        "brand_name": "Nike",
        "type_name": "Shoes",
        "list_price": "12995.00",
        "selling_price": "10999.00",
        "quantity": 12,
        "size": "UK 9",
    },
    {
        "name": "Ultraboost Light",
        "brand_name": "Adidas",
        "type_name": "Shoes",
        "list_price": "17999.00",
        "selling_price": "15299.00",
        "quantity": 5,
        "size": "UK 8",
    },
    {
        "name": "Essentials Tee",
        "brand_name": "Puma",
        "type_name": "Apparel",
        "list_price": "1499.00",
        "selling_price": "999.00",
        "quantity": 40,
        "size": "M",
    },
    {
        "name": "Heritage Cap",
        "brand_name": "Nike",
        "type_name": "Accessories",
        "list_price": "1295.00",
        "selling_price": "1295.00",
        "quantity": 0,
    },
]


def seed_if_empty(db: Session) -> bool:
    """
    Insert a small demo catalog when the database holds no brands.

    Returns:
        True if demo data was inserted
    """
    brand_service = BrandService()
    if brand_service.repository.count(db) > 0:
        logger.debug("Catalog already populated, skipping seed")
        return False

    type_service = ProductTypeService()
    product_service = ProductService()

    for name in DEMO_BRANDS:
        brand_service.create(db, name)
    for name in DEMO_TYPES:
        type_service.create(db, name)
    for product_data in DEMO_PRODUCTS:
        product_service.add_product(db, product_data)

    logger.info(
        f"Seeded {len(DEMO_BRANDS)} brands, {len(DEMO_TYPES)} types and "
        f"{len(DEMO_PRODUCTS)} products"
    )
    return True
