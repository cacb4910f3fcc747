"""Product service for managing the inventory catalog."""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_admin.exceptions import (
    CatalogValidationError,
    EmptyNameError,
    InvalidQuantityError,
    NotFoundError,
    PersistenceError,
    PriceInvariantViolation,
)
from catalog_admin.models import Product
from catalog_admin.models.enums import CatalogTable
from catalog_admin.services.id_allocator import IdentifierAllocator
from catalog_admin.services.naming import compose_name, decompose_name
from catalog_admin.services.repository import (
    BrandRepository,
    ProductRepository,
    ProductTypeRepository,
)
from catalog_admin.utils.logger import logger

EDITABLE_FIELDS = (
    "name",
    "brand_name",
    "type_name",
    "image_url",
    "list_price",
    "selling_price",
    "quantity",
    "size",
)


def to_decimal(value: Any, field: str) -> Decimal:
    """Parse a price into a two-place Decimal."""
    try:
        return Decimal(str(value)).quantize(Decimal("0.01"))
    except (InvalidOperation, ValueError, TypeError):
        raise CatalogValidationError(f"{field} must be a number (got {value!r})")


def validate_pricing(list_price: Any, selling_price: Any) -> Tuple[Decimal, Decimal]:
    """
    Check that prices are non-negative and the selling price is within the MRP.

    Returns:
        (list_price, selling_price) as Decimals

    Raises:
        PriceInvariantViolation: If the selling price is above the list price
    """
    mrp = to_decimal(list_price, "MRP")
    sp = to_decimal(selling_price, "Selling price")
    if mrp < 0 or sp < 0:
        raise CatalogValidationError("Prices cannot be negative")
    if sp > mrp:
        raise PriceInvariantViolation(sp, mrp)
    return mrp, sp


class ProductService:
    """
    Service for managing products in the catalog.

    Provides:
    - Adding products with a brand-prefixed display name
    - Editing products, recomposing the name when the brand changes
    - Stock adjustments that never go below zero
    - Single and bulk deletes
    - Case-insensitive search over name, brand and type
    """

    def __init__(
        self,
        products: Optional[ProductRepository] = None,
        brands: Optional[BrandRepository] = None,
        types: Optional[ProductTypeRepository] = None,
        allocator: Optional[IdentifierAllocator] = None,
    ):
        """Initialize product service."""
        self.products = products or ProductRepository()
        self.brands = brands or BrandRepository()
        self.types = types or ProductTypeRepository()
        self.allocator = allocator or IdentifierAllocator(
            {
                CatalogTable.PRODUCTS: self.products,
                CatalogTable.BRANDS: self.brands,
                CatalogTable.TYPES: self.types,
            }
        )

    def list_products(self, db: Session, search: Optional[str] = None) -> List[Product]:
        """
        List products, optionally filtered by a search term.

        Args:
            db: Database session
            search: Matched case-insensitively against product name, brand and type

        Returns:
            Matching products ordered by id
        """
        if not search or not search.strip():
            return self.products.list_all(db)

        pattern = f"%{search.strip()}%"
        try:
            return (
                db.query(Product)
                .filter(
                    or_(
                        Product.name.ilike(pattern),
                        Product.brand_name.ilike(pattern),
                        Product.type_name.ilike(pattern),
                    )
                )
                .order_by(Product.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error searching products: {e}")
            raise PersistenceError("search", CatalogTable.PRODUCTS.value, e) from e

    def get_product(self, db: Session, product_id: int) -> Product:
        """
        Get a product by id.

        Raises:
            NotFoundError: If the product does not exist
        """
        product = self.products.get(db, product_id)
        if product is None:
            raise NotFoundError(CatalogTable.PRODUCTS.value, product_id)
        return product

    def add_product(self, db: Session, product_data: Dict[str, Any]) -> Product:
        """
        Add a new product.

        Args:
            db: Database session
            product_data: Dictionary with:
                - name: base label, without the brand
                - brand_name: existing brand
                - type_name: existing product type
                - list_price, selling_price
                - quantity (default 0), image_url, size (optional)

        Returns:
            Created product

        Raises:
            EmptyNameError: If the base label is blank
            PriceInvariantViolation: If the selling price exceeds the MRP
            InvalidQuantityError: If the quantity is negative
            NotFoundError: If the brand or type does not exist
        """
        base_label = (product_data.get("name") or "").strip()
        if not base_label:
            raise EmptyNameError("Product")

        list_price, selling_price = validate_pricing(
            product_data.get("list_price"), product_data.get("selling_price")
        )
        quantity = int(product_data.get("quantity") or 0)
        if quantity < 0:
            raise InvalidQuantityError(quantity)

        brand = self._resolve_brand(db, product_data.get("brand_name"))
        product_type = self._resolve_type(db, product_data.get("type_name"))

        new_id = self.allocator.next_id(db, CatalogTable.PRODUCTS)
        product = self.products.insert(
            db,
            {
                "id": new_id,
                "name": compose_name(brand.name, base_label),
                "brand_name": brand.name,
                "brand_id": brand.id,
                "type_name": product_type.name,
                "type_id": product_type.id,
                "list_price": list_price,
                "selling_price": selling_price,
                "quantity": quantity,
                "image_url": product_data.get("image_url"),
                "size": product_data.get("size"),
            },
        )
        logger.info(f"Product added: {product.name} (ID: {product.id})")
        return product

    def update_product(
        self, db: Session, product_id: int, changes: Dict[str, Any]
    ) -> Product:
        """
        Edit a product.

        A ``name`` in ``changes`` is the base label and is composed with the
        (possibly new) brand. Changing only the brand swaps the brand prefix
        of the stored name. Brand and type ids are looked up from the names.

        Raises:
            NotFoundError: If the product, brand or type does not exist
            PriceInvariantViolation: If the selling price would exceed the MRP
            InvalidQuantityError: If the quantity would be negative
        """
        product = self.get_product(db, product_id)
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise CatalogValidationError(f"Fields cannot be edited: {sorted(unknown)}")

        patch: Dict[str, Any] = {}

        if "list_price" in changes or "selling_price" in changes:
            list_price, selling_price = validate_pricing(
                changes.get("list_price", product.list_price),
                changes.get("selling_price", product.selling_price),
            )
            patch["list_price"] = list_price
            patch["selling_price"] = selling_price

        if "quantity" in changes:
            if changes["quantity"] is None:
                raise CatalogValidationError("quantity cannot be null")
            quantity = int(changes["quantity"])
            if quantity < 0:
                raise InvalidQuantityError(quantity, product_id)
            patch["quantity"] = quantity

        old_brand = product.brand_name
        brand_name = old_brand
        if changes.get("brand_name") is not None:
            brand = self._resolve_brand(db, changes["brand_name"])
            brand_name = brand.name
            patch["brand_name"] = brand.name
            patch["brand_id"] = brand.id

        if changes.get("type_name") is not None:
            product_type = self._resolve_type(db, changes["type_name"])
            patch["type_name"] = product_type.name
            patch["type_id"] = product_type.id

        if "name" in changes:
            base_label = (changes["name"] or "").strip()
            prefix = brand_name.lower()
            if base_label.lower() == prefix or base_label.lower().startswith(prefix + " "):
                base_label = base_label[len(brand_name):].strip()
            if not base_label:
                raise EmptyNameError("Product")
            patch["name"] = compose_name(brand_name, base_label)
        elif brand_name != old_brand:
            patch["name"] = compose_name(brand_name, decompose_name(product.name, old_brand))

        for field in ("image_url", "size"):
            if field in changes:
                patch[field] = changes[field]

        if not patch:
            return product

        return self.products.update_by_id(db, product_id, patch)

    def set_quantity(self, db: Session, product_id: int, quantity: int) -> Product:
        """
        Set the stock level of a product.

        Raises:
            InvalidQuantityError: If ``quantity`` is negative; nothing is written
        """
        if quantity < 0:
            raise InvalidQuantityError(quantity, product_id)
        self.get_product(db, product_id)
        product = self.products.update_by_id(db, product_id, {"quantity": quantity})
        logger.info(f"Quantity of product {product_id} set to {quantity}")
        return product

    def adjust_quantity(self, db: Session, product_id: int, delta: int) -> Product:
        """
        Increment or decrement the stock level of a product.

        Decrements past zero are rejected, not clamped.

        Raises:
            InvalidQuantityError: If the result would be negative
        """
        product = self.get_product(db, product_id)
        new_quantity = (product.quantity or 0) + delta
        if new_quantity < 0:
            raise InvalidQuantityError(new_quantity, product_id)
        return self.set_quantity(db, product_id, new_quantity)

    def delete_product(self, db: Session, product_id: int) -> bool:
        """Delete one product. Returns False if it did not exist."""
        return self.products.delete_by_id(db, product_id)

    def delete_products(self, db: Session, product_ids: Iterable[int]) -> int:
        """Delete several products at once. An empty set deletes nothing."""
        return self.products.delete_by_ids(db, product_ids)

    def _resolve_brand(self, db: Session, name: Optional[str]):
        if not name or not name.strip():
            raise EmptyNameError("Brand")
        brand = self.brands.find_by_name(db, name)
        if brand is None:
            raise NotFoundError(CatalogTable.BRANDS.value, name, field="name")
        return brand

    def _resolve_type(self, db: Session, name: Optional[str]):
        if not name or not name.strip():
            raise EmptyNameError("Type")
        product_type = self.types.find_by_name(db, name)
        if product_type is None:
            raise NotFoundError(CatalogTable.TYPES.value, name, field="name")
        return product_type
