"""Product schemas for request/response validation."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

from catalog_admin.utils.formatting import format_price


class ProductCreate(BaseModel):
    """Schema for adding a product. ``name`` is the label without the brand."""

    name: str = Field(..., min_length=1, max_length=200)
    brand_name: str = Field(..., min_length=1, max_length=100)
    type_name: str = Field(..., min_length=1, max_length=100)
    list_price: Decimal = Field(..., ge=0)
    selling_price: Decimal = Field(..., ge=0)
    quantity: int = Field(default=0, ge=0)
    image_url: Optional[str] = None
    size: Optional[str] = Field(None, max_length=50)

    @field_validator("name", "brand_name", "type_name", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class ProductUpdate(BaseModel):
    """Schema for editing a product. All fields are optional."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    brand_name: Optional[str] = Field(None, min_length=1, max_length=100)
    type_name: Optional[str] = Field(None, min_length=1, max_length=100)
    list_price: Optional[Decimal] = Field(None, ge=0)
    selling_price: Optional[Decimal] = Field(None, ge=0)
    quantity: Optional[int] = None
    image_url: Optional[str] = None
    size: Optional[str] = Field(None, max_length=50)

    @field_validator("name", "list_price", "selling_price", "quantity", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("cannot be null; omit the field to leave it unchanged")
        return v


class QuantityUpdate(BaseModel):
    """Either an absolute quantity or a relative change, not both."""

    quantity: Optional[int] = None
    delta: Optional[int] = None

    @model_validator(mode="after")
    def check_one_of(self):
        if (self.quantity is None) == (self.delta is None):
            raise ValueError("Provide exactly one of 'quantity' or 'delta'")
        return self


class BulkDeleteRequest(BaseModel):
    """Ids of products to delete."""

    ids: List[int] = []


class BulkDeleteResult(BaseModel):
    """Result of a bulk delete."""

    requested: int
    deleted: int


class ProductResponse(BaseModel):
    """Product response schema."""

    id: int
    name: str
    brand_name: str
    brand_id: Optional[int] = None
    type_name: str
    type_id: Optional[int] = None
    image_url: Optional[str] = None
    list_price: Decimal
    selling_price: Decimal
    quantity: int
    size: Optional[str] = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def list_price_display(self) -> str:
        return format_price(self.list_price)

    @computed_field
    @property
    def selling_price_display(self) -> str:
        return format_price(self.selling_price)


class Notification(BaseModel):
    """Message describing the latest change."""

    title: str
    description: str


class BrandSummary(BaseModel):
    id: int
    name: str


class TypeSummary(BaseModel):
    id: int
    name: str


class InventoryResponse(BaseModel):
    """Current in-memory inventory view."""

    products: List[ProductResponse]
    brands: List[BrandSummary]
    product_types: List[TypeSummary]
    total_products: int
    total_quantity: int
    loaded_at: Optional[datetime] = None
    last_notification: Optional[Notification] = None

