"""Brand and product type schemas for request/response validation."""

from typing import List

from pydantic import BaseModel, Field, field_validator

from catalog_admin.models.enums import RenameState


class ReferenceCreate(BaseModel):
    """Schema for adding a brand or type."""

    name: str = Field(..., min_length=1, max_length=100)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class ReferenceRename(BaseModel):
    """Schema for renaming a brand or type."""

    new_name: str = Field(..., min_length=1, max_length=100)

    @field_validator("new_name", mode="before")
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class BrandResponse(BaseModel):
    """Brand response schema."""

    id: int
    name: str

    model_config = {"from_attributes": True}


class ProductTypeResponse(BaseModel):
    """Product type response schema."""

    id: int
    name: str

    model_config = {"from_attributes": True}


class RenameResponse(BaseModel):
    """Outcome of a cascading rename."""

    table: str
    old_name: str
    new_name: str
    products_updated: int
    state: RenameState
    history: List[RenameState] = []

    model_config = {"from_attributes": True}
