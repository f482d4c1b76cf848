"""Pydantic models for REST API requests and responses."""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from ratguide.models import FoodType


# =============================================================================
# Requests
# =============================================================================

class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    display_name: str = Field(min_length=1, max_length=200)
    type: FoodType


class ItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    type: FoodType
    category_id: int | None = None
    description: str | None = None


# =============================================================================
# Responses
# =============================================================================

class CategoryResponse(BaseModel):
    id: int
    name: str
    display_name: str
    type: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class CategoryCreatedResponse(CategoryResponse):
    message: str


class ItemResponse(BaseModel):
    id: int
    name: str
    type: str
    category_id: int | None = None
    description: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class ItemWithCategoryResponse(ItemResponse):
    """Item joined with its category label (null when uncategorized)."""
    category_name: str | None = None


class ItemCreatedResponse(ItemResponse):
    message: str


class ItemGroupResponse(BaseModel):
    category_name: str
    category_type: str
    items: list[ItemResponse]

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    message: str


class BulkDeleteResponse(BaseModel):
    message: str
    deleted_count: int = Field(serialization_alias="deletedCount")

    model_config = ConfigDict(populate_by_name=True)
