from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from ..models.category import CategoryType


class CategoryBase(BaseModel):
    """Base category fields."""
    name: str = Field(min_length=1, max_length=255)
    essential: bool
    type: CategoryType

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class CategoryCreate(CategoryBase):
    """Fields for creating a category."""
    pass


class CategoryUpdate(CategoryBase):
    """Fields for replacing a category (PUT sends every field)."""
    pass


class CategoryResponse(CategoryBase):
    """Category response with all fields."""
    id: int
    type_label: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class EssentialCount(BaseModel):
    essential: int
    non_essential: int
