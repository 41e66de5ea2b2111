"""Category schema with validation."""
from pydantic import Field, field_validator

from schemas.base_schema import BaseSchema


class CategorySchema(BaseSchema):
    """
    Transfer shape for a category, used by the API and the management screen.

    Names are stripped before the length check. Blank names are rejected by
    CategoryService rather than here, so that a whitespace-only name surfaces
    as InvalidArgumentError.
    """

    name: str = Field(..., max_length=100, description="Category name (required, unique)")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value
