"""Conversion between CategoryModel rows and CategorySchema transfer objects."""
from typing import Optional

from exceptions import InvalidArgumentError
from models.category import CategoryModel
from schemas.category_schema import CategorySchema


def to_model(schema: Optional[CategorySchema]) -> CategoryModel:
    """Build a (possibly transient) CategoryModel from a schema."""
    if schema is None:
        raise InvalidArgumentError("Cannot map an empty category schema to a model")
    return CategoryModel(id=schema.id, name=schema.name)


def to_schema(model: Optional[CategoryModel]) -> CategorySchema:
    """Build a CategorySchema from a stored (or transient) CategoryModel."""
    if model is None:
        raise InvalidArgumentError("Cannot map an empty category model to a schema")
    return CategorySchema.model_validate(model)
