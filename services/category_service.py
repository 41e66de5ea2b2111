"""Category service: the business operations behind the API and the management screen."""
import logging

from sqlalchemy.orm import Session

from exceptions import InstanceNotFoundError, InvalidArgumentError
from mappers import category_mapper
from repositories.category_repository import CategoryRepository
from schemas.category_schema import CategorySchema
from services.base_service_impl import BaseServiceImpl

logger = logging.getLogger(__name__)


class CategoryService(BaseServiceImpl):
    """
    Create, read, update and delete categories.

    Names are stripped of surrounding whitespace before they are stored and
    must not be empty. Uniqueness is enforced by the database constraint, so
    renaming a category to its current name is accepted.
    """

    def __init__(self, db: Session):
        super().__init__(
            repository=CategoryRepository(db),
            to_model=category_mapper.to_model,
            to_schema=category_mapper.to_schema,
        )

    def save(self, schema: CategorySchema) -> CategorySchema:
        name = self._validated_name(schema)
        created = super().save(schema.model_copy(update={"name": name}))
        logger.info("Created category id=%s name=%r", created.id, created.name)
        return created

    def update(self, id_key: int, schema: CategorySchema) -> CategorySchema:
        name = self._validated_name(schema)
        updated = super().update(id_key, schema.model_copy(update={"name": name}))
        logger.info("Updated category id=%s name=%r", updated.id, updated.name)
        return updated

    def delete(self, id_key: int) -> None:
        try:
            super().delete(id_key)
        except InstanceNotFoundError:
            logger.warning("Delete requested for unknown category id=%s", id_key)
            raise
        logger.info("Deleted category id=%s", id_key)

    @staticmethod
    def _validated_name(schema: CategorySchema) -> str:
        if schema is None or schema.name is None or not schema.name.strip():
            raise InvalidArgumentError("Category name must not be empty")
        return schema.name.strip()
