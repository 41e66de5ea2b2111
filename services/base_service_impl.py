"""Generic service implementation: validate, call the repository, map the result."""
import logging
from typing import Callable, List

from models.base_model import BaseModel
from repositories.base_repository import BaseRepository
from schemas.base_schema import BaseSchema
from services.base_service import BaseService

logger = logging.getLogger(__name__)


class BaseServiceImpl(BaseService):
    """
    Service base class wiring a repository to a pair of mapping functions.

    Args:
        repository: The data store for the entity
        to_model: Converts a schema into a model
        to_schema: Converts a model into a schema
    """

    def __init__(
        self,
        repository: BaseRepository,
        to_model: Callable[[BaseSchema], BaseModel],
        to_schema: Callable[[BaseModel], BaseSchema],
    ):
        self._repository = repository
        self._to_model = to_model
        self._to_schema = to_schema

    @property
    def repository(self) -> BaseRepository:
        return self._repository

    def get_all(self) -> List[BaseSchema]:
        return [self._to_schema(model) for model in self.repository.find_all()]

    def get_one(self, id_key: int) -> BaseSchema:
        return self._to_schema(self.repository.find(id_key))

    def save(self, schema: BaseSchema) -> BaseSchema:
        # New records never take their id from the caller
        model = self._to_model(schema.model_copy(update={"id": None}))
        return self._to_schema(self.repository.save(model))

    def update(self, id_key: int, schema: BaseSchema) -> BaseSchema:
        changes = schema.model_dump(exclude={"id"})
        return self._to_schema(self.repository.update(id_key, changes))

    def delete(self, id_key: int) -> None:
        self.repository.remove(id_key)

    def count(self) -> int:
        return self.repository.count()
