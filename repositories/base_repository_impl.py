"""SQLAlchemy implementation of the repository contract."""
import logging
from typing import Any, Dict, List, Type

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from exceptions import ConstraintViolationError, InstanceNotFoundError
from models.base_model import BaseModel
from repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)

# Largest value an INTEGER primary key can hold (signed 64 bit)
MAX_ID = 2**63 - 1

__all__ = ["BaseRepositoryImpl", "InstanceNotFoundError", "ConstraintViolationError"]


class BaseRepositoryImpl(BaseRepository):
    """
    Generic repository backed by a SQLAlchemy session.

    Every write commits on its own, so a single repository call is a single
    transaction. Integrity errors are rolled back and re-raised as
    ConstraintViolationError.
    """

    def __init__(self, model: Type[BaseModel], session: Session):
        self._model = model
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    @property
    def model(self) -> Type[BaseModel]:
        return self._model

    @property
    def model_name(self) -> str:
        return self._model.__name__.removesuffix("Model")

    def find(self, id_key: int) -> BaseModel:
        if not self._storable_id(id_key):
            raise InstanceNotFoundError(self.model_name, id_key)
        instance = self.session.get(self.model, id_key)
        if instance is None:
            raise InstanceNotFoundError(self.model_name, id_key)
        return instance

    def find_all(self) -> List[BaseModel]:
        stmt = select(self.model).order_by(self.model.id)
        return list(self.session.scalars(stmt).all())

    def save(self, model: BaseModel) -> BaseModel:
        if model.id is None:
            self.session.add(model)
        else:
            # Updating requires an existing row, save() never invents ids
            self.find(model.id)
            model = self.session.merge(model)
        self._commit({"name": getattr(model, "name", None)})
        self.session.refresh(model)
        return model

    def update(self, id_key: int, changes: Dict[str, Any]) -> BaseModel:
        instance = self.find(id_key)
        for key, value in changes.items():
            if key == "id" or not hasattr(instance, key):
                continue
            setattr(instance, key, value)
        self._commit(changes)
        self.session.refresh(instance)
        return instance

    def remove(self, id_key: int) -> None:
        if not self._storable_id(id_key):
            raise InstanceNotFoundError(self.model_name, id_key)
        # One conditional DELETE, so there is no window between "exists" and "delete"
        result = self.session.execute(delete(self.model).where(self.model.id == id_key))
        if result.rowcount == 0:
            self.session.rollback()
            raise InstanceNotFoundError(self.model_name, id_key)
        self.session.commit()

    def delete(self, model: BaseModel) -> None:
        if model.id is None:
            raise InstanceNotFoundError(self.model_name, model.id)
        self.remove(model.id)

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(self.model))

    @staticmethod
    def _storable_id(id_key: int) -> bool:
        # Ids the column cannot hold would overflow the driver, they simply do not exist
        return -MAX_ID - 1 <= id_key <= MAX_ID

    def _commit(self, values: Dict[str, Any]) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning("Integrity error on %s: %s", self.model_name, e.orig)
            raise self.constraint_violation(e, values) from e

    def constraint_violation(self, error: IntegrityError, values: Dict[str, Any]) -> ConstraintViolationError:
        """Translate an IntegrityError into a domain error. Subclasses refine the message."""
        return ConstraintViolationError(
            f"{self.model_name} violates a database constraint",
            details={"model": self.model_name},
        )
