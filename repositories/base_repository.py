"""Abstract repository contract."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from models.base_model import BaseModel


class BaseRepository(ABC):
    """Persistence operations over one model type, keyed by ``id``."""

    @abstractmethod
    def save(self, model: BaseModel) -> BaseModel:
        """Insert a new record, or update the stored one when ``model.id`` is set."""

    @abstractmethod
    def find(self, id_key: int) -> BaseModel:
        """Return the record with ``id_key`` or raise InstanceNotFoundError."""

    @abstractmethod
    def find_all(self) -> List[BaseModel]:
        """Return every stored record."""

    @abstractmethod
    def update(self, id_key: int, changes: Dict[str, Any]) -> BaseModel:
        """Apply ``changes`` to the record with ``id_key``."""

    @abstractmethod
    def remove(self, id_key: int) -> None:
        """Delete the record with ``id_key`` or raise InstanceNotFoundError."""

    @abstractmethod
    def delete(self, model: BaseModel) -> None:
        """Delete the given record."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored records."""
