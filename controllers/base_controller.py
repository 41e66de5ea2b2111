"""Base controller contract."""
from abc import ABC, abstractmethod

from fastapi import APIRouter


class BaseController(ABC):
    """A controller owns an APIRouter and registers its routes on it."""

    router: APIRouter

    @abstractmethod
    def _register_routes(self) -> None:
        pass
