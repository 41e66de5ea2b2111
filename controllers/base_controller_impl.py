"""Base controller implementation module with FastAPI dependency injection."""
import logging
from typing import Callable, Dict, List, Type

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from config.database import get_db
from controllers.base_controller import BaseController
from exceptions import (
    CategoryAppError,
    ConstraintViolationError,
    InstanceNotFoundError,
    InvalidArgumentError,
)
from schemas.base_schema import BaseSchema
from services.base_service import BaseService

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: Dict[Type[CategoryAppError], int] = {
    InstanceNotFoundError: status.HTTP_404_NOT_FOUND,
    ConstraintViolationError: status.HTTP_409_CONFLICT,
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
}


def error_status_code(error: CategoryAppError) -> int:
    """HTTP status for a domain error; unknown kinds are treated as bad requests."""
    for error_type, code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


class BaseControllerImpl(BaseController):
    """
    Base controller implementation using FastAPI dependency injection.

    This class creates standard CRUD endpoints and properly manages database sessions.
    Domain errors raised by the service (not found, constraint violation,
    invalid argument) are turned into HTTP responses by the application's
    exception handlers.
    """

    def __init__(
        self,
        schema: Type[BaseSchema],
        service_factory: Callable[[Session], BaseService],
        prefix: str,
        entity_name: str,
        tags: List[str] = None,
    ):
        """
        Initialize the controller with dependency injection support.

        Args:
            schema: The Pydantic schema class for validation
            service_factory: A callable that creates a service instance given a DB session
            prefix: Base path of the resource, e.g. "/api/categories"
            entity_name: Human readable entity name used in confirmation messages
            tags: Optional list of tags for API documentation
        """
        self.schema = schema
        self.service_factory = service_factory
        self.entity_name = entity_name
        self.router = APIRouter(prefix=prefix, tags=tags or [])

        # Register all CRUD endpoints with proper dependency injection
        self._register_routes()

    def _register_routes(self):
        """Register all CRUD routes with proper dependency injection."""

        @self.router.get("", response_model=List[self.schema], status_code=status.HTTP_200_OK)
        async def get_all(db: Session = Depends(get_db)):
            """Get all records."""
            service = self.service_factory(db)
            return service.get_all()

        @self.router.get("/{id_key}", response_model=self.schema, status_code=status.HTTP_200_OK)
        async def get_one(id_key: int, db: Session = Depends(get_db)):
            """Get one record by id."""
            service = self.service_factory(db)
            return service.get_one(id_key)

        @self.router.post("", response_model=self.schema, status_code=status.HTTP_201_CREATED)
        async def create(schema_in: self.schema, db: Session = Depends(get_db)):
            """Create a new record."""
            service = self.service_factory(db)
            return service.save(schema_in)

        @self.router.put("/{id_key}", response_model=self.schema, status_code=status.HTTP_200_OK)
        async def update(id_key: int, schema_in: self.schema, db: Session = Depends(get_db)):
            """Update an existing record."""
            service = self.service_factory(db)
            return service.update(id_key, schema_in)

        @self.router.delete("/{id_key}", status_code=status.HTTP_200_OK, response_class=PlainTextResponse)
        async def delete(id_key: int, db: Session = Depends(get_db)):
            """Delete a record."""
            service = self.service_factory(db)
            service.delete(id_key)
            return f"{self.entity_name} deleted successfully."

        logger.debug(f"{type(self).__name__}: Registered {len(self.router.routes)} routes.")
