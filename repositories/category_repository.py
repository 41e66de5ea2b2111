"""Category repository."""
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from exceptions import ConstraintViolationError
from models.category import CategoryModel
from repositories.base_repository_impl import BaseRepositoryImpl


class CategoryRepository(BaseRepositoryImpl):
    """Data store for categories. Names are unique (case-sensitive)."""

    def __init__(self, session: Session):
        super().__init__(CategoryModel, session)

    def find_by_name(self, name: str) -> Optional[CategoryModel]:
        stmt = select(CategoryModel).where(CategoryModel.name == name)
        return self.session.scalars(stmt).first()

    def constraint_violation(self, error: IntegrityError, values: Dict[str, Any]) -> ConstraintViolationError:
        name = values.get("name")
        reason = str(error.orig).lower()
        if name is None or "not null" in reason:
            return ConstraintViolationError("Category name must not be null")
        return ConstraintViolationError(
            f"Category with name '{name}' already exists",
            details={"name": name},
        )
