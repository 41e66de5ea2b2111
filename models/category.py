from sqlalchemy import Column, String

from models.base_model import BaseModel


class CategoryModel(BaseModel):
    __tablename__ = "categories"

    name = Column(String(100), unique=True, index=True, nullable=False)

    # Expenses referencing categories are not modelled yet, so deleting a
    # category never cascades.

    def __repr__(self) -> str:
        return f"CategoryModel(id={self.id!r}, name={self.name!r})"
