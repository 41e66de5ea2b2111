"""Category REST controller, mounted at /api/categories."""
from controllers.base_controller_impl import BaseControllerImpl
from schemas.category_schema import CategorySchema
from services.category_service import CategoryService


class CategoryController(BaseControllerImpl):
    """
    Controller for Category entity with CRUD operations.

    - POST   /api/categories       -> 201 with the created category
    - GET    /api/categories       -> 200 with every category
    - GET    /api/categories/{id}  -> 200 with one category
    - PUT    /api/categories/{id}  -> 200 with the renamed category
    - DELETE /api/categories/{id}  -> 200 with a confirmation text
    """

    def __init__(self):
        super().__init__(
            schema=CategorySchema,
            service_factory=lambda db: CategoryService(db),
            prefix="/api/categories",
            entity_name="Category",
            tags=["Categories"],
        )
