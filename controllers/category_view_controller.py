"""
Server-rendered management screen for categories.

Serves a listing with an "active categories" counter, create/edit dialogs
and a delete confirmation. Every mutation ends in a timed toast.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.requests import Request

from config import settings
from config.database import get_db
from controllers.base_controller_impl import error_status_code
from exceptions import CategoryAppError, InvalidArgumentError
from schemas.category_schema import CategorySchema
from services.category_service import CategoryService

logger = logging.getLogger(__name__)

templates_dir = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))

TOAST_LEVELS = ("success", "error", "contrast")

DIALOG_TITLES = {
    "create": "Create new category",
    "edit": "Edit category",
    "delete": "Delete category",
}


@dataclass(frozen=True)
class Toast:
    message: str
    level: str = "success"
    duration_ms: int = settings.TOAST_DURATION_MS


@dataclass(frozen=True)
class Dialog:
    kind: str
    category: Optional[CategorySchema] = None
    value: str = ""
    # Put the cursor back into the name field (after a rejected submit)
    focus: bool = True

    @property
    def title(self) -> str:
        return DIALOG_TITLES[self.kind]


@dataclass(frozen=True)
class ScreenState:
    """Everything the template needs. ``count`` always matches ``items``."""

    items: List[CategorySchema] = field(default_factory=list)
    dialog: Optional[Dialog] = None
    toast: Optional[Toast] = None

    @property
    def count(self) -> int:
        return len(self.items)


def build_screen_state(
    service: CategoryService,
    dialog: Optional[str] = None,
    category_id: Optional[int] = None,
    value: Optional[str] = None,
    toast: Optional[Toast] = None,
) -> ScreenState:
    """
    Load the listing and resolve which dialog (if any) is open.

    Args:
        service: Category service bound to the current session
        dialog: "create", "edit" or "delete"; anything else means no dialog
        category_id: Category the edit/delete dialog refers to
        value: Current text of the name field (defaults to the stored name)
        toast: Notification to show on this render

    Returns:
        ScreenState with the fresh listing; the counter is derived from it.
    """
    try:
        items = service.get_all()
    except (CategoryAppError, SQLAlchemyError) as e:
        logger.error(f"Failed to load categories: {e}")
        return ScreenState(items=[], toast=Toast(f"Error while loading: {e}", "error"))

    if dialog not in DIALOG_TITLES:
        return ScreenState(items=items, toast=toast)

    if dialog == "create":
        return ScreenState(items=items, dialog=Dialog("create", value=value or ""), toast=toast)

    category = next((item for item in items if item.id == category_id), None)
    if category is None:
        return ScreenState(
            items=items,
            toast=Toast(f"Error: Category not found with id: {category_id}", "error"),
        )
    current = category.name if value is None else value
    return ScreenState(items=items, dialog=Dialog(dialog, category=category, value=current), toast=toast)


def _name_schema(name: str, category_id: Optional[int] = None) -> CategorySchema:
    try:
        return CategorySchema(id=category_id, name=name)
    except ValidationError as e:
        raise InvalidArgumentError("Category name must be at most 100 characters", details={"errors": e.errors()}) from e


def _redirect_home(message: str, level: str = "success") -> RedirectResponse:
    query = urlencode({"toast": message, "toast_level": level})
    return RedirectResponse(url=f"/?{query}", status_code=status.HTTP_303_SEE_OTHER)


class CategoryViewController:
    """HTML routes of the management screen."""

    template_name = "categories.html"

    def __init__(self):
        self.router = APIRouter(tags=["Management Screen"], include_in_schema=False)
        self._register_routes()

    def render(self, request: Request, state: ScreenState, status_code: int = status.HTTP_200_OK):
        return templates.TemplateResponse(
            request=request,
            name=self.template_name,
            context={"title": settings.APP_TITLE, "state": state},
            status_code=status_code,
        )

    def _register_routes(self):

        @self.router.get("/", response_class=HTMLResponse)
        async def home(
            request: Request,
            dialog: Optional[str] = Query(None),
            category_id: Optional[int] = Query(None),
            toast: Optional[str] = Query(None),
            toast_level: str = Query("success"),
            db: Session = Depends(get_db),
        ):
            level = toast_level if toast_level in TOAST_LEVELS else "success"
            state = build_screen_state(
                CategoryService(db),
                dialog=dialog,
                category_id=category_id,
                toast=Toast(toast, level) if toast else None,
            )
            return self.render(request, state)

        @self.router.get("/refresh")
        async def refresh():
            return _redirect_home("Data was refreshed")

        @self.router.post("/categories", response_class=HTMLResponse)
        async def create(request: Request, name: str = Form(""), db: Session = Depends(get_db)):
            service = CategoryService(db)
            try:
                created = service.save(_name_schema(name))
            except CategoryAppError as e:
                return self._rejected(request, service, e, "create", None, name)
            return _redirect_home(f"Category '{created.name}' was created!")

        @self.router.post("/categories/{category_id}/edit", response_class=HTMLResponse)
        async def edit(
            request: Request,
            category_id: int,
            name: str = Form(""),
            db: Session = Depends(get_db),
        ):
            service = CategoryService(db)
            try:
                service.update(category_id, _name_schema(name, category_id))
            except CategoryAppError as e:
                return self._rejected(request, service, e, "edit", category_id, name)
            return _redirect_home("Category was updated!")

        @self.router.post("/categories/{category_id}/delete")
        async def delete(category_id: int, db: Session = Depends(get_db)):
            service = CategoryService(db)
            try:
                label = service.get_one(category_id).name
                service.delete(category_id)
            except CategoryAppError as e:
                return _redirect_home(f"Error while deleting: {e}", "error")
            return _redirect_home(f"Category '{label}' was deleted")

    def _rejected(
        self,
        request: Request,
        service: CategoryService,
        error: CategoryAppError,
        dialog: str,
        category_id: Optional[int],
        value: str,
    ):
        """Re-render with the dialog still open and the submitted text kept."""
        if isinstance(error, InvalidArgumentError) and not value.strip():
            toast = Toast("Please enter a name", "contrast")
        elif isinstance(error, InvalidArgumentError):
            toast = Toast(str(error), "contrast")
        else:
            toast = Toast(f"Error: {error}", "error")
        logger.warning(f"Rejected {dialog} of category {category_id}: {error}")
        state = build_screen_state(service, dialog=dialog, category_id=category_id, value=value, toast=toast)
        return self.render(request, state, status_code=error_status_code(error))
