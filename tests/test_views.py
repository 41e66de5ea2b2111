"""Tests for the server-rendered management screen."""
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from controllers.category_view_controller import (
    ScreenState,
    Toast,
    build_screen_state,
)
from schemas.category_schema import CategorySchema
from services.category_service import CategoryService


def count_marker(count: int) -> str:
    return f'id="category-count">{count}<'


class TestBuildScreenState:
    """Tests for the pure screen-state builder."""

    def test_empty_listing(self, db_session):
        state = build_screen_state(CategoryService(db_session))

        assert state == ScreenState(items=[], dialog=None, toast=None)
        assert state.count == 0

    def test_count_follows_listing(self, db_session, seeded_db):
        state = build_screen_state(CategoryService(db_session))

        assert [c.name for c in state.items] == ["Groceries", "Transport"]
        assert state.count == 2

    def test_create_dialog(self, db_session):
        state = build_screen_state(CategoryService(db_session), dialog="create", value="Bo")

        assert state.dialog.kind == "create"
        assert state.dialog.title == "Create new category"
        assert state.dialog.value == "Bo"
        assert state.dialog.focus

    def test_edit_dialog_prefilled(self, db_session, seeded_db):
        category_id = seeded_db["transport"].id

        state = build_screen_state(CategoryService(db_session), dialog="edit", category_id=category_id)

        assert state.dialog.kind == "edit"
        assert state.dialog.category == CategorySchema(id=category_id, name="Transport")
        assert state.dialog.value == "Transport"

    def test_edit_dialog_keeps_submitted_value(self, db_session, seeded_db):
        state = build_screen_state(
            CategoryService(db_session), dialog="edit", category_id=seeded_db["transport"].id, value=""
        )

        assert state.dialog.value == ""

    def test_dialog_for_unknown_category(self, db_session):
        state = build_screen_state(CategoryService(db_session), dialog="delete", category_id=999)

        assert state.dialog is None
        assert state.toast.level == "error"
        assert "999" in state.toast.message

    def test_unknown_dialog_kind_is_ignored(self, db_session):
        assert build_screen_state(CategoryService(db_session), dialog="bogus").dialog is None

    def test_toast_passes_through(self, db_session):
        toast = Toast("Data was refreshed")

        state = build_screen_state(CategoryService(db_session), toast=toast)

        assert state.toast == toast
        assert state.toast.duration_ms == 3000

    def test_loading_failure_becomes_error_toast(self):
        service = Mock(spec=CategoryService)
        service.get_all.side_effect = SQLAlchemyError("database is locked")

        state = build_screen_state(service, dialog="create")

        assert state.items == []
        assert state.count == 0
        assert state.dialog is None
        assert state.toast == Toast("Error while loading: database is locked", "error")


@pytest.mark.integration
class TestManagementScreen:
    """Tests for the HTML routes."""

    def test_home_empty(self, api_client):
        response = api_client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "No categories yet" in response.text
        assert count_marker(0) in response.text
        assert "<dialog" not in response.text

    def test_home_lists_categories(self, api_client, seeded_db):
        response = api_client.get("/")

        assert "Groceries" in response.text
        assert "Transport" in response.text
        assert count_marker(2) in response.text

    def test_open_create_dialog(self, api_client):
        response = api_client.get("/", params={"dialog": "create"})

        assert 'id="create-dialog"' in response.text
        assert 'action="/categories"' in response.text

    def test_create_category(self, api_client):
        response = api_client.post("/categories", data={"name": "Groceries"}, follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"].startswith("/?toast=")

        page = api_client.get(response.headers["location"])
        assert "Category &#39;Groceries&#39; was created!" in page.text
        assert "toast-success" in page.text
        assert count_marker(1) in page.text

    def test_create_blank_name_keeps_dialog_open(self, api_client):
        response = api_client.post("/categories", data={"name": "   "})

        assert response.status_code == 400
        assert 'id="create-dialog"' in response.text
        assert "Please enter a name" in response.text
        assert "toast-contrast" in response.text
        assert "autofocus" in response.text
        assert count_marker(0) in response.text

    def test_create_name_too_long_keeps_dialog_open(self, api_client):
        too_long = "x" * 101

        response = api_client.post("/categories", data={"name": too_long})

        assert response.status_code == 400
        assert 'id="create-dialog"' in response.text
        assert "Category name must be at most 100 characters" in response.text
        assert "toast-contrast" in response.text
        assert f'value="{too_long}"' in response.text
        assert count_marker(0) in response.text

    def test_create_duplicate_keeps_dialog_open(self, api_client, seeded_db):
        response = api_client.post("/categories", data={"name": "Groceries"})

        assert response.status_code == 409
        assert 'id="create-dialog"' in response.text
        assert "already exists" in response.text
        assert "toast-error" in response.text
        assert count_marker(2) in response.text

    def test_open_edit_dialog(self, api_client, seeded_db):
        category_id = seeded_db["groceries"].id

        response = api_client.get("/", params={"dialog": "edit", "category_id": category_id})

        assert 'id="edit-dialog"' in response.text
        assert f'action="/categories/{category_id}/edit"' in response.text
        assert 'value="Groceries"' in response.text

    def test_edit_category(self, api_client, seeded_db):
        category_id = seeded_db["groceries"].id

        response = api_client.post(f"/categories/{category_id}/edit", data={"name": "Food"})

        assert response.status_code == 200
        assert "Category was updated!" in response.text
        assert "Food" in response.text
        assert count_marker(2) in response.text

    def test_edit_blank_name(self, api_client, seeded_db):
        category_id = seeded_db["groceries"].id

        response = api_client.post(f"/categories/{category_id}/edit", data={"name": ""})

        assert response.status_code == 400
        assert 'id="edit-dialog"' in response.text
        assert "Please enter a name" in response.text

    def test_edit_name_too_long(self, api_client, seeded_db):
        category_id = seeded_db["groceries"].id

        response = api_client.post(f"/categories/{category_id}/edit", data={"name": "x" * 101})

        assert response.status_code == 400
        assert 'id="edit-dialog"' in response.text
        assert "Category name must be at most 100 characters" in response.text
        assert "Groceries" in response.text

    def test_edit_unknown_category(self, api_client):
        response = api_client.post("/categories/999/edit", data={"name": "Food"})

        assert response.status_code == 404
        assert "Category not found with id: 999" in response.text

    def test_delete_requires_confirmation_dialog(self, api_client, seeded_db):
        category_id = seeded_db["transport"].id

        response = api_client.get("/", params={"dialog": "delete", "category_id": category_id})

        assert 'id="delete-dialog"' in response.text
        assert "Do you really want to delete the category &#39;Transport&#39;?" in response.text
        assert f'action="/categories/{category_id}/delete"' in response.text

    def test_delete_category(self, api_client, seeded_db):
        category_id = seeded_db["transport"].id

        response = api_client.post(f"/categories/{category_id}/delete")

        assert response.status_code == 200
        assert "Category &#39;Transport&#39; was deleted" in response.text
        assert count_marker(1) in response.text

    def test_delete_toast_uses_stored_name(self, api_client, seeded_db):
        category_id = seeded_db["transport"].id

        response = api_client.post(f"/categories/{category_id}/delete", data={"name": "Something else"})

        assert "Category &#39;Transport&#39; was deleted" in response.text
        assert "Something else" not in response.text

    def test_delete_unknown_category(self, api_client):
        response = api_client.post("/categories/999/delete", data={"name": "Ghost"})

        assert response.status_code == 200
        assert "Error while deleting: Category not found with id: 999" in response.text
        assert "toast-error" in response.text

    def test_refresh(self, api_client):
        response = api_client.get("/refresh")

        assert response.status_code == 200
        assert "Data was refreshed" in response.text

    def test_unknown_toast_level_falls_back_to_success(self, api_client):
        response = api_client.get("/", params={"toast": "Hello", "toast_level": "<script>"})

        assert "toast-success" in response.text
        assert "toast-<script>" not in response.text
