"""
Seed the categories table from a JSON file, straight through the service layer.

Usage: python scripts/seed_categories.py [path/to/categories.json]
"""
import json
import os
import sys

# Add the project root to the Python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config.database import SessionLocal, create_tables
from exceptions import CategoryAppError
from repositories.category_repository import CategoryRepository
from schemas.category_schema import CategorySchema
from services.category_service import CategoryService


def load_names(path: str) -> list:
    with open(path, "r") as f:
        return [entry["name"] for entry in json.load(f)]


def seed_categories(db, names) -> int:
    """Create every name that is not stored yet. Returns how many were created."""
    repository = CategoryRepository(db)
    service = CategoryService(db)
    created = 0
    for name in names:
        if repository.find_by_name(name.strip()):
            print(f"Category '{name}' already exists. Skipping.")
            continue
        try:
            service.save(CategorySchema(name=name))
        except CategoryAppError as e:
            print(f"Error creating category '{name}': {e}")
            continue
        created += 1
        print(f"Successfully created category: {name}")
    return created


def main(argv) -> int:
    path = argv[1] if len(argv) > 1 else "categories.json"
    try:
        names = load_names(path)
    except FileNotFoundError:
        print(f"Error: {path} not found. Please ensure it's in the project root.")
        return 1

    create_tables()
    db = SessionLocal()
    try:
        created = seed_categories(db, names)
    finally:
        db.close()
    print(f"\nSeeding finished: {created} new categories.")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
