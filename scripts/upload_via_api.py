
import asyncio
import json
import os
import sys
from dotenv import load_dotenv
import httpx

# --- Configuration ---
# Load environment variables from .env file
load_dotenv()
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")


async def upload_categories_via_api(path: str = "categories.json"):
    """
    Uploads categories through the REST API, skipping names that already exist.
    """
    async with httpx.AsyncClient(base_url=API_BASE_URL) as client:
        # --- Health Check ---
        try:
            print(f"Checking API health at {API_BASE_URL}/health_check...")
            health_response = await client.get("/health_check")
            health_response.raise_for_status()
            print("API is healthy. Proceeding with data upload.")
        except (httpx.RequestError, httpx.HTTPStatusError) as e:
            print(f"Error: API health check failed: {e}")
            print("Please ensure the application is running and API_BASE_URL is correct.")
            return

        # --- Upload Categories ---
        print("\n--- Uploading Categories ---")
        try:
            with open(path, "r") as f:
                categories_data = json.load(f)
        except FileNotFoundError:
            print(f"Error: {path} not found. Please ensure it's in the project root.")
            return

        for cat_data in categories_data:
            payload = {"name": cat_data["name"]}
            try:
                response = await client.post("/api/categories", json=payload)
                if response.status_code == 409:  # Conflict
                    print(f"Category '{cat_data['name']}' already exists. Skipping.")
                elif response.status_code == 201:  # Created
                    print(f"Successfully created category: {cat_data['name']}")
                else:
                    response.raise_for_status()  # Raise exception for other errors
            except httpx.HTTPStatusError as e:
                print(f"Error creating category '{cat_data['name']}': {e.response.text}")

        # --- Summary ---
        response = await client.get("/api/categories")
        response.raise_for_status()
        print(f"\nThe API now holds {len(response.json())} categories.")


if __name__ == "__main__":
    asyncio.run(upload_categories_via_api(sys.argv[1] if len(sys.argv) > 1 else "categories.json"))
