"""
FastAPI client wrapper for Streamlit UI.
"""

import os
from typing import BinaryIO

import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def _movies_url(suffix: str = "") -> str:
    return f"{get_api_base_url()}/api/movies{suffix}"


def _payload(movie_name: str, description: str, casting: str) -> dict:
    return {"Movie_Name": movie_name, "Description": description, "Casting": casting}


def list_movies() -> list[dict]:
    """Fetch the full catalog."""
    r = requests.get(_movies_url(), timeout=10)
    r.raise_for_status()
    return r.json()


def get_movie(movie_id: str) -> dict:
    """Get a single movie."""
    r = requests.get(_movies_url(f"/{movie_id}"), timeout=10)
    r.raise_for_status()
    return r.json()


def create_movie(movie_name: str, description: str, casting: str) -> dict:
    """Create a new movie."""
    r = requests.post(
        _movies_url(),
        json=_payload(movie_name, description, casting),
        timeout=10,
    )
    r.raise_for_status()
    return r.json()


def update_movie(movie_id: str, movie_name: str, description: str, casting: str) -> dict:
    """Replace all fields of a movie."""
    r = requests.patch(
        _movies_url(f"/{movie_id}"),
        json=_payload(movie_name, description, casting),
        timeout=10,
    )
    r.raise_for_status()
    return r.json()


def delete_movie(movie_id: str) -> list[dict]:
    """Delete a movie; returns the refreshed catalog."""
    r = requests.delete(_movies_url(f"/{movie_id}"), timeout=10)
    r.raise_for_status()
    return r.json()


def delete_movies(movie_ids: list[str]) -> list[dict]:
    """Delete several movies; returns the deleted records."""
    r = requests.post(
        _movies_url("/delete-multiple"),
        json={"ids": list(movie_ids)},
        timeout=10,
    )
    r.raise_for_status()
    return r.json()


def upload_spreadsheet(filename: str, content: bytes | BinaryIO) -> dict:
    """Upload an .xlsx workbook for bulk import."""
    r = requests.post(
        _movies_url("/upload"),
        files={
            "file": (
                filename,
                content,
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            )
        },
        timeout=60,
    )
    r.raise_for_status()
    return r.json()


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()
