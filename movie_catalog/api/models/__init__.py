"""
Pydantic schemas for API request/response validation.
"""

from movie_catalog.api.models.movie import (
    MovieFields,
    MovieResponse,
    DeleteManyRequest,
    ImportResponse,
)

__all__ = [
    "MovieFields",
    "MovieResponse",
    "DeleteManyRequest",
    "ImportResponse",
]
