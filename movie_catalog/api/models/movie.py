"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _scalar_text(value):
    """Numbers are accepted as text (a film called 1917)."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class MovieFields(BaseModel):
    """
    Request body for creating or replacing a movie.

    Fields are optional at the schema level so that a missing field is
    reported as a 400 by the crud validation rather than a 422.
    Accepts both ``Movie_Name`` and ``movie_name`` style keys.
    """

    model_config = ConfigDict(populate_by_name=True)

    movie_name: str | None = Field(None, alias="Movie_Name")
    description: str | None = Field(None, alias="Description")
    casting: str | None = Field(None, alias="Casting")

    @field_validator("movie_name", "description", "casting", mode="before")
    @classmethod
    def coerce_scalars(cls, value):
        return _scalar_text(value)


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: str
    movie_name: str
    description: str
    casting: str

    class Config:
        from_attributes = True


class DeleteManyRequest(BaseModel):
    """Request body for deleting several movies."""

    ids: list[str] | None = None

    @field_validator("ids", mode="before")
    @classmethod
    def coerce_ids(cls, value):
        if isinstance(value, list):
            return [_scalar_text(item) for item in value]
        return value


class ImportResponse(BaseModel):
    """Response model for a spreadsheet import."""

    message: str
    imported: int
