"""
Movie API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session

from movie_catalog.api.config import get_import_atomic, get_upload_dir
from movie_catalog.api.dependencies import get_db
from movie_catalog.api.models.movie import (
    DeleteManyRequest,
    ImportResponse,
    MovieFields,
    MovieResponse,
)
from movie_catalog.core import importer
from movie_catalog.database import crud

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/movies", tags=["movies"])


def _all_movies(db: Session) -> list[MovieResponse]:
    return [MovieResponse.model_validate(m) for m in crud.get_movies(db)]


@router.get("", response_model=list[MovieResponse])
def list_movies(db: Session = Depends(get_db)):
    """List every movie in the catalog."""
    return _all_movies(db)


@router.post("", response_model=MovieResponse)
def create_movie(movie_in: MovieFields, db: Session = Depends(get_db)):
    """Create a movie with a freshly generated id."""
    try:
        movie = crud.create_movie(
            db,
            movie_name=movie_in.movie_name,
            description=movie_in.description,
            casting=movie_in.casting,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Created movie %s", movie.id)
    return MovieResponse.model_validate(movie)


@router.post("/delete-multiple", response_model=list[MovieResponse])
def delete_movies(body: DeleteManyRequest, db: Session = Depends(get_db)):
    """Delete several movies at once; returns the records actually deleted."""
    if not body.ids:
        raise HTTPException(status_code=400, detail="No movie IDs provided")
    deleted = crud.delete_movies(db, body.ids)
    if not deleted:
        raise HTTPException(status_code=404, detail="No movies found to delete")
    logger.info("Deleted %d of %d requested movies", len(deleted), len(body.ids))
    return [MovieResponse.model_validate(m) for m in deleted]


@router.post("/upload", response_model=ImportResponse)
def upload_movies(file: UploadFile | None = File(None), db: Session = Depends(get_db)):
    """Import movies from the first sheet of an uploaded .xlsx workbook."""
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")
    try:
        created = importer.import_upload(
            db,
            file.file,
            upload_dir=get_upload_dir(),
            atomic=get_import_atomic(),
        )
    except (crud.MovieValidationError, importer.SpreadsheetError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info("Imported %d movies from %s", len(created), file.filename)
    return ImportResponse(
        message="Movies added successfully from spreadsheet",
        imported=len(created),
    )


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: str, db: Session = Depends(get_db)):
    """Get movie details by ID."""
    movie = crud.get_movie(db, movie_id)
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    return MovieResponse.model_validate(movie)


def _replace_movie(movie_id: str, movie_in: MovieFields, db: Session) -> MovieResponse:
    try:
        movie = crud.update_movie(
            db,
            movie_id,
            movie_name=movie_in.movie_name,
            description=movie_in.description,
            casting=movie_in.casting,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    logger.info("Updated movie %s", movie_id)
    return MovieResponse.model_validate(movie)


@router.patch("/{movie_id}", response_model=MovieResponse)
def update_movie(movie_id: str, movie_in: MovieFields, db: Session = Depends(get_db)):
    """Update a movie. All three fields are required."""
    return _replace_movie(movie_id, movie_in, db)


@router.put("/{movie_id}", response_model=MovieResponse)
def replace_movie(movie_id: str, movie_in: MovieFields, db: Session = Depends(get_db)):
    """Replace a movie; same semantics as PATCH."""
    return _replace_movie(movie_id, movie_in, db)


@router.delete("/{movie_id}", response_model=list[MovieResponse])
def delete_movie(movie_id: str, db: Session = Depends(get_db)):
    """Delete a movie and return the refreshed catalog."""
    if not crud.delete_movie(db, movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")
    logger.info("Deleted movie %s", movie_id)
    return _all_movies(db)
