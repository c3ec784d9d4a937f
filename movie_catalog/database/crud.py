"""
CRUD operations for the Movie model.

This module provides Create, Read, Update, Delete operations for catalog
records. Lookups return ``None`` when a record does not exist; invalid input
raises ``MovieValidationError``.
"""

from typing import Iterable, List, Optional
from sqlalchemy import delete, func
from sqlalchemy.orm import Session

from movie_catalog.database.models import Movie, generate_movie_id


# Column-style names used by the REST API and spreadsheet headers
FIELD_LABELS = {
    'movie_name': 'Movie_Name',
    'description': 'Description',
    'casting': 'Casting',
}


class MovieValidationError(ValueError):
    """Raised when a movie record is missing one of its required fields."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        labels = ", ".join(FIELD_LABELS.values())
        super().__init__(f"All fields ({labels}) are required; missing: {', '.join(missing)}")


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def validate_movie_fields(
    movie_name: Optional[str],
    description: Optional[str],
    casting: Optional[str]
) -> dict:
    """
    Check that all three content fields are present and non-blank.

    Args:
        movie_name: Movie name
        description: Movie description
        casting: Cast list

    Returns:
        Dict of the stripped field values keyed by attribute name

    Raises:
        MovieValidationError: If any field is missing, empty or whitespace
    """
    values = {
        'movie_name': _clean(movie_name),
        'description': _clean(description),
        'casting': _clean(casting),
    }
    missing = [FIELD_LABELS[key] for key, value in values.items() if value is None]
    if missing:
        raise MovieValidationError(missing)
    return values


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(
    session: Session,
    movie_name: Optional[str],
    description: Optional[str],
    casting: Optional[str],
    commit: bool = True
) -> Movie:
    """
    Create a new movie with a freshly generated id.

    Args:
        session: Database session
        movie_name: Movie name
        description: Movie description
        casting: Cast list
        commit: If False, only flush so the caller controls the transaction

    Returns:
        Created Movie object

    Raises:
        MovieValidationError: If any field is missing
    """
    values = validate_movie_fields(movie_name, description, casting)

    movie = Movie(id=generate_movie_id(), **values)
    session.add(movie)
    if commit:
        session.commit()
        session.refresh(movie)
    else:
        session.flush()
    return movie


def get_movie(session: Session, movie_id: str) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    return session.query(Movie).filter(Movie.id == movie_id).first()


def get_movies(session: Session) -> List[Movie]:
    """
    Get every movie in natural table order.

    Args:
        session: Database session

    Returns:
        List of Movie objects
    """
    return session.query(Movie).all()


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.id)).scalar()


def update_movie(
    session: Session,
    movie_id: str,
    movie_name: Optional[str],
    description: Optional[str],
    casting: Optional[str]
) -> Optional[Movie]:
    """
    Replace all three content fields of a movie.

    Partial updates are not supported: every field must be supplied.

    Args:
        session: Database session
        movie_id: Movie ID
        movie_name: New movie name
        description: New description
        casting: New cast list

    Returns:
        Updated Movie object or None if not found

    Raises:
        MovieValidationError: If any field is missing
    """
    values = validate_movie_fields(movie_name, description, casting)

    movie = get_movie(session, movie_id)
    if movie:
        for key, value in values.items():
            setattr(movie, key, value)
        session.commit()
        session.refresh(movie)
    return movie


def delete_movie(session: Session, movie_id: str) -> bool:
    """
    Delete a movie.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        True if movie was deleted, False if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        session.delete(movie)
        session.commit()
        return True
    return False


def delete_movies(session: Session, movie_ids: Iterable[str]) -> List[Movie]:
    """
    Delete several movies in a single DELETE statement.

    Ids that do not match any record are ignored.

    Args:
        session: Database session
        movie_ids: Movie IDs to delete

    Returns:
        Detached Movie objects for the rows actually deleted

    Raises:
        ValueError: If no ids are given
    """
    ids = list(dict.fromkeys(movie_ids))
    if not ids:
        raise ValueError("No movie IDs provided")

    stmt = (
        delete(Movie)
        .where(Movie.id.in_(ids))
        .returning(Movie.id, Movie.movie_name, Movie.description, Movie.casting)
    )
    rows = session.execute(stmt).all()
    session.commit()

    return [
        Movie(id=row[0], movie_name=row[1], description=row[2], casting=row[3])
        for row in rows
    ]
