"""
SQLAlchemy ORM models for the movie catalog database.

The catalog is a single flat table of movie records; there are no
relationships between rows.
"""

import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def generate_movie_id() -> str:
    """Generate a fresh unique identifier for a movie record."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing catalog entries.

    Attributes:
        id: Primary key, a UUID4 string assigned by the service
        movie_name: Movie name (column ``Movie_Name``)
        description: Free-text description (column ``Description``)
        casting: Cast list as free text (column ``Casting``)
    """
    __tablename__ = 'movies'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_movie_id)
    movie_name: Mapped[str] = mapped_column("Movie_Name", Text, nullable=False)
    description: Mapped[str] = mapped_column("Description", Text, nullable=False)
    casting: Mapped[str] = mapped_column("Casting", Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Movie(id='{self.id}', movie_name='{self.movie_name}')>"
