"""
Bulk import of movie records from spreadsheets.

Rows are inserted one at a time in sheet order and the import stops at the
first row that is missing a required field. In atomic mode the whole import
runs in one transaction and a failing row rolls back every row before it;
otherwise each row is committed as soon as it is inserted.
"""

import logging
import os
import shutil
import tempfile
from typing import BinaryIO, Iterable, List

from sqlalchemy.orm import Session

from movie_catalog.core.importer.spreadsheet import SpreadsheetRow, read_movie_rows
from movie_catalog.database import crud
from movie_catalog.database.models import Movie

logger = logging.getLogger(__name__)


class RowValidationError(crud.MovieValidationError):
    """A spreadsheet row is missing one of the required fields."""

    def __init__(self, row_number: int, missing: List[str]):
        super().__init__(missing)
        self.row_number = row_number
        self.args = (
            f"Row {row_number}: all fields (Movie_Name, Description, Casting) "
            f"are required in the spreadsheet; missing: {', '.join(missing)}",
        )


def import_rows(
    session: Session,
    rows: Iterable[SpreadsheetRow],
    atomic: bool = True
) -> List[Movie]:
    """
    Insert decoded spreadsheet rows as new movies.

    Every row gets a freshly generated id.

    Args:
        session: Database session
        rows: (sheet_row_number, {Movie_Name, Description, Casting}) pairs
        atomic: Roll back all inserted rows when one row fails

    Returns:
        Created Movie objects in sheet order

    Raises:
        RowValidationError: On the first row missing a required field
    """
    created: List[Movie] = []
    try:
        for row_number, values in rows:
            try:
                movie = crud.create_movie(
                    session,
                    movie_name=values.get('Movie_Name'),
                    description=values.get('Description'),
                    casting=values.get('Casting'),
                    commit=not atomic,
                )
            except crud.MovieValidationError as e:
                raise RowValidationError(row_number, e.missing) from e
            created.append(movie)
        if atomic:
            session.commit()
    except RowValidationError as e:
        if atomic:
            session.rollback()
            logger.warning("Import aborted, rolled back %d rows: %s", len(created), e)
        else:
            logger.warning("Import aborted after committing %d rows: %s", len(created), e)
        raise

    logger.info("Imported %d movies", len(created))
    return created


def import_spreadsheet(session: Session, path: str, atomic: bool = True) -> List[Movie]:
    """
    Import every row of the first sheet of a workbook on disk.

    Args:
        session: Database session
        path: Path to the .xlsx workbook
        atomic: Roll back all inserted rows when one row fails

    Returns:
        Created Movie objects
    """
    return import_rows(session, read_movie_rows(path), atomic=atomic)


def import_upload(
    session: Session,
    stream: BinaryIO,
    upload_dir: str,
    atomic: bool = True
) -> List[Movie]:
    """
    Import an uploaded workbook via a temporary file in ``upload_dir``.

    The temporary file is removed whether the import succeeds or fails.

    Args:
        session: Database session
        stream: Binary stream of the uploaded file
        upload_dir: Directory that holds uploads while they are processed
        atomic: Roll back all inserted rows when one row fails

    Returns:
        Created Movie objects
    """
    os.makedirs(upload_dir, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(dir=upload_dir, suffix='.xlsx')
    try:
        with os.fdopen(fd, 'wb') as handle:
            shutil.copyfileobj(stream, handle)
        return import_spreadsheet(session, temp_path, atomic=atomic)
    finally:
        os.remove(temp_path)
        logger.debug("Removed upload %s", temp_path)
