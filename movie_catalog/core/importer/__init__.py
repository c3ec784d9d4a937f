"""
Spreadsheet import for the movie catalog.

This package contains:
- Workbook parsing into movie rows
- Row-by-row insertion with atomic or per-row commit policy
"""

from movie_catalog.core.importer.spreadsheet import (
    SPREADSHEET_COLUMNS,
    SpreadsheetError,
    read_movie_rows,
)
from movie_catalog.core.importer.service import (
    RowValidationError,
    import_rows,
    import_spreadsheet,
    import_upload,
)

__all__ = [
    'SPREADSHEET_COLUMNS',
    'SpreadsheetError',
    'read_movie_rows',
    'RowValidationError',
    'import_rows',
    'import_spreadsheet',
    'import_upload',
]
