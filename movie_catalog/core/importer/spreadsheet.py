"""
Spreadsheet parsing for bulk movie import.

Reads the first sheet of an .xlsx workbook with pandas and turns every data
row into a mapping of the three catalog columns.
"""

import logging
import zipfile
from typing import BinaryIO, Dict, List, Optional, Tuple, Union

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

logger = logging.getLogger(__name__)

SPREADSHEET_COLUMNS = ('Movie_Name', 'Description', 'Casting')

# Header occupies sheet row 1, so data rows start at 2
FIRST_DATA_ROW = 2

SpreadsheetRow = Tuple[int, Dict[str, Optional[str]]]


class SpreadsheetError(ValueError):
    """Raised when an uploaded file cannot be read as a spreadsheet."""
    pass


def _cell_text(value) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def load_first_sheet(source: Union[str, BinaryIO]) -> pd.DataFrame:
    """
    Load the first sheet of a workbook as text cells.

    Args:
        source: Path or binary file object of an .xlsx workbook

    Returns:
        DataFrame whose columns are the stripped header names

    Raises:
        SpreadsheetError: If the file is not a readable workbook
    """
    try:
        df = pd.read_excel(
            source,
            sheet_name=0,
            dtype=str,
            engine='openpyxl',
            keep_default_na=False,
            na_filter=False,
        )
    except (ValueError, OSError, KeyError, zipfile.BadZipFile, InvalidFileException) as e:
        raise SpreadsheetError(f"Could not read spreadsheet: {e}") from e

    df.columns = [str(column).strip() for column in df.columns]
    # Fully blank rows are skipped, like an empty line in the sheet
    blank = df.map(lambda value: _cell_text(value) is None).all(axis=1)
    return df[~blank]


def read_movie_rows(source: Union[str, BinaryIO]) -> List[SpreadsheetRow]:
    """
    Decode every data row of the first sheet into a movie mapping.

    Columns other than Movie_Name, Description and Casting are ignored,
    including any id column. A column missing from the header decodes as
    None for every row.

    Args:
        source: Path or binary file object of an .xlsx workbook

    Returns:
        List of (sheet_row_number, {column: text or None}) in sheet order
    """
    df = load_first_sheet(source)

    missing_columns = [column for column in SPREADSHEET_COLUMNS if column not in df.columns]
    if missing_columns:
        logger.warning("Spreadsheet header is missing columns: %s", missing_columns)

    rows: List[SpreadsheetRow] = []
    for index, record in df.iterrows():
        values = {column: _cell_text(record.get(column)) for column in SPREADSHEET_COLUMNS}
        rows.append((int(index) + FIRST_DATA_ROW, values))

    logger.debug("Read %d data rows from spreadsheet", len(rows))
    return rows
