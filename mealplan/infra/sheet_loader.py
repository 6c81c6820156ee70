"""Open an uploaded workbook with openpyxl and materialize one sheet as a RawGrid."""
import io
import logging
import zipfile
from pathlib import Path
from typing import BinaryIO, Tuple, Union
from xml.etree.ElementTree import ParseError as XMLParseError

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from mealplan.domain.Cell import EmptyCell, RawGrid, cell_from_raw
from mealplan.domain.errors import ParseError
from mealplan.utilities.config import PREFERRED_SHEET

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, str, Path, BinaryIO]

_CONTAINER_ERRORS = (
    InvalidFileException,
    zipfile.BadZipFile,
    XMLParseError,
    KeyError,
    OSError,
    ValueError,
    TypeError,
)


def _open_source(source: Source):
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(bytes(source))
    if isinstance(source, Path):
        return str(source)
    return source


def load_sheet(source: Source, preferred_sheet: str = PREFERRED_SHEET) -> Tuple[str, RawGrid]:
    """Return (sheet name, grid) for the preferred sheet, or the first one.

    Blank rows are dropped; every value is wrapped in its Cell case.
    Raises ParseError when the container cannot be read at all.
    """
    try:
        wb = openpyxl.load_workbook(_open_source(source), read_only=True, data_only=True)
    except _CONTAINER_ERRORS as e:
        raise ParseError(f"Cannot open spreadsheet: {e}") from e

    try:
        names = wb.sheetnames
        if not names:
            raise ParseError("Workbook contains no sheets")
        sheet_name = preferred_sheet if preferred_sheet in names else names[0]
        ws = wb[sheet_name]
        # stored <dimension> can be stale (e.g. "A1"); read every row present
        ws.reset_dimensions()
        rows: RawGrid = []
        for values in ws.iter_rows(values_only=True):
            row = [cell_from_raw(v) for v in values]
            if any(not isinstance(cell, EmptyCell) for cell in row):
                rows.append(row)
    except ParseError:
        raise
    except _CONTAINER_ERRORS as e:
        raise ParseError(f"Cannot read sheet data: {e}") from e
    finally:
        wb.close()

    logger.debug("Loaded sheet %r with %d non-blank rows", sheet_name, len(rows))
    return sheet_name, rows
