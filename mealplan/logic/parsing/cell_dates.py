"""Recover calendar dates from date-column cells.

Cells arrive in several encodings depending on how the sheet was typed:
native date values, raw spreadsheet serial numbers, or text such as
"1/12\\n(월)" and "2026-01-12". Every path yields a canonical ISO string or None;
malformed input never raises.
"""
import math
import re
from datetime import date
from typing import Optional

from openpyxl.utils.datetime import from_excel

from mealplan.domain.Cell import Cell, DateCell, EmptyCell, NumberCell, TextCell

_MONTH_DAY = re.compile(r"(\d{1,2})\s*/\s*(\d{1,2})")
_ISO_TEXT = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")


def to_iso_date(y: int, m: int, d: int) -> Optional[str]:
    try:
        return date(y, m, d).isoformat()
    except (ValueError, OverflowError):
        return None


def serial_to_iso(value: float) -> Optional[str]:
    """Decode a 1900-system spreadsheet serial. Fractions (time of day) are dropped."""
    if isinstance(value, bool) or not math.isfinite(value) or value < 1:
        return None
    try:
        decoded = from_excel(value)
    except (ValueError, OverflowError, TypeError):
        return None
    if decoded is None:
        return None
    return decoded.date().isoformat() if hasattr(decoded, "date") else None


def text_to_iso(text: str, base_year_guess: Optional[int] = None) -> Optional[str]:
    s = text.strip()
    if not s:
        return None
    md = _MONTH_DAY.search(s)
    if md:
        # Known ambiguity: with no filename hint the current year is assumed,
        # which mislabels old sheets uploaded around New Year.
        y = base_year_guess if base_year_guess is not None else date.today().year
        iso = to_iso_date(y, int(md.group(1)), int(md.group(2)))
        if iso:
            return iso
    full = _ISO_TEXT.search(s)
    if full:
        return to_iso_date(int(full.group(1)), int(full.group(2)), int(full.group(3)))
    return None


def normalize_date_cell(cell: Cell, base_year_guess: Optional[int] = None) -> Optional[str]:
    """Return "YYYY-MM-DD" for a cell that encodes a date, else None."""
    if isinstance(cell, DateCell):
        return cell.value.isoformat()
    if isinstance(cell, NumberCell):
        return serial_to_iso(cell.value)
    if isinstance(cell, TextCell):
        return text_to_iso(cell.value, base_year_guess)
    if isinstance(cell, EmptyCell):
        return None
    raise TypeError(f"Unsupported cell: {cell!r}")
