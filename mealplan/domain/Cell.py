"""Cell domain values: a raw spreadsheet cell as one of four tagged cases.

EmptyCell  -> nothing in the cell (None or blank string)
TextCell   -> free text
NumberCell -> int/float as stored in the sheet (possibly a date serial)
DateCell   -> a native date value (time of day dropped)
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List, Union


@dataclass(frozen=True)
class EmptyCell:
    def as_text(self) -> str:
        return ""


@dataclass(frozen=True)
class TextCell:
    value: str

    def as_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumberCell:
    value: Union[int, float]

    def as_text(self) -> str:
        v = self.value
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return str(v)


@dataclass(frozen=True)
class DateCell:
    value: date

    def as_text(self) -> str:
        return self.value.isoformat()


Cell = Union[EmptyCell, TextCell, NumberCell, DateCell]
Row = List[Cell]
RawGrid = List[Row]

EMPTY = EmptyCell()


def cell_from_raw(raw: Any) -> Cell:
    """Wrap a value coming out of openpyxl into its tagged case."""
    if raw is None:
        return EMPTY
    # bool is an int subclass; keep it out of the numeric branch
    if isinstance(raw, bool):
        return TextCell(str(raw))
    if isinstance(raw, datetime):
        return DateCell(raw.date())
    if isinstance(raw, date):
        return DateCell(raw)
    if isinstance(raw, (int, float)):
        return NumberCell(raw)
    text = str(raw)
    if text == "":
        return EMPTY
    return TextCell(text)


def cell_at(row: Row, index: int) -> Cell:
    """Return the cell at a column index, EMPTY when the row is shorter."""
    if 0 <= index < len(row):
        return row[index]
    return EMPTY
