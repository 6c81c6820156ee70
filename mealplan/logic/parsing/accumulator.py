"""Walk the grid top to bottom and collect menu text under each date anchor.

A row whose first cell parses as a date starts a new day and carries no menu
text itself. Rows before the first anchor are header noise and are skipped.
Every other row continues the current day: its configured meal columns are
split into items and appended, in the order the columns are configured.
"""
from typing import Dict, List, Optional, Tuple

from mealplan.domain.Cell import RawGrid, Row, cell_at
from mealplan.domain.ColumnMap import ColumnMap
from mealplan.domain.MealDocument import DayMenu
from mealplan.logic.parsing.cell_dates import normalize_date_cell
from mealplan.logic.parsing.menu_text import finalize_day, split_menu_items
from mealplan.utilities.constants import MEAL_KEYS


def _append_row(day: DayMenu, row: Row, columns: ColumnMap) -> None:
    for meal in MEAL_KEYS:
        bucket = getattr(day, meal)
        for c in columns.meal_columns(meal):
            bucket.extend(split_menu_items(cell_at(row, c)))
    for label, cols in columns.extras.items():
        for c in cols:
            items = split_menu_items(cell_at(row, c))
            if items:
                day.extras.setdefault(label, []).extend(items)


def accumulate_days(rows: RawGrid, columns: ColumnMap,
                    base_year_guess: Optional[int] = None) -> Tuple[Dict[str, DayMenu], List[str]]:
    """Fold the grid into raw (not yet deduplicated) day buckets.

    Returns the buckets keyed by ISO date in first-seen order, and every date
    anchor in the order met (repeats included).
    """
    days: Dict[str, DayMenu] = {}
    dates_seen: List[str] = []
    current_date: Optional[str] = None

    for row in rows:
        date_iso = normalize_date_cell(cell_at(row, 0), base_year_guess)
        if date_iso:
            current_date = date_iso
            dates_seen.append(date_iso)
            days.setdefault(date_iso, DayMenu())
            continue
        if current_date is None:
            continue
        _append_row(days[current_date], row, columns)

    return days, dates_seen


def build_days(rows: RawGrid, columns: ColumnMap,
               base_year_guess: Optional[int] = None) -> Tuple[Dict[str, DayMenu], List[str]]:
    """Accumulate and then dedupe each day's buckets."""
    raw_days, dates_seen = accumulate_days(rows, columns, base_year_guess)
    return {d: finalize_day(menu) for d, menu in raw_days.items()}, dates_seen
