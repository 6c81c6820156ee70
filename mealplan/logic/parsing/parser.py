"""Weekly meal-plan spreadsheet -> MealDocument.

Pipeline: filename hint -> sheet -> column map -> day buckets -> week start.
Only ParseError (unreadable container) is raised; every other irregularity
shows up in the returned document as empty buckets or a missing week start.
"""
import logging
from typing import Optional

from mealplan.domain.MealDocument import MealDocument
from mealplan.infra.sheet_loader import Source, load_sheet
from mealplan.logic.parsing.accumulator import build_days
from mealplan.logic.parsing.columns import resolve_columns
from mealplan.logic.parsing.filename_hint import parse_filename_hint
from mealplan.logic.parsing.week_key import derive_week_start
from mealplan.utilities.config import PREFERRED_SHEET

logger = logging.getLogger(__name__)


def parse_meal_excel(source: Source, original_filename: str, site: str,
                     preferred_sheet: Optional[str] = None) -> MealDocument:
    sheet_name, rows = load_sheet(source, preferred_sheet or PREFERRED_SHEET)

    hint = parse_filename_hint(original_filename)
    base_year_guess = hint.y if hint else None

    columns = resolve_columns(rows, site)
    days, dates_seen = build_days(rows, columns, base_year_guess)
    week_start = derive_week_start(dates_seen)

    logger.info("Parsed %s for site=%s: sheet=%s days=%d weekStart=%s",
                original_filename, site, sheet_name, len(days), week_start)
    return MealDocument(
        site=site,
        filename=original_filename,
        sheet=sheet_name,
        week_start=week_start,
        days=days,
    )


# Short alias used by the upload route
parse = parse_meal_excel
