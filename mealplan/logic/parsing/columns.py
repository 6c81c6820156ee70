"""Locate meal columns: header keyword scan, per-site fallback, and the merge of both.

Detection is best effort. Sheets from the two known site templates often have
merged or missing header cells, so any meal the scan cannot place falls back to
the fixed template for the site. Extras (night meal, salad bar) are never
detected; they always come from the template.
"""
from __future__ import annotations
import logging
import re
from typing import Dict, List

from mealplan.domain.Cell import RawGrid
from mealplan.domain.ColumnMap import ColumnMap
from mealplan.utilities.constants import (
    DEFAULT_FALLBACK_TEMPLATE,
    HEADER_KEYWORDS,
    HEADER_SCAN_LIMIT,
    MEAL_KEYS,
    SITE_FALLBACK_COLUMNS,
)

logger = logging.getLogger(__name__)

DETECTED_CATEGORIES = ("breakfast", "lunch", "dinner", "night", "salad")
_WS = re.compile(r"\s+")


def _collapse_ws(text: str) -> str:
    return _WS.sub(" ", text).strip()


def detect_header_columns(rows: RawGrid, scan_limit: int = HEADER_SCAN_LIMIT) -> Dict[str, List[int]]:
    """Scan the top rows for meal keywords and return sorted column indices per category.

    A cell mentioning a corner ("A코너 중식") labels a serving line, not a meal
    column, so it is recorded as a corner hit and nothing else.
    """
    found: Dict[str, set] = {k: set() for k in HEADER_KEYWORDS}
    for row in rows[:scan_limit]:
        for c, cell in enumerate(row):
            s = _collapse_ws(cell.as_text())
            if not s:
                continue
            if any(kw in s for kw in HEADER_KEYWORDS["corner"]):
                found["corner"].add(c)
                continue
            for category, keywords in HEADER_KEYWORDS.items():
                if any(kw in s for kw in keywords):
                    found[category].add(c)
    return {k: sorted(found[k]) for k in DETECTED_CATEGORIES}


def default_columns_for_site(site: str) -> ColumnMap:
    """Fixed template for a site; anything other than "main" uses the cancer-ward layout."""
    if site == "main":
        return ColumnMap.from_dict(SITE_FALLBACK_COLUMNS["main"])
    return ColumnMap.from_dict(SITE_FALLBACK_COLUMNS[DEFAULT_FALLBACK_TEMPLATE])


def merge_columns(detected: Dict[str, List[int]], fallback: ColumnMap) -> ColumnMap:
    """Per meal, take the detected columns when there are any, else the fallback's."""
    picked = {}
    for meal in MEAL_KEYS:
        cols = detected.get(meal) or []
        if cols:
            picked[meal] = cols
        else:
            logger.debug("No %s header found, using fallback columns %s", meal, fallback.meal_columns(meal))
            picked[meal] = fallback.meal_columns(meal)
    return ColumnMap(
        breakfast=picked["breakfast"],
        lunch=picked["lunch"],
        dinner=picked["dinner"],
        extras=fallback.extras,
    )


def resolve_columns(rows: RawGrid, site: str) -> ColumnMap:
    return merge_columns(detect_header_columns(rows), default_columns_for_site(site))
