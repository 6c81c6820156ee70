"""Turn menu cells into item lists and clean the per-day buckets."""
import re
from typing import Iterable, List

from mealplan.domain.Cell import Cell
from mealplan.domain.MealDocument import DayMenu
from mealplan.utilities.constants import NOISE_TOKEN_PATTERN

_NOISE = re.compile(NOISE_TOKEN_PATTERN, re.IGNORECASE)
_NEWLINES = re.compile(r"\n+")


def split_menu_items(cell: Cell) -> List[str]:
    """Split a cell into one item per line, dropping blank lines and header echoes."""
    text = cell.as_text().replace("\r", "").replace("\u00a0", " ").strip()
    if not text:
        return []
    parts = [p.strip() for p in _NEWLINES.split(text)]
    return [p for p in parts if p and not _NOISE.match(p)]


def dedupe(items: Iterable[str]) -> List[str]:
    """Trim, drop empties and keep the first occurrence of each item (case-sensitive)."""
    seen = set()
    out = []
    for item in items:
        key = item.strip()
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(key)
    return out


def finalize_day(day: DayMenu) -> DayMenu:
    """Dedupe every bucket of a day and drop extras that ended up empty."""
    extras = {}
    for label, items in day.extras.items():
        cleaned = dedupe(items)
        if cleaned:
            extras[label] = cleaned
    return DayMenu(
        breakfast=dedupe(day.breakfast),
        lunch=dedupe(day.lunch),
        dinner=dedupe(day.dinner),
        extras=extras,
    )
