from datetime import date, timedelta
from typing import Iterable, Optional


def monday_of(date_iso: str) -> str:
    """ISO date of the Monday starting the week that contains date_iso."""
    d = date.fromisoformat(date_iso)
    return (d - timedelta(days=d.weekday())).isoformat()


def derive_week_start(dates: Iterable[str]) -> Optional[str]:
    """Monday of the earliest date seen, or None when the sheet had no dates."""
    unique = sorted(set(dates))
    if not unique:
        return None
    return monday_of(unique[0])
