"""Menu domain entities: a day's meals and the weekly document built from a sheet."""
from typing import Dict, List, Optional


class DayMenu:
    def __init__(self, breakfast: Optional[List[str]] = None, lunch: Optional[List[str]] = None,
                 dinner: Optional[List[str]] = None, extras: Optional[Dict[str, List[str]]] = None):
        self.breakfast = breakfast[:] if breakfast else []
        self.lunch = lunch[:] if lunch else []
        self.dinner = dinner[:] if dinner else []
        self.extras = {k: v[:] for k, v in (extras or {}).items()}

    def __eq__(self, other) -> bool:
        if not isinstance(other, DayMenu):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"DayMenu({self.to_dict()!r})"

    @staticmethod
    def from_dict(data: dict) -> "DayMenu":
        return DayMenu(
            breakfast=data.get("breakfast", []),
            lunch=data.get("lunch", []),
            dinner=data.get("dinner", []),
            extras=data.get("extras"),
        )

    def to_dict(self) -> dict:
        d = {
            "breakfast": list(self.breakfast),
            "lunch": list(self.lunch),
            "dinner": list(self.dinner),
        }
        # extras is omitted rather than serialized empty
        if self.extras:
            d["extras"] = {k: list(v) for k, v in self.extras.items()}
        return d


class MealDocument:
    """Weekly menu for one site, keyed in storage by (site, week_start)."""

    def __init__(self, site: str, filename: str, sheet: str,
                 week_start: Optional[str] = None, days: Optional[Dict[str, DayMenu]] = None):
        self.site = site
        self.filename = filename
        self.sheet = sheet
        self.week_start = week_start
        self.days = dict(days) if days else {}

    @staticmethod
    def from_dict(data: dict) -> "MealDocument":
        source = data.get("source") or {}
        return MealDocument(
            site=data.get("site", ""),
            filename=source.get("filename", ""),
            sheet=source.get("sheet", ""),
            week_start=data.get("weekStart"),
            days={d: DayMenu.from_dict(menu) for d, menu in (data.get("days") or {}).items()},
        )

    def to_dict(self) -> dict:
        return {
            "site": self.site,
            "source": {
                "filename": self.filename,
                "sheet": self.sheet,
            },
            "weekStart": self.week_start,
            "days": {d: menu.to_dict() for d, menu in self.days.items()},
        }
