"""ColumnMap domain entity: which sheet columns feed each meal bucket."""
from typing import Dict, List, Optional


class ColumnMap:
    def __init__(self, breakfast: Optional[List[int]] = None, lunch: Optional[List[int]] = None,
                 dinner: Optional[List[int]] = None, extras: Optional[Dict[str, List[int]]] = None):
        self.breakfast = list(breakfast) if breakfast else []
        self.lunch = list(lunch) if lunch else []
        self.dinner = list(dinner) if dinner else []
        self.extras = {label: list(cols) for label, cols in (extras or {}).items()}

    def meal_columns(self, meal: str) -> List[int]:
        return getattr(self, meal)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColumnMap):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"ColumnMap({self.to_dict()!r})"

    @staticmethod
    def from_dict(data: dict) -> "ColumnMap":
        return ColumnMap(
            breakfast=data.get("breakfast"),
            lunch=data.get("lunch"),
            dinner=data.get("dinner"),
            extras=data.get("extras"),
        )

    def to_dict(self) -> dict:
        return {
            "breakfast": list(self.breakfast),
            "lunch": list(self.lunch),
            "dinner": list(self.dinner),
            "extras": {label: list(cols) for label, cols in self.extras.items()},
        }
