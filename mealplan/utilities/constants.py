from typing import Final

DEFAULT_SITE: Final[str] = "main"
PREFERRED_SHEET_NAME: Final[str] = "게시메뉴"

# Header detection only looks at the top of the sheet
HEADER_SCAN_LIMIT: Final[int] = 35

MEAL_KEYS: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner")

HEADER_KEYWORDS: Final[dict[str, list[str]]] = {
    "breakfast": ["조식"],
    "lunch": ["중식"],
    "dinner": ["석식"],
    "night": ["야식"],
    "salad": ["샐러드"],
    "corner": ["코너"],
}

# Stray header echoes inside menu cells
NOISE_TOKEN_PATTERN: Final[str] = r"^\s*(조식|중식|석식|야식|샐러드|A\s*코너|B\s*코너)\s*$"

# Column templates used when the header scan finds nothing for a meal
SITE_FALLBACK_COLUMNS: Final[dict[str, dict]] = {
    "main": {
        "breakfast": [1],
        "lunch": [3, 4],
        "dinner": [5, 6],
        "extras": {"night": [7, 8]},
    },
    "cancer": {
        "breakfast": [1, 2],
        "lunch": [3, 4],
        "dinner": [5, 6],
        "extras": {"salad": [7], "night": [8]},
    },
}
DEFAULT_FALLBACK_TEMPLATE: Final[str] = "cancer"
