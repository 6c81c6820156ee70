from pathlib import Path

from mealplan.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR: Path = _CONFIGURED_DATA_DIR
WEEK_MENUS_FILE = DATA_DIR / 'week_menus.json'

__all__ = ['DATA_DIR', 'WEEK_MENUS_FILE']
