import json, os, tempfile, shutil
import logging
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional, Tuple, Union

from mealplan.domain.MealDocument import MealDocument
from mealplan.domain.errors import StorageError
from mealplan.infra.paths import WEEK_MENUS_FILE

logger = logging.getLogger(__name__)

_write_lock = Lock()


class WeekRepository:
    """Weekly menu documents stored in one JSON file.

    Layout: {site: {week_start: {"payload": <document dict>, "updated_at": <ISO timestamp>}}}.
    A put for an existing (site, week_start) overwrites it (last write wins).
    """

    def __init__(self, path: Union[str, Path] = WEEK_MENUS_FILE):
        self.path = Path(path)

    def _load(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                store = json.load(f) or {}
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in week store {self.path}: {e}")
            raise StorageError(f"Week store is corrupt: {e}") from e
        except OSError as e:
            logger.error(f"Cannot read week store {self.path}: {e}")
            raise StorageError(f"Week store is unreadable: {e}") from e
        if not isinstance(store, dict):
            raise StorageError("Week store has an unexpected layout")
        return store

    def _atomic_write(self, store: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".week_menus_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(store, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, str(self.path))
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def put(self, site: str, week_start: str, document: Union[MealDocument, dict],
            now: Optional[datetime] = None) -> None:
        payload = document.to_dict() if isinstance(document, MealDocument) else document
        updated_at = (now or datetime.now(timezone.utc)).isoformat()
        with _write_lock:
            store = self._load()
            store.setdefault(site, {})[week_start] = {
                "payload": payload,
                "updated_at": updated_at,
            }
            self._atomic_write(store)
        logger.info(f"Stored week {week_start} for site {site}")

    def get(self, site: str, week_start: str) -> Optional[dict]:
        entry = self._load().get(site, {}).get(week_start)
        return entry["payload"] if entry else None

    def get_latest(self, site: str) -> Optional[Tuple[str, dict]]:
        """(week_start, payload) of the most recently updated week for a site."""
        weeks = self._load().get(site, {})
        if not weeks:
            return None
        week_start = max(weeks, key=lambda w: weeks[w].get("updated_at", ""))
        return week_start, weeks[week_start]["payload"]

    def list_weeks(self, site: str) -> List[dict]:
        weeks = self._load().get(site, {})
        return [
            {"weekStart": w, "updatedAt": weeks[w].get("updated_at")}
            for w in sorted(weeks, reverse=True)
        ]

    def ping(self) -> bool:
        try:
            self._load()
        except StorageError:
            return False
        return True
