from typing import Optional
import logging

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from mealplan.domain.errors import StorageError
from mealplan.infra import paths
from mealplan.infra.Week_Repository import WeekRepository
from mealplan.utilities.validators import SiteInput, WeekInput

router = APIRouter()
logger = logging.getLogger("mealplan_app")


def get_repository() -> WeekRepository:
    # resolved per request so tests can point paths.WEEK_MENUS_FILE elsewhere
    return WeekRepository(paths.WEEK_MENUS_FILE)


def resolve_site(site: Optional[str]) -> str:
    return SiteInput(site=site or "").site


def _storage_failure(message: str, e: Exception) -> JSONResponse:
    logger.error("%s: %s", message, e)
    return JSONResponse(status_code=500, content={"error": message, "detail": str(e)})


def _invalid_week(e: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Invalid weekStart", "detail": e.errors()[0]["msg"]})


def _load_week(site: str, week_start: str) -> JSONResponse:
    try:
        query = WeekInput(site=site, week_start=week_start)
    except ValidationError as e:
        return _invalid_week(e)
    try:
        payload = get_repository().get(query.site, query.week_start)
    except StorageError as e:
        return _storage_failure("Failed to load week", e)
    if payload is None:
        return JSONResponse(status_code=404, content={"error": "No such week"})
    return JSONResponse(content=payload)


# -------------------- Latest --------------------
@router.get("/api/latest")
def latest_week(site: Optional[str] = Query(default=None)):
    """Payload of the most recently uploaded week for a site."""
    try:
        found = get_repository().get_latest(resolve_site(site))
    except StorageError as e:
        return _storage_failure("Failed to load latest", e)
    if found is None:
        return JSONResponse(status_code=404, content={"error": "No data for this site yet"})
    return JSONResponse(content=found[1])


# Declared before /api/weeks/{week_start} so "latest" is not read as a date
@router.get("/api/weeks/latest")
def latest_week_start(site: Optional[str] = Query(default=None)):
    try:
        found = get_repository().get_latest(resolve_site(site))
    except StorageError as e:
        return _storage_failure("Failed to load latest weekStart", e)
    if found is None:
        return JSONResponse(status_code=404, content={"error": "No data for this site yet"})
    return {"weekStart": found[0]}


@router.get("/api/weeks/{week_start}")
def week_by_path(week_start: str, site: Optional[str] = Query(default=None)):
    return _load_week(resolve_site(site), week_start)


# -------------------- Listing --------------------
@router.get("/api/weeks")
def list_weeks(site: Optional[str] = Query(default=None)):
    """All stored weeks for a site, newest week first."""
    site = resolve_site(site)
    try:
        weeks = get_repository().list_weeks(site)
    except StorageError as e:
        return _storage_failure("Failed to list weeks", e)
    return {"site": site, "weeks": weeks}


@router.get("/api/week")
def week_by_query(site: Optional[str] = Query(default=None),
                  weekStart: Optional[str] = Query(default=None)):
    if not weekStart:
        return JSONResponse(status_code=400, content={"error": "weekStart is required"})
    return _load_week(resolve_site(site), weekStart)
