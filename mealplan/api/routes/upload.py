from typing import Optional
import logging

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from mealplan.api.routes.weeks import get_repository, resolve_site
from mealplan.domain.errors import ParseError, StorageError
from mealplan.logic.parsing.parser import parse
from mealplan.utilities import config
from mealplan.utilities.validators import UploadResult

router = APIRouter()
logger = logging.getLogger("mealplan_app")


def _check_admin(request: Request, form_token: Optional[str]) -> Optional[JSONResponse]:
    """Return an error response when the upload token is missing or wrong, else None."""
    token = (request.headers.get("x-admin-token") or form_token
             or request.query_params.get("token") or "")
    if not config.ADMIN_TOKEN:
        return JSONResponse(status_code=500, content={"error": "Server misconfigured: ADMIN_TOKEN not set"})
    if token != config.ADMIN_TOKEN:
        return JSONResponse(status_code=401, content={"error": "Unauthorized"})
    return None


@router.post("/api/upload")
async def upload_week(
    request: Request,
    file: Optional[UploadFile] = File(None),
    site: Optional[str] = Form(None),
    token: Optional[str] = Form(None),
):
    """Parse an uploaded meal-plan workbook and store it under (site, weekStart)."""
    try:
        denied = _check_admin(request, token)
        if denied is not None:
            return denied
        site = resolve_site(site or request.query_params.get("site"))
        if file is None:
            return JSONResponse(status_code=400, content={"error": "file is required"})

        data = await file.read(config.MAX_UPLOAD_BYTES + 1)
        if len(data) > config.MAX_UPLOAD_BYTES:
            return JSONResponse(status_code=413, content={"error": "File too large"})

        try:
            document = await run_in_threadpool(parse, data, file.filename or "", site)
        except ParseError as e:
            logger.error("Upload parse failed for %s: %s", file.filename, e)
            return JSONResponse(status_code=500, content={"error": "Upload/parse failed", "detail": str(e)})

        if not document.week_start:
            return JSONResponse(status_code=400, content={"error": "Could not determine weekStart from the file"})

        try:
            get_repository().put(site, document.week_start, document)
        except (StorageError, OSError) as e:
            logger.error("Storing week %s for %s failed: %s", document.week_start, site, e)
            return JSONResponse(status_code=500, content={"error": "Upload/parse failed", "detail": str(e)})

        logger.info("Upload stored site=%s weekStart=%s days=%d", site, document.week_start, len(document.days))
        return UploadResult(site=site, weekStart=document.week_start, days=len(document.days)).model_dump()
    finally:
        if file is not None:
            await file.close()
