from fastapi import FastAPI
from fastapi.responses import JSONResponse

import logging

from mealplan.api.routes import upload, weeks
from mealplan.api.routes.weeks import get_repository

# Logging
logger = logging.getLogger("mealplan_app")

# Initialize FastAPI app
app = FastAPI(title="Weekly Menu API")

# Include routers
app.include_router(weeks.router)
app.include_router(upload.router)


@app.on_event("startup")
def _startup_storage_check():
    """Log where week menus are stored and whether the store is readable."""
    repo = get_repository()
    if repo.ping():
        logger.info("Week store ready at %s", repo.path)
    else:
        logger.error("Week store at %s is unreadable", repo.path)


@app.get("/healthz")
def healthz():
    if get_repository().ping():
        return {"ok": True}
    return JSONResponse(status_code=500, content={"ok": False})
