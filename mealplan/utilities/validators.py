"""
Input validation schemas using Pydantic for the week menu API.
"""
from datetime import date

from pydantic import BaseModel, Field, field_validator

from mealplan.utilities.constants import DEFAULT_SITE


class SiteInput(BaseModel):
    """Schema for the site selector shared by every route."""
    site: str = DEFAULT_SITE

    @field_validator('site')
    @classmethod
    def default_when_blank(cls, v):
        """Blank or whitespace-only site means the default site."""
        v = (v or '').strip()
        return v or DEFAULT_SITE


class WeekInput(SiteInput):
    """Schema for addressing one stored week."""
    week_start: str = Field(..., pattern=r'^\d{4}-\d{2}-\d{2}$')

    @field_validator('week_start')
    @classmethod
    def validate_calendar_date(cls, v):
        """Reject strings shaped like a date that are not one (2026-02-30)."""
        try:
            date.fromisoformat(v)
        except ValueError:
            raise ValueError('weekStart must be a real YYYY-MM-DD date')
        return v


class UploadResult(BaseModel):
    """Response body for a successful upload."""
    ok: bool = True
    site: str
    weekStart: str
    days: int = Field(..., ge=0)
