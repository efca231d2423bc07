# calendar_service.py
import logging
from fastapi import FastAPI
from pydantic import BaseModel
from typing import Optional, List, Dict, Any, Union
from textcal.config import get_default_width, highlight_today_enabled
from textcal.models.calendar_models import CalendarDate, CalendarError
from textcal.services.calendar_builder import generate_calendar, parse_highlight, today_date, validate_date

logger = logging.getLogger(__name__)

app = FastAPI(title="Text Calendar Service")


# Request models for POST endpoints
class RenderRequest(BaseModel):
    month: Optional[int] = None  # 1-12; omit for the whole year
    width: Optional[int] = None  # months per row for a whole year
    highlight: List[Union[str, Dict[str, Any]]] = []  # "MM-dd", "dd" or {"year", "month", "day"}
    today: bool = False


def _highlight_date(entry, year: int, month: Optional[int]) -> CalendarDate:
    """Turn one highlight entry from a request into a CalendarDate."""
    if isinstance(entry, dict):
        try:
            day = CalendarDate.from_dict(entry)
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"Invalid date format. Got {entry!r}. Expected year, month and day.")
        return validate_date(day)
    return parse_highlight(entry, year, month=month)


def _render(year: int, month: Optional[int], width: Optional[int], highlight: List[CalendarDate]) -> Dict[str, Any]:
    lines = generate_calendar(year, month=month, width=width, highlight=highlight)
    return {
        "success": True,
        "lines": lines,
        "text": "\n".join(lines),
        "highlighted": [day.to_dict() for day in highlight]
    }


@app.get("/calendar/{year}")
async def get_year(year: int, width: Optional[int] = None, today: Optional[bool] = None):
    """
    Render a whole year.
    /calendar/2024?width=3&today=true
    """
    try:
        if width is None:
            width = get_default_width()
        if today is None:
            today = highlight_today_enabled()
        highlight = [today_date()] if today else []
        return _render(year, None, width, highlight)
    except (CalendarError, EnvironmentError) as e:
        logger.warning("Rejected calendar request for %s: %s", year, e)
        return {"success": False, "error": str(e)}


@app.get("/calendar/{year}/{month}")
async def get_month(year: int, month: int, today: Optional[bool] = None):
    """
    Render a single month.
    /calendar/2024/2?today=true
    """
    try:
        if today is None:
            today = highlight_today_enabled()
        highlight = [today_date()] if today else []
        return _render(year, month, None, highlight)
    except (CalendarError, EnvironmentError) as e:
        logger.warning("Rejected calendar request for %s-%s: %s", year, month, e)
        return {"success": False, "error": str(e)}


@app.post("/calendar/{year}/render")
async def render_calendar(year: int, request: RenderRequest):
    """
    Render a month or year with highlighted dates.

    Args:
        year: Year to render
        request: Request body with optional month, width and highlight dates

    Returns:
        Result with success status, the rendered lines and the highlighted dates
    """
    try:
        highlight = [
            _highlight_date(entry, year, request.month)
            for entry in request.highlight
        ]
        if request.today:
            highlight.append(today_date())

        width = request.width
        if width is None and request.month is None:
            width = get_default_width()

        return _render(year, request.month, width, highlight)
    except (ValueError, EnvironmentError) as e:
        logger.warning("Rejected render request for %s: %s", year, e)
        return {"success": False, "error": str(e)}

# ###########################################
# How to start:
#  uvicorn textcal.api.calendar_service:app --host 0.0.0.0 --port 8000
# ###########################################
