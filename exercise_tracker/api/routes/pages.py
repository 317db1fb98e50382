"""Pages — the HTML landing page served at the site root."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, HTMLResponse

from exercise_tracker.config import get_settings

router = APIRouter(tags=["pages"])

_FALLBACK_PAGE = (
    "<!DOCTYPE html><html><head><title>Exercise Tracker</title></head>"
    "<body><h1>Exercise Tracker</h1></body></html>"
)


@router.get("/", include_in_schema=False)
async def landing_page():
    """Serve views/index.html, or a minimal page when it is missing."""
    index = Path(get_settings().views_dir) / "index.html"
    if index.is_file():
        return FileResponse(index, media_type="text/html")
    return HTMLResponse(_FALLBACK_PAGE)
