"""Landing Routes — HTML landing page and the hello endpoint.

Invariants:
    - GET / serves views/index.html from the package directory
    - GET /api/hello always returns {"greeting": "hello API"}
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

VIEWS_DIR = Path(__file__).resolve().parents[2] / "views"

router = APIRouter(tags=["landing"])


@router.get("/", include_in_schema=False)
async def landing_page():
    return FileResponse(VIEWS_DIR / "index.html")


@router.get("/api/hello")
async def hello():
    return {"greeting": "hello API"}
