from typing import List
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from backend.app.models.schemas import Section
from backend.app.routes.deps import get_registry
from backend.app.services.renderer import render_markdown

router = APIRouter()

@router.get("/report", response_class=HTMLResponse)
async def report(request: Request, search: str = ""):
    return render_markdown(get_registry(request).document, search)

@router.get("/sections", response_model=List[Section])
async def sections(request: Request):
    return get_registry(request).sections
