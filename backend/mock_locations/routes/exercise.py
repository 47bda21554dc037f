"""
Mock Location API — Exercise Documentation Routes
===================================================

What:  Serves the client-building exercise brief.
       GET /markdown     → the brief as raw Markdown
       GET /requirement  → an HTML page that fetches /markdown and renders it
                           in the browser with marked.js
Why:   Candidates get the task description from the same host as the API.
How:   Both documents ship as package data under `content/` and are read once
       at import. Neither route appears in the OpenAPI description.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse

CONTENT_DIR = Path(__file__).resolve().parent.parent / "content"

EXERCISE_MARKDOWN = (CONTENT_DIR / "exercise.md").read_text(encoding="utf-8")
REQUIREMENT_HTML = (CONTENT_DIR / "requirement.html").read_text(encoding="utf-8")

router = APIRouter(include_in_schema=False)


class MarkdownResponse(PlainTextResponse):
    media_type = "text/markdown"


@router.get("/markdown", name="markdown", response_class=MarkdownResponse)
async def get_markdown() -> MarkdownResponse:
    return MarkdownResponse(EXERCISE_MARKDOWN)


@router.get("/requirement", name="requirement", response_class=HTMLResponse)
async def get_requirement() -> HTMLResponse:
    return HTMLResponse(REQUIREMENT_HTML)
