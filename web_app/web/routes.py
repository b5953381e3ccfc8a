"""Web interface routes implementation."""

import os
from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "ux", "web")


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage():
    """Serve the form page that posts to /api/shorturl."""
    html_file = os.path.join(template_dir, "index.html")

    if os.path.exists(html_file):
        with open(html_file, "r", encoding="utf-8") as f:
            content = f.read()
        return HTMLResponse(content=content)

    return HTMLResponse(
        content=(
            "<h1>URL Shortener Microservice</h1>"
            '<form action="/api/shorturl" method="POST">'
            '<input type="url" name="url" required>'
            '<button type="submit">Shorten URL</button>'
            "</form>"
        ),
        status_code=200,
    )
