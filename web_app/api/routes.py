"""API routes implementation."""

from typing import Optional, Union

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import RedirectResponse
from datetime import datetime, timezone

from .schemas import (
    ShortenResponse,
    ErrorResponse,
    HealthResponse,
    INVALID_URL_MESSAGE,
    NOT_FOUND_MESSAGE,
)
from shorturl.exceptions import InvalidURLError, LinkNotFoundError

router = APIRouter()


@router.post(
    "/shorturl",
    response_model=Union[ShortenResponse, ErrorResponse],
    summary="Create short URL",
    description=(
        "Shorten the URL given in the form field `url`. The URL must include a "
        "protocol and a host that resolves. Rejections are reported as "
        f'`{{"error": "{INVALID_URL_MESSAGE}"}}` with status 200.'
    ),
)
async def create_short_url(request: Request, url: Optional[str] = Form(None)):
    """Create a short URL."""
    service = request.app.state.service

    try:
        link = await service.submit(url)
    except InvalidURLError:
        return ErrorResponse(error=INVALID_URL_MESSAGE)

    return ShortenResponse(original_url=link.original_url, short_url=link.id)


@router.get(
    "/shorturl/{short_url}",
    response_model=ErrorResponse,
    responses={
        302: {"description": "Redirect to the original URL"},
    },
    summary="Follow short URL",
    description=(
        "Redirect to the URL stored under `short_url`. Unknown identifiers are "
        f'reported as `{{"error": "{NOT_FOUND_MESSAGE}"}}` with status 200.'
    ),
)
async def redirect_to_url(request: Request, short_url: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    try:
        original_url = service.resolve(short_url)
    except LinkNotFoundError:
        return ErrorResponse(error=NOT_FOUND_MESSAGE)

    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    service = request.app.state.service

    health = service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        links=health["links"],
        timestamp=datetime.now(timezone.utc),
    )
