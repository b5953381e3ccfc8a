"""Pydantic schemas for API responses."""

from pydantic import BaseModel, Field
from datetime import datetime

INVALID_URL_MESSAGE = "invalid url"
NOT_FOUND_MESSAGE = "No short URL found for the given input"


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    original_url: str = Field(..., description="The submitted URL, echoed verbatim")
    short_url: int = Field(..., description="The assigned short identifier")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "original_url": "https://www.example.com",
                    "short_url": 1
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Error response, returned with status 200."""

    error: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    links: int = Field(..., description="Number of stored links")
    timestamp: datetime = Field(..., description="Check timestamp")
