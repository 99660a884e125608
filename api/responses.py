"""
Standardized API response models and utilities.
Provides consistent response formatting across all endpoints.
"""

from typing import Optional, Any, Mapping
from pydantic import BaseModel, Field
from datetime import datetime


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Additional error details")


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Error timestamp"
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Check timestamp"
    )


# Documented error shapes, for the ``responses=`` argument of routes
NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Unknown ID"}}
BAD_REQUEST_RESPONSE = {400: {"model": ErrorResponse, "description": "Invalid payload"}}
CONFLICT_RESPONSE = {409: {"model": ErrorResponse, "description": "Reference in use"}}


def error_response(
    code: str,
    message: str,
    details: Optional[Mapping[str, Any]] = None,
) -> dict:
    """Create a standardized, JSON-serializable error response body"""
    error: dict = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {
        "success": False,
        "error": error,
        "timestamp": datetime.utcnow().isoformat(),
    }
