"""
Noteful Backend — Shared Response Schemas
===========================================

What:  Error envelope and health check models shared by every route.

Error format:
    Every error response has a single string at `error.message`:
        {"error": {"message": "Article doesn't exist"}}
    No stack traces, SQL text or store error codes are ever included.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """Standardized error response format for all API errors."""
    error: ErrorDetail


def error_body(message: str) -> dict:
    """Build the JSON body for an error response."""
    return ErrorResponse(error=ErrorDetail(message=message)).model_dump()


class HealthResponse(BaseModel):
    """
    Health check response showing service and database status.

    status is "healthy" when the database answers, "unhealthy" otherwise.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
