# src/realloc/api/schemas.py
"""
Pydantic response schemas for the node agent API.
"""

from pydantic import BaseModel, Field


class ResizeResponse(BaseModel):
    """Response of a successful resize: the runtime's raw standard output."""

    output: str = Field(..., description="Standard output of the container runtime command.")


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str = Field(..., description="Health status of the agent.")
    version: str = Field(..., description="Current application version.")


class VersionResponse(BaseModel):
    """Response schema for the version endpoint."""

    version: str = Field(..., description="Current application version.")
