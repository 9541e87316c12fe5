"""HTTP server configuration models."""

from pydantic import BaseModel, Field


class APIConfig(BaseModel):
    """Configuration for the HTTP server."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Port number")
