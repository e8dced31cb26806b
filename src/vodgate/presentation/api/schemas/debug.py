"""Schemas for the diagnostics endpoint."""

from pydantic import BaseModel, Field


class DebugResponse(BaseModel):
    """Runtime facts with every secret reduced to a presence flag."""

    env: str = Field(..., description="Runtime family")
    runtime: str = Field(..., description="Interpreter version")
    tmdb: bool = Field(..., description="A TMDB API key is configured")
    sites_json: bool = Field(..., description="An inline source catalogue is configured")
    remote_db_url: bool = Field(..., description="A remote source catalogue is configured")
    search_timeout_seconds: float = Field(..., description="Per-source search deadline")
