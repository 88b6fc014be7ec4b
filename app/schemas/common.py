"""Shared Pydantic schema base."""

from __future__ import annotations

from pydantic import BaseModel


class APIModel(BaseModel):
    """Base for request/response bodies; outputs validate straight from ORM rows."""

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str
