"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class HttpConfig(BaseModel):
    """Where and how the breach list is fetched."""

    server: str = Field(default="https://monitor.firefox.com/")
    endpoint: str = Field(default="/hibp/breaches")
    # None disables the client timeout entirely
    timeout_seconds: Optional[float] = Field(default=10.0, gt=0)
    user_agent: str = Field(default="breach-query/0.1")


class LoaderConfig(BaseModel):
    """Post-fetch processing."""

    validate_schema: bool = True
    coerce_dates: bool = True


class BreachQueryConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    http: HttpConfig = Field(default_factory=HttpConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
