"""Configuration models.

The backend URL is selected by environment: ``production`` talks to the
hosted backend, ``development`` to a server on localhost.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

Environment = Literal["production", "development"]


class APIConfig(BaseModel):
    """API configuration."""

    timeout: float = Field(default=30, gt=0)


class EndpointsConfig(BaseModel):
    """Base URL per environment."""

    production: str = Field(default="https://smartdash-backend-pkgl.onrender.com/api")
    development: str = Field(default="http://localhost:5000/api")

    @field_validator("production", "development")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint must start with http:// or https://")
        return v.rstrip("/")


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "json", "yaml"] = Field(default="pretty")


class AppConfig(BaseModel):
    """Main SmartDash configuration."""

    environment: Environment = Field(default="production")
    endpoints: EndpointsConfig = Field(default_factory=EndpointsConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def endpoint_for(self, environment: Environment | None = None) -> str:
        """Base URL for *environment* (defaults to the configured one)."""
        return getattr(self.endpoints, environment or self.environment)
