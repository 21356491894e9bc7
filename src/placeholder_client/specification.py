"""
Request specification shared by all endpoints.

A ``RequestSpecification`` is the read-only connection configuration every
request is built from: base URL, default headers and transport options.
"""

from typing import Dict, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from placeholder_client.config import PlaceholderSettings

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class RequestSpecification(BaseModel):
    """Immutable base configuration for outgoing requests."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    timeout: float = 30.0
    follow_redirects: bool = True

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base_url must not be empty")
        return value.rstrip("/")

    @classmethod
    def from_settings(cls, settings: PlaceholderSettings) -> "RequestSpecification":
        """Build a specification from loaded settings."""
        return cls(
            base_url=settings.base_url,
            headers=dict(settings.headers),
            timeout=settings.timeout,
            follow_redirects=settings.follow_redirects,
        )

    def with_headers(self, **headers: str) -> "RequestSpecification":
        """Return a copy with additional default headers."""
        return self.model_copy(update={"headers": {**self.headers, **headers}})

    def build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Build request headers: JSON defaults, then spec headers, then extras."""
        headers = {**DEFAULT_HEADERS, **self.headers}
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def url_for(self, path: str) -> str:
        """Join a resolved path onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def create_client(self, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
        """Create a new httpx client configured from this specification."""
        return httpx.Client(
            base_url=self.base_url,
            headers=self.build_headers(),
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=self.follow_redirects,
            transport=transport,
        )
