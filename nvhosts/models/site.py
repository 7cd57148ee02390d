"""
Pydantic models for virtual-host site descriptions.

These models mirror the input description file: a list of sites, each
with optional header blocks, cache-control rules and redirects. They are
frozen so worker threads can share them while rendering.
"""

from typing import Optional, List, Dict
from pydantic import BaseModel, ConfigDict, Field


class Header(BaseModel):
    """A block of response headers applied to a path pattern."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    for_field: str = Field(
        ...,
        alias="for",
        description="Path or selector pattern the headers apply to"
    )
    values: Dict[str, str] = Field(
        default_factory=dict,
        description="Header name to header value"
    )


class CacheControl(BaseModel):
    """Cache-Control directive for responses of a given MIME type."""

    model_config = ConfigDict(frozen=True)

    mime: str = Field(..., description="MIME type, e.g. text/html")
    value: str = Field(..., description="Cache-Control value, e.g. no-cache")


class Redirect(BaseModel):
    """A redirect from a local path to a target URL."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_field: str = Field(..., alias="from", description="Source path")
    to: str = Field(..., description="Target URL or path")
    status_code: int = Field(
        default=302,
        ge=0,
        le=65535,
        description="HTTP status code returned for the redirect"
    )


class Site(BaseModel):
    """One virtual host."""

    model_config = ConfigDict(frozen=True)

    domain: str = Field(..., description="Primary domain, also the output filename")
    cache_control: Optional[List[CacheControl]] = Field(
        None,
        description="Cache-Control values by MIME type"
    )
    headers: Optional[List[Header]] = Field(
        None,
        description="Response header blocks"
    )
    redirects: Optional[List[Redirect]] = Field(
        None,
        description="Path redirects"
    )
    extra: Optional[str] = Field(
        None,
        description="Free-form configuration appended verbatim to the server block"
    )

    @property
    def filename(self) -> str:
        """Name of the rendered configuration file."""
        return f"{self.domain}.conf"


class UnverifiedConfig(BaseModel):
    """
    Site list as read from the input description.

    Nothing here has been checked beyond its shape. Pass it through
    ``nvhosts.core.validator.validate`` to obtain a ``Config`` that the
    generator accepts.
    """

    sites: List[Site] = Field(default_factory=list, description="Sites to generate")


def example() -> UnverifiedConfig:
    """Build the sample configuration shown by ``nvhosts --example``."""
    header = Header(
        for_field="/*",
        values={
            "Referrer-Policy": "strict-origin-when-cross-origin",
            "Strict-Transport-Security": "max-age=31536000; includeSubDomains; preload",
            "X-Content-Type-Options": "nosniff",
        },
    )
    redirect = Redirect(
        from_field="/example",
        to="http://example.com",
        status_code=301,
    )
    cache_control = CacheControl(mime="text/html", value="public, max-age=3600")

    site = Site(
        domain="example.com",
        headers=[header],
        redirects=[redirect],
        cache_control=[cache_control],
    )
    return UnverifiedConfig(sites=[site])
