"""
Global test fixtures.

Keeps settings from reading the developer's environment and provides
sample sites and output directories.
"""

import os

import pytest

# Neutral defaults before any nvhosts imports
os.environ.pop("NVHOSTS_VERBOSE", None)
os.environ.pop("NVHOSTS_OUTPUT_DIR", None)

from nvhosts.models.site import CacheControl, Header, Redirect, Site, UnverifiedConfig  # noqa: E402


@pytest.fixture
def output_dir(tmp_path):
    """Output directory that does not exist yet."""
    return tmp_path / "sites-available"


@pytest.fixture
def sample_site():
    """Site using every optional field."""
    return Site(
        domain="example.com",
        headers=[
            Header(
                for_field="/*",
                values={
                    "Referrer-Policy": "strict-origin-when-cross-origin",
                    "X-Frame-Options": "DENY",
                },
            )
        ],
        redirects=[Redirect(from_field="/old", to="https://example.com/new", status_code=301)],
        cache_control=[CacheControl(mime="text/html", value="no-cache")],
        extra="    gzip on;",
    )


@pytest.fixture
def two_sites():
    """Two minimal sites."""
    return UnverifiedConfig(sites=[Site(domain="a.com"), Site(domain="b.com")])


@pytest.fixture
def template_dir(tmp_path):
    """Factory writing a custom vhost.conf.j2 into a temporary directory."""

    def _make(body: str):
        directory = tmp_path / "templates"
        directory.mkdir(exist_ok=True)
        (directory / "vhost.conf.j2").write_text(body)
        return directory

    return _make
