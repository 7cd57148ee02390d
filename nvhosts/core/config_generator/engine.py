"""
Jinja2 rendering engine for virtual-host configuration files.

Holds one environment with the ``redirect_domain`` and ``pad_right``
filters registered and the compiled ``vhost.conf.j2`` template.
"""

import logging
from pathlib import Path
from typing import Optional

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
)

from nvhosts.models.site import Site

from .filters import pad_right, redirect_domain

logger = logging.getLogger(__name__)

# Default template directory
DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "vhost.conf.j2"


class ConfigGeneratorError(Exception):
    """Base exception for config generator errors."""

    def __init__(self, message: str, site_name: Optional[str] = None):
        self.message = message
        self.site_name = site_name
        super().__init__(message)


class TemplateNotFoundError(ConfigGeneratorError):
    """Template file not found."""
    pass


class TemplateRenderError(ConfigGeneratorError):
    """Template failed to render for a site."""
    pass


class TemplateEngine:
    """
    Renders sites through the virtual-host template.

    The engine is not thread-safe; callers sharing one instance across
    threads must serialize calls to ``render``.
    """

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize the engine and compile the template.

        Args:
            template_dir: Path to template directory. Uses default if not specified.
        """
        self.template_dir = template_dir or DEFAULT_TEMPLATE_DIR

        if not self.template_dir.exists():
            raise TemplateNotFoundError(
                f"Template directory not found: {self.template_dir}"
            )

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            undefined=StrictUndefined,
            autoescape=False,  # NGINX configs don't need HTML escaping
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True
        )
        self.env.filters["redirect_domain"] = redirect_domain
        self.env.filters["pad_right"] = pad_right

        try:
            self.template = self.env.get_template(TEMPLATE_NAME)
        except TemplateNotFound:
            raise TemplateNotFoundError(
                f"Template {TEMPLATE_NAME} not found in {self.template_dir}"
            )
        except TemplateError as e:
            raise TemplateRenderError(f"Failed to compile {TEMPLATE_NAME}: {e}") from e

        logger.debug(f"TemplateEngine initialized with templates from {self.template_dir}")

    def render(self, site: Site) -> str:
        """
        Render the configuration file for one site.

        Args:
            site: Site bound to the ``site`` template variable

        Returns:
            Rendered NGINX configuration

        Raises:
            TemplateRenderError: If the template fails to render
        """
        try:
            return self.template.render(site=site)
        except (TemplateError, TypeError) as e:
            raise TemplateRenderError(
                f"Failed to render {site.domain}: {e}",
                site_name=site.domain
            ) from e
