"""
NGINX virtual-host generator.

Renders validated site descriptions into one NGINX configuration file
per site using a shared Jinja2 template.
"""

from .engine import ConfigGeneratorError, TemplateEngine, TemplateNotFoundError, TemplateRenderError
from .generator import OutputWriteError, generate, run

__all__ = [
    "ConfigGeneratorError",
    "OutputWriteError",
    "TemplateEngine",
    "TemplateNotFoundError",
    "TemplateRenderError",
    "generate",
    "run",
]
