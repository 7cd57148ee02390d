"""
nvhosts - NGINX virtual-host generator.

Turns a declarative list of sites into one NGINX configuration file per
site.
"""

__version__ = "0.1.0"

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.config_generator import generate, run
from .core.validator import validate
from .models.site import example

__all__ = ["example", "generate", "run", "validate"]
