"""
Site configuration validation.

``validate`` is the only way to obtain a ``Config``. The generator only
accepts ``Config``, so nothing is rendered from an unchecked site list.
"""

import logging
import re
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from nvhosts.models.site import Site, UnverifiedConfig

logger = logging.getLogger(__name__)

DOMAIN_PATTERN = re.compile(r"(?:[a-z0-9]+(?:-[a-z0-9]+)*\.)+[a-z]{2,}")

# Cache directives must go through Site.cache_control
RESERVED_HEADER = "Cache-Control"

_VERIFIED = object()


class Violation(BaseModel):
    """A single rule violation found during validation."""

    code: str = Field(..., description="Violation code (e.g., 'invalid_domain')")
    message: str = Field(..., description="Human-readable description")
    domain: str = Field(..., description="Domain of the offending site")
    header_for: Optional[str] = Field(
        None,
        description="Pattern of the offending header block, if any"
    )


class ConfigValidationError(Exception):
    """Raised when one or more sites break a validation rule."""

    def __init__(self, violations: List[Violation]):
        self.violations = violations
        lines = "\n".join(f"  - {v.message}" for v in violations)
        self.message = f"{len(violations)} validation error(s):\n{lines}"
        super().__init__(self.message)


class Config:
    """
    A validated site list.

    Instances are only produced by ``validate``; calling the constructor
    directly raises ``TypeError``.
    """

    __slots__ = ("_sites",)

    def __init__(self, sites: List[Site], *, _token: object = None):
        if _token is not _VERIFIED:
            raise TypeError("Config can only be created by validate()")
        self._sites = tuple(sites)

    @property
    def sites(self) -> Tuple[Site, ...]:
        return self._sites

    def __len__(self) -> int:
        return len(self._sites)

    def __repr__(self) -> str:
        return f"Config(sites={[site.domain for site in self._sites]!r})"


def check_site(site: Site) -> List[Violation]:
    """Return every violation found in a single site."""
    violations = []

    if not DOMAIN_PATTERN.fullmatch(site.domain):
        violations.append(Violation(
            code="invalid_domain",
            message=f"Invalid domain: {site.domain!r}",
            domain=site.domain,
        ))

    for header in site.headers or []:
        if RESERVED_HEADER in header.values:
            violations.append(Violation(
                code="explicit_cache_control",
                message=(
                    f"Header block {header.for_field!r} of {site.domain!r} sets "
                    f"{RESERVED_HEADER}; use cache_control instead"
                ),
                domain=site.domain,
                header_for=header.for_field,
            ))

    return violations


def validate(config: UnverifiedConfig) -> Config:
    """
    Check every site and wrap the list as a ``Config``.

    All sites are checked before failing, so the error lists every
    violation rather than just the first one.

    Args:
        config: Site list as loaded from the input description

    Returns:
        The same sites wrapped as a verified ``Config``

    Raises:
        ConfigValidationError: If any site breaks a rule
    """
    violations: List[Violation] = []
    for site in config.sites:
        violations.extend(check_site(site))

    if violations:
        logger.debug(f"Validation found {len(violations)} violation(s)")
        raise ConfigValidationError(violations)

    logger.debug(f"Validated {len(config.sites)} site(s)")
    return Config(config.sites, _token=_VERIFIED)
