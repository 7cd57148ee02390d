"""
Reading site descriptions from TOML and writing the example description.
"""

import logging
import tomllib
from pathlib import Path
from typing import Union

import tomli_w
from pydantic import ValidationError

from nvhosts.models.site import UnverifiedConfig, example

logger = logging.getLogger(__name__)


class ConfigLoadError(Exception):
    """The site description could not be read or has the wrong shape."""

    def __init__(self, message: str, path: Path):
        self.message = message
        self.path = path
        super().__init__(message)


def load_config(path: Union[str, Path]) -> UnverifiedConfig:
    """
    Load a site description file.

    Args:
        path: Path to the TOML file

    Returns:
        The parsed, not yet validated site list

    Raises:
        ConfigLoadError: If the file is missing, not TOML, or malformed
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigLoadError(f"File not found: {path}", path) from e
    except OSError as e:
        raise ConfigLoadError(f"Cannot read {path}: {e}", path) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigLoadError(f"Invalid TOML in {path}: {e}", path) from e

    try:
        config = UnverifiedConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid site description in {path}: {e}", path) from e

    logger.debug(f"Loaded {len(config.sites)} site(s) from {path}")
    return config


def dump_config(config: UnverifiedConfig) -> str:
    """Serialize a site list to TOML, using the file's field names."""
    # tomli_w has no representation for None
    data = config.model_dump(by_alias=True, exclude_none=True)
    return tomli_w.dumps(data)


def dump_example() -> str:
    """TOML text of the example configuration."""
    return dump_config(example())
