"""
Concurrent generation of per-site configuration files.

Every site is rendered and written by its own worker thread. The worker
threads share one ``TemplateEngine``; a lock serializes the render calls
while file creation and writes run in parallel.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Union

from nvhosts.config import get_output_dir, settings
from nvhosts.core.validator import Config, validate
from nvhosts.models.site import Site, UnverifiedConfig

from .engine import ConfigGeneratorError, TemplateEngine

logger = logging.getLogger(__name__)


class OutputWriteError(ConfigGeneratorError):
    """Output directory or file could not be created or written."""
    pass


def generate_site(
    engine: TemplateEngine,
    lock: threading.Lock,
    site: Site,
    output_dir: Path,
    verbose: bool = False,
) -> Path:
    """
    Render one site and write it to ``<output_dir>/<domain>.conf``.

    The file is created before rendering; a failed render leaves it
    truncated.

    Returns:
        Path of the written file
    """
    path = output_dir / site.filename

    try:
        with path.open("w", encoding="utf-8") as f:
            with lock:
                content = engine.render(site)
            f.write(content)
    except OSError as e:
        raise OutputWriteError(
            f"Couldn't write {path}: {e}",
            site_name=site.domain
        ) from e

    if verbose:
        logger.info(f"{path}")
    else:
        logger.debug(f"Wrote {path}")
    return path


def generate(
    config: Config,
    output_dir: Optional[Union[str, Path]] = None,
    *,
    verbose: Optional[bool] = None,
    template_dir: Optional[Path] = None,
) -> List[Path]:
    """
    Write one configuration file per site.

    All sites are processed even when some fail; once every worker has
    finished, the error of the first failing site (in input order) is
    raised. Files written by the other workers are kept.

    Args:
        config: Validated site list
        output_dir: Destination directory. Uses settings if not specified.
        verbose: Log each written path at INFO. Uses settings if not specified.
        template_dir: Alternative template directory

    Returns:
        Paths of the written files, in site order

    Raises:
        OutputWriteError: If the directory or a file cannot be written
        TemplateRenderError: If a site fails to render
    """
    if not isinstance(config, Config):
        raise TypeError(f"generate() expects a validated Config, got {type(config).__name__}")

    output_path = Path(output_dir) if output_dir is not None else get_output_dir()
    if verbose is None:
        verbose = settings.verbose

    try:
        output_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"Couldn't create output directory {output_path}: {e}") from e

    if not config.sites:
        logger.info("No sites to generate")
        return []

    engine = TemplateEngine(template_dir)
    lock = threading.Lock()

    logger.debug(f"Generating {len(config)} site(s) into {output_path}")

    # One worker per site; leaving the block waits for all of them
    with ThreadPoolExecutor(max_workers=len(config), thread_name_prefix="nvhosts") as executor:
        futures = [
            executor.submit(generate_site, engine, lock, site, output_path, verbose)
            for site in config.sites
        ]

    paths = []
    first_error: Optional[BaseException] = None
    for site, future in zip(config.sites, futures):
        error = future.exception()
        if error is None:
            paths.append(future.result())
            continue
        logger.error(f"Failed to generate {site.domain}: {error}")
        if first_error is None:
            first_error = error

    if first_error is not None:
        raise first_error

    logger.info(f"Generated {len(paths)} site(s) in {output_path}")
    return paths


def run(
    config: UnverifiedConfig,
    output_dir: Optional[Union[str, Path]] = None,
    *,
    verbose: Optional[bool] = None,
) -> List[Path]:
    """Validate ``config`` and generate its sites."""
    return generate(validate(config), output_dir, verbose=verbose)
