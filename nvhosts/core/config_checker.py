"""
Syntax check of rendered configuration files using crossplane.

Site files are fragments included from the ``http`` block, so context and
argument checks are disabled; only the file structure is verified.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List

import crossplane

logger = logging.getLogger(__name__)


def check_file(path: Path) -> List[str]:
    """
    Parse one rendered file.

    Returns:
        Error messages, empty when the file parsed cleanly
    """
    payload = crossplane.parse(
        str(path),
        catch_errors=True,
        check_ctx=False,
        check_args=False,
        single=True,
    )

    errors = [e.get("error", "") for e in payload.get("errors", [])]
    for config in payload.get("config", []):
        for e in config.get("errors", []):
            message = e.get("error", "")
            if message not in errors:
                errors.append(message)

    if errors:
        logger.warning(f"Parse errors in {path}: {errors}")
    return errors


def check_rendered(paths: Iterable[Path]) -> Dict[Path, List[str]]:
    """
    Parse every rendered file.

    Returns:
        Mapping of file path to its errors, only for files that failed
    """
    failures = {}
    for path in paths:
        errors = check_file(path)
        if errors:
            failures[path] = errors
    return failures
