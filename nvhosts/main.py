"""
nvhosts command line.

Generates NGINX virtual hosts from a TOML site description:

    nvhosts -c nvhosts.toml        # write ./sites-available/<domain>.conf
    nvhosts --example              # print an example description
"""

import argparse
import logging
import sys
from typing import List, Optional

from nvhosts import __version__
from nvhosts.config import settings
from nvhosts.core.config_checker import check_rendered
from nvhosts.core.config_generator import ConfigGeneratorError, run
from nvhosts.core.loader import ConfigLoadError, dump_example, load_config
from nvhosts.core.validator import ConfigValidationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nvhosts",
        description="Generate nginx vhosts from a configuration file",
    )
    parser.add_argument(
        "-c", "--config",
        default=settings.config_path,
        help=f"Path to config file to use (default: {settings.config_path})"
    )
    parser.add_argument(
        "-o", "--output-dir",
        default=settings.output_dir,
        help=f"Directory for the generated files (default: {settings.output_dir})"
    )
    parser.add_argument(
        "--example",
        action="store_true",
        help="Show an example config"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Parse the generated files and fail on syntax errors"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=settings.verbose,
        help="Print every generated file"
    )
    parser.add_argument(
        "-V", "--version",
        action="store_true",
        help="Show the version"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    level = logging.getLevelNamesMapping().get(settings.log_level.upper())
    if level is None:
        print(f"invalid LOG_LEVEL: {settings.log_level!r}", file=sys.stderr)
        return 1

    # Configure logging
    logging.basicConfig(
        level=logging.INFO if args.verbose else level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if args.version:
        print(__version__, file=sys.stderr)
        return 0

    if args.example:
        print(dump_example(), end="")
        return 0

    try:
        config = load_config(args.config)
    except ConfigLoadError as e:
        print(f"failed to load file {args.config}: {e}", file=sys.stderr)
        return 1

    try:
        paths = run(config, args.output_dir, verbose=args.verbose)
    except (ConfigValidationError, ConfigGeneratorError) as e:
        print(f"failed to run: {e}", file=sys.stderr)
        return 1

    if args.check:
        failures = check_rendered(paths)
        for path, errors in failures.items():
            for error in errors:
                print(f"{path}: {error}", file=sys.stderr)
        if failures:
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
