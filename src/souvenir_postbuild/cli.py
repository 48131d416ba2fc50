"""Command-line entry point for the Souvenir post-build step.

Regenerates CONTRIBUTORS.md and/or the translation files from a module
catalog exported by the build.

Usage:
    souvenir-postbuild catalog.json -c CONTRIBUTORS.md -t Lib/Translations
    python -m souvenir_postbuild catalog.json -t Lib/Translations --languages de,ja
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .catalog import CatalogLoadError
from .config import ConfigError, load_config
from .controller import run_postbuild

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CATALOG_ERROR = 1
EXIT_CONFIG_ERROR = 2


def _language_list(value: str) -> list[str]:
    languages = [part.strip() for part in value.split(",") if part.strip()]
    if not languages:
        raise argparse.ArgumentTypeError("expected a comma-separated list of language ids")
    return languages


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="souvenir-postbuild",
        description="Regenerate translation tables and contributor credits from the module catalog.",
    )
    parser.add_argument("catalog", type=Path, help="Module catalog JSON exported by the build")
    parser.add_argument(
        "-c", "--contributors", type=Path, default=None,
        help="Path to the CONTRIBUTORS.md file to be regenerated",
    )
    parser.add_argument(
        "-t", "--translations", type=Path, default=None,
        help="Folder whose translation files are updated in place",
    )
    parser.add_argument("--config", type=Path, default=None, help="JSON file with run parameters")
    parser.add_argument(
        "--languages", type=_language_list, default=None,
        help="Comma-separated language ids (default: de,eo,es,ja)",
    )
    parser.add_argument("--columns", type=int, default=None, help="Columns per contributor table")
    parser.add_argument(
        "--major-threshold", type=int, default=None,
        help="Contributors with more modules than this get their own section",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s | %(message)s",
    )

    try:
        config = load_config(args.config).with_overrides(
            languages=args.languages,
            columns=args.columns,
            major_threshold=args.major_threshold,
        )
    except ConfigError as exc:
        logger.error(f"Invalid configuration: {exc}")
        return EXIT_CONFIG_ERROR

    if args.contributors is None and args.translations is None:
        logger.warning("Nothing to do: pass --contributors and/or --translations")

    try:
        summary = run_postbuild(
            args.catalog,
            config,
            contributors_file=args.contributors,
            translations_dir=args.translations,
        )
    except CatalogLoadError as exc:
        logger.error(str(exc))
        for error in exc.errors:
            logger.error(f"  {error}")
        return EXIT_CATALOG_ERROR

    if summary.skipped:
        logger.warning(f"{len(summary.skipped)} translation file(s) were skipped:")
        for path, reason in summary.skipped:
            logger.warning(f"  {path}: {reason}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
