"""
Module: controller

Purpose:
    Orchestrate a post-build run.
    Load catalog → regenerate translation files → write CONTRIBUTORS.md

Key Functions:
    - run_postbuild(): Main entry point

Key Classes:
    - RegenerationSummary: Files written, unchanged and skipped

Dependencies:
    - catalog: Module catalog and prior translations
    - translations: Per-language merge engine
    - contributors: Credits document

Used By:
    - cli
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .catalog import (
    CatalogLoadError,
    ModuleCatalog,
    OverrideParseError,
    load_catalog,
    read_prior_overrides,
)
from .config import PostBuildConfig
from .contributors import write_contributors_document
from .translations import RegionNotFoundError, regenerate_translation_file

logger = logging.getLogger(__name__)


@dataclass
class RegenerationSummary:
    """
    Outcome of a post-build run.

    Attributes:
        written: Files rewritten with new content
        unchanged: Translation files that were already current
        skipped: (path, reason) for translation files that could not be regenerated
    """
    written: List[Path] = field(default_factory=list)
    unchanged: List[Path] = field(default_factory=list)
    skipped: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped


def _regenerate_language(
    catalog: ModuleCatalog,
    language: str,
    translations_dir: Path,
    config: PostBuildConfig,
    summary: RegenerationSummary,
) -> None:
    path = config.translation_path(translations_dir, language)
    try:
        overrides = catalog.overrides_for(language)
        if overrides is None:
            overrides = read_prior_overrides(path, config.begin_sentinel, config.end_sentinel)
        changed = regenerate_translation_file(path, language, catalog.questions, overrides, config)
    except (RegionNotFoundError, OverrideParseError, OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Skipping {language}: {exc}")
        summary.skipped.append((path, str(exc)))
        return

    if changed:
        summary.written.append(path)
    else:
        summary.unchanged.append(path)


def run_postbuild(
    catalog_path: Path,
    config: Optional[PostBuildConfig] = None,
    *,
    contributors_file: Optional[Path] = None,
    translations_dir: Optional[Path] = None,
) -> RegenerationSummary:
    """
    Run the post-build steps that were requested.

    The catalog is read once. Each language is processed independently; a
    failure for one file is recorded and the run moves on.

    Args:
        catalog_path: Module catalog JSON
        config: Run parameters (defaults if None)
        contributors_file: CONTRIBUTORS.md to regenerate, if requested
        translations_dir: Folder with Translation{LANG}.cs files, if requested

    Returns:
        RegenerationSummary

    Raises:
        CatalogLoadError: If the catalog cannot be loaded (fatal)
    """
    config = config or PostBuildConfig()
    summary = RegenerationSummary()
    start_time = time.perf_counter()

    catalog = load_catalog(catalog_path)

    if contributors_file is not None:
        write_contributors_document(contributors_file, catalog.contributor_map(), config)
        summary.written.append(contributors_file)

    if translations_dir is not None:
        for language in config.languages:
            _regenerate_language(catalog, language, translations_dir, config, summary)

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Post-build finished in {elapsed:.2f}s: {len(summary.written)} written, "
        f"{len(summary.unchanged)} unchanged, {len(summary.skipped)} skipped"
    )
    return summary


__all__ = ["CatalogLoadError", "RegenerationSummary", "run_postbuild"]
