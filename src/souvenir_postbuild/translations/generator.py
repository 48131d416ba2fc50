"""
Module: translations.generator

Purpose:
    Per-language entry points of the translation merge engine:
    merge → render → splice, in memory or against a file on disk.

Key Functions:
    - generate_translation_file(): Existing file text -> new file text
    - regenerate_translation_file(): Same, reading and rewriting a file

Dependencies:
    - translations.merge, translations.codegen, translations.splice
    - core.utils.files: Exact read/write

Used By:
    - controller
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Sequence

from souvenir_postbuild.config import PostBuildConfig
from souvenir_postbuild.core.models import QuestionSpec, TranslationOverride
from souvenir_postbuild.core.utils import read_text_exact, write_text_exact

from .codegen import render_translation_block
from .merge import merge_translations
from .splice import RegionNotFoundError, detect_newline, splice_region

logger = logging.getLogger(__name__)


def generate_translation_file(
    language: str,
    specs: Sequence[QuestionSpec],
    overrides: Optional[Mapping[str, TranslationOverride]],
    existing_text: str,
    config: Optional[PostBuildConfig] = None,
) -> str:
    """
    Compute the new contents of a language's translation file.

    Args:
        language: Language id, used for logging only
        specs: Canonical specs in catalog order
        overrides: Prior translations for this language (None = none)
        existing_text: Current file contents, sentinels included
        config: Sentinel settings (defaults if None)

    Returns:
        File contents with the sentinel region regenerated

    Raises:
        RegionNotFoundError: If the sentinels are missing or misordered
    """
    config = config or PostBuildConfig()
    records = merge_translations(specs, overrides)
    block = render_translation_block(specs, records, newline=detect_newline(existing_text))
    logger.debug(f"Rendered {len(records)} translation record(s) for {language}")
    return splice_region(existing_text, block, config.begin_sentinel, config.end_sentinel)


def regenerate_translation_file(
    path: Path,
    language: str,
    specs: Sequence[QuestionSpec],
    overrides: Optional[Mapping[str, TranslationOverride]],
    config: Optional[PostBuildConfig] = None,
) -> bool:
    """
    Regenerate a translation file in place.

    The new contents are computed in full before the file is opened for
    writing, and an unchanged file is not rewritten.

    Returns:
        True if the file was rewritten, False if it was already current

    Raises:
        RegionNotFoundError: If the file does not exist or lacks the
            sentinels; ``path`` is set on the error
    """
    config = config or PostBuildConfig()
    if not path.exists():
        raise RegionNotFoundError(f"File {path} does not exist.", path=path)

    existing = read_text_exact(path)
    try:
        updated = generate_translation_file(language, specs, overrides, existing, config)
    except RegionNotFoundError as exc:
        raise RegionNotFoundError(
            f"File {path} does not contain the “{config.begin_sentinel}” and "
            f"“{config.end_sentinel}” directives. Please put them back in. ({exc})",
            path=path,
        ) from exc

    if updated == existing:
        logger.info(f"{path} is up to date")
        return False

    write_text_exact(path, updated)
    logger.info(f"Regenerated {path}")
    return True
