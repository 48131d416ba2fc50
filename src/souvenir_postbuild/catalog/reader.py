"""
Module: catalog.reader

Purpose:
    Load the module catalog - the JSON snapshot exported from the compiled
    Souvenir assembly - into typed, immutable records.

Key Functions:
    - load_catalog(): Read and validate a catalog manifest
    - group_modules_by_contributor(): Contributor -> module names

Key Classes:
    - ModuleCatalog: Questions, modules and manifest-carried translations
    - CatalogLoadError: Fatal catalog failure

Dependencies:
    - core.schemas.validator: jsonschema validation
    - core.models: QuestionSpec, ModuleInfo, TranslationOverride

Used By:
    - controller
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Set

from souvenir_postbuild.core.models import ModuleInfo, QuestionSpec, TranslationOverride
from souvenir_postbuild.core.schemas import ValidationError, validate_catalog

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Raised when the module catalog cannot be located or read. Fatal for the run."""

    def __init__(self, message: str, path: Optional[Path] = None, errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


@dataclass(frozen=True)
class ModuleCatalog:
    """
    Immutable snapshot of the module catalog.

    Attributes:
        questions: Canonical question specs in declaration order
        modules: Supported modules with their credited contributor
        translations: Per language, prior overrides carried by the manifest.
            Languages absent here fall back to the translation files.
    """

    questions: tuple[QuestionSpec, ...]
    modules: tuple[ModuleInfo, ...] = ()
    translations: Dict[str, Dict[str, TranslationOverride]] = field(default_factory=dict)

    def overrides_for(self, language: str) -> Optional[Dict[str, TranslationOverride]]:
        """
        Get the manifest-carried overrides for a language.

        Returns:
            Id -> override mapping, or None if the manifest has no entry
            for the language
        """
        return self.translations.get(language)

    def contributor_map(self) -> Dict[str, Set[str]]:
        return group_modules_by_contributor(self.modules)


def group_modules_by_contributor(modules: Iterable[ModuleInfo]) -> Dict[str, Set[str]]:
    """
    Group module names under the contributor credited for them.

    Args:
        modules: Module records from the catalog

    Returns:
        Contributor name -> set of module names

    Raises:
        ValueError: If one module name is credited to two different contributors
    """
    owner: Dict[str, str] = {}
    groups: Dict[str, Set[str]] = {}
    for module in modules:
        existing = owner.get(module.name)
        if existing is not None and existing != module.contributor:
            raise ValueError(
                f"Module {module.name!r} is credited to both {existing!r} and {module.contributor!r}"
            )
        owner[module.name] = module.contributor
        groups.setdefault(module.contributor, set()).add(module.name)
    return groups


def _parse_catalog(data: dict[str, Any]) -> ModuleCatalog:
    questions = tuple(QuestionSpec.from_dict(q) for q in data["questions"])
    modules = tuple(ModuleInfo.from_dict(m) for m in data["modules"])
    translations = {
        language: {qid: TranslationOverride.from_dict(entry) for qid, entry in entries.items()}
        for language, entries in data.get("translations", {}).items()
    }
    return ModuleCatalog(questions=questions, modules=modules, translations=translations)


def load_catalog(path: Path) -> ModuleCatalog:
    """
    Load and validate a module catalog manifest.

    Args:
        path: Path to the catalog JSON file

    Returns:
        ModuleCatalog snapshot

    Raises:
        CatalogLoadError: If the file is missing, is not valid JSON, fails
            schema validation, or contains inconsistent records
    """
    if not path.exists():
        raise CatalogLoadError(f"Module catalog not found: {path}", path=path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Cannot read module catalog {path}: {exc}", path=path) from exc

    try:
        validate_catalog(data)
        catalog = _parse_catalog(data)
        group_modules_by_contributor(catalog.modules)
    except ValidationError as exc:
        raise CatalogLoadError(
            f"Invalid module catalog {path}: {exc}", path=path, errors=exc.errors
        ) from exc
    except ValueError as exc:
        raise CatalogLoadError(f"Invalid module catalog {path}: {exc}", path=path) from exc

    logger.info(
        f"Loaded {len(catalog.questions)} questions across {len(catalog.modules)} modules from {path}"
    )
    return catalog
