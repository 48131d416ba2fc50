"""
Catalog Package

Module catalog reader and the parser that recovers prior translations from
generated translation files.
"""

from .reader import (
    CatalogLoadError,
    ModuleCatalog,
    group_modules_by_contributor,
    load_catalog,
)
from .overrides import OverrideParseError, parse_translation_block, read_prior_overrides

__all__ = [
    "CatalogLoadError",
    "ModuleCatalog",
    "group_modules_by_contributor",
    "load_catalog",
    "OverrideParseError",
    "parse_translation_block",
    "read_prior_overrides",
]
