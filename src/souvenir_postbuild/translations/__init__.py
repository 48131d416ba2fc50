"""
Translations Package

Merge engine for the per-language translation tables: merge canonical specs
with prior overrides, render the C# initializer, splice it between the
sentinels of the translation file.
"""

from .merge import merge_question, merge_translations
from .codegen import SubstitutionPreviewError, render_preview, render_translation_block
from .splice import RegionNotFoundError, extract_region, find_region, splice_region
from .generator import generate_translation_file, regenerate_translation_file

__all__ = [
    "merge_question",
    "merge_translations",
    "SubstitutionPreviewError",
    "render_preview",
    "render_translation_block",
    "RegionNotFoundError",
    "extract_region",
    "find_region",
    "splice_region",
    "generate_translation_file",
    "regenerate_translation_file",
]
