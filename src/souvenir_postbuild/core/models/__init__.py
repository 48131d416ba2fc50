"""
Core Models Package

Immutable data models shared by the catalog reader and both generators.

All models in this package are frozen dataclasses. The catalog is read once
per run and every generator works from the same snapshot, so nothing
downstream may mutate it.
"""

from .questions import QuestionSpec, ModuleInfo
from .translations import TranslationOverride, TranslationRecord
from .contributors import ContributorGroup

__all__ = [
    "QuestionSpec",
    "ModuleInfo",
    "TranslationOverride",
    "TranslationRecord",
    "ContributorGroup",
]
