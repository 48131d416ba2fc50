"""
Souvenir Post-Build Core Package

Shared data models, literal escaping and catalog schema validation.
"""

from .models import (
    QuestionSpec,
    ModuleInfo,
    TranslationOverride,
    TranslationRecord,
    ContributorGroup,
)

__all__ = [
    "QuestionSpec",
    "ModuleInfo",
    "TranslationOverride",
    "TranslationRecord",
    "ContributorGroup",
]
