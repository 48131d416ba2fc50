"""
Module: translations.merge

Purpose:
    Merge canonical question specs with prior translation overrides into
    the records that get written back for one language.

Key Functions:
    - merge_question(): One spec + its override -> TranslationRecord
    - merge_translations(): All specs in canonical order

Merge rules:
    - question text: override text if non-empty, else the template
    - module name: only when the override carries one
    - answers: only for a non-empty, translatable answer list; each literal
      maps to its prior translation or to itself
    - format args: only for non-empty distinct example args with at least
      one translatable slot; slot = index mod group size
    - override ids with no canonical spec are dropped
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from souvenir_postbuild.core.models import QuestionSpec, TranslationOverride, TranslationRecord

logger = logging.getLogger(__name__)


def _merge_answers(spec: QuestionSpec, override: Optional[TranslationOverride]) -> Optional[dict[str, str]]:
    if not spec.answers or not spec.translate_answers:
        return None
    prior = (override.answers if override else None) or {}
    return {answer: prior.get(answer, answer) for answer in spec.answers}


def _merge_format_args(spec: QuestionSpec, override: Optional[TranslationOverride]) -> Optional[dict[str, str]]:
    distinct = spec.distinct_format_args
    if not distinct or not spec.has_translatable_format_args:
        return None
    prior = (override.format_args if override else None) or {}
    return {
        arg: prior.get(arg, arg)
        for index, arg in enumerate(distinct)
        if spec.is_format_arg_position_translatable(index)
    }


def merge_question(spec: QuestionSpec, override: Optional[TranslationOverride]) -> TranslationRecord:
    """
    Merge a single canonical spec with its prior override.

    Args:
        spec: Canonical question definition
        override: Prior translation for the same id, if any

    Returns:
        TranslationRecord with only the fields the merge rules emit
    """
    question_text = spec.question_text
    if override and override.question_text:
        question_text = override.question_text

    return TranslationRecord(
        question_id=spec.id,
        question_text=question_text,
        module_name=override.module_name if override else None,
        answers=_merge_answers(spec, override),
        format_args=_merge_format_args(spec, override),
    )


def merge_translations(
    specs: Iterable[QuestionSpec],
    overrides: Optional[Mapping[str, TranslationOverride]] = None,
) -> list[TranslationRecord]:
    """
    Merge every canonical spec with the overrides for one language.

    Args:
        specs: Canonical specs in catalog order
        overrides: Question id -> prior override (may be None or partial)

    Returns:
        One record per spec, in the order given
    """
    overrides = overrides or {}
    specs = list(specs)
    records = [merge_question(spec, overrides.get(spec.id)) for spec in specs]

    stale = set(overrides) - {spec.id for spec in specs}
    if stale:
        logger.debug(f"Dropping {len(stale)} stale override(s): {sorted(stale)}")

    return records
