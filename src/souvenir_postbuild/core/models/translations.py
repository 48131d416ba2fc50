"""
Module: translations

Purpose:
    Typed translation data. TranslationOverride is what a previous run (or a
    translator) left behind for one question in one language;
    TranslationRecord is the merged result that gets written back.

Key Classes:
    - TranslationOverride: Prior translation values, all optional
    - TranslationRecord: Merged output entity, one per canonical question

Dependencies:
    - dataclasses (std)

Used By:
    - catalog.reader, catalog.overrides
    - translations.merge, translations.codegen
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TranslationOverride:
    """
    Prior translation for a single question (immutable).

    Advisory input only: the canonical question list decides which ids
    survive, never the overrides.

    Attributes:
        question_text: Translated question template
        module_name: Translated module name
        answers: Literal answer -> translated answer
        format_args: Literal format argument -> translated value
    """

    question_text: Optional[str] = None
    module_name: Optional[str] = None
    answers: Optional[Dict[str, str]] = None
    format_args: Optional[Dict[str, str]] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.question_text is not None:
            data["question_text"] = self.question_text
        if self.module_name is not None:
            data["module_name"] = self.module_name
        if self.answers is not None:
            data["answers"] = dict(self.answers)
        if self.format_args is not None:
            data["format_args"] = dict(self.format_args)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TranslationOverride:
        answers = data.get("answers")
        format_args = data.get("format_args")
        return cls(
            question_text=data.get("question_text"),
            module_name=data.get("module_name"),
            answers=dict(answers) if answers is not None else None,
            format_args=dict(format_args) if format_args is not None else None,
        )


@dataclass(frozen=True)
class TranslationRecord:
    """
    Merged translation entry for one question in one language.

    Optional fields are None when the merge policy says they are not
    emitted. Mapping order is the emission order.

    Attributes:
        question_id: Canonical question id
        question_text: Final question text (override or template)
        module_name: Module name override, only if one existed
        answers: Literal -> translation for translatable answer lists
        format_args: Literal -> translation for translatable argument slots
    """

    question_id: str
    question_text: str
    module_name: Optional[str] = None
    answers: Optional[Dict[str, str]] = None
    format_args: Optional[Dict[str, str]] = None

    def to_override(self) -> TranslationOverride:
        """Turn the record back into override input for the next run."""
        return TranslationOverride(
            question_text=self.question_text,
            module_name=self.module_name,
            answers=dict(self.answers) if self.answers is not None else None,
            format_args=dict(self.format_args) if self.format_args is not None else None,
        )
