"""
Module: questions

Purpose:
    Provides the QuestionSpec dataclass - the canonical definition of a
    Souvenir question as declared in the module catalog - and ModuleInfo,
    the catalog's record of a supported module and who implemented it.

Key Functions:
    - QuestionSpec.module_name_with_the: Module name with definite article
    - QuestionSpec.distinct_format_args: Example format args, first occurrence order
    - QuestionSpec.has_translatable_format_args: Any group position flagged
    - QuestionSpec.to_dict() / QuestionSpec.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - catalog.reader
    - translations.merge
    - translations.codegen
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Optional


@dataclass(frozen=True)
class QuestionSpec:
    """
    Canonical question definition (immutable).

    Read once per run from the module catalog. Declaration order in the
    catalog is significant and preserved by everything downstream.

    Attributes:
        id: Symbolic question id like "WiresColor" (stable across runs)
        module_name: Display name of the owning module like "Wires"
        add_the: Whether the module name takes a definite article
        question_text: Template with positional placeholders like "{0}"
        answers: Fixed list of literal answers, if the question has one
        example_format_args: Example extra format arguments, flattened groups
        format_arg_group_size: Number of argument slots per group
        translate_format_args: Per group position, whether the slot is translatable
        translate_answers: Whether the answer list itself is translatable

    Example:
        >>> q = QuestionSpec(
        ...     id="WiresColor",
        ...     module_name="Wires",
        ...     add_the=True,
        ...     question_text="What was the {1} wire's color in {0}?",
        ...     answers=("Red", "Blue"),
        ...     translate_answers=True,
        ... )
        >>> q.module_name_with_the
        'The Wires'
    """

    id: str
    module_name: str
    add_the: bool
    question_text: str
    answers: Optional[tuple[str, ...]] = None
    example_format_args: Optional[tuple[str, ...]] = None
    format_arg_group_size: int = 1
    translate_format_args: Optional[tuple[bool, ...]] = None
    translate_answers: bool = False

    def __post_init__(self) -> None:
        """Validate spec on construction."""
        if not self.id:
            raise ValueError("question id must not be empty")
        if not self.module_name:
            raise ValueError(f"module_name must not be empty for {self.id!r}")
        if self.format_arg_group_size < 1:
            raise ValueError(
                f"format_arg_group_size must be >= 1 for {self.id!r}: {self.format_arg_group_size}"
            )

    @property
    def module_name_with_the(self) -> str:
        return f"The {self.module_name}" if self.add_the else self.module_name

    @cached_property
    def distinct_format_args(self) -> tuple[str, ...]:
        """
        Example format arguments with duplicates removed.

        Returns:
            Arguments in first-occurrence order (empty if none declared)
        """
        if not self.example_format_args:
            return ()
        return tuple(dict.fromkeys(self.example_format_args))

    @property
    def has_translatable_format_args(self) -> bool:
        return bool(self.translate_format_args) and any(self.translate_format_args)

    def is_format_arg_position_translatable(self, index: int) -> bool:
        """
        Check whether the argument at ``index`` falls on a translatable slot.

        The slot is ``index mod format_arg_group_size``; slots without a
        flag are treated as not translatable.
        """
        if not self.translate_format_args:
            return False
        position = index % self.format_arg_group_size
        if position >= len(self.translate_format_args):
            return False
        return self.translate_format_args[position]

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the catalog manifest's question format."""
        data: dict[str, Any] = {
            "id": self.id,
            "module": self.module_name,
            "add_the": self.add_the,
            "text": self.question_text,
            "translate_answers": self.translate_answers,
            "format_arg_group_size": self.format_arg_group_size,
        }
        if self.answers is not None:
            data["answers"] = list(self.answers)
        if self.example_format_args is not None:
            data["example_format_args"] = list(self.example_format_args)
        if self.translate_format_args is not None:
            data["translate_format_args"] = list(self.translate_format_args)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuestionSpec:
        """Deserialize from the catalog manifest's question format."""
        answers = data.get("answers")
        format_args = data.get("example_format_args")
        translate_flags = data.get("translate_format_args")
        return cls(
            id=data["id"],
            module_name=data["module"],
            add_the=data.get("add_the", False),
            question_text=data["text"],
            answers=tuple(answers) if answers is not None else None,
            example_format_args=tuple(format_args) if format_args is not None else None,
            format_arg_group_size=data.get("format_arg_group_size", 1),
            translate_format_args=tuple(translate_flags) if translate_flags is not None else None,
            translate_answers=data.get("translate_answers", False),
        )


@dataclass(frozen=True)
class ModuleInfo:
    """
    A supported module and the single author credited with implementing it.

    Attributes:
        module_id: Module id as used by the game like "wires"
        name: Display name like "Wires"
        contributor: Author credited in CONTRIBUTORS.md
    """

    module_id: str
    name: str
    contributor: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ModuleInfo:
        return cls(
            module_id=data["id"],
            name=data["name"],
            contributor=data["contributor"],
        )
