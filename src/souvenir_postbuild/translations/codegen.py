"""
Module: translations.codegen

Purpose:
    Serialize merged translation records into the C# dictionary initializer
    that lives between the sentinels of each Translation{LANG}.cs file.

Key Functions:
    - render_preview(): Example rendering of a question template
    - render_translation_block(): Full generated region text

Key Classes:
    - SubstitutionPreviewError: Template could not be rendered with the
      example arguments (benign, the preview line is dropped)

Dependencies:
    - core.utils.escaping: Every emitted string value is escaped

Used By:
    - translations.generator
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from souvenir_postbuild.core.models import QuestionSpec, TranslationRecord
from souvenir_postbuild.core.utils import escape_literal, join_surrogate_pairs

logger = logging.getLogger(__name__)

ORDINAL_PLACEHOLDER = "\ufffdordinal"
ORDINAL_EXAMPLE = "first"

_INDENT = "    "
_PROPERTY_HEADER = (
    "public override Dictionary<Question, TranslationInfo> Translations"
    " => new Dictionary<Question, TranslationInfo>"
)
_STRING_MAP = "new Dictionary<string, string>"


class SubstitutionPreviewError(ValueError):
    """Raised when a question template cannot be rendered with its example arguments."""


def preview_arguments(spec: QuestionSpec) -> list[str]:
    """Module name (with article) followed by the first example argument group."""
    args = [spec.module_name_with_the]
    if spec.example_format_args is not None:
        args.extend(
            ORDINAL_EXAMPLE if arg == ORDINAL_PLACEHOLDER else arg
            for arg in spec.example_format_args[:spec.format_arg_group_size]
        )
    return args


def render_preview(spec: QuestionSpec) -> str:
    """
    Render the question template with example arguments.

    Raises:
        SubstitutionPreviewError: If the template references arguments that
            are not supplied or is not a valid format string
    """
    try:
        return spec.question_text.format(*preview_arguments(spec))
    except (IndexError, KeyError, ValueError, AttributeError, TypeError) as exc:
        raise SubstitutionPreviewError(f"Cannot preview {spec.id}: {exc}") from exc


def _comment(text: str) -> str:
    # Comments are single-line and must stay encodable.
    text = join_surrogate_pairs(text)
    return "".join(
        f"\\u{ord(c):04X}" if ord(c) < 0x20 or 0xD800 <= ord(c) <= 0xDFFF else c
        for c in text
    )


def _quoted(value: str) -> str:
    return f'"{escape_literal(value)}"'


def _string_map_lines(name: str, mapping: dict[str, str], depth: int) -> list[str]:
    pad = _INDENT * depth
    lines = [f"{pad}{name} = {_STRING_MAP}", f"{pad}{{"]
    for key, value in mapping.items():
        lines.append(f"{pad}{_INDENT}[{_quoted(key)}] = {_quoted(value)},")
    lines.append(f"{pad}}},")
    return lines


def _record_lines(spec: QuestionSpec, record: TranslationRecord) -> list[str]:
    pad = _INDENT * 3
    lines = [f"{pad}// {_comment(spec.question_text)}"]
    try:
        lines.append(f"{pad}// {_comment(render_preview(spec))}")
    except SubstitutionPreviewError as exc:
        logger.debug(str(exc))

    lines.append(f"{pad}[Question.{record.question_id}] = new TranslationInfo")
    lines.append(f"{pad}{{")
    field_pad = _INDENT * 4
    lines.append(f"{field_pad}QuestionText = {_quoted(record.question_text)},")
    if record.module_name is not None:
        lines.append(f"{field_pad}ModuleName = {_quoted(record.module_name)},")
    if record.answers is not None:
        lines.extend(_string_map_lines("Answers", record.answers, 4))
    if record.format_args is not None:
        lines.extend(_string_map_lines("FormatArgs", record.format_args, 4))
    lines.append(f"{pad}}},")
    return lines


def _group_by_module(
    entries: Iterable[tuple[QuestionSpec, TranslationRecord]],
) -> dict[str, list[tuple[QuestionSpec, TranslationRecord]]]:
    groups: dict[str, list[tuple[QuestionSpec, TranslationRecord]]] = {}
    for spec, record in entries:
        groups.setdefault(spec.module_name, []).append((spec, record))
    return groups


def render_translation_block(
    specs: Sequence[QuestionSpec],
    records: Sequence[TranslationRecord],
    newline: str = "\n",
) -> str:
    """
    Render the generated region for one language.

    Questions are grouped by owning module in order of first appearance;
    each group opens with a comment naming the module and ends with a
    blank line.

    Args:
        specs: Canonical specs in catalog order
        records: Merged records, parallel to ``specs``
        newline: Line terminator to use

    Returns:
        Region text ending with a line terminator
    """
    if len(specs) != len(records):
        raise ValueError(f"Got {len(specs)} specs but {len(records)} records")
    for spec, record in zip(specs, records):
        if spec.id != record.question_id:
            raise ValueError(f"Record {record.question_id!r} does not match spec {spec.id!r}")

    lines = [f"{_INDENT * 2}{_PROPERTY_HEADER}", f"{_INDENT * 2}{{"]
    for group in _group_by_module(zip(specs, records)).values():
        # Last question's article flag wins.
        heading = group[-1][0].module_name_with_the
        lines.append(f"{_INDENT * 3}// {_comment(heading)}")
        for spec, record in group:
            lines.extend(_record_lines(spec, record))
        lines.append("")
    lines.append(f"{_INDENT * 2}}};")
    return newline.join(lines) + newline
