"""
Module: catalog.overrides

Purpose:
    Read the generated region of an existing Translation{LANG}.cs file back
    into TranslationOverride records, so translations entered by hand since
    the last run survive the next one.

Key Functions:
    - parse_translation_block(): Region text -> id -> TranslationOverride
    - read_prior_overrides(): Same, starting from a translation file path

Key Classes:
    - OverrideParseError: The region could not be parsed safely

Used By:
    - controller: When the catalog carries no translations for a language
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Optional

from souvenir_postbuild.core.models import TranslationOverride
from souvenir_postbuild.core.utils import read_text_exact, unescape_literal
from souvenir_postbuild.translations.splice import RegionNotFoundError, extract_region, split_lines

logger = logging.getLogger(__name__)

_LITERAL = r'"((?:[^"\\]|\\.)*)"'

_RECORD_START_RE = re.compile(r"^\[Question\.(\w+)\]\s*=\s*new\s+TranslationInfo\s*(\{)?$")
_SCALAR_RE = re.compile(rf"^(QuestionText|ModuleName)\s*=\s*{_LITERAL}\s*,?$")
_MAP_START_RE = re.compile(r"^(Answers|FormatArgs)\s*=\s*new\s+Dictionary<string,\s*string>\s*(\{)?$")
_MAP_ENTRY_RE = re.compile(rf"^\[{_LITERAL}\]\s*=\s*{_LITERAL}\s*,?$")
_CLOSE_RE = re.compile(r"^\}\s*,?$")


class OverrideParseError(ValueError):
    """Raised when a generated region cannot be read back without losing data."""

    def __init__(self, message: str, line_no: int = 0):
        super().__init__(f"line {line_no}: {message}" if line_no else message)
        self.line_no = line_no


class _RecordBuilder:
    def __init__(self, question_id: str):
        self.question_id = question_id
        self.fields: dict[str, object] = {}
        self.current_map: Optional[str] = None

    def build(self) -> TranslationOverride:
        return TranslationOverride(
            question_text=self.fields.get("QuestionText"),
            module_name=self.fields.get("ModuleName"),
            answers=self.fields.get("Answers"),
            format_args=self.fields.get("FormatArgs"),
        )


def _unescape(value: str, line_no: int) -> str:
    try:
        return unescape_literal(value)
    except ValueError as exc:
        raise OverrideParseError(str(exc), line_no) from exc


def parse_translation_block(text: str) -> Dict[str, TranslationOverride]:
    """
    Parse a generated translation region.

    Comments, blank lines, braces and the property header are skipped.
    Anything that looks like a record field but is malformed raises, because
    silently skipping it would drop a translation on the next write.

    Args:
        text: Region text between the sentinels

    Returns:
        Question id -> TranslationOverride, in file order

    Raises:
        OverrideParseError: On malformed escapes, unbalanced records, or a
            record header in a layout the parser does not recognise
    """
    result: Dict[str, TranslationOverride] = {}
    record: Optional[_RecordBuilder] = None

    for line_no, raw in enumerate(split_lines(text), 1):
        line = raw.strip()
        if not line or line.startswith("//"):
            continue

        if record is None:
            match = _RECORD_START_RE.match(line)
            if match:
                record = _RecordBuilder(match.group(1))
            elif line.startswith("[Question."):
                raise OverrideParseError(f"Unrecognised record layout: {line!r}", line_no)
            continue

        if record.current_map is not None:
            entry = _MAP_ENTRY_RE.match(line)
            if entry:
                key = _unescape(entry.group(1), line_no)
                record.fields[record.current_map][key] = _unescape(entry.group(2), line_no)
            elif _CLOSE_RE.match(line):
                record.current_map = None
            elif line != "{":
                raise OverrideParseError(
                    f"Unexpected line in {record.current_map} of {record.question_id}: {line!r}", line_no
                )
            continue

        scalar = _SCALAR_RE.match(line)
        map_start = _MAP_START_RE.match(line)
        if scalar:
            record.fields[scalar.group(1)] = _unescape(scalar.group(2), line_no)
        elif map_start:
            record.current_map = map_start.group(1)
            record.fields[record.current_map] = {}
        elif _CLOSE_RE.match(line):
            if record.question_id in result:
                logger.warning(f"Duplicate translation for {record.question_id}; keeping the last one")
            result[record.question_id] = record.build()
            record = None
        elif line != "{":
            raise OverrideParseError(
                f"Unexpected line in record {record.question_id}: {line!r}", line_no
            )

    if record is not None:
        raise OverrideParseError(f"Unterminated record {record.question_id}")

    return result


def read_prior_overrides(
    path: Path,
    begin_sentinel: str,
    end_sentinel: str,
) -> Dict[str, TranslationOverride]:
    """
    Read prior overrides from an existing translation file.

    A missing file or a file without the sentinels yields no overrides; the
    generator reports those files separately.

    Raises:
        OverrideParseError: If the region exists but cannot be parsed
    """
    if not path.exists():
        return {}
    text = read_text_exact(path)
    try:
        region = extract_region(text, begin_sentinel, end_sentinel)
    except RegionNotFoundError:
        return {}
    overrides = parse_translation_block(region)
    logger.debug(f"Read {len(overrides)} prior translation(s) from {path}")
    return overrides
