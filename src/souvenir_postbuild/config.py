"""
Module: config

Purpose:
    Run parameters for the post-build tool. Immutable configuration with
    validation on construction, optionally loaded from a JSON file.

Key Classes:
    - PostBuildConfig: Languages, table layout and sentinel settings
    - ConfigError: Invalid configuration

Key Functions:
    - load_config(): Build a PostBuildConfig from a JSON file plus overrides

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - controller: Dispatch to generators
    - translations.generator, contributors.document
    - cli: Merges command-line flags over the file values
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

DEFAULT_LANGUAGES = ("de", "eo", "es", "ja")
_STRING_KEYS = ("begin_sentinel", "end_sentinel", "translation_filename", "product_name")


class ConfigError(ValueError):
    """Raised when run configuration is invalid."""


@dataclass(frozen=True)
class PostBuildConfig:
    """
    Configuration for a post-build run (immutable).

    Attributes:
        languages: Supported language ids; one translation file each
        columns: Column count for major contributor tables
        major_threshold: Contributors with more modules than this get their own table
        column_spacing: Width of the gap between table columns, rule glyph included
        begin_sentinel: Line marking the start of the generated region
        end_sentinel: Line marking the end of the generated region
        translation_filename: File name pattern; {LANG} is upper-cased, {lang} verbatim
        product_name: Product named in the credits heading

    Example:
        >>> config = PostBuildConfig(languages=("de", "ja"))
        >>> config.translation_path(Path("Translations"), "de")
        PosixPath('Translations/TranslationDE.cs')
    """

    languages: tuple[str, ...] = DEFAULT_LANGUAGES
    columns: int = 5
    major_threshold: int = 5
    column_spacing: int = 5
    begin_sentinel: str = "#region Translatable strings"
    end_sentinel: str = "#endregion"
    translation_filename: str = "Translation{LANG}.cs"
    product_name: str = "Souvenir"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.languages:
            raise ConfigError("languages must not be empty")
        if len(set(self.languages)) != len(self.languages):
            raise ConfigError(f"languages contains duplicates: {list(self.languages)}")
        if any(not lang.strip() for lang in self.languages):
            raise ConfigError("language ids must not be blank")
        if self.columns < 1:
            raise ConfigError(f"columns must be >= 1: {self.columns}")
        if self.major_threshold < 0:
            raise ConfigError(f"major_threshold must be >= 0: {self.major_threshold}")
        if self.column_spacing < 1:
            raise ConfigError(f"column_spacing must be >= 1: {self.column_spacing}")
        if not self.begin_sentinel.strip() or not self.end_sentinel.strip():
            raise ConfigError("sentinels must not be blank")
        if self.begin_sentinel.strip() == self.end_sentinel.strip():
            raise ConfigError("begin and end sentinels must differ")
        if "{LANG}" not in self.translation_filename and "{lang}" not in self.translation_filename:
            raise ConfigError(
                f"translation_filename must contain {{LANG}} or {{lang}}: {self.translation_filename!r}"
            )

    def translation_path(self, folder: Path, language: str) -> Path:
        """Resolve the translation file for ``language`` inside ``folder``."""
        name = (
            self.translation_filename
            .replace("{LANG}", language.upper())
            .replace("{lang}", language)
        )
        return folder / name

    def with_overrides(self, **overrides: Any) -> PostBuildConfig:
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "languages" in changes:
            changes["languages"] = tuple(changes["languages"])
        return replace(self, **changes)


def load_config(path: Optional[Path] = None) -> PostBuildConfig:
    """
    Load configuration from a JSON file.

    Keys match the PostBuildConfig attribute names; missing keys keep their
    defaults.

    Args:
        path: JSON file, or None for the defaults

    Returns:
        Validated PostBuildConfig

    Raises:
        ConfigError: If the file is unreadable, not a JSON object, has
            unknown keys, or the values fail validation
    """
    if path is None:
        return PostBuildConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")

    known = {f.name for f in fields(PostBuildConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {unknown}")

    if "languages" in data:
        if not isinstance(data["languages"], list) or not all(isinstance(x, str) for x in data["languages"]):
            raise ConfigError("languages must be a list of strings")
        data["languages"] = tuple(data["languages"])

    for key in _STRING_KEYS:
        if key in data and not isinstance(data[key], str):
            raise ConfigError(f"{key} must be a string")

    try:
        return PostBuildConfig(**data)
    except TypeError as exc:
        raise ConfigError(f"Invalid config {path}: {exc}") from exc
