"""
Unit Tests for Translation File Generation

Tests for generate_translation_file and regenerate_translation_file,
including regeneration over the tool's own output.
"""

import pytest

from souvenir_postbuild.catalog.overrides import parse_translation_block, read_prior_overrides
from souvenir_postbuild.config import PostBuildConfig
from souvenir_postbuild.core.models import TranslationOverride
from souvenir_postbuild.translations.generator import (
    generate_translation_file,
    regenerate_translation_file,
)
from souvenir_postbuild.translations.splice import RegionNotFoundError, extract_region

BEGIN = "#region Translatable strings"
END = "#endregion"


class TestGenerateTranslationFile:
    """Tests for generate_translation_file."""

    def test_generate_when_empty_region_then_all_questions_emitted(self, sample_specs, translation_file_text):
        """A fresh file gets a record for every question."""
        result = generate_translation_file("de", sample_specs, None, translation_file_text("de"))

        region = extract_region(result, BEGIN, END)
        assert "[Question.WiresColor] = new TranslationInfo" in region
        assert "[Question.MazeStart] = new TranslationInfo" in region

    def test_generate_when_called_then_outside_region_untouched(self, sample_specs, translation_file_text):
        """Only the region between the sentinels changes."""
        original = translation_file_text("de")

        result = generate_translation_file("de", sample_specs, None, original)

        head, _, _ = original.partition(BEGIN)
        assert result.startswith(head)
        assert result.endswith("        #endregion\n    }\n}\n")

    def test_generate_when_crlf_file_then_block_uses_crlf(self, sample_specs, translation_file_text):
        """The generated block follows the file's newline convention."""
        original = translation_file_text("de").replace("\n", "\r\n")

        result = generate_translation_file("de", sample_specs, None, original)

        assert "\n" not in result.replace("\r\n", "")

    def test_generate_when_overrides_given_then_translations_kept(self, sample_specs, translation_file_text):
        """Overrides flow through the merge into the file."""
        overrides = {"WiresColor": TranslationOverride(answers={"Red": "Rot"})}

        result = generate_translation_file("de", sample_specs, overrides, translation_file_text("de"))

        assert '["Red"] = "Rot",' in result
        assert '["Blue"] = "Blue",' in result

    def test_generate_when_custom_sentinels_then_used(self, sample_specs):
        """Sentinels come from the configuration."""
        config = PostBuildConfig(begin_sentinel="// BEGIN", end_sentinel="// END")

        result = generate_translation_file("de", sample_specs, None, "x\n// BEGIN\n// END\ny\n", config)

        assert result.startswith("x\n// BEGIN\n        public override")
        assert result.endswith("        };\n// END\ny\n")

    def test_generate_when_sentinels_missing_then_raises(self, sample_specs):
        with pytest.raises(RegionNotFoundError):
            generate_translation_file("de", sample_specs, None, "class T {}\n")

    def test_generate_when_rerun_on_own_output_then_identical(self, sample_specs, translation_file_text):
        """Regenerating with overrides read back from the output changes nothing."""
        overrides = {
            "WiresColor": TranslationOverride(
                question_text="Welche Farbe hatte der {1} Draht in {0}?",
                module_name="Drähte",
                answers={"Red": "Rot"},
            ),
            "MazeStart": TranslationOverride(format_args={"green": "grün"}),
        }
        first = generate_translation_file("de", sample_specs, overrides, translation_file_text("de"))

        reread = parse_translation_block(extract_region(first, BEGIN, END))
        second = generate_translation_file("de", sample_specs, reread, first)

        assert second == first


class TestRegenerateTranslationFile:
    """Tests for regenerate_translation_file."""

    def test_regenerate_when_file_missing_then_raises_with_path(self, tmp_path, sample_specs):
        """A missing translation file is reported, not created."""
        path = tmp_path / "TranslationDE.cs"

        with pytest.raises(RegionNotFoundError, match="does not exist") as exc_info:
            regenerate_translation_file(path, "de", sample_specs, None)
        assert exc_info.value.path == path
        assert not path.exists()

    def test_regenerate_when_sentinels_missing_then_file_untouched(self, tmp_path, sample_specs):
        """A file without sentinels is left exactly as it was."""
        path = tmp_path / "TranslationDE.cs"
        path.write_bytes(b"class T {}\r\n")

        with pytest.raises(RegionNotFoundError, match="Please put them back in"):
            regenerate_translation_file(path, "de", sample_specs, None)
        assert path.read_bytes() == b"class T {}\r\n"

    def test_regenerate_when_new_content_then_written(self, tmp_path, sample_specs, translation_file_text):
        path = tmp_path / "TranslationDE.cs"
        path.write_text(translation_file_text("de"), encoding="utf-8")

        assert regenerate_translation_file(path, "de", sample_specs, None) is True
        assert "[Question.MazeStart]" in path.read_text(encoding="utf-8")

    def test_regenerate_when_already_current_then_not_rewritten(self, tmp_path, sample_specs, translation_file_text):
        """A second run with the same inputs leaves the file alone."""
        path = tmp_path / "TranslationDE.cs"
        path.write_text(translation_file_text("de"), encoding="utf-8")
        regenerate_translation_file(path, "de", sample_specs, None)
        overrides = read_prior_overrides(path, BEGIN, END)

        assert regenerate_translation_file(path, "de", sample_specs, overrides) is False

    def test_regenerate_when_crlf_and_bom_then_preserved(self, tmp_path, sample_specs, translation_file_text):
        """Byte order mark and CRLF line endings survive regeneration."""
        path = tmp_path / "TranslationDE.cs"
        original = "\ufeff" + translation_file_text("de").replace("\n", "\r\n")
        path.write_bytes(original.encode("utf-8"))

        regenerate_translation_file(path, "de", sample_specs, None)

        data = path.read_bytes()
        assert data.startswith(b"\xef\xbb\xbfusing System.Collections.Generic;\r\n")
        assert b"\n" not in data.replace(b"\r\n", b"")

    def test_regenerate_when_translation_has_astral_char_then_utf8_written(self, tmp_path, sample_specs, translation_file_text):
        """Non-BMP characters are written as proper UTF-8."""
        path = tmp_path / "TranslationJA.cs"
        path.write_text(translation_file_text("ja"), encoding="utf-8")
        overrides = {"WiresColor": TranslationOverride(module_name="\U0001F50C")}

        regenerate_translation_file(path, "ja", sample_specs, overrides)

        assert "ModuleName = \"\U0001F50C\"," in path.read_text(encoding="utf-8")
