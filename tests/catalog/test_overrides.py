"""
Unit Tests for the Prior Translation Parser

Tests for parse_translation_block and read_prior_overrides.
"""

import pytest

from souvenir_postbuild.catalog.overrides import (
    OverrideParseError,
    parse_translation_block,
    read_prior_overrides,
)
from souvenir_postbuild.core.models import TranslationOverride
from souvenir_postbuild.translations.codegen import render_translation_block
from souvenir_postbuild.translations.merge import merge_translations

BEGIN = "#region Translatable strings"
END = "#endregion"

HAND_EDITED_BLOCK = """\
        public override Dictionary<Question, TranslationInfo> Translations => new Dictionary<Question, TranslationInfo>
        {
            // The Wires
            // What was the {1} wire's color in {0}?
            [Question.WiresColor] = new TranslationInfo
            {
                QuestionText = "Welche Farbe hatte der {1} Draht in {0}?",
                ModuleName = "Dr\\u00E4hte \\"klassisch\\"",
                Answers = new Dictionary<string, string>
                {
                    ["Red"] = "Rot",
                    ["Blue"] = "Blue",
                },
            },

            // Maze
            [Question.MazeStart] = new TranslationInfo {
                QuestionText = "Labyrinth?",
                FormatArgs = new Dictionary<string, string> {
                    ["red"]="rot",
                },
            },
        };
"""


class TestParseTranslationBlock:
    """Tests for parse_translation_block."""

    def test_parse_when_generated_block_then_overrides_recovered(self):
        """Every field of every record is read back and unescaped."""
        overrides = parse_translation_block(HAND_EDITED_BLOCK)

        assert list(overrides) == ["WiresColor", "MazeStart"]
        wires = overrides["WiresColor"]
        assert wires.question_text == "Welche Farbe hatte der {1} Draht in {0}?"
        assert wires.module_name == 'Drähte "klassisch"'
        assert wires.answers == {"Red": "Rot", "Blue": "Blue"}
        assert wires.format_args is None

    def test_parse_when_braces_on_same_line_then_accepted(self):
        """Hand edits that move opening braces are tolerated."""
        maze = parse_translation_block(HAND_EDITED_BLOCK)["MazeStart"]

        assert maze == TranslationOverride(question_text="Labyrinth?", format_args={"red": "rot"})

    def test_parse_when_empty_region_then_no_overrides(self):
        """An empty region is a valid starting point."""
        assert parse_translation_block("") == {}

    def test_parse_when_rendered_records_then_roundtrip(self, sample_specs):
        """Whatever the generator writes, the parser reads back."""
        overrides = {
            "WiresColor": TranslationOverride(
                question_text="Line\nbreak \"quoted\" \\ and \x01",
                module_name="\ud800 lone",
                answers={"Red": "Rot"},
            ),
        }
        records = merge_translations(sample_specs, overrides)
        block = render_translation_block(sample_specs, records)

        parsed = parse_translation_block(block)

        assert parsed == {record.question_id: record.to_override() for record in records}

    def test_parse_when_bad_escape_then_raises(self):
        """A malformed literal stops the parse instead of losing data."""
        block = '[Question.Q] = new TranslationInfo\n{\nQuestionText = "bad \\q",\n},\n'

        with pytest.raises(OverrideParseError, match="line 3"):
            parse_translation_block(block)

    def test_parse_when_unknown_field_line_then_raises(self):
        """Unrecognised lines inside a record are errors."""
        block = '[Question.Q] = new TranslationInfo\n{\nQuestionTxt = "typo",\n},\n'

        with pytest.raises(OverrideParseError, match="Unexpected line"):
            parse_translation_block(block)

    def test_parse_when_record_unterminated_then_raises(self):
        """A record missing its closing brace is an error."""
        block = '[Question.Q] = new TranslationInfo\n{\nQuestionText = "x",\n'

        with pytest.raises(OverrideParseError, match="Unterminated"):
            parse_translation_block(block)

    def test_parse_when_record_on_single_line_then_raises(self):
        """A record collapsed onto one line is rejected rather than silently lost."""
        block = (
            "        {\n"
            '            [Question.WiresColor] = new TranslationInfo { QuestionText = "Welche Farbe?" },\n'
            "        };\n"
        )

        with pytest.raises(OverrideParseError, match="line 2: Unrecognised record layout"):
            parse_translation_block(block)


class TestReadPriorOverrides:
    """Tests for read_prior_overrides."""

    def test_read_when_file_missing_then_empty(self, tmp_path):
        """A missing translation file means no prior translations."""
        assert read_prior_overrides(tmp_path / "TranslationDE.cs", BEGIN, END) == {}

    def test_read_when_no_sentinels_then_empty(self, tmp_path):
        """A file without sentinels has no readable region."""
        path = tmp_path / "TranslationDE.cs"
        path.write_text("class Foo {}\n", encoding="utf-8")

        assert read_prior_overrides(path, BEGIN, END) == {}

    def test_read_when_region_present_then_parsed(self, tmp_path, translation_file_text):
        """Overrides are read from between the sentinels only."""
        path = tmp_path / "TranslationDE.cs"
        path.write_text(translation_file_text("de", HAND_EDITED_BLOCK), encoding="utf-8")

        overrides = read_prior_overrides(path, BEGIN, END)

        assert set(overrides) == {"WiresColor", "MazeStart"}
        assert overrides["WiresColor"].answers["Red"] == "Rot"

    def test_read_when_crlf_file_then_parsed(self, tmp_path, translation_file_text):
        """Windows line endings do not confuse the parser."""
        path = tmp_path / "TranslationDE.cs"
        text = translation_file_text("de", HAND_EDITED_BLOCK).replace("\n", "\r\n")
        path.write_bytes(text.encode("utf-8"))

        overrides = read_prior_overrides(path, BEGIN, END)

        assert overrides["MazeStart"].format_args == {"red": "rot"}

