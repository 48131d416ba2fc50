import json
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import souvenir_postbuild
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from souvenir_postbuild.core.models import QuestionSpec  # noqa: E402


TRANSLATION_FILE_TEMPLATE = """using System.Collections.Generic;

namespace Souvenir
{{
    public class Translation_{lang} : TranslationBase
    {{
        public override string FormatModuleName(string moduleName, bool addThe) => moduleName;

        #region Translatable strings
{region}        #endregion
    }}
}}
"""


# Common test fixtures
@pytest.fixture
def wires_spec() -> QuestionSpec:
    """A question with a translatable answer list."""
    return QuestionSpec(
        id="WiresColor",
        module_name="Wires",
        add_the=True,
        question_text="What was the {1} wire's color in {0}?",
        answers=("Red", "Blue"),
        example_format_args=("\ufffdordinal",),
        format_arg_group_size=1,
        translate_format_args=(True,),
        translate_answers=True,
    )


@pytest.fixture
def maze_spec() -> QuestionSpec:
    """A question with two-slot argument groups, only the second slot translatable."""
    return QuestionSpec(
        id="MazeStart",
        module_name="Maze",
        add_the=False,
        question_text="In {0}, where did you start when the light was {2} on the {1} stage?",
        answers=("A1", "B2"),
        example_format_args=("first", "red", "second", "green", "third", "red"),
        format_arg_group_size=2,
        translate_format_args=(False, True),
        translate_answers=False,
    )


@pytest.fixture
def sample_specs(wires_spec, maze_spec) -> list[QuestionSpec]:
    return [wires_spec, maze_spec]


@pytest.fixture
def catalog_data(sample_specs) -> dict:
    """A valid catalog manifest built from the sample specs."""
    return {
        "schema_version": 1,
        "modules": [
            {"id": "wires", "name": "Wires", "contributor": "Timwi"},
            {"id": "maze", "name": "Maze", "contributor": "Bob"},
        ],
        "questions": [spec.to_dict() for spec in sample_specs],
    }


@pytest.fixture
def write_catalog(tmp_path: Path):
    """Write a catalog dict to a JSON file and return its path."""
    def _write(data: dict, name: str = "catalog.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def translation_file_text():
    """Render a translation source file around a given region."""
    def _render(lang: str = "de", region: str = "") -> str:
        return TRANSLATION_FILE_TEMPLATE.format(lang=lang, region=region)
    return _render
