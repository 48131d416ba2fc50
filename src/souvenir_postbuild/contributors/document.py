"""
Module: contributors.document

Purpose:
    Generate CONTRIBUTORS.md: every supported module credited to the person
    who implemented it. Prolific contributors get a section of their own with
    a columnized module list; everyone else shares one two-column table.

Key Functions:
    - build_contributor_groups(): Mapping -> ContributorGroup list
    - generate_contributors_document(): Mapping -> document text
    - write_contributors_document(): Generate and write in full

Dependencies:
    - contributors.table: Text table layout
    - core.models.ContributorGroup

Used By:
    - controller
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional

from souvenir_postbuild.config import PostBuildConfig
from souvenir_postbuild.core.models import ContributorGroup

from .table import render_table, split_column_major

logger = logging.getLogger(__name__)

OTHERS_HEADER = ("MODULE", "IMPLEMENTED BY")


def build_contributor_groups(
    contributor_to_modules: Mapping[str, Iterable[str]],
) -> list[ContributorGroup]:
    """Build groups ordered by module count (descending), then name."""
    groups = [
        ContributorGroup.from_modules(contributor, modules)
        for contributor, modules in contributor_to_modules.items()
    ]
    return sorted(groups, key=lambda g: (-g.count, g.contributor))


def _intro(product_name: str) -> str:
    return (
        f"# {product_name} implementors\n\n"
        f"The following is a list of modules supported by {product_name}, "
        "and the fine people who have contributed their effort to make it happen:\n\n\n"
    )


def _major_section(group: ContributorGroup, config: PostBuildConfig) -> str:
    rows = split_column_major(group.modules, config.columns)
    lines = render_table(rows, column_spacing=config.column_spacing)
    return f"## Implemented by {group.contributor} ({group.count})\n\n" + "\n".join(lines) + "\n\n"


def _others_section(groups: Iterable[ContributorGroup], config: PostBuildConfig) -> str:
    remaining = sorted(
        (module, group.contributor)
        for group in groups
        for module in group.modules
    )
    rows = [list(OTHERS_HEADER)] + [list(row) for row in remaining]
    lines = render_table(rows, column_spacing=config.column_spacing, header_rows=1)
    return "## Others\n\n" + "\n".join(lines) + "\n\n"


def generate_contributors_document(
    contributor_to_modules: Mapping[str, Iterable[str]],
    config: Optional[PostBuildConfig] = None,
) -> str:
    """
    Generate the credits document.

    Contributors with more than ``config.major_threshold`` modules get their
    own section ("major"), ordered by module count then name; the rest are
    merged into the "Others" table, one row per module sorted by module name.

    Args:
        contributor_to_modules: Contributor -> module names; each module
            must be credited to exactly one contributor
        config: Layout settings (defaults if None)

    Returns:
        Complete Markdown document
    """
    config = config or PostBuildConfig()
    groups = build_contributor_groups(contributor_to_modules)
    majors = [g for g in groups if g.count > config.major_threshold]
    minors = [g for g in groups if g.count <= config.major_threshold]

    parts = [_intro(config.product_name)]
    parts.extend(_major_section(group, config) for group in majors)
    parts.append(_others_section(minors, config))
    return "".join(parts)


def write_contributors_document(
    path: Path,
    contributor_to_modules: Mapping[str, Iterable[str]],
    config: Optional[PostBuildConfig] = None,
) -> None:
    """Generate the credits document and overwrite ``path`` with it."""
    content = generate_contributors_document(contributor_to_modules, config)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    logger.info(f"Wrote {path} ({len(contributor_to_modules)} contributors)")
