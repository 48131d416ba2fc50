"""
Module: contributors

Purpose:
    ContributorGroup: the modules credited to one author, in the order the
    credits document lists them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class ContributorGroup:
    """
    Modules implemented by a single contributor.

    Attributes:
        contributor: Author name
        modules: Module names, sorted alphabetically
    """

    contributor: str
    modules: tuple[str, ...]

    @classmethod
    def from_modules(cls, contributor: str, modules: Iterable[str]) -> ContributorGroup:
        return cls(contributor=contributor, modules=tuple(sorted(set(modules))))

    @property
    def count(self) -> int:
        return len(self.modules)
