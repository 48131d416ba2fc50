"""Top-level package for the Souvenir post-build tool.

Provides subpackages:
- souvenir_postbuild.core – data models, literal escaping, catalog schema
- souvenir_postbuild.catalog – module catalog reader and prior-translation parser
- souvenir_postbuild.translations – translation merge, codegen and region splicing
- souvenir_postbuild.contributors – CONTRIBUTORS.md table generator
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "2.0.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("souvenir-postbuild")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 the Souvenir post-build tool authors"
__all__: list[str] = ["__version__"]
