"""Top-level package for the Exam Archive Browser.

Provides subpackages:
- exam_archive.core – exam records, catalog and selection models
- exam_archive.fetching – JSON resource fetching with retry
- exam_archive.loading – catalog and translation loaders
- exam_archive.i18n – localization store
- exam_archive.query – filter options and query engine
- exam_archive.gui – PySide6 browser window
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            for line in pyproject.read_text().splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import version as pkg_version, PackageNotFoundError

    try:
        return pkg_version("exam-archive-browser")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
