"""Top-level package for simple-record.

Immutable records over an arbitrary payload, with read-only fields,
derived fields and copy-with-overrides.
"""

from .core import (
    FieldNotFound,
    ImmutableViolation,
    Record,
    RecordError,
    RecordOptions,
    derived,
)


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("simple-record")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = [
    "__version__",
    "Record",
    "RecordOptions",
    "derived",
    "RecordError",
    "FieldNotFound",
    "ImmutableViolation",
]
