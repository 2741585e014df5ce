"""Helpers for working with the bundled HMRC rate documents."""

from __future__ import annotations

from pathlib import Path
from typing import Final

__all__ = ["DEFAULT_DATA_DIR", "BUNDLED_PATTERN", "bundled_rate_files"]

# Resolved so callers get an absolute path regardless of the working directory
# or whether the package is installed in site-packages.
DEFAULT_DATA_DIR: Final[Path] = Path(__file__).resolve().parent
BUNDLED_PATTERN: Final[str] = "exrates-monthly-*.xml"


def bundled_rate_files(data_dir: Path = DEFAULT_DATA_DIR) -> list[Path]:
    """Return the packaged ``exrates-monthly-MMYY.xml`` files, sorted by name."""

    return sorted(path for path in data_dir.glob(BUNDLED_PATTERN) if path.is_file())
