"""Permission and existence checks on paths."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def is_folder_readable(path: PathLike) -> bool:
    """Tell whether the current user may read path."""
    return os.access(path, os.R_OK)


def is_folder_writable(path: PathLike) -> bool:
    """Tell whether the current user may write path."""
    return os.access(path, os.W_OK)


def is_folder_readable_and_writable(path: PathLike) -> bool:
    """Tell whether the current user may both read and write path."""
    return is_folder_readable(path) and is_folder_writable(path)


def exists_file(path: PathLike) -> bool:
    """Tell whether path exists."""
    return Path(path).exists()