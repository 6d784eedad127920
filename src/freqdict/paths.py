from __future__ import annotations

import os
from pathlib import Path

from .errors import PathResolutionError


def resolve_dictionary_path(name: str | os.PathLike[str]) -> Path:
    """
    Turn a dictionary name into an absolute path.

    Absolute names are returned verbatim. Relative names are joined to the
    current working directory at call time and normalized, collapsing
    redundant separators and ``.``/``..`` segments.
    """
    path = Path(name)
    if path.is_absolute():
        return path
    try:
        cwd = os.getcwd()
    except OSError as exc:
        raise PathResolutionError(os.fspath(name), exc) from exc
    return Path(os.path.normpath(os.path.join(cwd, path)))
