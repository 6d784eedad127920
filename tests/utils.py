from __future__ import annotations

from pathlib import Path


def write_dictionary(
    path: Path, lines: list[str], bom: bool = False, encoding: str = "utf-8"
) -> Path:
    """Write dictionary lines to ``path``, optionally prefixed with a byte-order mark."""
    body = "\n".join(lines) + "\n"
    if bom:
        body = "\ufeff" + body
    path.write_text(body, encoding=encoding)
    return path
