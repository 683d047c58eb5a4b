"""Utility helpers for file persistence."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from tempfile import NamedTemporaryFile


def ensure_file_with_template(path: Path, *, template_provider: Callable[[], object]) -> bool:
    """Create ``path`` using the supplied template when it does not exist.

    Args:
        path: Target file to create.
        template_provider: Callable returning the file contents to write.

    Returns:
        bool: ``True`` when the file was created, ``False`` if it already existed.
    """

    if path.exists():
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    content = template_provider()
    if not isinstance(content, str):
        raise TypeError("Template provider must return a string")

    _ = path.write_text(content, encoding="utf-8")
    return True


def write_text_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` so readers never see a partial file."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile(
        "w", encoding="utf-8", delete=False, dir=str(path.parent), suffix=".tmp"
    ) as tmp:
        _ = tmp.write(content)
        tmp.flush()
        os.fsync(tmp.fileno())
        temp_name = tmp.name
    try:
        os.replace(temp_name, path)
    except OSError:
        Path(temp_name).unlink(missing_ok=True)
        raise


__all__ = ["ensure_file_with_template", "write_text_atomic"]
