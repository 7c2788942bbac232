"""Filesystem scan mapping title folders to the pictures they contain."""
from __future__ import annotations

import os
from pathlib import Path


class PictureIndexError(RuntimeError):
    """Raised when the pictures directory cannot be scanned."""


def _raise_walk_error(error: OSError) -> None:
    raise error


def build_picture_index(root: str | Path, suffix: str) -> dict[str, list[str]]:
    """Map each lower-cased top-level folder under ``root`` to its picture names.

    Files are collected at any depth below the folder and matched on ``suffix``
    case-insensitively; the suffix is stripped from the returned names. Files
    sitting directly in ``root`` belong to no title and are skipped.
    """

    root_path = Path(root)
    if not root_path.is_dir():
        raise PictureIndexError(f"pictures directory not found: {root_path}")

    lowered_suffix = suffix.lower()
    index: dict[str, list[str]] = {}
    try:
        for current, dirnames, filenames in os.walk(root_path, onerror=_raise_walk_error):
            dirnames.sort()
            relative = Path(current).relative_to(root_path)
            if not relative.parts:
                continue
            group = relative.parts[0].lower()
            for filename in sorted(filenames):
                if not filename.lower().endswith(lowered_suffix):
                    continue
                index.setdefault(group, []).append(filename[: len(filename) - len(suffix)])
    except OSError as exc:
        raise PictureIndexError(f"failed to scan {root_path}: {exc}") from exc
    return index
