"""Enumerate the files currently present in the working tree."""

from __future__ import annotations

import os
from pathlib import Path

_METADATA_DIR = ".git"


def list_target_files(root: str | Path) -> tuple[str, ...]:
    """Return every regular file under ``root`` as a sorted POSIX relative path.

    Hidden files are included; the ``.git`` entry at the root is not.
    Symlinked directories are not followed. A symlink to a file counts as a
    file, matching what ``git`` tracks.
    """
    root = Path(root)
    found: list[str] = []

    for dirpath, dirnames, filenames in os.walk(root):
        at_root = Path(dirpath) == root
        if at_root and _METADATA_DIR in dirnames:
            dirnames.remove(_METADATA_DIR)
        for name in filenames:
            if at_root and name == _METADATA_DIR:
                # worktree or submodule pointer file
                continue
            full = os.path.join(dirpath, name)
            if os.path.isfile(full):
                found.append(Path(full).relative_to(root).as_posix())

    return tuple(sorted(found))
