"""Filesystem walking: collect every file and directory under a root.

The walk is a single top-down pass.  Entries are partitioned into files and
directories in the order they are discovered; nothing is renamed here.
"""

from __future__ import annotations

import enum
import os
from collections.abc import Callable
from pathlib import Path


class EntryKind(enum.Enum):
    """Classification of a filesystem entry."""

    FILE = "file"
    DIRECTORY = "directory"


class DirectoryAccessError(OSError):
    """The root directory of a walk could not be opened."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(cause.errno, f"Cannot access directory {path}: {cause.strerror or cause}")
        self.path: Path = path
        self.cause: OSError = cause


def collect(
    root: Path,
    *,
    on_inaccessible: Callable[[Path, OSError], None] | None = None,
) -> tuple[list[Path], list[Path]]:
    """Walk *root* recursively and return ``(files, directories)``.

    Every entry appears in exactly one of the two lists, in discovery order.
    A directory is always discovered after its parent.  Symbolic links to
    directories are listed as directories but not descended into; any other
    non-directory entry (including broken links) counts as a file.

    Subdirectories that cannot be listed are still collected themselves, but
    their contents are skipped and *on_inaccessible* is called with the path
    and the error.

    Raises:
        DirectoryAccessError: If *root* itself cannot be opened.
    """
    files: list[Path] = []
    directories: list[Path] = []
    root_fspath = os.fspath(root)

    def _on_error(exc: OSError) -> None:
        failed = exc.filename
        if failed is None or os.fspath(failed) == root_fspath:
            raise DirectoryAccessError(root, exc) from exc
        if on_inaccessible is not None:
            on_inaccessible(Path(failed), exc)

    for dirpath_str, dirnames, filenames in os.walk(root, topdown=True, onerror=_on_error):
        dirpath = Path(dirpath_str)

        for dname in dirnames:
            directories.append(dirpath / dname)

        for fname in filenames:
            files.append(dirpath / fname)

    return files, directories
