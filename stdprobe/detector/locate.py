"""Upward directory search for build artifacts and project roots."""

import os
from collections.abc import Iterator, Sequence
from pathlib import Path

# Files and directories that mark the top of a C/C++ project, in priority order
ROOT_MARKERS: tuple[str, ...] = (
    "compile_commands.json",
    "compile_flags.txt",
    ".clangd",
    ".git",
    "CMakeLists.txt",
    "Makefile",
)


def _start_directory(start: Path | str) -> Path:
    """Normalize a search start point to an absolute directory path."""
    path = Path(os.path.abspath(os.path.expanduser(str(start))))
    if path.is_file():
        return path.parent
    return path


def iter_ancestors(start: Path | str) -> Iterator[Path]:
    """Yield the start directory followed by each of its parents up to the root."""
    directory = _start_directory(start)
    yield directory
    yield from directory.parents


def _exists(path: Path, *, file_only: bool) -> bool:
    try:
        return path.is_file() if file_only else path.exists()
    except OSError:
        return False


def find_nearest(file_name: str, start: Path | str) -> Path | None:
    """Find the nearest file with the given name at or above ``start``.

    The walk stops at the first directory containing a regular file named
    ``file_name``.

    Args:
        file_name: Name of the file to look for.
        start: Directory (or file) to start searching from.

    Returns:
        Path to the nearest matching file, or None if no ancestor has one.
    """
    for directory in iter_ancestors(start):
        candidate = directory / file_name
        if _exists(candidate, file_only=True):
            return candidate
    return None


def find_project_root(
    start: Path | str,
    markers: Sequence[str] = ROOT_MARKERS,
) -> Path | None:
    """Find the nearest directory at or above ``start`` holding a root marker.

    Args:
        start: Directory (or file) to start searching from.
        markers: Marker names; any one of them identifies a root.

    Returns:
        The project root directory, or None if no marker is found.
    """
    for directory in iter_ancestors(start):
        for marker in markers:
            if _exists(directory / marker, file_only=False):
                return directory
    return None
