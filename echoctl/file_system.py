"""File and directory helpers: existence checks, copying, sizes and scanning."""

from __future__ import annotations

import os
import re
import shutil
import sys
from enum import IntFlag

_SEPARATORS = ("\\", "/") if sys.platform == "win32" else ("/",)


class ScanMode(IntFlag):
    """What :func:`scandir` reports: regular files, directories or both."""

    FILE = 1
    DIR = 2


def is_file(path: str | os.PathLike) -> bool:
    """True if ``path`` is an existing regular file."""
    return os.path.isfile(path)


def is_directory(path: str | os.PathLike) -> bool:
    """True if ``path`` is an existing directory."""
    return os.path.isdir(path)


def exists(path: str | os.PathLike) -> bool:
    """True if ``path`` is an existing regular file or directory."""
    return os.path.isfile(path) or os.path.isdir(path)


def create_directory(path: str | os.PathLike) -> None:
    """Create ``path`` and any missing parents; raises OSError on failure."""
    os.makedirs(path, mode=0o775, exist_ok=True)


def delete_directory(path: str | os.PathLike) -> None:
    """Remove a directory and everything below it."""
    if not os.path.isdir(path):
        if os.path.exists(path):
            raise NotADirectoryError(f"not a directory: {os.fspath(path)}")
        raise FileNotFoundError(f"no such directory: {os.fspath(path)}")
    shutil.rmtree(path)


def copy_file(src: str | os.PathLike, dst: str | os.PathLike) -> None:
    """Copy the bytes of ``src`` to ``dst``; raises OSError on failure."""
    shutil.copyfile(src, dst)


def change_current_directory(path: str | os.PathLike) -> None:
    """Change the working directory; raises OSError on failure."""
    os.chdir(path)


def _last_separator(path: str) -> int:
    return max(path.rfind(sep) for sep in _SEPARATORS)


def get_dir(file_path: str) -> str:
    """Return the part of ``file_path`` up to and including its last separator."""
    return file_path[: _last_separator(file_path) + 1]


def executable_path() -> str:
    """Path of the running interpreter's executable."""
    return sys.executable or ""


def executable_directory() -> str:
    """Directory of :func:`executable_path`, ending with a separator."""
    return get_dir(executable_path())


def absolute_path(path: str | os.PathLike) -> str:
    """Canonical absolute path of an existing file or directory."""
    if not exists(path):
        raise FileNotFoundError(f"no such file or directory: {os.fspath(path)}")
    return os.path.realpath(path)


def format_directory(path: str, slash: bool) -> str:
    """Add (``slash`` true) or remove a trailing separator."""
    if not path:
        return path
    has_slash = path[-1] in _SEPARATORS
    if slash and not has_slash:
        return path + "/"
    if not slash and has_slash:
        return path[:-1]
    return path


def _require_existing(path: str | os.PathLike) -> None:
    if not exists(path):
        raise FileNotFoundError(f"no such file or directory: {os.fspath(path)}")


def disk_total(path: str | os.PathLike) -> int:
    """Total size in bytes of the file system holding ``path``."""
    _require_existing(path)
    return shutil.disk_usage(path).total


def disk_free(path: str | os.PathLike) -> int:
    """Bytes available to unprivileged users on the file system holding ``path``."""
    _require_existing(path)
    return shutil.disk_usage(path).free


def file_size(path: str | os.PathLike) -> int:
    """Size of a file in bytes; raises OSError if it cannot be opened."""
    with open(path, "rb") as fh:
        return fh.seek(0, os.SEEK_END)


def directory_size(
    path: str | os.PathLike, max_depth: int = 0, pattern: str | None = None
) -> int:
    """Total size of the files found by :func:`scandir` below ``path``."""
    if not os.path.isdir(path):
        raise NotADirectoryError(f"not a directory: {os.fspath(path)}")
    total = 0
    for name in scandir(path, ScanMode.FILE, max_depth, False, pattern):
        try:
            size = file_size(name)
        except OSError:
            continue
        if size > 0:
            total += size
    return total


def _scan(root: str, mode: ScanMode, max_depth: int, name_only: bool, regex) -> list[str]:
    results: list[str] = []
    if not os.path.isdir(root):
        return results
    base = root if root[-1] in ("\\", "/") else root + "/"
    try:
        entries = sorted(os.scandir(base), key=lambda e: e.name)
    except OSError:
        return results
    for entry in entries:
        full = base + entry.name
        if entry.is_dir(follow_symlinks=False):
            found = bool(mode & ScanMode.DIR)
            if max_depth:
                results.extend(_scan(full, mode, max_depth - 1, name_only, regex))
        elif entry.is_file(follow_symlinks=False):
            found = bool(mode & ScanMode.FILE)
        else:
            continue
        if not found:
            continue
        if regex is not None and regex.fullmatch(entry.name) is None:
            continue
        results.append(entry.name if name_only else full)
    return results


def scandir(
    path: str | os.PathLike,
    mode: ScanMode | int,
    max_depth: int = 0,
    name_only: bool = True,
    pattern: str | None = None,
) -> list[str]:
    """List files and/or directories below ``path``.

    Subdirectories are entered down to ``max_depth`` levels; their contents come
    before the subdirectory itself. ``pattern`` must match a whole entry name.
    A missing directory yields an empty list.
    """
    regex = re.compile(pattern) if pattern else None
    return _scan(os.fspath(path), ScanMode(mode), max_depth, name_only, regex)