"""Filesystem capability consumed by the solution and project parsers."""

from __future__ import annotations

import glob
import os
from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the read-only filesystem operations the inventory needs.

    Production code binds :class:`LocalFileSystem`; tests bind an in-memory
    implementation.
    """

    sep: str

    def glob(self, directory: str, pattern: str) -> list[str]:
        """Return paths of files in ``directory`` matching ``pattern`` (non-recursive)."""
        ...

    def exists(self, path: str) -> bool:
        """Return True if ``path`` is an existing file."""
        ...

    def read_lines(self, path: str) -> list[str]:
        """Read a text file fully and return its lines without terminators."""
        ...

    def open_binary(self, path: str) -> BinaryIO:
        """Open a file for streamed markup parsing."""
        ...

    def full_path(self, path: str) -> str:
        """Return the absolute, normalised form of ``path``."""
        ...

    def combine(self, *parts: str) -> str:
        ...

    def dirname(self, path: str) -> str:
        ...

    def basename(self, path: str) -> str:
        ...


class LocalFileSystem:
    """FileSystem backed by the real disk."""

    sep = os.sep

    def glob(self, directory: str, pattern: str) -> list[str]:
        matches = glob.glob(os.path.join(glob.escape(directory), pattern))
        return [m for m in matches if os.path.isfile(m)]

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def read_lines(self, path: str) -> list[str]:
        # utf-8-sig: Visual Studio writes solution files with a BOM. Legacy
        # ANSI bytes are replaced rather than failing the whole run.
        with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
            return f.read().splitlines()

    def open_binary(self, path: str) -> BinaryIO:
        return open(path, "rb")

    def full_path(self, path: str) -> str:
        return os.path.abspath(path)

    def combine(self, *parts: str) -> str:
        return os.path.join(*parts)

    def dirname(self, path: str) -> str:
        return os.path.dirname(path)

    def basename(self, path: str) -> str:
        return os.path.basename(path)
