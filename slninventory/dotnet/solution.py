"""Locate .sln files and read their project entries (custom text format, not XML)."""

from __future__ import annotations

import logging

from slninventory.config import SOLUTION_PATTERN
from slninventory.filesystem import FileSystem

logger = logging.getLogger(__name__)

# Project("{TYPE-GUID}") = "Name", "Path\To\Project.csproj", "{PROJECT-GUID}"
_PROJECT_MARKER = "Project("


def locate_solution(
    fs: FileSystem, root_path: str, pattern: str = SOLUTION_PATTERN
) -> str | None:
    """Return the absolute path of the solution file in ``root_path``.

    Only the directory itself is searched. When several files match, the
    lexicographically smallest path wins so repeated runs agree.
    """
    matches = sorted(fs.glob(root_path, pattern))
    if not matches:
        return None

    if len(matches) > 1:
        logger.debug(f"Multiple solutions in {root_path}, using {matches[0]}, ignoring {matches[1:]}")

    return fs.full_path(matches[0])


def parse_solution(fs: FileSystem, sln_path: str) -> list[str]:
    """Parse a .sln file and return the absolute paths of its projects.

    Paths keep the order they are declared in, duplicates included. Lines
    that are not project entries, or that carry no path field, are skipped.
    """
    sln_dir = fs.dirname(sln_path)
    paths = []

    for line in fs.read_lines(sln_path):
        if not line.startswith(_PROJECT_MARKER):
            continue

        parts = line.split(",")
        if len(parts) < 2:
            continue

        raw_path = parts[1].strip().strip('"')
        # Normalise path separators
        raw_path = raw_path.replace("\\", fs.sep).replace("/", fs.sep)

        full_path = fs.full_path(fs.combine(sln_dir, raw_path))
        logger.debug(f"Solution project: {raw_path} -> {full_path}")
        paths.append(full_path)

    return paths
