"""Solution inventory orchestrator."""

from __future__ import annotations

import logging
import os
import time
from typing import Any, Protocol

from slninventory.config import SOLUTION_PATTERN, InventoryConfig, SolutionResult
from slninventory.dotnet.project import ProjectParseError, parse_project
from slninventory.dotnet.solution import locate_solution, parse_solution
from slninventory.filesystem import FileSystem, LocalFileSystem
from slninventory.graph.project_graph import build_project_graph
from slninventory.output import build_output


class SupportsLog(Protocol):
    def log(self, level: int, msg: str) -> None:
        ...


class Inventory:
    """Reads the solution in a directory and every project it declares.

    Projects are parsed one at a time in solution order. A project that is
    missing on disk or whose markup fails to parse is logged and skipped;
    the rest of the run continues and earlier records are left untouched.
    """

    def __init__(
        self,
        fs: FileSystem,
        logger: SupportsLog | None = None,
        solution_pattern: str = SOLUTION_PATTERN,
    ) -> None:
        self.fs = fs
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.solution_pattern = solution_pattern

    def start(self, root_path: str) -> SolutionResult:
        """Inventory the solution found in ``root_path``.

        ``~`` and environment variables in ``root_path`` are expanded.

        Raises:
            ValueError: ``root_path`` is empty.
        """
        if not root_path:
            raise ValueError("root_path must be a non-empty directory path")

        root = os.path.expanduser(os.path.expandvars(root_path))
        result = SolutionResult()

        sln_path = locate_solution(self.fs, root, self.solution_pattern)
        if sln_path is None:
            self.logger.log(logging.WARNING, f"No solution (.sln) file found in {root}")
            return result

        result.solution_path = sln_path
        self.logger.log(logging.INFO, f"Reading solution: {self.fs.basename(sln_path)}")

        for project_path in parse_solution(self.fs, sln_path):
            self.logger.log(logging.INFO, f"Project: {self.fs.basename(project_path)}")

            if not self.fs.exists(project_path):
                self.logger.log(logging.WARNING, f"Project file not found: {project_path}")
                continue

            try:
                record = parse_project(self.fs, project_path)
            except ProjectParseError as e:
                self.logger.log(logging.WARNING, f"Failed to parse project {e.path}: {e.reason}")
                continue

            result.projects.append(record)

        return result


def run_inventory(config: InventoryConfig, fs: FileSystem | None = None) -> dict[str, Any]:
    """Run the inventory for ``config.root_path`` and return the output document."""
    inventory = Inventory(fs or LocalFileSystem(), solution_pattern=config.solution_pattern)

    start = time.monotonic()
    result = inventory.start(config.root_path)
    graph = build_project_graph(result)
    total_ms = (time.monotonic() - start) * 1000

    return build_output(config, result, graph, total_ms)
