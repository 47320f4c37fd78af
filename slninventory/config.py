"""Core data types and configuration for solution inventory."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SOLUTION_PATTERN = "*.sln"


@dataclass
class PackageRecord:
    """A <PackageReference> declared by a project file."""
    name: str | None = None
    version: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "version": self.version}


@dataclass
class ProjectRecord:
    """Build metadata parsed from a single project file.

    ``None`` marks a property the project does not declare; an empty string
    means the element is present with no content.
    """
    path: str
    sdk: str | None = None
    target_framework: str | None = None
    output_type: str | None = None
    assembly_name: str | None = None
    lang_version: str | None = None
    packages: list[PackageRecord] = field(default_factory=list)
    project_references: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "sdk": self.sdk,
            "target_framework": self.target_framework,
            "output_type": self.output_type,
            "assembly_name": self.assembly_name,
            "lang_version": self.lang_version,
            "packages": [p.to_dict() for p in self.packages],
            "project_references": list(self.project_references),
        }


@dataclass
class SolutionResult:
    """The solution file and every project it declares that exists on disk."""
    solution_path: str = ""
    projects: list[ProjectRecord] = field(default_factory=list)

    def project_paths(self) -> list[str]:
        return [p.path for p in self.projects]

    def to_dict(self) -> dict[str, Any]:
        return {
            "solution_path": self.solution_path,
            "projects": [p.to_dict() for p in self.projects],
        }


@dataclass
class InventoryConfig:
    root_path: str = ""
    output_path: str | None = None
    solution_pattern: str = SOLUTION_PATTERN
    verbose: bool = False
    quiet: bool = False
