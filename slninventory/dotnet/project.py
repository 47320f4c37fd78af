"""Parse .csproj/.vbproj files (XML with MSBuild schema)."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from slninventory.config import PackageRecord, ProjectRecord
from slninventory.filesystem import FileSystem

logger = logging.getLogger(__name__)

_PARENT_DIR = ".."

# Candidate element names per property, in priority order
_TARGET_FRAMEWORK_NAMES = ("TargetFramework", "TargetFrameworks", "TargetFrameworkVersion")


class ProjectParseError(Exception):
    """Raised when a project file cannot be read or is not well-formed XML."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def _namespace(root: ET.Element) -> str:
    """Return the root element's namespace in ``{uri}`` form, or ``""``.

    SDK-style projects have no namespace; legacy projects declare the
    MSBuild schema as the default namespace.
    """
    if root.tag.startswith("{"):
        return root.tag.split("}")[0] + "}"
    return ""


def _descendants(root: ET.Element, tag: str) -> Iterator[ET.Element]:
    for elem in root.iter(tag):
        if elem is not root:
            yield elem


def _first_value(root: ET.Element, ns: str, *names: str) -> str | None:
    """Text of the first descendant matching any of ``names``, tried in order."""
    for name in names:
        elem = next(_descendants(root, f"{ns}{name}"), None)
        if elem is not None:
            return "".join(elem.itertext())
    return None


def _package_version(elem: ET.Element, ns: str) -> str | None:
    version = elem.get("Version")
    if version is None:
        # Extension: legacy projects may put Version in a child element
        ver_elem = elem.find(f"{ns}Version")
        if ver_elem is not None:
            version = "".join(ver_elem.itertext())
    return version


def resolve_project_reference(fs: FileSystem, project_path: str, include: str) -> str:
    """Resolve a <ProjectReference Include="..."> value to an absolute path.

    A value starting with ``..`` has every leading ``..`` segment dropped and
    the remainder is joined to the parent of the project's directory, so
    ``../../Lib/Lib.csproj`` resolves the same as ``../Lib/Lib.csproj``.
    Anything else is resolved against the project's directory.
    """
    include = include.replace("\\", fs.sep).replace("/", fs.sep)
    project_dir = fs.dirname(project_path)

    if include.startswith(_PARENT_DIR):
        segments = include.split(fs.sep)
        while segments and segments[0] in (_PARENT_DIR, ""):
            segments.pop(0)
        remainder = fs.sep.join(segments)
        return fs.full_path(fs.combine(fs.dirname(project_dir), remainder))

    return fs.full_path(fs.combine(project_dir, include))


def parse_project(fs: FileSystem, project_path: str) -> ProjectRecord:
    """Parse a .csproj/.vbproj file and return its build metadata.

    Handles both SDK-style and legacy project formats.

    Raises:
        ProjectParseError: the file cannot be read or is malformed.
    """
    try:
        with fs.open_binary(project_path) as f:
            tree = ET.parse(f)
    except ET.ParseError as e:
        raise ProjectParseError(project_path, f"malformed XML ({e})") from e
    except OSError as e:
        raise ProjectParseError(project_path, f"unreadable ({e})") from e

    root = tree.getroot()
    ns = _namespace(root)

    record = ProjectRecord(
        path=project_path,
        sdk=root.get("Sdk"),
        target_framework=_first_value(root, ns, *_TARGET_FRAMEWORK_NAMES),
        output_type=_first_value(root, ns, "OutputType"),
        assembly_name=_first_value(root, ns, "AssemblyName"),
        lang_version=_first_value(root, ns, "LangVersion"),
    )

    for pkg in _descendants(root, f"{ns}PackageReference"):
        record.packages.append(PackageRecord(
            name=pkg.get("Include"),
            version=_package_version(pkg, ns),
        ))

    for ref in _descendants(root, f"{ns}ProjectReference"):
        include = ref.get("Include")
        if not include:
            logger.debug(f"Skipping ProjectReference without Include in {project_path}")
            continue
        resolved = resolve_project_reference(fs, project_path, include)
        if resolved:
            record.project_references.append(resolved)

    return record
