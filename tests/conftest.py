"""Shared fixtures: an in-memory filesystem bound to the FileSystem protocol."""

from __future__ import annotations

import fnmatch
import io
import ntpath
import posixpath

import pytest


class MemoryFileSystem:
    """FileSystem holding POSIX-style absolute paths mapped to text content."""

    sep = "/"
    pathmod = posixpath

    def __init__(self, files: dict[str, str] | None = None, cwd: str = "/") -> None:
        self.cwd = cwd
        self.files: dict[str, str] = {}
        self.opened: list[str] = []
        for path, content in (files or {}).items():
            self.add_file(path, content)

    def add_file(self, path: str, content: str) -> None:
        self.files[self.full_path(path)] = content

    def glob(self, directory: str, pattern: str) -> list[str]:
        directory = self.full_path(directory)
        return [
            p for p in self.files
            if self.pathmod.dirname(p) == directory
            and fnmatch.fnmatchcase(self.pathmod.basename(p), pattern)
        ]

    def exists(self, path: str) -> bool:
        return self.full_path(path) in self.files

    def read_lines(self, path: str) -> list[str]:
        try:
            return self.files[self.full_path(path)].splitlines()
        except KeyError:
            raise FileNotFoundError(path) from None

    def open_binary(self, path: str) -> io.BytesIO:
        try:
            content = self.files[self.full_path(path)]
        except KeyError:
            raise FileNotFoundError(path) from None
        self.opened.append(path)
        return io.BytesIO(content.encode("utf-8"))

    def full_path(self, path: str) -> str:
        return self.pathmod.normpath(self.pathmod.join(self.cwd, path))

    def combine(self, *parts: str) -> str:
        return self.pathmod.join(*parts)

    def dirname(self, path: str) -> str:
        return self.pathmod.dirname(path)

    def basename(self, path: str) -> str:
        return self.pathmod.basename(path)


class WindowsMemoryFileSystem(MemoryFileSystem):
    """MemoryFileSystem with Windows path rules and a drive-letter root."""

    sep = "\\"
    pathmod = ntpath

    def __init__(self, files: dict[str, str] | None = None, cwd: str = "C:\\") -> None:
        super().__init__(files, cwd)


class RecordingLogger:
    """Logging capability that keeps every (level, message) it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[int, str]] = []

    def log(self, level: int, msg: str) -> None:
        self.events.append((level, msg))


SDK_PROJECT = """\
<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <OutputType>Exe</OutputType>
    <TargetFramework>net9.0</TargetFramework>
  </PropertyGroup>
  <ItemGroup>
    <PackageReference Include="Microsoft.NET.Test.Sdk" Version="17.12.0" />
  </ItemGroup>
  <ItemGroup>
    <ProjectReference Include="../Proj2/Proj2.csproj" />
  </ItemGroup>
</Project>
"""

LEGACY_PROJECT = """\
<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="15.0" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <PropertyGroup>
    <OutputType>Library</OutputType>
    <AssemblyName>Legacy.Core</AssemblyName>
    <TargetFrameworkVersion>v4.7.2</TargetFrameworkVersion>
    <LangVersion>7.3</LangVersion>
  </PropertyGroup>
  <ItemGroup>
    <PackageReference Include="Newtonsoft.Json">
      <Version>13.0.3</Version>
    </PackageReference>
  </ItemGroup>
  <ItemGroup>
    <ProjectReference Include="..\\Shared\\Shared.csproj">
      <Project>{5B7D5A3E-0000-4C3B-9F1A-000000000001}</Project>
    </ProjectReference>
  </ItemGroup>
</Project>
"""

LIBRARY_PROJECT = """\
<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFramework>net9.0</TargetFramework>
  </PropertyGroup>
</Project>
"""


def solution_text(*entries: tuple[str, str]) -> str:
    """Build a .sln body declaring ``(name, relative_path)`` projects."""
    lines = [
        "Microsoft Visual Studio Solution File, Format Version 12.00",
        "# Visual Studio Version 17",
    ]
    for i, (name, path) in enumerate(entries, start=1):
        lines.append(
            f'Project("{{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}}") = "{name}", "{path}", '
            f'"{{00000000-0000-0000-0000-{i:012d}}}"'
        )
        lines.append("EndProject")
    lines += ["Global", "EndGlobal"]
    return "\n".join(lines) + "\n"


@pytest.fixture
def memfs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
