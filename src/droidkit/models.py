"""Directive data models: DirectiveKind, Directive, Plugin, Project, FrameworkLinkage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


class DirectiveKind(str, Enum):
    SOURCE_FILE = "source-file"
    LIB_FILE = "lib-file"
    RESOURCE_FILE = "resource-file"
    FRAMEWORK = "framework"
    ASSET = "asset"
    JS_MODULE = "js-module"


class FrameworkType(str, Enum):
    GRADLE_REFERENCE = "gradleReference"
    SYS = "sys"
    SUBPROJECT = "subproject"


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


@dataclass(frozen=True)
class Directive:
    """One resource a plugin asks to have installed. Read-only."""

    kind: DirectiveKind
    src: str = ""
    target: str = ""
    target_dir: str = ""
    name: str = ""
    # framework-only
    parent: str = ""
    custom: bool = False
    type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Directive:
        """Build from parsed element attributes (``targetDir``, ``target-dir`` ...)."""
        target_dir = data.get("targetDir", data.get("target-dir", data.get("target_dir", "")))
        return cls(
            kind=DirectiveKind(data["kind"]),
            src=data.get("src") or "",
            target=data.get("target") or "",
            target_dir=target_dir or "",
            name=data.get("name") or "",
            parent=data.get("parent") or "",
            custom=_to_bool(data.get("custom", False)),
            type=data.get("type") or "",
        )


@dataclass(frozen=True)
class Plugin:
    """The plugin supplying directives. ``dir`` is the trusted source root."""

    id: str
    dir: Path


@runtime_checkable
class Project(Protocol):
    """Install target. Linkage operations are implemented by the caller."""

    project_dir: Path
    www: Path
    platform_www: Path

    def add_gradle_reference(self, parent_dir: Path, sub_dir: str) -> None: ...
    def remove_gradle_reference(self, parent_dir: Path, sub_dir: str) -> None: ...
    def add_system_library(self, parent_dir: Path, sub_dir: str) -> None: ...
    def remove_system_library(self, parent_dir: Path, sub_dir: str) -> None: ...
    def add_subproject(self, parent_dir: Path, sub_dir: str) -> None: ...
    def remove_subproject(self, parent_dir: Path, sub_dir: str) -> None: ...
    def get_custom_subproject_relative_dir(self, plugin_id: str, src: str) -> str: ...


@dataclass(frozen=True)
class FrameworkLinkage:
    """Effective framework directive, shared by install and uninstall."""

    parent_dir: Path
    sub_dir: str
    type: FrameworkType
    custom_dir: Path | None = None  # copied subproject, custom frameworks only
    custom_relative_dir: str = ""
