"""lib-file - Drop a prebuilt library into app/libs."""

from __future__ import annotations

import posixpath

from ..core.config import InstallOptions
from ..fs import copy_file, remove_path
from ..models import Directive, DirectiveKind, Plugin, Project
from .base import DirectiveHandler, require

LIBS_DIR = "app/libs"


def lib_destination(src: str) -> str:
    return posixpath.join(LIBS_DIR, posixpath.basename(src))


class LibFileHandler(DirectiveHandler):
    kind = DirectiveKind.LIB_FILE

    def install(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        options = options or InstallOptions()
        require(directive, plugin, "src")
        dest = lib_destination(directive.src)
        copy_file(plugin.dir, directive.src, project.project_dir, dest, options.link)

    def uninstall(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        require(directive, plugin, "src")
        remove_path(project.project_dir, lib_destination(directive.src))
