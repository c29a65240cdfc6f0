"""resource-file - Copy a resource under app/src/main."""

from __future__ import annotations

import posixpath

from ..core.config import InstallOptions
from ..destinations import APP_MAIN_PREFIX
from ..fs import copy_file, remove_path
from ..models import Directive, DirectiveKind, Plugin, Project
from .base import DirectiveHandler, require


def resource_destination(target: str) -> str:
    return posixpath.join(APP_MAIN_PREFIX, target)


class ResourceFileHandler(DirectiveHandler):
    kind = DirectiveKind.RESOURCE_FILE

    def install(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        options = options or InstallOptions()
        require(directive, plugin, "src", "target")
        copy_file(
            plugin.dir,
            directive.src,
            project.project_dir,
            resource_destination(directive.target),
            options.link,
        )

    def uninstall(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        require(directive, plugin, "target")
        remove_path(project.project_dir, resource_destination(directive.target))
