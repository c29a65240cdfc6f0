"""source-file - Copy a native source into the Android app module."""

from __future__ import annotations

from ..core.config import InstallOptions
from ..core.events import events
from ..destinations import is_prunable_source, resolve_source_destination
from ..fs import copy_file, copy_new_file, remove_and_prune_ancestors, remove_path
from ..models import Directive, DirectiveKind, Plugin, Project
from .base import DirectiveHandler, require


class SourceFileHandler(DirectiveHandler):
    kind = DirectiveKind.SOURCE_FILE

    def install(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        options = options or InstallOptions()
        require(directive, plugin, "src", "target_dir")
        dest = resolve_source_destination(directive.target_dir, directive.src)
        copy = copy_file if options.force else copy_new_file
        copy(plugin.dir, directive.src, project.project_dir, dest, options.link)
        events.emit("verbose", f"Installed source file {directive.src} to {dest}")

    def uninstall(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        require(directive, plugin, "src", "target_dir")
        dest = resolve_source_destination(directive.target_dir, directive.src)
        if is_prunable_source(directive.src):
            # package directories (com/example/...) go with their last source
            remove_and_prune_ancestors(project.project_dir, dest, "src")
        else:
            remove_path(project.project_dir, dest)
