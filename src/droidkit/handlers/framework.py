"""framework - Link a library project, gradle reference or system library.

Custom frameworks ship their sources with the plugin and are copied into a
plugin-scoped subproject directory before being linked. Anything else names a
system library (e.g. a Maven coordinate) and is passed through verbatim.
"""

from __future__ import annotations

from pathlib import Path

from ..core.config import InstallOptions
from ..core.events import events
from ..core.paths import is_path_inside, resolve_under
from ..fs import copy_file, copy_new_file, remove_dir_if_empty, remove_path
from ..models import Directive, DirectiveKind, FrameworkLinkage, FrameworkType, Plugin, Project
from .base import DirectiveHandler, require


def resolve_linkage(directive: Directive, plugin: Plugin, project: Project) -> FrameworkLinkage:
    """Work out where and how a framework is linked. Same answer for install and uninstall."""
    project_dir = Path(project.project_dir)
    if directive.parent:
        parent_dir = resolve_under(project_dir, directive.parent)
    else:
        parent_dir = project_dir

    if not directive.custom:
        return FrameworkLinkage(parent_dir=parent_dir, sub_dir=directive.src, type=FrameworkType.SYS)

    rel_dir = project.get_custom_subproject_relative_dir(plugin.id, directive.src)
    custom_dir = resolve_under(project_dir, rel_dir)
    try:
        link_type = FrameworkType(directive.type)
    except ValueError:
        link_type = FrameworkType.SUBPROJECT
    return FrameworkLinkage(
        parent_dir=parent_dir,
        sub_dir=str(custom_dir),
        type=link_type,
        custom_dir=custom_dir,
        custom_relative_dir=rel_dir,
    )


class FrameworkHandler(DirectiveHandler):
    kind = DirectiveKind.FRAMEWORK

    def install(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        options = options or InstallOptions()
        require(directive, plugin, "src")
        events.emit("verbose", f"Installing Android library: {directive.src}")

        linkage = resolve_linkage(directive, plugin, project)
        if linkage.custom_dir is not None:
            copy = copy_file if options.force else copy_new_file
            copy(
                plugin.dir,
                directive.src,
                project.project_dir,
                linkage.custom_relative_dir,
                options.link,
            )

        if linkage.type is FrameworkType.GRADLE_REFERENCE:
            project.add_gradle_reference(linkage.parent_dir, linkage.sub_dir)
        elif linkage.type is FrameworkType.SYS:
            project.add_system_library(linkage.parent_dir, linkage.sub_dir)
        else:
            project.add_subproject(linkage.parent_dir, linkage.sub_dir)

    def uninstall(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        require(directive, plugin, "src")
        events.emit("verbose", f"Uninstalling Android library: {directive.src}")

        linkage = resolve_linkage(directive, plugin, project)
        if linkage.custom_dir is not None:
            remove_path(project.project_dir, linkage.custom_relative_dir)
            # last framework of the plugin takes the plugin's directory with it
            plugin_frameworks_dir = linkage.custom_dir.parent
            if is_path_inside(plugin_frameworks_dir, project.project_dir):
                remove_dir_if_empty(plugin_frameworks_dir)

        if linkage.type is FrameworkType.GRADLE_REFERENCE:
            project.remove_gradle_reference(linkage.parent_dir, linkage.sub_dir)
        elif linkage.type is FrameworkType.SYS:
            project.remove_system_library(linkage.parent_dir, linkage.sub_dir)
        else:
            project.remove_subproject(linkage.parent_dir, linkage.sub_dir)
