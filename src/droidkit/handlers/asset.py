"""asset - Copy a web asset into www (and platform_www)."""

from __future__ import annotations

from ..core.config import InstallOptions
from ..core.errors import ConfigurationError
from ..core.paths import ensure_destination_inside, resolve_under
from ..fs import copy_file, remove_and_prune_ancestors
from ..models import Directive, DirectiveKind, Plugin, Project
from .base import DirectiveHandler, require, web_roots


class AssetHandler(DirectiveHandler):
    kind = DirectiveKind.ASSET

    def install(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        options = options or InstallOptions()
        require(directive, plugin, "src", "target")
        roots = web_roots(project, options)
        for root in roots:
            ensure_destination_inside(resolve_under(root, directive.target), root)
        # Assets are always copied; linking into www is not supported.
        for root in roots:
            copy_file(plugin.dir, directive.src, root, directive.target)

    def uninstall(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        options = options or InstallOptions()
        target = directive.target or directive.src
        if not target:
            raise ConfigurationError("target", directive.kind.value, plugin.id)
        for root in web_roots(project, options):
            remove_and_prune_ancestors(root, target)
