"""js-module - Wrap a plugin script in cordova.define and write it to www/plugins."""

from __future__ import annotations

from ..core.config import InstallOptions
from ..fs import module_destination, remove_and_prune_ancestors, write_js_module
from ..models import Directive, DirectiveKind, Plugin, Project
from .base import DirectiveHandler, require, web_roots


class JsModuleHandler(DirectiveHandler):
    kind = DirectiveKind.JS_MODULE

    def install(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        options = options or InstallOptions()
        require(directive, plugin, "src")
        write_js_module(
            plugin.dir,
            plugin.id,
            directive.src,
            web_roots(project, options),
            name=directive.name,
        )

    def uninstall(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        options = options or InstallOptions()
        require(directive, plugin, "src")
        rel_path = module_destination(plugin.id, directive.src)
        for root in web_roots(project, options):
            remove_and_prune_ancestors(root, rel_path)
