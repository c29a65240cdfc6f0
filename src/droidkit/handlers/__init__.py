"""Handler registry: HANDLER_MAP, get_installer() / get_uninstaller()."""

from __future__ import annotations

from collections.abc import Callable

from ..core.config import InstallOptions
from ..core.errors import UnsupportedDirectiveWarning
from ..core.events import events
from ..models import Directive, DirectiveKind, Plugin, Project
from .asset import AssetHandler
from .base import DirectiveHandler
from .framework import FrameworkHandler, resolve_linkage
from .js_module import JsModuleHandler
from .lib_file import LibFileHandler
from .resource_file import ResourceFileHandler
from .source_file import SourceFileHandler

HandlerFn = Callable[[Directive, Plugin, Project, InstallOptions | None], None]

# Kind → handler mapping; one entry per DirectiveKind.
HANDLER_MAP: dict[DirectiveKind, DirectiveHandler] = {
    DirectiveKind.SOURCE_FILE: SourceFileHandler(),
    DirectiveKind.LIB_FILE: LibFileHandler(),
    DirectiveKind.RESOURCE_FILE: ResourceFileHandler(),
    DirectiveKind.FRAMEWORK: FrameworkHandler(),
    DirectiveKind.ASSET: AssetHandler(),
    DirectiveKind.JS_MODULE: JsModuleHandler(),
}


def get_handler(kind: str | DirectiveKind) -> DirectiveHandler | None:
    """Look up the handler for *kind*; unknown kinds are reported and yield None."""
    try:
        handler = HANDLER_MAP.get(DirectiveKind(kind))
    except ValueError:
        handler = None
    if handler is None:
        name = kind.value if isinstance(kind, DirectiveKind) else str(kind)
        events.emit("verbose", str(UnsupportedDirectiveWarning(name)))
    return handler


def get_installer(kind: str | DirectiveKind) -> HandlerFn | None:
    handler = get_handler(kind)
    return handler.install if handler is not None else None


def get_uninstaller(kind: str | DirectiveKind) -> HandlerFn | None:
    handler = get_handler(kind)
    return handler.uninstall if handler is not None else None


__all__ = [
    "HANDLER_MAP",
    "AssetHandler",
    "DirectiveHandler",
    "FrameworkHandler",
    "HandlerFn",
    "JsModuleHandler",
    "LibFileHandler",
    "ResourceFileHandler",
    "SourceFileHandler",
    "get_handler",
    "get_installer",
    "get_uninstaller",
    "resolve_linkage",
]
