"""DirectiveHandler base class and the helpers every handler shares."""

from __future__ import annotations

from pathlib import Path

from ..core.config import InstallOptions
from ..core.errors import ConfigurationError
from ..models import Directive, DirectiveKind, Plugin, Project

# Attribute names as they appear in plugin.xml.
_XML_NAMES = {"target_dir": "target-dir"}


def require(directive: Directive, plugin: Plugin, *attributes: str) -> None:
    """Raise ConfigurationError for the first missing attribute."""
    for attr in attributes:
        if not getattr(directive, attr):
            raise ConfigurationError(
                _XML_NAMES.get(attr, attr), directive.kind.value, plugin.id
            )


def web_roots(project: Project, options: InstallOptions) -> list[Path]:
    """``www``, plus ``platform_www`` when assets are mirrored into both."""
    roots = [Path(project.www)]
    if options.use_platform_www:
        roots.append(Path(project.platform_www))
    return roots


class DirectiveHandler:
    """Install/uninstall pair for one directive kind."""

    kind: DirectiveKind

    def install(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        raise NotImplementedError

    def uninstall(
        self,
        directive: Directive,
        plugin: Plugin,
        project: Project,
        options: InstallOptions | None = None,
    ) -> None:
        raise NotImplementedError
