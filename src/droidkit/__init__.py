"""droidkit: install and uninstall plugin directives into an Android project."""

from .core.config import InstallOptions, load_options
from .core.errors import (
    AlreadyExistsError,
    ConfigurationError,
    InstallError,
    PathEscapeError,
    SourceNotFoundError,
    UnsupportedDirectiveWarning,
)
from .core.events import events
from .destinations import resolve_source_destination
from .handlers import get_installer, get_uninstaller
from .models import Directive, DirectiveKind, FrameworkType, Plugin, Project

__version__ = "0.1.0"

__all__ = [
    "AlreadyExistsError",
    "ConfigurationError",
    "Directive",
    "DirectiveKind",
    "FrameworkType",
    "InstallError",
    "InstallOptions",
    "PathEscapeError",
    "Plugin",
    "Project",
    "SourceNotFoundError",
    "UnsupportedDirectiveWarning",
    "events",
    "get_installer",
    "get_uninstaller",
    "load_options",
    "resolve_source_destination",
]
