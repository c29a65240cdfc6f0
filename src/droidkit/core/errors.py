"""Install errors: InstallError and its subclasses, UnsupportedDirectiveWarning."""

from __future__ import annotations

from pathlib import Path


class InstallError(Exception):
    """Error while installing or uninstalling a plugin directive."""

    def __init__(self, message: str, plugin_id: str | None = None):
        self.plugin_id = plugin_id
        super().__init__(message)


class ConfigurationError(InstallError):
    """A required directive attribute is missing."""

    def __init__(self, attribute: str, kind: str, plugin_id: str):
        self.attribute = attribute
        self.kind = kind
        super().__init__(
            f'Required attribute "{attribute}" not specified in <{kind}> element '
            f"from plugin: {plugin_id}",
            plugin_id,
        )


class SourceNotFoundError(InstallError):
    def __init__(self, path: Path, plugin_id: str | None = None):
        self.path = path
        super().__init__(f'"{path}" not found!', plugin_id)


class PathEscapeError(InstallError):
    """A source or destination resolved outside its trusted root."""

    def __init__(self, message: str, path: Path, root: Path):
        self.path = path
        self.root = root
        super().__init__(message)


class AlreadyExistsError(InstallError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f'"{path}" already exists!')


class UnsupportedDirectiveWarning(UserWarning):
    """Directive kind with no handler. Reported, never raised."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"<{kind}> is not supported for android plugins")
