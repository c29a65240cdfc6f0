"""Path containment checks for every filesystem mutation."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import PathEscapeError, SourceNotFoundError


def resolve_under(root: str | Path, path: str | Path) -> Path:
    """Join *path* onto *root* and normalize ``..`` without touching the filesystem."""
    return Path(os.path.abspath(os.path.join(root, path)))


def is_path_inside(child: str | Path, parent: str | Path) -> bool:
    """True if *child* is strictly below *parent* (both absolute)."""
    child = Path(os.path.abspath(child))
    parent = Path(os.path.abspath(parent))
    return child != parent and parent in child.parents


def real_location(path: str | Path) -> Path:
    """Resolve symlinks in the directories leading to *path*, not in *path* itself.

    The destination may not exist yet, so the deepest existing ancestor is
    realpath'd and the missing remainder re-attached.
    """
    path = Path(os.path.abspath(path))
    anchor = path.parent
    missing: list[str] = []
    while not anchor.exists() and anchor != anchor.parent:
        missing.append(anchor.name)
        anchor = anchor.parent
    real = Path(os.path.realpath(anchor))
    for name in reversed(missing):
        real = real / name
    return real / path.name


def ensure_source_inside(src: Path, root: Path, plugin_id: str | None = None) -> Path:
    """Check *src* exists and its real location is inside the real *root*."""
    if not os.path.exists(src):
        raise SourceNotFoundError(src, plugin_id)
    real_src = Path(os.path.realpath(src))
    real_root = Path(os.path.realpath(root))
    if not is_path_inside(real_src, real_root):
        raise PathEscapeError(
            f'File "{src}" is located outside the plugin directory "{root}"', src, root
        )
    return real_src


def ensure_destination_inside(dest: Path, root: Path, src: Path | None = None) -> Path:
    """Check *dest* (existing or not) lands inside *root* once links are resolved."""
    real_root = Path(os.path.realpath(root))
    if not is_path_inside(real_location(dest), real_root):
        if src is not None:
            message = f'Destination "{dest}" for source file "{src}" is located outside the project'
        else:
            message = f'Destination "{dest}" is located outside "{root}"'
        raise PathEscapeError(message, dest, root)
    return dest
