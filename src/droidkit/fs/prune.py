"""Removal helpers: remove_path, remove_dir_if_empty, remove_and_prune_ancestors."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from ..core.paths import ensure_destination_inside, is_path_inside, resolve_under


def rm_rf(path: Path) -> None:
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


def remove_path(root: Path, rel_path: str | Path) -> bool:
    """Remove a file or tree under *root*. Returns False if nothing was there."""
    path = resolve_under(root, rel_path)
    ensure_destination_inside(path, root)
    if not os.path.lexists(path):
        return False
    rm_rf(path)
    return True


def remove_dir_if_empty(path: Path) -> bool:
    if path.is_dir() and not path.is_symlink() and not any(path.iterdir()):
        path.rmdir()
        return True
    return False


def remove_and_prune_ancestors(base_dir: Path, rel_path: str | Path, stopper: str = ".") -> None:
    """Remove *rel_path* under *base_dir*, then every ancestor it leaves empty.

    The walk stops before ``base_dir/stopper``, before ``base_dir`` itself, and at
    the first ancestor that is missing or still has entries.
    """
    target = resolve_under(base_dir, rel_path)
    ensure_destination_inside(target, base_dir)
    if not os.path.lexists(target):
        return

    rm_rf(target)

    base = resolve_under(base_dir, ".")
    stop_at = resolve_under(base_dir, stopper)
    cur = target.parent
    while cur != stop_at and is_path_inside(cur, base):
        if not remove_dir_if_empty(cur):
            break
        cur = cur.parent
