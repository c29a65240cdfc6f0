"""Guarded copies: copy_file, copy_new_file, symlink_tree."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from ..core.errors import AlreadyExistsError
from ..core.paths import ensure_destination_inside, ensure_source_inside, resolve_under
from .prune import rm_rf


def symlink_tree(src: Path, dest: Path) -> None:
    """Mirror *src* at *dest* as directories of relative symlinks to each file."""
    if os.path.lexists(dest):
        rm_rf(dest)

    if src.is_dir():
        dest.mkdir(parents=True, exist_ok=True)
        for entry in sorted(os.listdir(src)):
            symlink_tree(src / entry, dest / entry)
    else:
        dest.parent.mkdir(parents=True, exist_ok=True)
        link_dir = os.path.realpath(dest.parent)
        os.symlink(os.path.relpath(os.path.realpath(src), link_dir), dest)


def copy_file(
    plugin_dir: Path,
    src: str,
    project_dir: Path,
    dest: str,
    link: bool = False,
) -> Path:
    """Copy (or link) ``plugin_dir/src`` to ``project_dir/dest``. Returns the destination."""
    src_path = resolve_under(plugin_dir, src)
    ensure_source_inside(src_path, plugin_dir)

    dest_path = resolve_under(project_dir, dest)
    ensure_destination_inside(dest_path, project_dir, src=src_path)

    dest_path.parent.mkdir(parents=True, exist_ok=True)
    if link:
        symlink_tree(src_path, dest_path)
    elif src_path.is_dir():
        if os.path.lexists(dest_path):
            rm_rf(dest_path)
        shutil.copytree(src_path, dest_path, symlinks=True)
    else:
        if dest_path.is_symlink():
            dest_path.unlink()
        shutil.copy2(src_path, dest_path)
    return dest_path


def copy_new_file(
    plugin_dir: Path,
    src: str,
    project_dir: Path,
    dest: str,
    link: bool = False,
) -> Path:
    """Same as copy_file but refuses to touch an existing destination."""
    target_path = resolve_under(project_dir, dest)
    if os.path.lexists(target_path):
        raise AlreadyExistsError(target_path)
    return copy_file(plugin_dir, src, project_dir, dest, link)
