"""js-module rewriting: module_id, wrap_module, write_js_module."""

from __future__ import annotations

import posixpath
from collections.abc import Iterable
from pathlib import Path

from ..core.paths import ensure_destination_inside, ensure_source_inside, resolve_under

BOM = "\ufeff"

DATA_SUFFIXES = (".json",)


def module_id(plugin_id: str, src: str, name: str = "") -> str:
    """``<plugin id>.<name>``; name defaults to the source file stem."""
    if not name:
        name = posixpath.splitext(posixpath.basename(src))[0]
    return f"{plugin_id}.{name}"


def wrap_module(content: str, module_name: str, is_data: bool = False) -> str:
    if content.startswith(BOM):
        content = content[len(BOM) :]
    if is_data:
        content = "module.exports = " + content
    return (
        f'cordova.define("{module_name}", function(require, exports, module) {{\n'
        f"{content}\n"
        "});\n"
    )


def module_destination(plugin_id: str, src: str) -> str:
    return posixpath.join("plugins", plugin_id, src)


def write_js_module(
    plugin_dir: Path,
    plugin_id: str,
    src: str,
    web_roots: Iterable[Path],
    name: str = "",
) -> list[Path]:
    """Wrap ``plugin_dir/src`` and write it under each web root. Returns written paths."""
    roots = list(web_roots)
    source = resolve_under(plugin_dir, src)
    ensure_source_inside(source, plugin_dir, plugin_id)

    rel_dest = module_destination(plugin_id, src)
    dests = [resolve_under(root, rel_dest) for root in roots]
    for root, dest in zip(roots, dests):
        ensure_destination_inside(dest, root, src=source)

    content = wrap_module(
        source.read_bytes().decode("utf-8", errors="replace"),
        module_id(plugin_id, src, name),
        is_data=src.endswith(DATA_SUFFIXES),
    )
    for dest in dests:
        dest.parent.mkdir(parents=True, exist_ok=True)
        # never write through a link left at the destination
        if dest.is_symlink():
            dest.unlink()
        with open(dest, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    return dests
