"""Filesystem primitives: guarded copy, symlink mirroring, js-module rewriting, pruning."""

from .copy import copy_file, copy_new_file, symlink_tree
from .prune import remove_and_prune_ancestors, remove_dir_if_empty, remove_path, rm_rf
from .rewrite import module_destination, module_id, wrap_module, write_js_module

__all__ = [
    "copy_file",
    "copy_new_file",
    "module_destination",
    "module_id",
    "remove_and_prune_ancestors",
    "remove_dir_if_empty",
    "remove_path",
    "rm_rf",
    "symlink_tree",
    "wrap_module",
    "write_js_module",
]
