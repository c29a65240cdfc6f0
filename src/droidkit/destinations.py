"""Source-file destinations: FileCategory, classify, resolve_source_destination.

Plugins written before the ``app/src/main`` restructure target directories
such as ``src/com/example`` or ``libs/armeabi``. Those are mapped onto the
current layout; any ``target-dir`` already starting with ``app`` is used as-is.
"""

from __future__ import annotations

import posixpath
import re
from enum import Enum

APP_MAIN_PREFIX = "app/src/main"

_APP_RE = re.compile(r"^app(/|$)")
_LIBS_RE = re.compile(r"^libs(/|$)")
_SRC_RE = re.compile(r"^src(/|$)")
_SRC_MAIN_RE = re.compile(r"^src/main(/|$)")

# Sources whose removal should also prune the package directories above them.
PRUNABLE_SOURCE_SUFFIXES = (".java", ".kt")


class FileCategory(Enum):
    COMPILED_SOURCE = ".java"
    INTERFACE_DEFINITION = ".aidl"
    NATIVE_LIBRARY = ".so"
    OTHER = ""


def classify(src: str) -> FileCategory:
    for category in FileCategory:
        if category.value and src.endswith(category.value):
            return category
    return FileCategory.OTHER


def is_prunable_source(src: str) -> bool:
    return src.endswith(PRUNABLE_SOURCE_SUFFIXES)


def _join(*parts: str) -> str:
    return posixpath.normpath(posixpath.join(*parts))


def resolve_source_destination(target_dir: str, src: str) -> str:
    """Project-relative POSIX path a ``<source-file>`` is installed to."""
    basename = posixpath.basename(src)

    if _APP_RE.match(target_dir):
        return _join(target_dir, basename)

    category = classify(src)
    if category is FileCategory.COMPILED_SOURCE:
        return _join(APP_MAIN_PREFIX, "java", _SRC_RE.sub("", target_dir), basename)
    if category is FileCategory.INTERFACE_DEFINITION:
        return _join(APP_MAIN_PREFIX, "aidl", _SRC_RE.sub("", target_dir), basename)
    if _LIBS_RE.match(target_dir):
        if category is FileCategory.NATIVE_LIBRARY:
            return _join(APP_MAIN_PREFIX, "jniLibs", _LIBS_RE.sub("", target_dir), basename)
        return _join("app", target_dir, basename)
    if _SRC_MAIN_RE.match(target_dir):
        return _join("app", target_dir, basename)

    return _join(APP_MAIN_PREFIX, target_dir, basename)
