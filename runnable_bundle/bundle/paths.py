"""Archive entry naming rules and static path normalization."""

from enum import Enum

STATIC_PREFIX = "static/"


class EntryKind(str, Enum):
    """What an archive entry is, judged by its name alone."""

    MANIFEST = "manifest"
    MODULE = "module"
    STATIC = "static"
    IGNORED = "ignored"


def ensure_prefix(value: str, prefix: str) -> str:
    if value.startswith(prefix):
        return value
    return f"{prefix}{value}"


def strip_prefix(value: str, prefix: str) -> str:
    if value.startswith(prefix):
        return value[len(prefix):]
    return value


def normalize_static_filename(file_name: str, static_prefix: str = STATIC_PREFIX) -> str:
    """Normalize the variations of a static filename to the key used in a bundle's static index.

    ``static/foo.txt``, ``/foo.txt``, ``./foo.txt`` and ``foo.txt`` all become
    ``foo.txt``. Each prefix is stripped at most once, in that order.
    """
    without_static = strip_prefix(file_name, static_prefix)
    without_leading_slash = strip_prefix(without_static, "/")
    without_dot_slash = strip_prefix(without_leading_slash, "./")

    return without_dot_slash


def has_parent_reference(path: str) -> bool:
    """True if any segment of the path is ``..``."""
    return ".." in path.replace("\\", "/").split("/")


def classify_entry(
    name: str,
    manifest_name: str = "tenant.yaml",
    static_prefix: str = STATIC_PREFIX,
    module_extension: str = ".wasm",
) -> EntryKind:
    """Classify an archive entry name.

    The static check runs before the module check, so ``static/x.wasm`` is a
    static asset, not a module.
    """
    if name == manifest_name:
        return EntryKind.MANIFEST
    if name.endswith("/"):
        # zip directory entry
        return EntryKind.IGNORED
    if name.startswith(static_prefix):
        return EntryKind.STATIC
    if name.endswith(module_extension):
        return EntryKind.MODULE
    return EntryKind.IGNORED
