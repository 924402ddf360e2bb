from .errors import (
    BundleError,
    BundleIOError,
    CorruptBundleError,
    InvalidInputError,
    ManifestDecodeError,
    MissingManifestError,
    NotFoundError,
    PathTraversalError,
    StaticFileNotFoundError,
    UnresolvedModuleError,
)
from .paths import EntryKind, classify_entry, ensure_prefix, normalize_static_filename
from .schema import Bundle
from .reader import read_bundle
from .writer import ModuleFile, write_bundle

__all__ = [
    "Bundle",
    "ModuleFile",
    "read_bundle",
    "write_bundle",
    "normalize_static_filename",
    "ensure_prefix",
    "classify_entry",
    "EntryKind",
    "BundleError",
    "BundleIOError",
    "CorruptBundleError",
    "InvalidInputError",
    "ManifestDecodeError",
    "MissingManifestError",
    "NotFoundError",
    "PathTraversalError",
    "StaticFileNotFoundError",
    "UnresolvedModuleError",
]
