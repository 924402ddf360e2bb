"""Bundle error taxonomy.

Every failure raised while writing, reading or serving from a bundle derives
from ``BundleError`` and names the operation and, where there is one, the
archive entry involved.
"""

from typing import Optional


class BundleError(Exception):
    """Base class for bundle failures."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        entry: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.operation = operation
        self.entry = entry
        self.cause = cause
        super().__init__(self._format())

    def _format(self) -> str:
        text = self.message
        if self.entry:
            text = f"{text} (entry {self.entry!r})"
        if self.operation:
            text = f"{self.operation}: {text}"
        if self.cause is not None:
            text = f"{text}: {self.cause}"
        return text


class InvalidInputError(BundleError, ValueError):
    """Caller supplied unusable input, e.g. empty tenant config bytes."""


class BundleIOError(BundleError, OSError):
    """Underlying storage or zip container failure."""


class ManifestDecodeError(BundleError):
    """tenant.yaml exists but could not be decoded."""


class MissingManifestError(BundleError):
    """The archive has no tenant.yaml entry."""


class UnresolvedModuleError(BundleError):
    """A module entry has no matching module in the tenant config."""


class CorruptBundleError(BundleError):
    """The archive disagrees with what was indexed when it was loaded."""


class NotFoundError(BundleError, FileNotFoundError):
    """Requested static file is not available from the bundle."""


class StaticFileNotFoundError(NotFoundError):
    """Requested static file is not in the bundle's static index."""


class PathTraversalError(NotFoundError):
    """Requested static path tries to leave the static directory."""
