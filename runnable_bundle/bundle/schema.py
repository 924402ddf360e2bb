"""Bundle schema - the resolved, in-memory view of a bundle archive."""

from pathlib import Path
from typing import FrozenSet, List

from loguru import logger
from pydantic import BaseModel, Field

from runnable_bundle.bundle import archive
from runnable_bundle.bundle.errors import CorruptBundleError, PathTraversalError, StaticFileNotFoundError
from runnable_bundle.bundle.paths import ensure_prefix, has_parent_reference, normalize_static_filename
from runnable_bundle.config import BundleSettings
from runnable_bundle.models import ModuleEntry, TenantConfig


class Bundle(BaseModel):
    """A bundle read from disk: tenant config with resolved modules, plus the static file index."""

    source_path: Path
    tenant_config: TenantConfig
    static_files: FrozenSet[str] = Field(default_factory=frozenset)
    settings: BundleSettings = Field(default_factory=BundleSettings, exclude=True)

    model_config = {"frozen": True}

    @property
    def modules(self) -> List[ModuleEntry]:
        return self.tenant_config.modules

    def resolved_modules(self) -> List[ModuleEntry]:
        """Modules that had a Wasm file in the bundle."""
        return [module for module in self.tenant_config.modules if module.wasm_ref is not None]

    def has_static_file(self, file_path: str) -> bool:
        return normalize_static_filename(file_path, self.settings.static_prefix) in self.static_files

    def static_file(self, file_path: str) -> bytes:
        """Return a static file from the bundle.

        The archive is reopened on every call and nothing is cached, so the
        contents reflect the archive on disk at call time. Paths that are not
        in the static index are rejected without opening the archive.

        Raises:
            PathTraversalError: the path contains a ``..`` segment
            StaticFileNotFoundError: the path is not in the bundle's static index
            CorruptBundleError: the path was indexed but the archive no longer has it
            BundleIOError: the archive could not be opened or read
        """
        operation = "read static file"

        # normalize in case the caller added `static/`, `/` or `./` to the filename
        file_path = normalize_static_filename(file_path, self.settings.static_prefix)

        if has_parent_reference(file_path):
            raise PathTraversalError("path escapes the static directory", operation=operation, entry=file_path)

        if file_path not in self.static_files:
            raise StaticFileNotFoundError("static file does not exist", operation=operation, entry=file_path)

        # re-add the static/ prefix; only entries under the static directory are ever read
        static_file_path = ensure_prefix(file_path, self.settings.static_prefix)

        with archive.open_archive(self.source_path, operation=operation) as zipf:
            for info in zipf.infolist():
                if not info.filename.startswith(self.settings.static_prefix):
                    continue
                # entries written as static/./x or static//x are indexed as x
                if normalize_static_filename(info.filename, self.settings.static_prefix) == file_path:
                    logger.debug(f"Serving {info.filename} from {self.source_path}")
                    return archive.read_entry(zipf, info, operation)

        raise CorruptBundleError(
            "static file was indexed but is missing from the bundle", operation=operation, entry=static_file_path
        )
