import zipfile
from pathlib import Path
from typing import Callable, Optional, Set

from loguru import logger

from runnable_bundle.bundle import archive
from runnable_bundle.bundle.archive import PathLike
from runnable_bundle.bundle.errors import ManifestDecodeError, MissingManifestError, UnresolvedModuleError
from runnable_bundle.bundle.paths import EntryKind, classify_entry, normalize_static_filename
from runnable_bundle.bundle.schema import Bundle
from runnable_bundle.config import BundleSettings, get_settings
from runnable_bundle.models import TenantConfig, WasmModuleRef

TenantConfigDecoder = Callable[[bytes], TenantConfig]


def read_bundle(
    path: PathLike,
    decoder: Optional[TenantConfigDecoder] = None,
    settings: Optional[BundleSettings] = None,
) -> Bundle:
    """Read a bundle file and resolve its Wasm modules against its tenant config.

    The tenant config is located and decoded first, since every module entry
    is resolved against it regardless of where it sits in the archive. Every
    module entry must match a module declared by the tenant config; static
    files are only indexed here and read later by Bundle.static_file.

    Raises:
        BundleIOError: the archive or one of its entries could not be read
        MissingManifestError: the archive has no tenant.yaml
        ManifestDecodeError: tenant.yaml could not be decoded
        UnresolvedModuleError: a module entry has no matching module in the tenant config
    """
    settings = settings or get_settings()
    decoder = decoder or TenantConfig.from_yaml
    path = Path(path)
    operation = "read bundle"

    with archive.open_archive(path, operation=operation) as zipf:
        entries = zipf.infolist()

        # first, find the tenant config
        tenant_config = None
        for info in entries:
            if info.filename == settings.manifest_name:
                tenant_config = _read_tenant_config(zipf, info, decoder)
                break

        if tenant_config is None:
            raise MissingManifestError(
                f"bundle is missing {settings.manifest_name}", operation=operation, entry=str(path)
            )

        module_index = tenant_config.module_index()
        static_files: Set[str] = set()

        for info in entries:
            kind = classify_entry(
                info.filename,
                manifest_name=settings.manifest_name,
                static_prefix=settings.static_prefix,
                module_extension=settings.module_extension,
            )

            if kind is EntryKind.MANIFEST:
                continue
            elif kind is EntryKind.STATIC:
                # index static files for quick reference later; contents are read on demand
                static_files.add(normalize_static_filename(info.filename, settings.static_prefix))
                continue
            elif kind is EntryKind.IGNORED:
                logger.debug(f"Ignoring unrecognized bundle entry {info.filename}")
                continue

            _resolve_module(zipf, info, module_index, settings, operation)

    bundle = Bundle(
        source_path=path,
        tenant_config=tenant_config,
        static_files=frozenset(static_files),
        settings=settings,
    )

    logger.info(
        f"Read bundle {path}: {len(bundle.resolved_modules())} modules, {len(bundle.static_files)} static files"
    )
    return bundle


def _read_tenant_config(zipf: zipfile.ZipFile, info: zipfile.ZipInfo, decoder: TenantConfigDecoder) -> TenantConfig:
    operation = "read tenant config"
    tenant_config_bytes = archive.read_entry(zipf, info, operation)

    try:
        tenant_config = decoder(tenant_config_bytes)
    except Exception as e:
        raise ManifestDecodeError("failed to decode tenant config", operation=operation, entry=info.filename, cause=e) from e

    if tenant_config is None:
        raise ManifestDecodeError("tenant config decoded to nothing", operation=operation, entry=info.filename)

    return tenant_config


def _resolve_module(zipf, info, module_index, settings: BundleSettings, operation: str) -> None:
    """Read a module entry and attach it to its module in the tenant config."""
    wasm_bytes = archive.read_entry(zipf, info, operation)

    module_name = info.filename[: -len(settings.module_extension)]
    module = module_index.get(module_name)
    if module is None:
        raise UnresolvedModuleError("unable to find Runnable for module", operation=operation, entry=info.filename)

    module.wasm_ref = WasmModuleRef.new(info.filename, module.fqmn, wasm_bytes)
    logger.debug(f"Resolved {info.filename} to {module.fqmn}")
