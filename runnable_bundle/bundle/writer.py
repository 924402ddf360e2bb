import os
from pathlib import Path
from typing import IO, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

from loguru import logger

from runnable_bundle.bundle.archive import PathLike, build_archive
from runnable_bundle.bundle.errors import BundleIOError, InvalidInputError
from runnable_bundle.bundle.paths import normalize_static_filename
from runnable_bundle.config import BundleSettings, get_settings

Content = Union[bytes, bytearray, IO[bytes], Path]


class ModuleFile(NamedTuple):
    """A compiled module to place in a bundle."""

    name: str
    content: Content


ModuleInput = Union[ModuleFile, Tuple[str, Content], Path]


def write_bundle(
    tenant_config_bytes: Optional[bytes],
    modules: Iterable[ModuleInput],
    static_files: Optional[Mapping[str, Content]],
    target_path: PathLike,
    settings: Optional[BundleSettings] = None,
) -> Path:
    """Write a runnable bundle to target_path.

    The archive is assembled in memory and written to disk in a single write,
    so a failure never leaves a partial bundle behind.

    Args:
        tenant_config_bytes: encoded tenant.yaml, required
        modules: compiled modules, stored under their base name
        static_files: *relative* paths mapped to contents, with or without the ``static/`` prefix
        target_path: where to write the bundle
        settings: naming and output rules, defaults to get_settings()

    Returns:
        The path the bundle was written to
    """
    settings = settings or get_settings()
    target_path = Path(target_path)

    if not tenant_config_bytes:
        raise InvalidInputError("tenant config must be provided", operation="write bundle")

    entries: List[Tuple[str, bytes]] = [(settings.manifest_name, bytes(tenant_config_bytes))]

    for module in modules:
        name, content = _module_name_and_content(module)

        if Path(name).name in settings.manifest_aliases:
            # only allow the canonical tenant config that's passed in
            logger.warning(f"Skipping module {name}: name is reserved for the tenant config")
            continue

        entries.append((Path(name).name, _read_content(name, content)))

    for path, content in (static_files or {}).items():
        # stored under the normalized name, so ./x, /x and static/x all land on static/x
        file_name = settings.static_prefix + normalize_static_filename(path, settings.static_prefix)
        entries.append((file_name, _read_content(path, content)))

    archive_bytes = build_archive(entries, settings.compression)
    _commit(target_path, archive_bytes, settings.file_mode)

    logger.info(f"Wrote bundle {target_path} ({len(entries)} entries, {len(archive_bytes)} bytes)")
    return target_path


def _module_name_and_content(module: ModuleInput) -> Tuple[str, Content]:
    if isinstance(module, Path):
        return str(module), module
    name, content = module
    return str(name), content


def _read_content(name: str, content: Content) -> bytes:
    """Read bytes from an in-memory buffer, a binary file object or a path."""
    try:
        if isinstance(content, (bytes, bytearray)):
            return bytes(content)
        if isinstance(content, Path):
            return content.read_bytes()
        return content.read()
    except OSError as e:
        raise BundleIOError("failed to read file", operation="write bundle", entry=name, cause=e) from e


def _commit(target_path: Path, data: bytes, mode: int) -> None:
    """Write the finished archive next to target_path, then move it into place.

    The bundle is always a freshly created file, so ``mode`` (minus the umask)
    applies on rebuilds too, and target_path never holds a partial archive.
    """
    tmp_path = target_path.with_name(f".{target_path.name}.{os.getpid()}.tmp")

    try:
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
    except OSError as e:
        raise BundleIOError(
            "failed to write bundle to disk", operation="write bundle", entry=str(target_path), cause=e
        ) from e

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_path, target_path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise BundleIOError(
            "failed to write bundle to disk", operation="write bundle", entry=str(target_path), cause=e
        ) from e
