"""Scoped access to the zip container backing a bundle."""

import io
import zipfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from .errors import BundleIOError

PathLike = Union[str, Path]

# Fixed timestamp so identical inputs produce identical bundle bytes.
ENTRY_DATE_TIME = (1980, 1, 1, 0, 0, 0)


@contextmanager
def open_archive(path: PathLike, operation: str = "open bundle") -> Iterator[zipfile.ZipFile]:
    """Open a bundle for reading; the handle is closed when the block exits."""
    try:
        archive = zipfile.ZipFile(path, "r")
    except (OSError, zipfile.BadZipFile) as e:
        raise BundleIOError("failed to open bundle", operation=operation, entry=str(path), cause=e) from e

    with archive:
        yield archive


def read_entry(archive: zipfile.ZipFile, info: zipfile.ZipInfo, operation: str) -> bytes:
    """Read an entry's full contents."""
    try:
        with archive.open(info) as f:
            return f.read()
    except (OSError, zipfile.BadZipFile, RuntimeError) as e:
        raise BundleIOError("failed to read entry", operation=operation, entry=info.filename, cause=e) from e


def build_archive(entries: List[Tuple[str, bytes]], compression: int) -> bytes:
    """Assemble entries into zip bytes in memory, in the given order."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression) as zipf:
        for name, contents in entries:
            try:
                info = zipfile.ZipInfo(name, date_time=ENTRY_DATE_TIME)
                info.compress_type = compression
                info.external_attr = 0o644 << 16
                zipf.writestr(info, contents)
            except (OSError, ValueError, zipfile.LargeZipFile) as e:
                raise BundleIOError(
                    "failed to add file to bundle", operation="write bundle", entry=name, cause=e
                ) from e
    return buf.getvalue()
