"""Shared fixtures for bundle tests."""

import sys
import warnings
import zipfile
from pathlib import Path
from typing import Iterable, Tuple

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from runnable_bundle.config import get_settings  # noqa: E402

TENANT_YAML = b"""\
identifier: com.example.tenant
tenantVersion: 3
defaultNamespace: default
modules:
  - name: hello
    lang: rust
  - name: goodbye
    lang: tinygo
  - name: worker
    namespace: jobs
    lang: assemblyscript
"""


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def tenant_yaml() -> bytes:
    return TENANT_YAML


@pytest.fixture
def bundle_path(tmp_path) -> Path:
    return tmp_path / "runnables.wasm.zip"


def make_zip(path: Path, entries: Iterable[Tuple[str, bytes]]) -> Path:
    """Write a raw zip archive, duplicates allowed, bypassing the bundle writer."""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        with zipfile.ZipFile(path, "w") as zipf:
            for name, contents in entries:
                zipf.writestr(name, contents)
    return path


def entry_names(path: Path):
    with zipfile.ZipFile(path) as zipf:
        return zipf.namelist()
