"""Runnable bundles: tenant config, compiled Wasm modules and static files in one archive."""

from .bundle import Bundle, ModuleFile, normalize_static_filename, read_bundle, write_bundle
from .config import BundleSettings, get_settings
from .models import ModuleEntry, TenantConfig, WasmModuleRef

__version__ = "1.0.0"

__all__ = [
    "Bundle",
    "ModuleFile",
    "read_bundle",
    "write_bundle",
    "normalize_static_filename",
    "BundleSettings",
    "get_settings",
    "TenantConfig",
    "ModuleEntry",
    "WasmModuleRef",
]
