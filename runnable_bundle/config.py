"""Bundle settings."""

import zipfile
from functools import lru_cache
from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

COMPRESSION_METHODS = {
    "deflated": zipfile.ZIP_DEFLATED,
    "stored": zipfile.ZIP_STORED,
}


class BundleSettings(BaseSettings):
    """Naming and output rules shared by the bundle writer and reader.

    Every field can be overridden from the environment with the
    ``RUNNABLE_BUNDLE_`` prefix:
    - RUNNABLE_BUNDLE_FILE_MODE: octal permission bits, e.g. ``644``
    - RUNNABLE_BUNDLE_COMPRESSION: ``deflated`` or ``stored``
    """

    manifest_name: str = Field(default="tenant.yaml")
    manifest_aliases: Tuple[str, ...] = Field(
        default=("tenant.yaml", "tenant.yml"),
        description="Module names that are never written because they would shadow the manifest",
    )
    static_prefix: str = Field(default="static/")
    module_extension: str = Field(default=".wasm")
    # Bundles are build artifacts; the process umask still applies.
    file_mode: int = Field(default=0o777)
    compression: int = Field(default=zipfile.ZIP_DEFLATED)

    model_config = SettingsConfigDict(env_prefix="RUNNABLE_BUNDLE_", frozen=True)

    @field_validator("static_prefix")
    @classmethod
    def _prefix_ends_with_slash(cls, value: str) -> str:
        if not value.endswith("/"):
            raise ValueError("static_prefix must end with '/'")
        return value

    @field_validator("file_mode", mode="before")
    @classmethod
    def _parse_octal_mode(cls, value):
        if isinstance(value, str):
            return int(value, 8)
        return value

    @field_validator("compression", mode="before")
    @classmethod
    def _parse_compression_name(cls, value):
        if isinstance(value, str):
            try:
                return COMPRESSION_METHODS[value.lower()]
            except KeyError:
                raise ValueError(f"compression must be one of {', '.join(COMPRESSION_METHODS)}, got {value!r}")
        if value not in COMPRESSION_METHODS.values():
            raise ValueError(f"unsupported compression method {value}")
        return value


@lru_cache
def get_settings() -> BundleSettings:
    """Get cached settings instance."""
    return BundleSettings()
