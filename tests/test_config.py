"""Tests for bundle settings."""

import zipfile

import pytest
from pydantic import ValidationError

from runnable_bundle.config import BundleSettings, get_settings


class TestBundleSettings:
    def test_defaults(self):
        settings = BundleSettings()
        assert settings.manifest_name == "tenant.yaml"
        assert settings.manifest_aliases == ("tenant.yaml", "tenant.yml")
        assert settings.static_prefix == "static/"
        assert settings.module_extension == ".wasm"
        assert settings.file_mode == 0o777
        assert settings.compression == zipfile.ZIP_DEFLATED

    def test_static_prefix_needs_trailing_slash(self):
        with pytest.raises(ValidationError):
            BundleSettings(static_prefix="static")

    def test_unknown_compression(self):
        with pytest.raises(ValidationError):
            BundleSettings(compression=99)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            BundleSettings().file_mode = 0o600


class TestFromEnv:
    def test_file_mode_is_octal(self, monkeypatch):
        monkeypatch.setenv("RUNNABLE_BUNDLE_FILE_MODE", "644")
        assert BundleSettings().file_mode == 0o644

    def test_compression(self, monkeypatch):
        monkeypatch.setenv("RUNNABLE_BUNDLE_COMPRESSION", "Stored")
        assert BundleSettings().compression == zipfile.ZIP_STORED

    def test_bad_compression(self, monkeypatch):
        monkeypatch.setenv("RUNNABLE_BUNDLE_COMPRESSION", "lzma")
        with pytest.raises(ValidationError):
            BundleSettings()

    def test_bad_file_mode(self, monkeypatch):
        monkeypatch.setenv("RUNNABLE_BUNDLE_FILE_MODE", "rwx")
        with pytest.raises(ValidationError):
            BundleSettings()

    def test_explicit_values_win(self, monkeypatch):
        monkeypatch.setenv("RUNNABLE_BUNDLE_FILE_MODE", "644")
        assert BundleSettings(file_mode=0o600).file_mode == 0o600

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.setenv("RUNNABLE_BUNDLE_FILE_MODE", "600")
        first = get_settings()
        monkeypatch.setenv("RUNNABLE_BUNDLE_FILE_MODE", "644")

        assert get_settings() is first
        assert first.file_mode == 0o600

        get_settings.cache_clear()
        assert get_settings().file_mode == 0o644
