"""Tests for bundle error types."""

from runnable_bundle.bundle.errors import (
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


class TestBundleError:
    def test_message_names_operation_and_entry(self):
        err = UnresolvedModuleError("unable to find Runnable for module", operation="read bundle", entry="orphan.wasm")
        assert str(err) == "read bundle: unable to find Runnable for module (entry 'orphan.wasm')"
        assert err.entry == "orphan.wasm"
        assert err.operation == "read bundle"

    def test_cause_included(self):
        cause = OSError("disk full")
        err = BundleIOError("failed to write bundle to disk", operation="write bundle", cause=cause)
        assert err.cause is cause
        assert "disk full" in str(err)

    def test_message_only(self):
        assert str(BundleError("broken")) == "broken"


class TestHierarchy:
    def test_all_are_bundle_errors(self):
        for cls in (
            BundleIOError,
            CorruptBundleError,
            InvalidInputError,
            ManifestDecodeError,
            MissingManifestError,
            NotFoundError,
            UnresolvedModuleError,
        ):
            assert issubclass(cls, BundleError)

    def test_builtin_bases(self):
        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(BundleIOError, OSError)
        assert issubclass(NotFoundError, FileNotFoundError)

    def test_not_found_family(self):
        assert issubclass(StaticFileNotFoundError, NotFoundError)
        assert issubclass(PathTraversalError, NotFoundError)
        assert not issubclass(CorruptBundleError, NotFoundError)
