"""
Minimal smoke test for the bundle package.
Tests that basic imports and a write/read cycle work.
"""

import sys
import tempfile
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

TENANT_YAML = b"""
identifier: com.example.smoke
tenantVersion: 1
modules:
  - name: hello
    lang: rust
"""


def test_imports():
    """Test that all basic imports work"""
    from runnable_bundle import Bundle, TenantConfig, read_bundle, write_bundle
    from runnable_bundle.bundle import normalize_static_filename
    from runnable_bundle.config import BundleSettings

    assert BundleSettings().static_prefix == "static/"


def test_write_and_read():
    """Test a bundle survives a write/read cycle"""
    from runnable_bundle import read_bundle, write_bundle

    with tempfile.TemporaryDirectory() as tmp:
        target = Path(tmp) / "runnables.wasm.zip"
        write_bundle(TENANT_YAML, [("hello.wasm", b"\x00asm")], {"index.html": b"<h1>hi</h1>"}, target)

        bundle = read_bundle(target)
        assert bundle.tenant_config.identifier == "com.example.smoke"
        assert bundle.tenant_config.modules[0].wasm_ref.data == b"\x00asm"
        assert bundle.static_file("/index.html") == b"<h1>hi</h1>"


if __name__ == "__main__":
    print("🧪 Running smoke tests for runnable_bundle...\n")

    results = []
    for name, test in [("Imports", test_imports), ("Write/Read", test_write_and_read)]:
        try:
            test()
            print(f"✅ {name}")
            results.append(True)
        except Exception as e:
            print(f"❌ {name} failed: {e}")
            import traceback

            traceback.print_exc()
            results.append(False)

    print("=" * 50)
    print(f"Results: {sum(results)}/{len(results)} tests passed")
    sys.exit(0 if all(results) else 1)
