"""Inspect command."""

import click
from pathlib import Path

from runnable_bundle.bundle import BundleError, read_bundle


@click.command()
@click.argument("bundle_path", type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
def inspect(bundle_path: Path):
    """Read a bundle and list its modules and static files."""
    try:
        bundle = read_bundle(bundle_path)
    except BundleError as e:
        click.echo(f"❌ Invalid bundle: {e}", err=True)
        raise click.Abort()

    config = bundle.tenant_config
    click.echo(f"🔍 {bundle_path.name}")
    click.echo(f"   Tenant: {config.identifier} (version {config.tenant_version})")

    click.echo(f"   Modules: {len(config.modules)}")
    for module in config.modules:
        if module.wasm_ref is not None:
            click.echo(f"     {module.fqmn}  {len(module.wasm_ref)} bytes")
        else:
            click.echo(f"     {module.fqmn}  (not in bundle)")

    click.echo(f"   Static files: {len(bundle.static_files)}")
    for file_path in sorted(bundle.static_files):
        click.echo(f"     {file_path}")
