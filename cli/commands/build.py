"""Build command."""

import click
from pathlib import Path
from typing import Dict, Tuple

from runnable_bundle.bundle import BundleError, ModuleFile, write_bundle


def collect_static_files(static_dir: Path) -> Dict[str, Path]:
    """Map every file under static_dir to its path relative to static_dir."""
    return {
        path.relative_to(static_dir).as_posix(): path
        for path in sorted(static_dir.rglob("*"))
        if path.is_file()
    }


@click.command()
@click.argument("tenant_config", type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.option(
    "--module",
    "modules",
    multiple=True,
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Compiled Wasm module to include (repeatable)",
)
@click.option(
    "--static-dir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    help="Directory whose files are added under static/",
)
@click.option("--output", "-o", required=True, type=click.Path(path_type=Path), help="Bundle file to write")
def build(tenant_config: Path, modules: Tuple[Path, ...], static_dir: Path, output: Path):
    """Build a bundle from a tenant config, Wasm modules and static files."""
    click.echo(f"📦 Building bundle: {output}")

    static_files = collect_static_files(static_dir) if static_dir else {}

    try:
        write_bundle(
            tenant_config.read_bytes(),
            [ModuleFile(path.name, path) for path in modules],
            static_files,
            output,
        )
    except (BundleError, OSError) as e:
        click.echo(f"❌ Build failed: {e}", err=True)
        raise click.Abort()

    click.echo(f"  Modules: {len(modules)}")
    click.echo(f"  Static files: {len(static_files)}")
    click.echo(f"✅ Bundle created: {output}")
