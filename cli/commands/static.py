"""Static file command."""

import click
from pathlib import Path

from runnable_bundle.bundle import BundleError, NotFoundError, read_bundle


@click.command()
@click.argument("bundle_path", type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.argument("file_path")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write the file here instead of stdout")
def static(bundle_path: Path, file_path: str, output: Path):
    """Print a static file from a bundle."""
    try:
        bundle = read_bundle(bundle_path)
        contents = bundle.static_file(file_path)
    except NotFoundError as e:
        click.echo(f"❌ Not found: {e}", err=True)
        raise click.Abort()
    except BundleError as e:
        click.echo(f"❌ Failed to read static file: {e}", err=True)
        raise click.Abort()

    if output:
        output.write_bytes(contents)
        click.echo(f"✅ Wrote {len(contents)} bytes to {output}")
    else:
        click.echo(contents, nl=False)
