"""CLI entrypoint."""

import click

from runnable_bundle import __version__

from .commands.build import build
from .commands.inspect import inspect
from .commands.static import static


@click.group()
@click.version_option(version=__version__, prog_name="runnable-bundle")
def cli():
    """Runnable bundle CLI - build and inspect Wasm bundles."""
    pass


cli.add_command(build)
cli.add_command(inspect)
cli.add_command(static)


if __name__ == "__main__":
    cli()
