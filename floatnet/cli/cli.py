#!/usr/bin/env python3
"""
Main CLI entry point using Typer.
"""

import sys
from typing import List, Optional

import typer
from oslo_log import log as logging

from floatnet.cli.commands import floating_ip, instance, network
from floatnet.configuration import PROJECT, load_config

app = typer.Typer(
    name="floatnet",
    help="Floating IP association lookups for OpenStack clouds",
    add_completion=False,
)

# Add command groups
app.add_typer(floating_ip.app, name="floating-ip", help="Floating IP lookups")
app.add_typer(instance.app, name="instance", help="Instance port lookups")
app.add_typer(network.app, name="network", help="Network lookups")


@app.callback()
def configure(
    ctx: typer.Context,
    config_file: Optional[List[str]] = typer.Option(
        None, "--config-file", help="Configuration file (may be repeated)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    Load configuration and set up logging for all commands.
    """
    conf = load_config(config_files=config_file or None, args=["--debug"] if debug else [])
    logging.setup(conf, PROJECT)
    ctx.obj = conf


def main() -> int:
    """Main entry point."""
    try:
        app()
        return 0
    except KeyboardInterrupt:
        typer.echo("\nOperation cancelled by user", err=True)
        return 130
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
