"""
Instance commands.
"""

from typing import Optional

import typer

from floatnet.clients import get_nova_client
from floatnet.networks import get_instance_port_id

app = typer.Typer(help="Instance port lookups")


@app.command()
def port(
    ctx: typer.Context,
    instance_id: str = typer.Argument(..., help="Server UUID"),
    network: Optional[str] = typer.Option(
        None, "--network", help="Preferred network UUID (default: instance_float_net from config)"
    ),
):
    """
    Show the instance port used for floating IP association.
    """
    try:
        preferred = network or ctx.obj.floatnet.instance_float_net or ""
        client = get_nova_client(ctx.obj)
        typer.echo(get_instance_port_id(client, instance_id, preferred))
    except Exception as e:
        typer.echo(f"Error resolving instance port: {e}", err=True)
        raise typer.Exit(1)
