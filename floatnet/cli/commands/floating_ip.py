"""
Floating IP commands.
"""

import typer

from floatnet.clients import get_neutron_client
from floatnet.networks import check_floating_ip, find_free_floating_ip

app = typer.Typer(help="Floating IP lookups")


@app.command()
def check(
    ctx: typer.Context,
    floating_ip_id: str = typer.Argument(..., help="Floating IP UUID"),
):
    """
    Check that a floating IP exists and is not associated with a port.
    """
    try:
        client = get_neutron_client(ctx.obj)
        fip = check_floating_ip(client, floating_ip_id)
        typer.echo(f"{fip.id} {fip.floating_ip_address or ''}".rstrip())
    except Exception as e:
        typer.echo(f"Error checking floating IP: {e}", err=True)
        raise typer.Exit(1)


@app.command("find-free")
def find_free(ctx: typer.Context):
    """
    Find the first floating IP that is not associated with a port.
    """
    try:
        client = get_neutron_client(ctx.obj)
        fip = find_free_floating_ip(client)
        typer.echo(f"{fip.id} {fip.floating_ip_address or ''}".rstrip())
    except Exception as e:
        typer.echo(f"Error finding free floating IP: {e}", err=True)
        raise typer.Exit(1)
