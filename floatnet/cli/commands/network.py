"""
Network commands.
"""

from typing import List, Optional

import typer

from floatnet.clients import get_neutron_client
from floatnet.networks import check_floating_ip_network, discover_provisioning_network

app = typer.Typer(help="Network lookups")


@app.command()
def resolve(
    ctx: typer.Context,
    network_ref: Optional[str] = typer.Argument(
        None, help="Network UUID or name (default: floating_ip_network from config)"
    ),
):
    """
    Resolve a floating IP network reference to a network UUID.

    A UUID is printed unchanged; a name must match an external network.
    """
    try:
        ref = network_ref or ctx.obj.floatnet.floating_ip_network
        if not ref:
            raise ValueError("No network given and floating_ip_network is not configured")
        client = get_neutron_client(ctx.obj)
        typer.echo(check_floating_ip_network(client, ref))
    except Exception as e:
        typer.echo(f"Error resolving network: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def discover(
    ctx: typer.Context,
    cidrs: Optional[List[str]] = typer.Option(
        None, "--cidr", help="Candidate CIDR (may be repeated; default: provisioning_cidrs from config)"
    ),
):
    """
    Discover the provisioning network from candidate CIDRs.
    """
    try:
        candidates = cidrs or ctx.obj.floatnet.provisioning_cidrs
        if not candidates:
            raise ValueError("No CIDRs given and provisioning_cidrs is not configured")
        client = get_neutron_client(ctx.obj)
        typer.echo(discover_provisioning_network(client, candidates))
    except Exception as e:
        typer.echo(f"Error discovering provisioning network: {e}", err=True)
        raise typer.Exit(1)
