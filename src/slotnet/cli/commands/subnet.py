"""Subnet inspection commands."""

from typing import Annotated

import typer
from rich.panel import Panel

from slotnet.cli.commands._common import get_allocator
from slotnet.cli.output import console, print_error, print_json
from slotnet.exceptions import AllocatorError

app = typer.Typer(help="Subnet inspection commands")


@app.command("show")
def show_subnet(
    uid: Annotated[int, typer.Argument(help="UID to look up")],
    as_json: Annotated[bool, typer.Option("--json", help="Print as JSON")] = False,
):
    """Show the /30 network a UID maps to. The UID need not be reserved."""
    allocator = get_allocator()
    try:
        uid_subnet = allocator.subnet_for_uid(uid)
    except AllocatorError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if as_json:
        print_json(uid_subnet.to_dict())
        return

    console.print(
        Panel(
            f"Subnet:       {uid_subnet}\n"
            f"Netmask:      {uid_subnet.netmask}\n"
            f"Host IP:      {uid_subnet.host_ip}\n"
            f"Container IP: {uid_subnet.container_ip}",
            title=f"UID {uid}",
        )
    )


@app.command("info")
def subnet_info(
    as_json: Annotated[bool, typer.Option("--json", help="Print as JSON")] = False,
):
    """Show the supernet, anchor and address-space accounting."""
    allocator = get_allocator()
    private_subnet = allocator.private_subnet
    min_uid, max_uid = allocator.uid_range
    info = {
        "supernet": str(private_subnet.supernet),
        "anchor": str(private_subnet.anchor),
        "total_subnets": private_subnet.total_subnets,
        "skipped_subnets": private_subnet.subnets_to_skip,
        "available_subnets": private_subnet.available_subnets,
        "min_uid": min_uid,
        "max_uid": max_uid,
        "store": allocator.store.location,
    }

    if as_json:
        print_json(info)
        return

    console.print(
        Panel(
            "\n".join(f"{key}: {value}" for key, value in info.items()),
            title="Allocator",
        )
    )
