"""UID reservation commands."""

from typing import Annotated

import typer
from rich.table import Table

from slotnet.cli.commands._common import get_allocator
from slotnet.cli.output import console, print_error, print_json, print_success
from slotnet.exceptions import AllocatorError

app = typer.Typer(help="UID reservation commands")


@app.command("reserve")
def reserve_uid(
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the UID and its subnet as JSON")
    ] = False,
):
    """Reserve a free UID and print it with its subnet."""
    allocator = get_allocator()
    try:
        uid = allocator.reserve_uid()
        uid_subnet = allocator.subnet_for_uid(uid)
    except AllocatorError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if as_json:
        print_json(uid_subnet.to_dict())
        return

    console.print(f"{uid} {uid_subnet}")


@app.command("free")
def free_uid(
    uid: Annotated[int, typer.Argument(help="UID to release")],
):
    """Release a reserved UID."""
    allocator = get_allocator()
    try:
        allocator.free_uid(uid)
    except AllocatorError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_success(f"Freed UID {uid}")


@app.command("list")
def list_uids(
    as_json: Annotated[bool, typer.Option("--json", help="Print as JSON")] = False,
):
    """List reserved UIDs with their subnets."""
    allocator = get_allocator()
    try:
        subnets = [allocator.subnet_for_uid(uid) for uid in allocator.reserved_uids()]
    except AllocatorError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if as_json:
        print_json([s.to_dict() for s in subnets])
        return

    if not subnets:
        console.print("[yellow]No UIDs reserved.[/yellow]")
        return

    table = Table(title=f"Reserved UIDs ({allocator.store.location})")
    table.add_column("UID", justify="right", style="cyan")
    table.add_column("Subnet")
    table.add_column("Host IP")
    table.add_column("Container IP")
    for s in subnets:
        table.add_row(str(s.uid), str(s), str(s.host_ip), str(s.container_ip))
    console.print(table)
