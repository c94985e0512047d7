"""
slotnet CLI entry point.

Usage:
    slotnet [OPTIONS] COMMAND [ARGS]...

Commands:
    uid       Reserve, free and list UIDs
    subnet    Inspect per-UID /30 networks
"""

from typing import Annotated

import typer

from slotnet.cli.commands import subnet, uid
from slotnet.config import config
from slotnet.models.enums import LogLevel, StoreBackend
from slotnet.utils.logger import configure_logging

app = typer.Typer(
    name="slotnet",
    help="Per-host UID and private subnet allocator",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(uid.app, name="uid", help="UID reservation")
app.add_typer(subnet.app, name="subnet", help="Per-UID subnets")


@app.callback()
def main(
    work_dir: Annotated[
        str | None,
        typer.Option(
            "--work-dir", "-w", help="Working directory", envvar="SLOTNET_WORK_DIR"
        ),
    ] = None,
    private_subnet: Annotated[
        str | None,
        typer.Option(
            "--private-subnet",
            "-s",
            help="ANCHOR_IP/SUPERNET_PREFIX, e.g. 172.16.0.28/12",
            envvar="SLOTNET_PRIVATE_SUBNET",
        ),
    ] = None,
    min_uid: Annotated[
        int | None,
        typer.Option("--min-uid", help="Smallest UID", envvar="SLOTNET_MIN_UID"),
    ] = None,
    max_uid: Annotated[
        int | None,
        typer.Option("--max-uid", help="Largest UID", envvar="SLOTNET_MAX_UID"),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option("--log-level", help="Log verbosity", envvar="SLOTNET_LOG_LEVEL"),
    ] = LogLevel.WARNING,
    log_file: Annotated[
        str,
        typer.Option("--log-file", help="Log file path", envvar="SLOTNET_LOG_FILE"),
    ] = "",
):
    """
    slotnet allocator CLI.

    Reserve and free per-host UIDs and show the /30 network each one maps to.
    """
    if work_dir:
        config.WORK_DIR = work_dir
    if private_subnet:
        config.PRIVATE_SUBNET = private_subnet
    if min_uid is not None:
        config.MIN_UID = min_uid
    if max_uid is not None:
        config.MAX_UID = max_uid
    # Each CLI run is its own process, so only on-disk markers persist
    config.STORE_BACKEND = StoreBackend.DIRECTORY
    config.LOG_LEVEL = log_level
    config.LOG_FILE = log_file

    configure_logging(config.LOG_LEVEL, config.LOG_FILE)


def run():
    """Entry point for the slotnet CLI."""
    app()


if __name__ == "__main__":
    run()
