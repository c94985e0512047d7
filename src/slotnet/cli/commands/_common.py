"""Shared helpers for CLI commands."""

import typer

from slotnet.allocator import Allocator
from slotnet.cli.output import print_error
from slotnet.config import config
from slotnet.exceptions import AllocatorError


def get_allocator() -> Allocator:
    """Build an allocator from the global config, exiting on bad configuration."""
    try:
        return Allocator.from_config(config)
    except AllocatorError as e:
        print_error(str(e))
        raise typer.Exit(1)
