"""Per-host UID and private /30 subnet allocator."""

from slotnet.allocator import Allocator
from slotnet.exceptions import (
    AllocatorError,
    CapacityExhaustedError,
    ConfigurationError,
    NotReservedError,
    StorageError,
    SubnetOutOfRangeError,
)
from slotnet.models import PrivateSubnetConfig, UIDSubnet

__all__ = [
    "Allocator",
    "AllocatorError",
    "CapacityExhaustedError",
    "ConfigurationError",
    "NotReservedError",
    "StorageError",
    "SubnetOutOfRangeError",
    "PrivateSubnetConfig",
    "UIDSubnet",
]
