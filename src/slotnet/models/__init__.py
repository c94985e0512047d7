"""Data models for UID and subnet allocation."""

from slotnet.models.enums import LogLevel, StoreBackend
from slotnet.models.private_subnet import PrivateSubnetConfig
from slotnet.models.subnet import UIDSubnet

__all__ = ["LogLevel", "StoreBackend", "PrivateSubnetConfig", "UIDSubnet"]
