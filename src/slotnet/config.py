"""
Allocator configuration.

A global Config instance that can be modified at runtime.
"""

import os
from dataclasses import dataclass

from slotnet.models.enums import LogLevel, StoreBackend
from slotnet.models.private_subnet import PrivateSubnetConfig


@dataclass
class AllocatorConfig:
    """UID and subnet allocator configuration."""

    # Path Configuration
    WORK_DIR: str = "/var/lib/slotnet"
    UIDS_DIR_NAME: str = "uids"
    STORE_BACKEND: StoreBackend = StoreBackend.DIRECTORY

    # Network Configuration
    # ANCHOR_IP/SUPERNET_PREFIX, see PrivateSubnetConfig
    PRIVATE_SUBNET: str = PrivateSubnetConfig.DEFAULT_CONFIG

    # UID Configuration (inclusive bounds)
    # (MAX_UID - MIN_UID + 1) must not exceed the /30 subnets PRIVATE_SUBNET provides
    MIN_UID: int = 3000
    MAX_UID: int = 60000

    # Logging Configuration
    LOG_LEVEL: LogLevel = LogLevel.INFO
    LOG_FILE: str = ""

    def get_uids_dir(self) -> str:
        """Get the directory holding one marker per reserved UID."""
        return os.path.join(self.WORK_DIR, self.UIDS_DIR_NAME)

    def get_private_subnet(self) -> PrivateSubnetConfig:
        """Parse the configured private subnet."""
        return PrivateSubnetConfig.parse(self.PRIVATE_SUBNET)

    def get_uid_range(self) -> tuple[int, int]:
        """Get the inclusive (min, max) UID bounds."""
        return self.MIN_UID, self.MAX_UID


# Global config instance
config = AllocatorConfig()
