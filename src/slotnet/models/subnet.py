"""Per-UID /30 network handed to the container driver."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass


@dataclass(frozen=True)
class UIDSubnet:
    """
    The /30 network derived for a reserved UID.

    A /30 holds four addresses: network, two endpoints and broadcast.
    The driver puts ``host_ip`` on the host side of the veth pair and
    ``container_ip`` inside the container.
    """

    uid: int
    network: ipaddress.IPv4Network

    @property
    def network_address(self) -> ipaddress.IPv4Address:
        return self.network.network_address

    @property
    def prefixlen(self) -> int:
        return self.network.prefixlen

    @property
    def netmask(self) -> ipaddress.IPv4Address:
        return self.network.netmask

    @property
    def host_ip(self) -> ipaddress.IPv4Address:
        """Host side endpoint (.1 of the block)."""
        return self.network.network_address + 1

    @property
    def container_ip(self) -> ipaddress.IPv4Address:
        """Container side endpoint (.2 of the block)."""
        return self.network.network_address + 2

    def to_dict(self) -> dict:
        return {
            "uid": self.uid,
            "subnet": str(self.network),
            "netmask": str(self.netmask),
            "host_ip": str(self.host_ip),
            "container_ip": str(self.container_ip),
        }

    def __str__(self) -> str:
        return str(self.network)
