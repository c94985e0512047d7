"""
Private supernet configuration for per-UID /30 networks.

Each reserved UID gets its own /30 (network, two endpoints, broadcast),
carved out of a private supernet. Numbering starts at an anchor block that
may sit partway into the supernet, so addresses already used by the
surrounding infrastructure are never handed out.

Format: ANCHOR_IP/SUPERNET_PREFIX
- SUPERNET_PREFIX selects the supernet (ANCHOR_IP masked to that prefix)
- ANCHOR_IP, masked to /30, is the first block handed out

Examples:
- 172.16.0.28/12 (default):
  - Supernet: 172.16.0.0/12 (172.16.0.0 - 172.31.255.255)
  - Anchor: 172.16.0.28/30, skipping the 7 blocks below it
  - Available: 2**18 - 7 = 262137 /30 subnets

- 10.0.0.0/8:
  - Supernet: 10.0.0.0/8
  - Anchor: 10.0.0.0/30, nothing skipped
  - Available: 2**22 = 4194304 /30 subnets
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field

from slotnet.exceptions import ConfigurationError, SubnetOutOfRangeError

SUBNET_PREFIX = 30
_ADDRESS_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class PrivateSubnetConfig:
    """
    Supernet and anchor that /30 subnets are numbered from.

    Attributes:
        supernet: Private block all subnets must fall into (e.g., 172.16.0.0/12)
        anchor: First /30 block handed out (e.g., 172.16.0.28/30)
        available_subnets: /30 blocks usable from the anchor onwards
    """

    supernet: ipaddress.IPv4Network
    anchor: ipaddress.IPv4Network
    available_subnets: int = field(init=False, repr=False)

    # 172.16/12 (RFC1918), starting at 172.16.0.28/30 to stay clear of
    # addresses used by cloud infrastructure (e.g. a DNS resolver at 172.16.0.23)
    DEFAULT_CONFIG = "172.16.0.28/12"

    def __post_init__(self):
        if not isinstance(self.supernet, ipaddress.IPv4Network) or not isinstance(
            self.anchor, ipaddress.IPv4Network
        ):
            raise ConfigurationError("Supernet and anchor must be IPv4 networks")

        if self.supernet.prefixlen > SUBNET_PREFIX:
            raise ConfigurationError(
                f"Invalid supernet prefix: /{self.supernet.prefixlen}. "
                f"Must be /{SUBNET_PREFIX} or larger to hold a single /{SUBNET_PREFIX}."
            )

        if self.anchor.prefixlen != SUBNET_PREFIX:
            raise ConfigurationError(
                f"Invalid anchor {self.anchor}: must be a /{SUBNET_PREFIX} block"
            )

        if not self.anchor.subnet_of(self.supernet):
            raise ConfigurationError(
                f"Anchor {self.anchor} lies outside supernet {self.supernet}"
            )

        available = self.total_subnets - self.subnets_to_skip
        if available <= 0:
            raise ConfigurationError(
                f"Supernet {self.supernet} leaves no /{SUBNET_PREFIX} subnets "
                f"after anchor {self.anchor}"
            )
        object.__setattr__(self, "available_subnets", available)

    @classmethod
    def parse(cls, config_str: str) -> PrivateSubnetConfig:
        """
        Parse a subnet configuration string.

        Args:
            config_str: Format "ANCHOR_IP/SUPERNET_PREFIX"
                        e.g., "172.16.0.28/12" or "10.0.0.0/8"

        Returns:
            PrivateSubnetConfig instance

        Raises:
            ConfigurationError: If the string is not an IPv4 address/prefix
        """
        try:
            interface = ipaddress.IPv4Interface(config_str.strip())
        except (ipaddress.AddressValueError, ipaddress.NetmaskValueError) as e:
            raise ConfigurationError(
                f"Invalid private subnet: '{config_str}'. "
                f"Expected format: ANCHOR_IP/SUPERNET_PREFIX (e.g., '172.16.0.28/12'). "
                f"Error: {e}"
            ) from e

        return cls.from_networks(interface.network, interface.ip)

    @classmethod
    def from_networks(
        cls,
        supernet: str | ipaddress.IPv4Network,
        anchor: str | ipaddress.IPv4Address | ipaddress.IPv4Network | None = None,
    ) -> PrivateSubnetConfig:
        """
        Build a configuration from a supernet and an optional anchor.

        The anchor defaults to the supernet's base address. Any anchor
        address is widened to its enclosing /30 block.
        """
        try:
            supernet = ipaddress.IPv4Network(supernet, strict=False)
            if anchor is None:
                anchor_ip = supernet.network_address
            elif isinstance(anchor, ipaddress.IPv4Network):
                anchor_ip = anchor.network_address
            else:
                anchor_ip = ipaddress.IPv4Interface(anchor).ip
        except ValueError as e:
            raise ConfigurationError(f"Invalid IPv4 network: {e}") from e

        anchor_net = ipaddress.IPv4Network(f"{anchor_ip}/{SUBNET_PREFIX}", strict=False)
        return cls(supernet=supernet, anchor=anchor_net)

    @classmethod
    def default(cls) -> PrivateSubnetConfig:
        """Get the default configuration (172.16.0.28/12)."""
        return cls.parse(cls.DEFAULT_CONFIG)

    @property
    def total_subnets(self) -> int:
        """Number of /30 blocks in the whole supernet."""
        return 2 ** (SUBNET_PREFIX - self.supernet.prefixlen)

    @property
    def subnets_to_skip(self) -> int:
        """
        Number of /30 blocks inside the supernet that precede the anchor.

        These are bits[prefix:30] of the anchor address, e.g. for a /12
        supernet, bits[12:30] of 172.16.0.28 give 7.
        """
        offset = int(self.anchor.network_address) & int(self.supernet.hostmask)
        return offset >> 2

    def subnet_at(self, shift: int) -> ipaddress.IPv4Network:
        """
        Get the /30 block ``shift`` positions after the anchor.

        Raises:
            SubnetOutOfRangeError: If the block is outside the supernet
        """
        as_int = int(self.anchor.network_address)

        # pick a /30 block
        as_int >>= 2
        as_int += shift
        as_int <<= 2
        as_int &= _ADDRESS_MASK

        address = ipaddress.IPv4Address(as_int)
        if address not in self.supernet:
            raise SubnetOutOfRangeError(str(address), str(self.supernet))

        return ipaddress.IPv4Network(f"{address}/{SUBNET_PREFIX}")

    def __str__(self) -> str:
        """Return the configuration in format string."""
        return f"{self.anchor.network_address}/{self.supernet.prefixlen}"

    def __repr__(self) -> str:
        return (
            f"PrivateSubnetConfig({self}, "
            f"supernet={self.supernet}, "
            f"available_subnets={self.available_subnets})"
        )
