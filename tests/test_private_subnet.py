"""Tests for PrivateSubnetConfig address-space accounting."""

import dataclasses
import ipaddress

import pytest

from slotnet.exceptions import ConfigurationError, SubnetOutOfRangeError
from slotnet.models import PrivateSubnetConfig, UIDSubnet


class TestParse:
    def test_default_config(self):
        cfg = PrivateSubnetConfig.default()
        assert cfg.supernet == ipaddress.IPv4Network("172.16.0.0/12")
        assert cfg.anchor == ipaddress.IPv4Network("172.16.0.28/30")
        assert str(cfg) == "172.16.0.28/12"

    def test_anchor_is_widened_to_its_block(self):
        cfg = PrivateSubnetConfig.parse("10.0.0.5/8")
        assert cfg.anchor == ipaddress.IPv4Network("10.0.0.4/30")
        assert cfg.subnets_to_skip == 1

    def test_from_networks_defaults_anchor_to_supernet_base(self):
        cfg = PrivateSubnetConfig.from_networks("10.0.0.0/8")
        assert cfg.anchor == ipaddress.IPv4Network("10.0.0.0/30")
        assert cfg.available_subnets == 2**22

    def test_from_networks_explicit_anchor(self):
        cfg = PrivateSubnetConfig.from_networks("10.1.0.0/16", "10.1.1.0")
        assert cfg.subnets_to_skip == 64
        assert cfg.available_subnets == 2**14 - 64

    @pytest.mark.parametrize(
        "text", ["not-an-ip", "10.0.0.0/33", "fd00::1/64", "300.1.1.1/8", ""]
    )
    def test_invalid_strings(self, text):
        with pytest.raises(ConfigurationError):
            PrivateSubnetConfig.parse(text)

    def test_supernet_smaller_than_a_block(self):
        with pytest.raises(ConfigurationError, match="prefix"):
            PrivateSubnetConfig.parse("10.0.0.0/31")

    def test_anchor_outside_supernet(self):
        with pytest.raises(ConfigurationError, match="outside"):
            PrivateSubnetConfig.from_networks("10.0.0.0/24", "10.0.1.0")

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            PrivateSubnetConfig.parse("bogus")

    def test_immutable(self):
        cfg = PrivateSubnetConfig.default()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.supernet = ipaddress.IPv4Network("10.0.0.0/8")


class TestAccounting:
    def test_default_skips_seven_blocks(self):
        cfg = PrivateSubnetConfig.default()
        assert cfg.total_subnets == 2**18
        assert cfg.subnets_to_skip == 7
        assert cfg.available_subnets == 2**18 - 7

    def test_single_block_supernet(self):
        cfg = PrivateSubnetConfig.parse("10.0.0.0/30")
        assert cfg.total_subnets == 1
        assert cfg.available_subnets == 1

    def test_last_block_of_supernet_as_anchor(self):
        cfg = PrivateSubnetConfig.parse("10.0.0.252/24")
        assert cfg.subnets_to_skip == 63
        assert cfg.available_subnets == 1


class TestSubnetAt:
    def test_first_block_is_anchor(self):
        cfg = PrivateSubnetConfig.default()
        assert cfg.subnet_at(0) == ipaddress.IPv4Network("172.16.0.28/30")
        assert cfg.subnet_at(1) == ipaddress.IPv4Network("172.16.0.32/30")

    def test_last_available_block(self):
        cfg = PrivateSubnetConfig.default()
        last = cfg.subnet_at(cfg.available_subnets - 1)
        assert last == ipaddress.IPv4Network("172.31.255.252/30")

    def test_past_the_end_fails_loudly(self):
        cfg = PrivateSubnetConfig.default()
        with pytest.raises(SubnetOutOfRangeError) as exc_info:
            cfg.subnet_at(cfg.available_subnets)
        assert exc_info.value.address == "172.32.0.0"
        assert exc_info.value.supernet == "172.16.0.0/12"

    def test_wraps_at_32_bits(self):
        cfg = PrivateSubnetConfig.parse("255.255.255.252/30")
        with pytest.raises(SubnetOutOfRangeError):
            cfg.subnet_at(1)


class TestUIDSubnet:
    def test_endpoints(self):
        s = UIDSubnet(uid=7, network=ipaddress.IPv4Network("10.0.0.28/30"))
        assert s.prefixlen == 30
        assert str(s.netmask) == "255.255.255.252"
        assert str(s.host_ip) == "10.0.0.29"
        assert str(s.container_ip) == "10.0.0.30"
        assert str(s) == "10.0.0.28/30"

    def test_to_dict(self):
        s = UIDSubnet(uid=1, network=ipaddress.IPv4Network("10.0.0.4/30"))
        assert s.to_dict() == {
            "uid": 1,
            "subnet": "10.0.0.4/30",
            "netmask": "255.255.255.252",
            "host_ip": "10.0.0.5",
            "container_ip": "10.0.0.6",
        }
