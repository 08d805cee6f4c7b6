"""IPv4 address, netmask and CIDR helpers."""

from __future__ import annotations

import ipaddress
from typing import Iterable, Union

AddressLike = Union[str, bytes, bytearray, ipaddress.IPv4Address, ipaddress.IPv6Address]
NetworkLike = Union[str, ipaddress.IPv4Network, ipaddress.IPv6Network]

_U32_MAX = 0xFFFFFFFF


def _to_address(ip: AddressLike) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    if isinstance(ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return ip
    if isinstance(ip, (bytes, bytearray)):
        return ipaddress.ip_address(bytes(ip))
    return ipaddress.ip_address(ip.strip())


def _to_network(network: NetworkLike) -> ipaddress.IPv4Network | ipaddress.IPv6Network:
    if isinstance(network, (ipaddress.IPv4Network, ipaddress.IPv6Network)):
        return network
    return ipaddress.ip_network(network.strip(), strict=False)


def _to_ipv4_network(network: NetworkLike) -> ipaddress.IPv4Network:
    net = _to_network(network)
    if net.version != 4:
        raise ValueError(f"not an IPv4 network: {net}")
    return net


def ipv4_to_int(ip: AddressLike) -> int:
    """Return the 32-bit integer form of an IPv4 address.

    IPv4-mapped IPv6 addresses give their IPv4 value; any other IPv6
    address gives 0.
    """
    addr = _to_address(ip)
    if isinstance(addr, ipaddress.IPv6Address):
        mapped = addr.ipv4_mapped
        if mapped is None:
            return 0
        addr = mapped
    return int(addr)


def ipv4_from_int(value: int) -> ipaddress.IPv4Address:
    """Return the IPv4 address for a 32-bit unsigned integer."""
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"value out of 32-bit range: {value}")
    return ipaddress.IPv4Address(value)


def mask_from_prefix(prefix: int) -> bytes:
    """Return the 4-byte netmask for a CIDR prefix length (0-32)."""
    if not 0 <= prefix <= 32:
        raise ValueError(f"prefix length out of range: {prefix}")
    mask = (_U32_MAX << (32 - prefix)) & _U32_MAX
    return mask.to_bytes(4, "big")


def mask_to_prefix(mask: bytes | bytearray | Iterable[int]) -> int:
    """Return the prefix length of a netmask given as bytes.

    Raises ValueError when the mask is empty or its ones are not contiguous.
    """
    raw = bytes(mask)
    width = len(raw) * 8
    if width == 0:
        raise ValueError("empty mask")
    bits = int.from_bytes(raw, "big")
    host = ~bits & ((1 << width) - 1)
    if host & (host + 1):
        raise ValueError(f"non-canonical mask: {raw.hex()}")
    return width - host.bit_length()


def cidr_equal(a: NetworkLike, b: NetworkLike) -> bool:
    """Whether two CIDR blocks have the same address and mask."""
    na = _to_network(a)
    nb = _to_network(b)
    return (
        na.version == nb.version
        and na.prefixlen == nb.prefixlen
        and na.network_address == nb.network_address
    )


def first_ipv4(network: NetworkLike) -> ipaddress.IPv4Address:
    """First address of an IPv4 CIDR block (the network address)."""
    return _to_ipv4_network(network).network_address


def last_ipv4(network: NetworkLike) -> ipaddress.IPv4Address:
    """Last address of an IPv4 CIDR block (the broadcast address)."""
    return _to_ipv4_network(network).broadcast_address