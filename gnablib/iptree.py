"""A binary tree of IPv4 space that merges addresses into minimal CIDR blocks."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Union

from gnablib.ipv4 import AddressLike, ipv4_to_int

Merge = Callable[[Any, Any], Any]

_U32_MAX = 0xFFFFFFFF


class _Empty:
    """No addresses below this point are present."""

    __slots__ = ()

    def walk(self, position: int, mask: int) -> Iterator[tuple[int, int, Any]]:
        return iter(())


_EMPTY = _Empty()


class _Full:
    """Every address below this point is present, with one value."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def walk(self, position: int, mask: int) -> Iterator[tuple[int, int, Any]]:
        yield position, 31 - mask, self.value


class _Fork:
    """A split into the lower (0 bit) and upper (1 bit) halves."""

    __slots__ = ("left", "right")

    def __init__(self) -> None:
        self.left: _Node = _EMPTY
        self.right: _Node = _EMPTY

    def walk(self, position: int, mask: int) -> Iterator[tuple[int, int, Any]]:
        yield from self.left.walk(position, mask - 1)
        yield from self.right.walk(position | (1 << mask), mask - 1)


_Node = Union[_Empty, _Full, _Fork]


def _add(parent: _Node, pos: int, mask: int, end: int, value: Any, merge: Merge) -> _Node:
    if isinstance(parent, _Full):
        return parent
    if mask <= end:
        return _Full(value)
    node = parent if isinstance(parent, _Fork) else _Fork()
    mask -= 1
    if (pos >> mask) & 1:
        node.right = _add(node.right, pos, mask, end, value, merge)
    else:
        node.left = _add(node.left, pos, mask, end, value, merge)
    if isinstance(node.left, _Full) and isinstance(node.right, _Full):
        return _Full(merge(node.left.value, node.right.value))
    return node


@dataclass(frozen=True)
class CidrValue:
    """A CIDR block in the tree and the value it carries."""

    network: ipaddress.IPv4Network
    value: Any


class IpTree:
    """IPv4 space as a tree; adjacent full blocks collapse into one.

    ``merge(a, b)`` picks the value kept when two sibling blocks join.
    """

    def __init__(self, merge: Merge) -> None:
        self._root: _Node = _EMPTY
        self._merge = merge

    def _insert(self, pos: int, end: int, value: Any) -> None:
        self._root = _add(self._root, pos, 32, end, value, self._merge)

    def add_ip(self, ip: AddressLike, value: Any) -> None:
        """Add a single address."""
        self._insert(ipv4_to_int(ip), 0, value)

    def add_range(self, start: AddressLike, end: AddressLike, value: Any) -> None:
        """Add every address from ``start`` to ``end`` inclusive."""
        low = ipv4_to_int(start)
        high = ipv4_to_int(end)
        while low <= high:
            # Largest aligned block starting at low that stays within the range
            block = ((low - 1) & _U32_MAX) & ~low & _U32_MAX
            while low + block > high:
                block >>= 1
            self._insert(low, block.bit_length(), value)
            low += block + 1

    def add_cidr(self, network: Union[str, ipaddress.IPv4Network], value: Any) -> None:
        """Add a CIDR block."""
        if not isinstance(network, ipaddress.IPv4Network):
            network = ipaddress.IPv4Network(network.strip(), strict=False)
        self._insert(int(network.network_address), 32 - network.prefixlen, value)

    def list_cidr(self) -> list[CidrValue]:
        """All CIDR blocks that describe the tree, in address order."""
        return [
            CidrValue(ipaddress.IPv4Network((position, prefix)), value)
            for position, prefix, value in self._root.walk(0, 31)
        ]