# gnablib

gnablib is a small pure-Python library. It has no dependencies.

- `gnablib.ipv4` has IPv4 helpers. They convert addresses to and from integers and netmasks to and from prefix lengths. They also compare CIDR blocks and give the first and last address of a block.
- `gnablib.iptree` has `IpTree`. It collects single addresses, inclusive ranges and CIDR blocks, and merges them into the fewest CIDR blocks that cover them.
- `gnablib.ripemd` has the RIPEMD-128, -160, -256 and -320 hashes.
- `gnablib.whirlpool` has the Whirlpool hash.
- `gnablib.whirlpool_tables` builds the lookup tables that Whirlpool uses.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## IPv4 helpers

Addresses can be given as strings, as `ipaddress` objects or as raw bytes. Networks can be given as strings or as `ipaddress` network objects.

```python
import ipaddress
from gnablib.ipv4 import (
    ipv4_to_int, ipv4_from_int, mask_from_prefix, mask_to_prefix,
    cidr_equal, first_ipv4, last_ipv4,
)

ipv4_to_int("1.2.3.4")                          # 16909060
ipv4_from_int(16909060)                         # IPv4Address('1.2.3.4')
mask_from_prefix(24)                            # b'\xff\xff\xff\x00'
mask_to_prefix(b"\xff\xff\xfe\x00")             # 23

net = ipaddress.ip_network("192.168.0.0/23")
first_ipv4(net)                                 # IPv4Address('192.168.0.0')
last_ipv4(net)                                  # IPv4Address('192.168.1.255')
cidr_equal(net, "192.168.0.0/24")               # False
```

`ipv4_to_int` gives the IPv4 value of an IPv4-mapped IPv6 address. It gives `0` for any other IPv6 address.

These calls raise `ValueError`:

- `ipv4_from_int` when the integer is outside 0 to 2^32-1.
- `mask_from_prefix` when the prefix is outside 0 to 32.
- `mask_to_prefix` when the mask is empty or its one bits are not contiguous.
- `first_ipv4` and `last_ipv4` when given an IPv6 network.

## Merging addresses with `IpTree`

An `IpTree` takes a merge function. The tree calls `merge(a, b)` with the values of two sibling blocks when they join into one block, and keeps the result.

```python
from gnablib.iptree import IpTree

tree = IpTree(lambda a, b: a)
tree.add_ip("192.168.1.0", "x")
tree.add_range("192.168.1.1", "192.168.1.129", "x")
tree.add_cidr("192.168.1.128/25", "x")

for entry in tree.list_cidr():
    print(entry.network, entry.value)           # 192.168.1.0/24 x
```

`list_cidr()` returns a list of `CidrValue` entries in address order. Each entry has a `network`, which is an `ipaddress.IPv4Network`, and a `value`.

If an address is already covered by a block in the tree, adding it again does not change that block's value. The tree holds IPv4 space only.

## Hashes

The hash objects follow the shape of the `hashlib` objects.

```python
from gnablib.ripemd import RipeMd, ripemd160
from gnablib.whirlpool import Whirlpool, whirlpool

ripemd160(b"abc").hexdigest()
# '8eb208f7e05d987a9b044a8e98c6b087f15a0bfc'

h = RipeMd(256)
h.update(b"a")
h.update(b"bc")
h.hexdigest()

whirlpool(b"abc").digest()                      # 64 bytes
w = Whirlpool(b"message ")
w.update(b"digest")
w.copy().hexdigest()
```

`RipeMd(variant=160, data=b"")` takes a variant of 128, 160, 256 or 320. Any other variant raises `ValueError`. The functions `ripemd128`, `ripemd160`, `ripemd256` and `ripemd320` each return a hash object of that variant, fed with any data passed to them. `whirlpool(data)` does the same for Whirlpool.

Every hash object has these methods:

- `update(data)` adds more bytes.
- `digest()` and `hexdigest()` return the result so far. They do not change the state, so you can keep updating afterwards.
- `copy()` returns an independent copy.
- `reset()` starts the hash over.

Every hash object also has the attributes `name`, `digest_size` and `block_size`.

`gnablib.whirlpool_tables` exposes the following:

- `build_circulant_table()` returns the 8 × 256 table.
- `build_round_constants(table)` returns the 10 round constants.
- `ROUNDS` is the number of rounds.